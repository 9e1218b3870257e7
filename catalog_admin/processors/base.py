"""Batched CSV import processing."""
from abc import ABC, abstractmethod
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional, Tuple
import logging
import time
import pandas as pd
from sqlalchemy.orm import Session

from ..db.session import SessionManager

@dataclass
class ImportStats:
    """Counters collected while importing one file."""
    rows_read: int = 0
    successful_batches: int = 0
    failed_batches: int = 0
    total_errors: int = 0
    processing_time: float = 0.0
    started_at: datetime = field(default_factory=datetime.utcnow)
    completed_at: Optional[datetime] = None
    # Processor-specific counts, e.g. created/skipped
    counters: Counter = field(default_factory=Counter)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the stats, processor counters included."""
        result = {
            'rows_read': self.rows_read,
            'successful_batches': self.successful_batches,
            'failed_batches': self.failed_batches,
            'total_errors': self.total_errors,
            'processing_time': round(self.processing_time, 3),
            'started_at': self.started_at.isoformat(),
            'completed_at': self.completed_at.isoformat() if self.completed_at else None
        }
        result.update(self.counters)
        return result

class BaseProcessor(ABC):
    """Import a DataFrame in fixed-size batches, one transaction per batch.

    Subclasses check the frame in ``validate_data`` and write rows in
    ``_process_batch``. A batch that raises is rolled back and counted; the
    import goes on with the next batch until ``error_limit`` is reached.
    """

    counter_names: Tuple[str, ...] = ()

    def __init__(
        self,
        session_manager: SessionManager,
        batch_size: int = 100,
        error_limit: int = 1000,
        debug: bool = False
    ):
        """Initialize processor.

        Args:
            session_manager: Database session manager
            batch_size: Rows per batch (and per transaction)
            error_limit: Stop after this many errors
            debug: Enable debug logging
        """
        self.session_manager = session_manager
        self.batch_size = batch_size
        self.error_limit = error_limit
        self.debug = debug
        self.logger = logging.getLogger(self.__class__.__name__)
        self.stats = ImportStats()
        for name in self.counter_names:
            self.stats.counters[name] = 0

    @abstractmethod
    def validate_data(self, df: pd.DataFrame) -> Tuple[List[str], List[str]]:
        """Check the frame before anything is written.

        Returns:
            Tuple of (critical_issues, warnings)
        """
        pass

    @abstractmethod
    def _process_batch(self, session: Session, batch_df: pd.DataFrame) -> pd.DataFrame:
        """Write one batch inside the given session and return the processed rows."""
        pass

    def count(self, name: str, amount: int = 1) -> None:
        """Increase a processor-specific counter."""
        self.stats.counters[name] += amount

    def process_file(self, path: Path) -> pd.DataFrame:
        """Read a CSV file as text columns and import it."""
        self.logger.info(f"Reading {path}")
        df = pd.read_csv(path, dtype=str, keep_default_na=False, na_values=[''])
        return self.process(df)

    def _batches(self, data: pd.DataFrame) -> Iterator[Tuple[int, int, pd.DataFrame]]:
        for number, start in enumerate(range(0, len(data), self.batch_size), 1):
            yield number, start, data.iloc[start:start + self.batch_size].copy()

    def process(self, data: pd.DataFrame) -> pd.DataFrame:
        """Validate and import a frame.

        Returns:
            Concatenated results of the successful batches; empty when
            validation reports a critical issue
        """
        start_time = time.time()
        critical_issues, warnings = self.validate_data(data)

        for warning in warnings:
            self.logger.warning(f"Validation warning: {warning}")

        if critical_issues:
            for issue in critical_issues:
                self.logger.error(f"Validation failed: {issue}")
            self.stats.total_errors += len(critical_issues)
            return pd.DataFrame()

        total_batches = (len(data) + self.batch_size - 1) // self.batch_size
        results = []

        for number, start, batch_df in self._batches(data):
            try:
                with self.session_manager as session:
                    results.append(self._process_batch(session, batch_df))
            except Exception as e:
                self.logger.error(f"Batch {number}/{total_batches} (rows {start}-{start + len(batch_df) - 1}) failed: {e}")
                self.stats.failed_batches += 1
                self.stats.total_errors += 1
            else:
                self.stats.successful_batches += 1
                self.stats.rows_read += len(batch_df)
                if self.debug:
                    self.logger.debug(f"Batch {number}/{total_batches} committed")

            if self.stats.total_errors >= self.error_limit:
                self.logger.error(f"Stopping: error limit ({self.error_limit}) reached")
                break

        self.stats.processing_time = time.time() - start_time
        self.stats.completed_at = datetime.utcnow()

        return pd.concat(results, ignore_index=True) if results else pd.DataFrame()

    def get_stats(self) -> Dict[str, Any]:
        """Return the stats as a flat dictionary."""
        return self.stats.to_dict()
