"""Operator-facing progress log for catalog operations."""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Iterator, List, Optional

class StepStatus(Enum):
    """Outcome of a logged step."""
    DONE = "done"
    FAILED = "failed"

@dataclass
class ProgressEntry:
    """One line of the progress log."""
    message: str
    status: StepStatus
    error: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)
    
    def __str__(self) -> str:
        if self.status is StepStatus.FAILED:
            return f"[failed] {self.message}: {self.error}"
        return f"[done] {self.message}"

class ProgressLog:
    """Ordered record of attempted steps.
    
    Each step is recorded once it completes. A step that raises is recorded
    as failed and the exception is re-raised unchanged.
    """
    
    def __init__(self, sink: Optional[Callable[[ProgressEntry], None]] = None):
        """Initialize log.
        
        Args:
            sink: Optional callback receiving each entry as it is recorded
        """
        self.entries: List[ProgressEntry] = []
        self.sink = sink
        self.logger = logging.getLogger(self.__class__.__name__)
    
    def _record(self, entry: ProgressEntry) -> None:
        self.entries.append(entry)
        if entry.status is StepStatus.FAILED:
            self.logger.error(str(entry))
        else:
            self.logger.info(str(entry))
        if self.sink:
            self.sink(entry)
    
    @contextmanager
    def step(self, message: str) -> Iterator[None]:
        """Run a block as a named step."""
        try:
            yield
        except Exception as e:
            self._record(ProgressEntry(message, StepStatus.FAILED, error=str(e)))
            raise
        self._record(ProgressEntry(message, StepStatus.DONE))
    
    @property
    def failed(self) -> bool:
        """Whether any step failed."""
        return any(entry.status is StepStatus.FAILED for entry in self.entries)
    
    def messages(self) -> List[str]:
        """Return the log as display strings."""
        return [str(entry) for entry in self.entries]
    
    def clear(self) -> None:
        """Drop all entries."""
        self.entries = []
