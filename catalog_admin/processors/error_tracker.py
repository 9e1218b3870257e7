"""Data-quality issue tracking for catalog operations."""

from collections import Counter, defaultdict
from typing import Any, Dict, List, Optional, Set
import logging

class ErrorTracker:
    """Collect non-fatal issues (such as unresolved light types) by kind.

    Repeats of the same kind and message are counted once. A few samples per
    kind are kept with their context for the end-of-command summary.
    """

    def __init__(self, max_samples: int = 3):
        self.counts: Counter = Counter()
        self.samples: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.max_samples = max_samples
        self._seen: Set[tuple] = set()

    def add_error(self, error_type: str, message: str, context: Optional[Dict] = None) -> None:
        """Record an issue.

        Args:
            error_type: Kind of issue, e.g. ``LIGHT_TYPE_UNRESOLVED``
            message: Human-readable description
            context: Ids and values that help locate the issue
        """
        if (error_type, message) in self._seen:
            return
        self._seen.add((error_type, message))
        self.counts[error_type] += 1
        if len(self.samples[error_type]) < self.max_samples:
            self.samples[error_type].append({'message': message, 'context': context or {}})

    def has_errors(self, error_type: Optional[str] = None) -> bool:
        if error_type is None:
            return bool(self.counts)
        return self.counts[error_type] > 0

    def get_summary(self) -> Dict[str, Any]:
        return {'counts': dict(self.counts), 'samples': dict(self.samples)}

    def log_summary(self, logger: logging.Logger) -> None:
        """Write one warning per issue kind, followed by its samples."""
        for error_type, count in self.counts.most_common():
            logger.warning(f"{error_type}: {count} distinct issue(s)")
            for sample in self.samples[error_type]:
                details = ', '.join(f"{key}={value}" for key, value in sample['context'].items())
                logger.warning(f"  {sample['message']}" + (f" ({details})" if details else ''))
