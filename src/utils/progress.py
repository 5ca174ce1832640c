"""Periodic progress reporting for the batch filters."""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)

# Receives a counter label ("reader", "dumper", ...) and its current value
ProgressCallback = Callable[[str, int], None]

DEFAULT_INTERVAL = 100_000


def log_progress(label: str, count: int) -> None:
    """Default callback: log the counter at INFO."""
    logger.info("%s: %d", label, count)


class ProgressCounter:
    """Counts events and fires a callback every ``interval`` of them."""

    def __init__(
        self,
        label: str,
        callback: Optional[ProgressCallback] = None,
        interval: int = DEFAULT_INTERVAL,
    ):
        if interval <= 0:
            raise ValueError("Progress interval must be positive")
        self.label = label
        self.callback = callback
        self.interval = interval
        self.count = 0

    def tick(self) -> bool:
        """Count one event; return True when an interval boundary is reached."""
        self.count += 1
        if self.count % self.interval:
            return False
        if self.callback is not None:
            self.callback(self.label, self.count)
        return True
