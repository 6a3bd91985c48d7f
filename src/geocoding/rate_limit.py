"""
Request pacing for the Nominatim API.

Nominatim allows roughly one request per second, so the pipeline waits a
fixed delay after every lookup. The sleep function is injectable so tests
can record waits instead of blocking.
"""
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FixedDelayPacer:
    def __init__(self, delay: float = 1.0, sleep: Optional[Callable[[float], None]] = None):
        if delay < 0:
            raise ValueError("delay must be non-negative")
        self.delay = delay
        self._sleep = sleep or time.sleep

    def wait(self) -> None:
        """Block for the configured delay before the next request."""
        if self.delay:
            logger.debug(f"Waiting {self.delay}s before next request")
            self._sleep(self.delay)
