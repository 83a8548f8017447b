"""Process-wide serialization of mutations against the singleton integration."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class MutationSerializer:
    """Mutual-exclusion guard for create, update and delete.

    The remote integration is a single account-wide object, so any two
    mutations issued by this process concern the same thing. Acquisition
    blocks without a timeout. Reads do not go through the guard.
    """

    def __init__(self):
        self._lock = threading.Lock()

    @contextmanager
    def hold(self, operation: str) -> Iterator[None]:
        """Hold the guard for the duration of a mutating operation."""
        logger.debug(f"Waiting for mutation guard ({operation})")
        with self._lock:
            logger.debug(f"Acquired mutation guard ({operation})")
            try:
                yield
            finally:
                logger.debug(f"Released mutation guard ({operation})")

    def locked(self) -> bool:
        """Whether a mutation is currently in flight."""
        return self._lock.locked()
