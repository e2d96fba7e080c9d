"""One-time initialization barrier for sharing a store between threads."""

import logging
import threading
from collections.abc import Callable

from .store import MetadataStore

logger = logging.getLogger(__name__)


class StoreHolder:
    """
    Holds at most one fully built :class:`MetadataStore`.

    The holder starts unloaded. The first successful :meth:`get` publishes
    the store and the holder stays loaded until it is discarded. Concurrent
    callers block on the lock while a load is in progress and then all see
    the same instance. A loader that raises publishes nothing.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._store: MetadataStore | None = None

    @property
    def is_loaded(self) -> bool:
        return self._store is not None

    def get(self, loader: Callable[[], MetadataStore]) -> MetadataStore:
        """
        Get the store, building it with ``loader`` on first use.

        Args:
            loader: Zero-argument callable returning a built store

        Returns:
            The published store
        """
        store = self._store
        if store is not None:
            return store

        with self._lock:
            if self._store is None:
                logger.debug("Building metadata store")
                self._store = loader()
            return self._store

    def peek(self) -> MetadataStore | None:
        """Get the published store without loading."""
        return self._store
