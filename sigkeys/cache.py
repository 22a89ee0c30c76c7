import logging
import threading
from collections import OrderedDict
from typing import Hashable, Optional

from .config import MAX_CACHE_SIZE

logger = logging.getLogger(__name__)


class BoundedKeyCache:
    """
    Insertion-ordered store of derived keys with first-in, first-out eviction.

    Lookups never refresh an entry's position: once the cache is full, every
    new key pushes out whichever entry was inserted earliest. Stored values
    are returned as-is, so repeated lookups hand back the same object.
    """

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._entries: 'OrderedDict[Hashable, bytes]' = OrderedDict()
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[bytes]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: Hashable, value: bytes) -> None:
        with self._lock:
            # Overwriting keeps the original insertion slot.
            self._entries[key] = value
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
                logger.debug("Evicted oldest signing key, cache size %d", self.max_size)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        logger.debug("Signing key cache cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._entries
