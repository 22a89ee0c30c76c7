import asyncio
import logging
from typing import Dict, Optional, Tuple

from .cache import BoundedKeyCache
from .config import KeyDerivationConfig
from .credentials import Credentials
from .hashing import HashFactory, hmac_digest
from .scope import KEY_TYPE_IDENTIFIER, create_scope
from .sigv4a import derive_sigv4a_key

logger = logging.getLogger(__name__)

CacheKey = Tuple[str, ...]
PendingKey = Tuple[asyncio.AbstractEventLoop, CacheKey]


class SigningKeyDeriver:
    """
    Derives SigV4 and SigV4a signing keys.

    Final SigV4 signing keys are held in ``cache``, one entry per derivation.
    The intermediate date, region and service keys live in ``level_caches``,
    one bounded cache per level, keyed by the inputs consumed up to that
    level, so that calls sharing a secret and date but differing in region
    or service reuse the common prefix. SigV4a keys are always recomputed.

    Concurrent SigV4 derivations of the same key on one event loop share a
    single computation and all receive the same bytes object.
    """

    def __init__(
            self,
            cache: Optional[BoundedKeyCache] = None,
            config: Optional[KeyDerivationConfig] = None
    ) -> None:
        self.config = config or KeyDerivationConfig()
        self.cache = cache if cache is not None else BoundedKeyCache(self.config.cache_size)
        self.level_caches = tuple(BoundedKeyCache(self.config.cache_size) for _ in range(3))
        self._pending: Dict[PendingKey, 'asyncio.Future[bytes]'] = {}

    def clear_cache(self) -> None:
        self.cache.clear()
        for level_cache in self.level_caches:
            level_cache.clear()

    async def get_sigv4_signing_key(
            self,
            hash_factory: HashFactory,
            credentials: Credentials,
            short_date: str,
            region: str,
            service: str
    ) -> bytes:
        chain = (short_date, region, service, KEY_TYPE_IDENTIFIER)
        signing_key_id = (credentials.secret_access_key,) + chain

        cached = self.cache.get(signing_key_id)
        if cached is not None:
            logger.debug("Signing key cache hit for %s", create_scope(short_date, region, service))
            return cached

        # Tasks are bound to the loop that created them.
        pending_key = (asyncio.get_running_loop(), signing_key_id)
        task = self._pending.get(pending_key)
        if task is None:
            task = asyncio.ensure_future(
                self._derive_sigv4_key(hash_factory, credentials.secret_access_key, chain)
            )
            self._pending[pending_key] = task
            task.add_done_callback(lambda done: self._forget_pending(pending_key, done))
        return await asyncio.shield(task)

    async def get_sigv4a_signing_key(
            self,
            hash_factory: HashFactory,
            secret_access_key: str,
            access_key_id: str
    ) -> bytes:
        return await derive_sigv4a_key(
            hash_factory,
            secret_access_key,
            access_key_id,
            self.config.max_sigv4a_attempts
        )

    async def _derive_sigv4_key(
            self,
            hash_factory: HashFactory,
            secret_access_key: str,
            chain: Tuple[str, ...]
    ) -> bytes:
        key = ('AWS4' + secret_access_key).encode('utf-8')
        cache_key: CacheKey = (secret_access_key,)
        caches = self.level_caches + (self.cache,)
        for part, level_cache in zip(chain, caches):
            cache_key += (part,)
            derived = level_cache.get(cache_key)
            if derived is None:
                derived = await hmac_digest(hash_factory, key, part)
                level_cache.put(cache_key, derived)
            key = derived

        logger.debug("Derived signing key for %s", create_scope(*chain[:3]))
        return key

    def _forget_pending(self, pending_key: PendingKey, task: 'asyncio.Future[bytes]') -> None:
        if self._pending.get(pending_key) is task:
            del self._pending[pending_key]
        if not task.cancelled():
            # Mark the outcome retrieved even if every waiter was cancelled.
            task.exception()
