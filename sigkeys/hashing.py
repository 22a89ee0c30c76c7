"""
Keyed-hash capability used by the key derivers.

A hash factory is any callable that takes an optional secret and returns an
object with ``update(data)`` and ``digest()``. Given a secret the object must
compute an HMAC with it. ``digest()`` may return the bytes directly or an
awaitable, so hardware-backed or off-thread implementations plug in the same
way as :class:`Sha256`. Objects from ``hmac.new`` already qualify.
"""

import hashlib
import hmac
import inspect
from typing import Awaitable, Callable, Optional, Protocol, Union

Data = Union[str, bytes, bytearray, memoryview]


class KeyedHash(Protocol):
    def update(self, data: bytes) -> None: ...

    def digest(self) -> Union[bytes, Awaitable[bytes]]: ...


HashFactory = Callable[[Optional[bytes]], KeyedHash]


def to_bytes(data: Data) -> bytes:
    if isinstance(data, str):
        return data.encode('utf-8')
    return bytes(data)


class Sha256:
    """SHA-256 digest, or HMAC-SHA256 when constructed with a secret."""

    def __init__(self, secret: Optional[Data] = None) -> None:
        if secret is None:
            self._hash = hashlib.sha256()
        else:
            self._hash = hmac.new(to_bytes(secret), digestmod=hashlib.sha256)

    def update(self, data: Data) -> None:
        self._hash.update(to_bytes(data))

    async def digest(self) -> bytes:
        return self._hash.digest()


async def hmac_digest(hash_factory: HashFactory, key: bytes, data: Data) -> bytes:
    """Run one keyed-hash computation through ``hash_factory``."""
    keyed_hash = hash_factory(key)
    keyed_hash.update(to_bytes(data))
    result = keyed_hash.digest()
    if inspect.isawaitable(result):
        result = await result
    return bytes(result)
