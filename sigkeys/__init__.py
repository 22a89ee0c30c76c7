"""
AWS Signature Version 4 / 4a - Signing Key Derivation

This package derives the per-scope signing keys used by SigV4 (HMAC-SHA256)
and the ECDSA P-256 private scalars used by SigV4a, with a bounded cache of
SigV4 keys shared by all derivations in the process.
"""

from .bignum import N_MINUS_2, add_one_to_array, is_bigger_than_n_minus_2
from .cache import BoundedKeyCache
from .config import KeyDerivationConfig
from .credentials import Credentials
from .errors import KeyDerivationError, SigningKeyError
from .hashing import HashFactory, KeyedHash, Sha256
from .scope import create_scope, create_sigv4a_scope, short_date
from .sigv4 import SigningKeyDeriver
from .sigv4a import build_fixed_input_buffer, load_sigv4a_private_key

__version__ = "0.1.0"

default_deriver = SigningKeyDeriver()


async def get_sigv4_signing_key(
        hash_factory: HashFactory,
        credentials: Credentials,
        short_date: str,
        region: str,
        service: str
) -> bytes:
    return await default_deriver.get_sigv4_signing_key(
        hash_factory, credentials, short_date, region, service
    )


async def get_sigv4a_signing_key(
        hash_factory: HashFactory,
        secret_access_key: str,
        access_key_id: str
) -> bytes:
    return await default_deriver.get_sigv4a_signing_key(
        hash_factory, secret_access_key, access_key_id
    )


def clear_credential_cache() -> None:
    """Empty the process-wide SigV4 key cache."""
    default_deriver.clear_cache()


__all__ = [
    "N_MINUS_2",
    "BoundedKeyCache",
    "Credentials",
    "HashFactory",
    "KeyDerivationConfig",
    "KeyDerivationError",
    "KeyedHash",
    "Sha256",
    "SigningKeyDeriver",
    "SigningKeyError",
    "add_one_to_array",
    "build_fixed_input_buffer",
    "clear_credential_cache",
    "create_scope",
    "create_sigv4a_scope",
    "default_deriver",
    "get_sigv4_signing_key",
    "get_sigv4a_signing_key",
    "is_bigger_than_n_minus_2",
    "load_sigv4a_private_key",
    "short_date",
]
