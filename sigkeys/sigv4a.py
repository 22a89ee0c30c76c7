"""
SigV4a private key derivation.

The signing key for SigV4a is an ECDSA P-256 private scalar derived
deterministically from the secret access key with an SP 800-108 counter-mode
KDF built on HMAC-SHA256. Candidates outside ``[1, N-2]`` are rejected and the
external counter is bumped until one fits; the scalar is then ``candidate + 1``.
"""

import logging
from typing import Union

from cryptography.hazmat.primitives.asymmetric.ec import (
    SECP256R1,
    EllipticCurvePrivateKey,
    derive_private_key,
)

from .bignum import ByteString, add_one_to_array, is_bigger_than_n_minus_2
from .config import MAX_SIGV4A_ATTEMPTS
from .errors import KeyDerivationError
from .hashing import HashFactory, hmac_digest

logger = logging.getLogger(__name__)

ALGORITHM_IDENTIFIER = 'AWS4-ECDSA-P256-SHA256'

# 32-bit big-endian KDF block counter; only one block is ever produced.
_BLOCK_COUNTER = '\x00\x00\x00\x01'
# 32-bit big-endian output length in bits (256).
_OUTPUT_LENGTH = '\x00\x00\x01\x00'


def build_fixed_input_buffer(label: str, access_key_id: str, counter: int) -> str:
    """Assemble the KDF fixed input, appended to ``label``.

    Layout: block counter, algorithm identifier, NUL separator, context
    (access key id followed by ``counter`` as one byte), output length.
    """
    if not 0 < counter < 256:
        raise ValueError(f"counter must fit in one byte, got {counter}")
    return ''.join((
        label,
        _BLOCK_COUNTER,
        ALGORITHM_IDENTIFIER,
        '\x00',
        access_key_id,
        chr(counter),
        _OUTPUT_LENGTH,
    ))


async def derive_sigv4a_key(
        hash_factory: HashFactory,
        secret_access_key: str,
        access_key_id: str,
        max_attempts: int = MAX_SIGV4A_ATTEMPTS
) -> bytes:
    input_key = ('AWS4A' + secret_access_key).encode('utf-8')

    for counter in range(1, max_attempts + 1):
        fixed_input = build_fixed_input_buffer('', access_key_id, counter)
        candidate = await hmac_digest(hash_factory, input_key, fixed_input)
        if any(candidate) and not is_bigger_than_n_minus_2(candidate):
            return add_one_to_array(candidate)
        logger.debug("Rejected SigV4a key candidate at counter %d", counter)

    raise KeyDerivationError(f"SigV4a key derivation failed after {max_attempts} attempts")


def load_sigv4a_private_key(scalar: Union[ByteString, int]) -> EllipticCurvePrivateKey:
    """Wrap a derived scalar as a P-256 private key usable for ECDSA signing."""
    if not isinstance(scalar, int):
        scalar = int.from_bytes(scalar, 'big')
    return derive_private_key(scalar, SECP256R1())
