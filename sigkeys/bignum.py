"""
Big-endian unsigned arithmetic on byte strings.

Only the two operations needed by SigV4a key derivation are provided: an
increment that grows the buffer on overflow, and a comparison against the
P-256 group order minus two.
"""

from typing import Union

ByteString = Union[bytes, bytearray, memoryview]

# NIST P-256 group order
P256_ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

N_MINUS_2 = (P256_ORDER - 2).to_bytes(32, 'big')

_N_MINUS_2_INT = P256_ORDER - 2


def add_one_to_array(data: ByteString) -> bytes:
    """Return ``data + 1`` as big-endian bytes.

    The result keeps the input length unless the carry runs past the most
    significant byte, in which case it is one byte longer with a leading 0x01.
    The input is never modified.
    """
    value = int.from_bytes(data, 'big') + 1
    length = max(len(data), (value.bit_length() + 7) // 8)
    return value.to_bytes(length, 'big')


def is_bigger_than_n_minus_2(data: ByteString) -> bool:
    """True iff the big-endian unsigned value of ``data`` exceeds ``N_MINUS_2``."""
    return int.from_bytes(data, 'big') > _N_MINUS_2_INT
