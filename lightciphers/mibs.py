"""MIBS Feistel block cipher: 64-bit block, 64- or 80-bit key, 32 rounds.

Blocks and keys are byte strings in memory order (little-endian): the first
four bytes of a block are its right half, the last four its left half.
"""

from __future__ import annotations

from collections.abc import Iterator

ROUNDS = 32
BLOCK_BYTES = 8

SBOX = (0x4, 0xF, 0x3, 0x8, 0xD, 0xA, 0xC, 0x0, 0xB, 0x5, 0x7, 0xE, 0x2, 0x6, 0x1, 0x9)
INV_SBOX = (0x7, 0xE, 0xC, 0x2, 0x0, 0x9, 0xD, 0xA, 0x3, 0xF, 0x5, 0x8, 0x6, 0x4, 0xB, 0x1)

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_MASK80 = (1 << 80) - 1


def _nibbles(b: bytes | list[int]) -> tuple[int, ...]:
    """Return n0..n7 where n0 is the high nibble of byte 3 and n7 the low of byte 0."""
    return (
        b[3] >> 4, b[3] & 0xF,
        b[2] >> 4, b[2] & 0xF,
        b[1] >> 4, b[1] & 0xF,
        b[0] >> 4, b[0] & 0xF,
    )


def _substitute(b: bytes) -> list[int]:
    return [SBOX[x & 0xF] | (SBOX[x >> 4] << 4) for x in b]


def _mix(b: list[int]) -> list[int]:
    n0, n1, n2, n3, n4, n5, n6, n7 = _nibbles(b)
    return [
        ((n1 ^ n2 ^ n3 ^ n6 ^ n7) << 4) | (n0 ^ n2 ^ n3 ^ n4 ^ n7),
        ((n0 ^ n1 ^ n3 ^ n4 ^ n5) << 4) | (n0 ^ n1 ^ n2 ^ n5 ^ n6),
        ((n0 ^ n1 ^ n3 ^ n4 ^ n6 ^ n7) << 4) | (n0 ^ n1 ^ n2 ^ n4 ^ n5 ^ n7),
        ((n1 ^ n2 ^ n3 ^ n4 ^ n5 ^ n6) << 4) | (n0 ^ n2 ^ n3 ^ n5 ^ n6 ^ n7),
    ]


def _permute(b: list[int]) -> list[int]:
    n0, n1, n2, n3, n4, n5, n6, n7 = _nibbles(b)
    return [
        (n5 << 4) | n1,
        (n7 << 4) | n4,
        (n3 << 4) | n6,
        (n2 << 4) | n0,
    ]


def _round_function(half: int, round_key: int) -> int:
    data = (half ^ round_key).to_bytes(4, "little")
    return int.from_bytes(bytes(_permute(_mix(_substitute(data)))), "little")


def _check_bytes(data: bytes, size: int, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


def _rotate_right(value: int, bits: int, width: int) -> int:
    mask = (1 << width) - 1
    return ((value >> bits) | (value << (width - bits))) & mask


def _round_keys_64(key: bytes) -> Iterator[int]:
    k = int.from_bytes(_check_bytes(key, 8, "key"), "little")
    for r in range(1, ROUNDS + 1):
        k = _rotate_right(k, 15, 64)
        k = (k & ((1 << 60) - 1)) | (SBOX[k >> 60] << 60)
        k ^= (r & 0x1F) << 11
        yield (k >> 32) & _MASK32


def _round_keys_80(key: bytes) -> Iterator[int]:
    k = int.from_bytes(_check_bytes(key, 10, "key"), "little")
    for r in range(1, ROUNDS + 1):
        k = _rotate_right(k, 19, 80)
        top = k >> 72
        top = (SBOX[top >> 4] << 4) | SBOX[top & 0xF]
        k = (k & ((1 << 72) - 1)) | (top << 72)
        k ^= (((r >> 2) & 0x7) << 16) | ((r & 0x3) << 14)
        yield (k >> 48) & _MASK32


def _encrypt(block: bytes, round_keys: list[int]) -> bytes:
    value = int.from_bytes(_check_bytes(block, BLOCK_BYTES, "block"), "little")
    right, left = value & _MASK32, value >> 32
    for rk in round_keys:
        left, right = _round_function(left, rk) ^ right, left
    return (right | (left << 32)).to_bytes(BLOCK_BYTES, "little")


def _decrypt(block: bytes, round_keys: list[int]) -> bytes:
    value = int.from_bytes(_check_bytes(block, BLOCK_BYTES, "block"), "little")
    right, left = value & _MASK32, value >> 32
    for rk in reversed(round_keys):
        right, left = _round_function(right, rk) ^ left, right
    return (right | (left << 32)).to_bytes(BLOCK_BYTES, "little")


def mibs64_encrypt(block: bytes, key: bytes) -> bytes:
    """Encrypt an 8-byte block with an 8-byte key."""
    return _encrypt(block, list(_round_keys_64(key)))


def mibs64_decrypt(block: bytes, key: bytes) -> bytes:
    """Decrypt an 8-byte block with an 8-byte key."""
    return _decrypt(block, list(_round_keys_64(key)))


def mibs80_encrypt(block: bytes, key: bytes) -> bytes:
    """Encrypt an 8-byte block with a 10-byte key."""
    return _encrypt(block, list(_round_keys_80(key)))


def mibs80_decrypt(block: bytes, key: bytes) -> bytes:
    """Decrypt an 8-byte block with a 10-byte key."""
    return _decrypt(block, list(_round_keys_80(key)))