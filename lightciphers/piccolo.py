"""Piccolo block cipher: 64-bit block with an 80-bit or 128-bit key.

A state is four 16-bit words ``(X0, X1, X2, X3)`` with ``X0`` the most
significant.  Keys are given as 16-bit words ``k0, k1, ...`` with ``k0`` the
most significant word of the key.
"""

from __future__ import annotations

from collections.abc import Sequence

SBOX = (0xE, 0x4, 0xB, 0x2, 0x3, 0x8, 0x0, 0x9, 0x1, 0xA, 0x7, 0xF, 0x6, 0xC, 0x5, 0xD)
MUL2 = (0x0, 0x2, 0x4, 0x6, 0x8, 0xA, 0xC, 0xE, 0x3, 0x1, 0x7, 0x5, 0xB, 0x9, 0xF, 0xD)
MUL3 = (0x0, 0x3, 0x6, 0x5, 0xC, 0xF, 0xA, 0x9, 0xB, 0x8, 0xD, 0xE, 0x7, 0x4, 0x1, 0x2)

ROUNDS_80 = 25
ROUNDS_128 = 31

_WORD = 0xFFFF
_HIGH = 0xFF00
_LOW = 0x00FF

Words = tuple[int, ...]


def _check_word(value: object, name: str) -> int:
    if not isinstance(value, int) or not 0 <= value <= _WORD:
        raise ValueError(f"{name} must be a 16-bit unsigned integer")
    return value


def _check_words(values: Sequence[int], count: int | None, name: str) -> list[int]:
    words = list(values)
    if count is not None and len(words) != count:
        raise ValueError(f"{name} must hold {count} words, got {len(words)}")
    return [_check_word(w, f"{name} words") for w in words]


def _to_words(value: int, count: int, name: str) -> list[int]:
    bits = 16 * count
    if not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise ValueError(f"{name} must be a {bits}-bit unsigned integer")
    return [(value >> (16 * (count - 1 - i))) & _WORD for i in range(count)]


def _from_words(words: Sequence[int]) -> int:
    result = 0
    for word in words:
        result = (result << 16) | word
    return result


def _f(value: int) -> int:
    s3, s2, s1, s0 = (SBOX[(value >> shift) & 0xF] for shift in (12, 8, 4, 0))
    t3 = MUL2[s3] ^ MUL3[s2] ^ s1 ^ s0
    t2 = s3 ^ MUL2[s2] ^ MUL3[s1] ^ s0
    t1 = s3 ^ s2 ^ MUL2[s1] ^ MUL3[s0]
    t0 = MUL3[s3] ^ s2 ^ s1 ^ MUL2[s0]
    return (SBOX[t3] << 12) | (SBOX[t2] << 8) | (SBOX[t1] << 4) | SBOX[t0]


def f_function(value: int) -> int:
    """Apply the F function (S-box, diffusion matrix, S-box) to a 16-bit word."""
    return _f(_check_word(value, "value"))


def _permute(x0: int, x1: int, x2: int, x3: int) -> Words:
    return (
        (x1 & _HIGH) | (x3 & _LOW),
        (x2 & _HIGH) | (x0 & _LOW),
        (x3 & _HIGH) | (x1 & _LOW),
        (x0 & _HIGH) | (x2 & _LOW),
    )


def round_permutation(state: Sequence[int]) -> Words:
    """Apply the byte-level round permutation to a four-word state."""
    return _permute(*_check_words(state, 4, "state"))


def whitening_keys_80(key: Sequence[int]) -> Words:
    """Derive the four whitening keys from five 80-bit key words."""
    k = _check_words(key, 5, "key")
    return (
        (k[1] & _LOW) | (k[0] & _HIGH),
        (k[0] & _LOW) | (k[1] & _HIGH),
        (k[3] & _LOW) | (k[4] & _HIGH),
        (k[4] & _LOW) | (k[3] & _HIGH),
    )


_RK80_EVEN = (2, 0, 2, 4, 0)
_RK80_ODD = (3, 1, 3, 4, 1)


def round_keys_80(key: Sequence[int]) -> Words:
    """Derive the 50 round keys from five 80-bit key words."""
    k = _check_words(key, 5, "key")
    keys: list[int] = []
    for i in range(ROUNDS_80):
        tmp = ((i + 1) << 10) | (i + 1)
        con0 = (tmp ^ 0x2D3C) & _WORD
        con1 = ((tmp << 1) ^ 0x0F1E) & _WORD
        keys.append(con1 ^ k[_RK80_EVEN[i % 5]])
        keys.append(con0 ^ k[_RK80_ODD[i % 5]])
    return tuple(keys)


def whitening_keys_128(key: Sequence[int]) -> Words:
    """Derive the four whitening keys from eight 128-bit key words."""
    k = _check_words(key, 8, "key")
    return (
        (k[1] & _LOW) | (k[0] & _HIGH),
        (k[0] & _LOW) | (k[1] & _HIGH),
        (k[7] & _LOW) | (k[4] & _HIGH),
        (k[4] & _LOW) | (k[7] & _HIGH),
    )


def round_keys_128(key: Sequence[int]) -> Words:
    """Derive the 62 round keys from eight 128-bit key words."""
    k = _check_words(key, 8, "key")
    keys: list[int] = []
    for i in range(2 * ROUNDS_128):
        if i & 0x7 == 0x6:
            k[3], k[7], k[5] = k[7], k[5], k[3]
            k[0], k[2], k[6], k[4] = k[2], k[6], k[4], k[0]
        step = i // 2 + 1
        tmp = (step << 10) | step
        con0 = (tmp ^ 0xA98B) & _WORD
        con1 = ((tmp << 1) ^ 0x6547) & _WORD
        keys.append(k[(i + 2) & 0x7] ^ (con0 if i & 1 else con1))
    return tuple(keys)


def _check_round_keys(round_keys: Sequence[int]) -> list[int]:
    keys = _check_words(round_keys, None, "round keys")
    if not keys or len(keys) % 2:
        raise ValueError("round keys must be a non-empty, even number of words")
    return keys


def encrypt(state: Sequence[int], whitening_keys: Sequence[int], round_keys: Sequence[int]) -> Words:
    """Run the Piccolo data path on a four-word state; one round per pair of round keys."""
    x0, x1, x2, x3 = _check_words(state, 4, "state")
    wk = _check_words(whitening_keys, 4, "whitening keys")
    rk = _check_round_keys(round_keys)
    pairs = list(zip(rk[0::2], rk[1::2]))
    x0 ^= wk[0]
    x2 ^= wk[1]
    for even, odd in pairs[:-1]:
        x1 ^= _f(x0) ^ even
        x3 ^= _f(x2) ^ odd
        x0, x1, x2, x3 = _permute(x0, x1, x2, x3)
    even, odd = pairs[-1]
    x1 ^= _f(x0) ^ even
    x3 ^= _f(x2) ^ odd
    x0 ^= wk[2]
    x2 ^= wk[3]
    return (x0, x1, x2, x3)


def decrypt(state: Sequence[int], whitening_keys: Sequence[int], round_keys: Sequence[int]) -> Words:
    """Invert :func:`encrypt` using the same whitening and round keys."""
    wk = _check_words(whitening_keys, 4, "whitening keys")
    rk = _check_round_keys(round_keys)
    n = len(rk) // 2
    inverse: list[int] = []
    for i in range(n):
        inverse.append(rk[2 * n - 2 * i - 2 + i % 2])
        inverse.append(rk[2 * n - 2 * i - 1 - i % 2])
    return encrypt(state, (wk[2], wk[3], wk[0], wk[1]), inverse)


def piccolo80_encrypt(block: int, key: int) -> int:
    """Encrypt a 64-bit block with an 80-bit key."""
    k = _to_words(key, 5, "key")
    state = _to_words(block, 4, "block")
    return _from_words(encrypt(state, whitening_keys_80(k), round_keys_80(k)))


def piccolo80_decrypt(block: int, key: int) -> int:
    """Decrypt a 64-bit block with an 80-bit key."""
    k = _to_words(key, 5, "key")
    state = _to_words(block, 4, "block")
    return _from_words(decrypt(state, whitening_keys_80(k), round_keys_80(k)))


def piccolo128_encrypt(block: int, key: int) -> int:
    """Encrypt a 64-bit block with a 128-bit key."""
    k = _to_words(key, 8, "key")
    state = _to_words(block, 4, "block")
    return _from_words(encrypt(state, whitening_keys_128(k), round_keys_128(k)))


def piccolo128_decrypt(block: int, key: int) -> int:
    """Decrypt a 64-bit block with a 128-bit key."""
    k = _to_words(key, 8, "key")
    state = _to_words(block, 4, "block")
    return _from_words(decrypt(state, whitening_keys_128(k), round_keys_128(k)))