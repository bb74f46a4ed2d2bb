"""SEA block cipher with a 96-bit block and key over 16-bit words, 51 rounds."""

from __future__ import annotations

from collections.abc import Sequence

WORD_BITS = 16
BLOCK_BITS = 96
NB = BLOCK_BITS // (2 * WORD_BITS)
ROUNDS = 51
MASK = 0xFFFF

Half = tuple[int, int, int]
Block = tuple[int, int, int, int, int, int]


def _xor(x: Sequence[int], y: Sequence[int]) -> list[int]:
    return [a ^ b for a, b in zip(x, y)]


def _add(x: Sequence[int], y: Sequence[int]) -> list[int]:
    return [(a + b) & MASK for a, b in zip(x, y)]


def _sub(x: Sequence[int]) -> list[int]:
    out = list(x)
    for base in range(0, NB, 3):
        a, b, c = out[base:base + 3]
        a ^= b & c
        b ^= a & c
        c ^= b | a
        out[base:base + 3] = [a, b, c]
    return out


def _word_rot(x: Sequence[int]) -> list[int]:
    return [x[-1], *x[:-1]]


def _inv_word_rot(x: Sequence[int]) -> list[int]:
    return [*x[1:], x[0]]


def _bit_rot(x: Sequence[int]) -> list[int]:
    out = list(x)
    for base in range(0, NB, 3):
        first, last = out[base], out[base + 2]
        out[base] = ((first >> 1) ^ (first << (WORD_BITS - 1))) & MASK
        out[base + 2] = ((last << 1) ^ (last >> (WORD_BITS - 1))) & MASK
    return out


def _round_function(r: Sequence[int], k: Sequence[int]) -> list[int]:
    return _bit_rot(_sub(_add(r, k)))


def _fk(kr: Sequence[int], kl: Sequence[int], constant: int) -> tuple[list[int], list[int]]:
    c = [constant] + [0] * (NB - 1)
    new_kr = _xor(_word_rot(_round_function(kr, c)), kl)
    return new_kr, list(kr)


def _check_words(values: Sequence[int], count: int, name: str) -> list[int]:
    words = list(values)
    if len(words) != count:
        raise ValueError(f"{name} must hold {count} words, got {len(words)}")
    for word in words:
        if not isinstance(word, int) or not 0 <= word <= MASK:
            raise ValueError(f"{name} words must be 16-bit unsigned integers")
    return words


def key_schedule(master_key: Sequence[int]) -> list[Block]:
    """Derive the 51 round keys, each six words (right half then left half)."""
    key = _check_words(master_key, 2 * NB, "master key")
    keys: list[list[int]] = [key]
    middle = ROUNDS >> 2
    for i in range(1, middle + 1):
        kr, kl = _fk(keys[-1][:NB], keys[-1][NB:], i)
        keys.append(kr + kl)
    keys[middle] = keys[middle][NB:] + keys[middle][:NB]
    for i in range(middle + 1, ROUNDS):
        kr, kl = _fk(keys[-1][:NB], keys[-1][NB:], ROUNDS - i)
        keys.append(kr + kl)
    return [tuple(k) for k in keys]  # type: ignore[misc]


def _check_round_keys(round_keys: Sequence[Sequence[int]]) -> list[list[int]]:
    keys = list(round_keys)
    if len(keys) != ROUNDS:
        raise ValueError(f"expected {ROUNDS} round keys, got {len(keys)}")
    return [_check_words(k, 2 * NB, "round key") for k in keys]


def encrypt(block: Sequence[int], round_keys: Sequence[Sequence[int]]) -> Block:
    """Encrypt six 16-bit words (right half first) with the given round keys."""
    state = _check_words(block, 2 * NB, "block")
    keys = _check_round_keys(round_keys)
    r, l = state[:NB], state[NB:]
    switch = (ROUNDS + 1) >> 2
    for i, key in enumerate(keys, start=1):
        subkey = key[:NB] if i <= switch else key[NB:]
        r, l = _xor(_round_function(r, subkey), _word_rot(l)), r
    return tuple(l + r)  # type: ignore[return-value]


def decrypt(block: Sequence[int], round_keys: Sequence[Sequence[int]]) -> Block:
    """Decrypt six 16-bit words (right half first) with the given round keys."""
    state = _check_words(block, 2 * NB, "block")
    keys = _check_round_keys(round_keys)
    r, l = state[:NB], state[NB:]
    switch = (ROUNDS + 1) >> 2
    for i in range(ROUNDS, 0, -1):
        key = keys[i - 1]
        subkey = key[NB:] if i > switch else key[:NB]
        r, l = _inv_word_rot(_xor(_round_function(r, subkey), l)), r
    return tuple(l + r)  # type: ignore[return-value]