"""Simon block cipher family: 64/96, 64/128, 96/96, 96/144 and 128/128.

Blocks and keys are unsigned integers.  A block holds the left word in its
high half; the key's lowest word is the first round key.
"""

from __future__ import annotations

from dataclasses import dataclass

_Z2 = "10101111011100000011010010011000101000010001111110010110110011"
_Z3 = "11011011101011000110010111100000010010001010011100110100001111"


@dataclass(frozen=True)
class _Params:
    word_bits: int
    key_words: int
    rounds: int
    z: str


_PARAMS = {
    (64, 96): _Params(32, 3, 42, _Z2),
    (64, 128): _Params(32, 4, 44, _Z3),
    (96, 96): _Params(48, 2, 52, _Z2),
    (96, 144): _Params(48, 3, 54, _Z3),
    (128, 128): _Params(64, 2, 68, _Z2),
}

SUPPORTED_SIZES = tuple(_PARAMS)


def _rotl(x: int, n: int, width: int) -> int:
    return ((x << n) | (x >> (width - n))) & ((1 << width) - 1)


def _rotr(x: int, n: int, width: int) -> int:
    return ((x >> n) | (x << (width - n))) & ((1 << width) - 1)


class Simon:
    """A Simon instance with its round keys expanded from ``key``."""

    def __init__(self, block_size: int, key_size: int, key: int) -> None:
        try:
            params = _PARAMS[(block_size, key_size)]
        except (KeyError, TypeError):
            raise ValueError(
                f"unsupported Simon size {block_size}/{key_size}; "
                f"choose one of {SUPPORTED_SIZES}"
            ) from None
        if not isinstance(key, int) or not 0 <= key < (1 << key_size):
            raise ValueError(f"key must be a {key_size}-bit unsigned integer")
        self.block_size = block_size
        self.key_size = key_size
        self._params = params
        self.round_keys = self._expand(key)

    def _expand(self, key: int) -> tuple[int, ...]:
        p = self._params
        w, m = p.word_bits, p.key_words
        mask = (1 << w) - 1
        k = [(key >> (w * i)) & mask for i in range(m)]
        for i in range(m, p.rounds):
            tmp = _rotr(k[i - 1], 3, w)
            if m == 4:
                tmp ^= k[i - 3]
            tmp ^= _rotr(tmp, 1, w)
            bit = int(p.z[(i - m) % len(p.z)])
            k.append((k[i - m] ^ mask) ^ tmp ^ bit ^ 3)
        return tuple(k)

    def _f(self, x: int) -> int:
        w = self._params.word_bits
        return (_rotl(x, 1, w) & _rotl(x, 8, w)) ^ _rotl(x, 2, w)

    def _split(self, block: int) -> tuple[int, int]:
        if not isinstance(block, int) or not 0 <= block < (1 << self.block_size):
            raise ValueError(f"block must be a {self.block_size}-bit unsigned integer")
        w = self._params.word_bits
        return block >> w, block & ((1 << w) - 1)

    def encrypt(self, block: int) -> int:
        """Encrypt one block."""
        x, y = self._split(block)
        for k in self.round_keys:
            x, y = y ^ self._f(x) ^ k, x
        return (x << self._params.word_bits) | y

    def decrypt(self, block: int) -> int:
        """Decrypt one block."""
        x, y = self._split(block)
        for k in reversed(self.round_keys):
            x, y = y, x ^ self._f(y) ^ k
        return (x << self._params.word_bits) | y