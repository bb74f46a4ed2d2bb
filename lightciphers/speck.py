"""Speck block cipher family: 64/96, 64/128, 96/96, 96/144 and 128/128.

Blocks and keys are unsigned integers.  A block holds the ``x`` word in its
high half and ``y`` in its low half; the key's lowest word is the first
round key ``k0``, followed by ``l0, l1, ...``.
"""

from __future__ import annotations

from dataclasses import dataclass

from lightciphers.simon import _rotl, _rotr

ALPHA = 8
BETA = 3


@dataclass(frozen=True)
class _Params:
    word_bits: int
    key_words: int
    rounds: int


_PARAMS = {
    (64, 96): _Params(32, 3, 26),
    (64, 128): _Params(32, 4, 27),
    (96, 96): _Params(48, 2, 28),
    (96, 144): _Params(48, 3, 29),
    (128, 128): _Params(64, 2, 32),
}

SUPPORTED_SIZES = tuple(_PARAMS)


class Speck:
    """A Speck instance with its round keys expanded from ``key``."""

    def __init__(self, block_size: int, key_size: int, key: int) -> None:
        try:
            params = _PARAMS[(block_size, key_size)]
        except (KeyError, TypeError):
            raise ValueError(
                f"unsupported Speck size {block_size}/{key_size}; "
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
        w = p.word_bits
        mask = (1 << w) - 1
        words = [(key >> (w * i)) & mask for i in range(p.key_words)]
        k = [words[0]]
        l = words[1:]
        for i in range(p.rounds - 1):
            new_l = ((k[i] + _rotr(l[i], ALPHA, w)) & mask) ^ i
            l.append(new_l)
            k.append(_rotl(k[i], BETA, w) ^ new_l)
        return tuple(k)

    def _split(self, block: int) -> tuple[int, int]:
        if not isinstance(block, int) or not 0 <= block < (1 << self.block_size):
            raise ValueError(f"block must be a {self.block_size}-bit unsigned integer")
        w = self._params.word_bits
        return block >> w, block & ((1 << w) - 1)

    def encrypt(self, block: int) -> int:
        """Encrypt one block."""
        w = self._params.word_bits
        mask = (1 << w) - 1
        x, y = self._split(block)
        for k in self.round_keys:
            x = ((_rotr(x, ALPHA, w) + y) & mask) ^ k
            y = _rotl(y, BETA, w) ^ x
        return (x << w) | y

    def decrypt(self, block: int) -> int:
        """Decrypt one block."""
        w = self._params.word_bits
        mask = (1 << w) - 1
        x, y = self._split(block)
        for k in reversed(self.round_keys):
            y = _rotr(x ^ y, BETA, w)
            x = _rotl(((x ^ k) - y) & mask, ALPHA, w)
        return (x << w) | y