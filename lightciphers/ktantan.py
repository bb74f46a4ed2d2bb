"""Bitsliced KTANTAN48 and KTANTAN64 block ciphers.

Every value is a 64-bit word; bit ``n`` of each word belongs to the ``n``-th
independent cipher instance.  To work with one instance only, use words in
``{0, 1}``.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

MASK64 = (1 << 64) - 1
ONES = MASK64
KEY_BITS = 80
MAX_ROUNDS = 254

_IR_BITS = (
    "1111111000" "1101010101" "1110110011" "0010100100" "0100011000"
    "1111000010" "0001010000" "0111110011" "1111010100" "0101010011"
    "0000110011" "1011111011" "1010010101" "1010011100" "1101100010"
    "1110110111" "1001011011" "0101110010" "0100110100" "0111000100"
    "1111010000" "1110101100" "0001011001" "0000001101" "1100000001"
    "0010"
)
IR = tuple(ONES if bit == "1" else 0 for bit in _IR_BITS)


def _not(value: int) -> int:
    return value ^ MASK64


def mux4(x: Sequence[int], s: Sequence[int]) -> int:
    """Select ``x[s0 + 2*s1]`` slice by slice."""
    x0, x1, x2, x3 = x
    s0, s1 = s
    ns0, ns1 = _not(s0), _not(s1)
    return (
        (x3 & s1 & s0) | (x2 & s1 & ns0) | (x1 & ns1 & s0) | (x0 & ns1 & ns0)
    ) & MASK64


def mux16(x: Sequence[int], s: Sequence[int]) -> int:
    """Select ``x[s0 + 2*s1 + 4*s2 + 8*s3]`` slice by slice."""
    x = tuple(x)
    s = tuple(s)
    if len(x) != 16 or len(s) != 4:
        raise ValueError("mux16 needs 16 inputs and 4 selectors")
    low = s[:2]
    quarters = [mux4(x[start:start + 4], low) for start in range(0, 16, 4)]
    return mux4(quarters, s[2:])


def _check_words(values: Sequence[int], count: int, name: str) -> list[int]:
    words = list(values)
    if len(words) != count:
        raise ValueError(f"{name} must hold {count} words, got {len(words)}")
    for word in words:
        if not isinstance(word, int) or not 0 <= word <= MASK64:
            raise ValueError(f"{name} words must be 64-bit unsigned integers")
    return words


def _check_rounds(rounds: int) -> None:
    if not isinstance(rounds, int) or not 0 <= rounds <= MAX_ROUNDS:
        raise ValueError(f"rounds must be between 0 and {MAX_ROUNDS}")


def _subkeys(key: Sequence[int], rounds: int) -> Iterator[tuple[int, int]]:
    """Yield the (ka, kb) round key pairs."""
    groups = [tuple(key[16 * g:16 * g + 16]) for g in range(5)]
    t = [ONES] * 8
    for _ in range(rounds):
        t = [t[7] ^ t[6] ^ t[4] ^ t[2]] + t[:7]
        selected = [mux16(group, t[4:8]) for group in groups]
        f = mux4(selected[1:5], (t[0], t[1]))
        g = mux4(selected[0:4], (_not(t[0]), _not(t[1])))
        nt2, nt3 = _not(t[2]), _not(t[3])
        ka = (nt3 & nt2 & selected[0]) ^ ((t[3] | t[2]) & f)
        kb = (nt3 & t[2] & selected[4]) ^ ((t[3] | nt2) & g)
        yield ka & MASK64, kb & MASK64


@dataclass(frozen=True)
class _Variant:
    name: str
    l2_len: int
    l1_len: int
    steps: int
    x: tuple[int, int, int, int, int]
    y: tuple[int, int, int, int, int, int]

    @property
    def block_bits(self) -> int:
        return self.l1_len + self.l2_len

    def _a_rest(self, l1: list[int], off: int, ir: int, ka: int) -> int:
        _, x2, x3, x4, x5 = self.x
        return (
            l1[x2 - off] ^ (l1[x3 - off] & l1[x4 - off]) ^ (l1[x5 - off] & ir) ^ ka
        )

    def _b_rest(self, l2: list[int], off: int, kb: int) -> int:
        _, y2, y3, y4, y5, y6 = self.y
        return (
            l2[y2 - off]
            ^ (l2[y3 - off] & l2[y4 - off])
            ^ (l2[y5 - off] & l2[y6 - off])
            ^ kb
        )

    def _offsets(self) -> range:
        return range(self.steps - 1, -1, -1)

    def encrypt(self, plain, key, rounds) -> tuple[int, ...]:
        words = _check_words(plain, self.block_bits, "plaintext")
        key = _check_words(key, KEY_BITS, "key")
        _check_rounds(rounds)
        l2, l1 = words[: self.l2_len], words[self.l2_len:]
        x1, y1 = self.x[0], self.y[0]
        for i, (ka, kb) in enumerate(_subkeys(key, rounds)):
            fa = [l1[x1 - off] ^ self._a_rest(l1, off, IR[i], ka) for off in self._offsets()]
            fb = [l2[y1 - off] ^ self._b_rest(l2, off, kb) for off in self._offsets()]
            l1 = fb + l1[: -self.steps]
            l2 = fa + l2[: -self.steps]
        return tuple(l2 + l1)

    def decrypt(self, cipher, key, rounds) -> tuple[int, ...]:
        words = _check_words(cipher, self.block_bits, "ciphertext")
        key = _check_words(key, KEY_BITS, "key")
        _check_rounds(rounds)
        l2, l1 = words[: self.l2_len], words[self.l2_len:]
        round_keys = list(_subkeys(key, rounds))
        for i in reversed(range(rounds)):
            ka, kb = round_keys[i]
            fb, fa = l1[: self.steps], l2[: self.steps]
            l1, l2 = l1[self.steps:], l2[self.steps:]
            for saved_a, saved_b, off in zip(fa, fb, self._offsets()):
                l1.append(saved_a ^ self._a_rest(l1, off, IR[i], ka))
                l2.append(saved_b ^ self._b_rest(l2, off, kb))
        return tuple(l2 + l1)


_KTANTAN48 = _Variant(
    name="KTANTAN48",
    l2_len=29,
    l1_len=19,
    steps=2,
    x=(18, 12, 15, 7, 6),
    y=(28, 19, 21, 13, 15, 6),
)

_KTANTAN64 = _Variant(
    name="KTANTAN64",
    l2_len=39,
    l1_len=25,
    steps=3,
    x=(24, 15, 20, 11, 9),
    y=(38, 25, 33, 21, 14, 9),
)


def ktantan48_encrypt(plain: Sequence[int], key: Sequence[int], rounds: int = MAX_ROUNDS) -> tuple[int, ...]:
    """Encrypt 48 bitsliced plaintext words under 80 bitsliced key words."""
    return _KTANTAN48.encrypt(plain, key, rounds)


def ktantan48_decrypt(cipher: Sequence[int], key: Sequence[int], rounds: int = MAX_ROUNDS) -> tuple[int, ...]:
    """Decrypt 48 bitsliced ciphertext words under 80 bitsliced key words."""
    return _KTANTAN48.decrypt(cipher, key, rounds)


def ktantan64_encrypt(plain: Sequence[int], key: Sequence[int], rounds: int = MAX_ROUNDS) -> tuple[int, ...]:
    """Encrypt 64 bitsliced plaintext words under 80 bitsliced key words."""
    return _KTANTAN64.encrypt(plain, key, rounds)


def ktantan64_decrypt(cipher: Sequence[int], key: Sequence[int], rounds: int = MAX_ROUNDS) -> tuple[int, ...]:
    """Decrypt 64 bitsliced ciphertext words under 80 bitsliced key words."""
    return _KTANTAN64.decrypt(cipher, key, rounds)