"""Skipjack block cipher: 64-bit block, 80-bit key, 32 rounds.

Blocks are 8 bytes holding four big-endian 16-bit words ``w1..w4``; keys are
10 bytes.
"""

from __future__ import annotations

BLOCK_BYTES = 8
KEY_BYTES = 10
ROUNDS = 32

F_TABLE = bytes.fromhex(
    "a3d70983f848f6f4b321157899b1aff9"
    "e72d4d8ace4cca2e5295d91e4e384428"
    "0adf02a017f1606812b77ac3e9fa3d53"
    "96846bbaf2639a197caee5f5f7166aa2"
    "39b67b0fc193811beeb41aead0912fb8"
    "55b9da853f41bfe05a58805f660bd890"
    "35d5c0a73306656945009456 6d989b76".replace(" ", "")
    + "97fcb2c2b0fedb20e1ebd6e4dd474a1d"
    "42ed9e6e493ccd4327d207d4dec76718"
    "89cb301f8dc68faac874dcc95d5c31a4"
    "7088612c9f0d2b8750825464267d0340"
    "344b1c73d1c4fd3bccfb7fabe63e5ba5"
    "ad04239c145122f02979717eff8c0ee2"
    "0cefbc72756f37a1ecd38e628b8610e8"
    "0877 11be924f24c53236 9dcff3a6bbac".replace(" ", "")
    + "5e6ca9135725b5e3bda83a0105592a46"
)


def _check_bytes(data: bytes, size: int, name: str) -> bytes:
    raw = bytes(data)
    if len(raw) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(raw)}")
    return raw


class Skipjack:
    """A Skipjack instance keyed with a 10-byte key."""

    def __init__(self, key: bytes) -> None:
        raw = _check_bytes(key, KEY_BYTES, "key")
        # One table per key byte: table[i] == F[i ^ key_byte].
        self._tables = tuple(
            bytes(F_TABLE[i ^ key_byte] for i in range(256)) for key_byte in raw
        )

    def _round_tables(self, round_index: int) -> tuple[bytes, bytes, bytes, bytes]:
        start = 4 * round_index
        return tuple(self._tables[(start + j) % KEY_BYTES] for j in range(4))  # type: ignore[return-value]

    def _g(self, word: int, round_index: int) -> int:
        t0, t1, t2, t3 = self._round_tables(round_index)
        high, low = word >> 8, word & 0xFF
        high = t0[low] ^ high
        low = t1[high] ^ low
        high = t2[low] ^ high
        low = t3[high] ^ low
        return (high << 8) | low

    def _g_inv(self, word: int, round_index: int) -> int:
        t0, t1, t2, t3 = self._round_tables(round_index)
        high, low = word >> 8, word & 0xFF
        low = t3[high] ^ low
        high = t2[low] ^ high
        low = t1[high] ^ low
        high = t0[low] ^ high
        return (high << 8) | low

    @staticmethod
    def _rule_a(round_index: int) -> bool:
        return (round_index // 8) % 2 == 0

    @staticmethod
    def _words(block: bytes) -> list[int]:
        raw = _check_bytes(block, BLOCK_BYTES, "block")
        return [int.from_bytes(raw[i:i + 2], "big") for i in range(0, BLOCK_BYTES, 2)]

    @staticmethod
    def _pack(words: list[int]) -> bytes:
        return b"".join(w.to_bytes(2, "big") for w in words)

    def encrypt(self, block: bytes) -> bytes:
        """Encrypt one 8-byte block."""
        w1, w2, w3, w4 = self._words(block)
        for k in range(ROUNDS):
            counter = k + 1
            g = self._g(w1, k)
            if self._rule_a(k):
                w1, w2, w3, w4 = g ^ w4 ^ counter, g, w2, w3
            else:
                w1, w2, w3, w4 = w4, g, w1 ^ w2 ^ counter, w3
        return self._pack([w1, w2, w3, w4])

    def decrypt(self, block: bytes) -> bytes:
        """Decrypt one 8-byte block."""
        w1, w2, w3, w4 = self._words(block)
        for k in reversed(range(ROUNDS)):
            counter = k + 1
            original = self._g_inv(w2, k)
            if self._rule_a(k):
                w1, w2, w3, w4 = original, w3, w4, w1 ^ w2 ^ counter
            else:
                w1, w2, w3, w4 = original, original ^ w3 ^ counter, w4, w1
        return self._pack([w1, w2, w3, w4])