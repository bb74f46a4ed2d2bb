"""LED block cipher over a 4x4 state of nibbles, for 64- and 128-bit keys.

The state is given as four rows of four nibbles.  The key is a sequence of
nibbles, added to the state row by row: 16 nibbles for a 64-bit key, 32 for a
128-bit key (the two halves are used alternately).
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from operator import xor

State = tuple[tuple[int, int, int, int], ...]

MIX_COLUMN_MATRIX = (
    (4, 1, 2, 2),
    (8, 6, 5, 6),
    (11, 14, 10, 9),
    (2, 2, 15, 11),
)

INV_MIX_COLUMN_MATRIX = (
    (12, 12, 13, 4),
    (3, 8, 4, 5),
    (7, 6, 2, 14),
    (13, 9, 9, 13),
)

SBOX = (12, 5, 6, 11, 9, 0, 10, 13, 3, 14, 15, 8, 4, 7, 1, 2)
INV_SBOX = (5, 14, 15, 8, 12, 1, 2, 13, 11, 4, 6, 3, 0, 7, 9, 10)

ROUND_CONSTANTS = (
    0x01, 0x03, 0x07, 0x0F, 0x1F, 0x3E, 0x3D, 0x3B, 0x37, 0x2F,
    0x1E, 0x3C, 0x39, 0x33, 0x27, 0x0E, 0x1D, 0x3A, 0x35, 0x2B,
    0x16, 0x2C, 0x18, 0x30, 0x21, 0x02, 0x05, 0x0B, 0x17, 0x2E,
    0x1C, 0x38, 0x31, 0x23, 0x06, 0x0D, 0x1B, 0x36, 0x2D, 0x1A,
    0x34, 0x29, 0x12, 0x24, 0x08, 0x11, 0x22, 0x04,
)

_REDUCTION_POLY = 0x3
_NIBBLE = 0xF


def field_mult(a: int, b: int) -> int:
    """Multiply two nibbles in GF(2^4) modulo x^4 + x + 1."""
    if not (isinstance(a, int) and isinstance(b, int) and 0 <= a <= 15 and 0 <= b <= 15):
        raise ValueError("field_mult operands must be nibbles (0..15)")
    x, result = a, 0
    for bit in range(4):
        if (b >> bit) & 1:
            result ^= x
        carry = x & 0x8
        x = (x << 1) & _NIBBLE
        if carry:
            x ^= _REDUCTION_POLY
    return result & _NIBBLE


_MUL = tuple(tuple(field_mult(a, b) for b in range(16)) for a in range(16))


@dataclass(frozen=True)
class _Variant:
    rounds: int
    key_nibbles: int
    second_half_offset: int


_VARIANTS = {
    64: _Variant(rounds=32, key_nibbles=16, second_half_offset=0),
    128: _Variant(rounds=48, key_nibbles=32, second_half_offset=16),
}


def _variant(key_bits: int) -> _Variant:
    try:
        return _VARIANTS[key_bits]
    except (KeyError, TypeError):
        raise ValueError(f"key_bits must be 64 or 128, got {key_bits!r}") from None


def _is_nibble(value: object) -> bool:
    return isinstance(value, int) and 0 <= value <= 15


def _check_state(state: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in state]
    if len(rows) != 4 or any(len(row) != 4 for row in rows):
        raise ValueError("state must be four rows of four nibbles")
    if not all(_is_nibble(cell) for row in rows for cell in row):
        raise ValueError("state cells must be nibbles (0..15)")
    return rows


def _check_key(key: Sequence[int], variant: _Variant) -> list[int]:
    nibbles = list(key)
    if len(nibbles) != variant.key_nibbles:
        raise ValueError(
            f"key must hold {variant.key_nibbles} nibbles, got {len(nibbles)}"
        )
    if not all(_is_nibble(n) for n in nibbles):
        raise ValueError("key values must be nibbles (0..15)")
    return nibbles


def _add_key(state: list[list[int]], key: list[int], half: int, offset: int) -> None:
    start = offset if half & 1 else 0
    for i, row in enumerate(state):
        for j in range(4):
            row[j] ^= key[start + 4 * i + j]


def _add_constants(state: list[list[int]], r: int) -> None:
    state[1][0] ^= 1
    state[2][0] ^= 2
    state[3][0] ^= 3
    high = (ROUND_CONSTANTS[r] >> 3) & 7
    low = ROUND_CONSTANTS[r] & 7
    state[0][1] ^= high
    state[2][1] ^= high
    state[1][1] ^= low
    state[3][1] ^= low


def _sub_cells(state: list[list[int]], box: Sequence[int]) -> None:
    for row in state:
        row[:] = [box[cell] for cell in row]


def _shift_rows(state: list[list[int]]) -> None:
    for i in range(1, 4):
        row = state[i]
        row[:] = row[i:] + row[:i]


def _inv_shift_rows(state: list[list[int]]) -> None:
    for i in range(1, 4):
        row = state[i]
        row[:] = row[-i:] + row[:-i]


def _mix_columns(state: list[list[int]], matrix: Sequence[Sequence[int]]) -> None:
    columns = list(zip(*state))
    mixed = [
        [reduce(xor, (_MUL[m][c] for m, c in zip(matrix_row, column)), 0) for matrix_row in matrix]
        for column in columns
    ]
    for i, row in enumerate(state):
        row[:] = [mixed[j][i] for j in range(4)]


def _freeze(state: list[list[int]]) -> State:
    return tuple(tuple(row) for row in state)  # type: ignore[return-value]


def encrypt(state: Sequence[Sequence[int]], key: Sequence[int], key_bits: int = 64) -> State:
    """Encrypt a 4x4 nibble state with a 64- or 128-bit key."""
    variant = _variant(key_bits)
    cells = _check_state(state)
    nibbles = _check_key(key, variant)
    offset = variant.second_half_offset
    _add_key(cells, nibbles, 0, offset)
    for step in range(variant.rounds // 4):
        for j in range(4):
            _add_constants(cells, step * 4 + j)
            _sub_cells(cells, SBOX)
            _shift_rows(cells)
            _mix_columns(cells, MIX_COLUMN_MATRIX)
        _add_key(cells, nibbles, step + 1, offset)
    return _freeze(cells)


def decrypt(state: Sequence[Sequence[int]], key: Sequence[int], key_bits: int = 64) -> State:
    """Decrypt a 4x4 nibble state with a 64- or 128-bit key."""
    variant = _variant(key_bits)
    cells = _check_state(state)
    nibbles = _check_key(key, variant)
    offset = variant.second_half_offset
    for step in reversed(range(variant.rounds // 4)):
        _add_key(cells, nibbles, step + 1, offset)
        for j in reversed(range(4)):
            _mix_columns(cells, INV_MIX_COLUMN_MATRIX)
            _inv_shift_rows(cells)
            _sub_cells(cells, INV_SBOX)
            _add_constants(cells, step * 4 + j)
    _add_key(cells, nibbles, 0, offset)
    return _freeze(cells)