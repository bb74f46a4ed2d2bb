"""Table-driven LED block cipher for 64- and 128-bit keys.

SubCells, ShiftRows and MixColumns are merged into one lookup per cell:
each table entry packs one column of four output nibbles into 16 bits, row 0
in the highest nibble.  Results are identical to :mod:`lightciphers.led`.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

from lightciphers.led import (
    INV_MIX_COLUMN_MATRIX,
    INV_SBOX,
    MIX_COLUMN_MATRIX,
    SBOX,
    State,
    _add_constants,
    _add_key,
    _check_key,
    _check_state,
    _variant,
    field_mult,
)

Table = tuple[tuple[int, ...], ...]

_NIBBLE = 0xF


def _pack_column(matrix: Sequence[Sequence[int]], column: int, value: int) -> int:
    packed = 0
    for row in matrix:
        packed = (packed << 4) | field_mult(row[column], value)
    return packed


def build_table() -> Table:
    """Return the forward table: entry [c][v] is column ``c`` of MixColumns applied to ``SBOX[v]``."""
    return tuple(
        tuple(_pack_column(MIX_COLUMN_MATRIX, c, SBOX[v]) for v in range(16))
        for c in range(4)
    )


def build_inverse_table() -> Table:
    """Return the inverse table: entry [c][v] is column ``c`` of the inverse MixColumns applied to ``v``."""
    return tuple(
        tuple(_pack_column(INV_MIX_COLUMN_MATRIX, c, v) for v in range(16))
        for c in range(4)
    )


_TABLE = build_table()
_INV_TABLE = build_inverse_table()


def _unpack(value: int) -> list[int]:
    """Split a packed column into nibbles for rows 0..3."""
    return [(value >> shift) & _NIBBLE for shift in (12, 8, 4, 0)]


def _forward_step(state: list[list[int]]) -> None:
    old = [row[:] for row in state]
    for c in range(4):
        packed = reduce(xor, (_TABLE[r][old[r][(r + c) % 4]] for r in range(4)), 0)
        for r, nibble in enumerate(_unpack(packed)):
            state[r][c] = nibble


def _inverse_step(state: list[list[int]]) -> None:
    old = [row[:] for row in state]
    for c in range(4):
        packed = reduce(xor, (_INV_TABLE[r][old[r][c]] for r in range(4)), 0)
        for r, nibble in enumerate(_unpack(packed)):
            state[r][(c + r) % 4] = INV_SBOX[nibble]


def _freeze(state: list[list[int]]) -> State:
    return tuple(tuple(row) for row in state)  # type: ignore[return-value]


def encrypt(state: Sequence[Sequence[int]], key: Sequence[int], key_bits: int = 64) -> State:
    """Encrypt a 4x4 nibble state with a 64- or 128-bit key using lookup tables."""
    variant = _variant(key_bits)
    cells = _check_state(state)
    nibbles = _check_key(key, variant)
    offset = variant.second_half_offset
    _add_key(cells, nibbles, 0, offset)
    for step in range(variant.rounds // 4):
        for j in range(4):
            _add_constants(cells, step * 4 + j)
            _forward_step(cells)
        _add_key(cells, nibbles, step + 1, offset)
    return _freeze(cells)


def decrypt(state: Sequence[Sequence[int]], key: Sequence[int], key_bits: int = 64) -> State:
    """Decrypt a 4x4 nibble state with a 64- or 128-bit key using lookup tables."""
    variant = _variant(key_bits)
    cells = _check_state(state)
    nibbles = _check_key(key, variant)
    offset = variant.second_half_offset
    for step in reversed(range(variant.rounds // 4)):
        _add_key(cells, nibbles, step + 1, offset)
        for j in reversed(range(4)):
            _inverse_step(cells)
            _add_constants(cells, step * 4 + j)
    _add_key(cells, nibbles, 0, offset)
    return _freeze(cells)