import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lightciphers.led import decrypt, encrypt, field_mult

nibble = st.integers(min_value=0, max_value=15)
state_strategy = st.lists(st.lists(nibble, min_size=4, max_size=4), min_size=4, max_size=4)


def _zero_state():
    return [[0] * 4 for _ in range(4)]


def _counting_state():
    return [[4 * i + j for j in range(4)] for i in range(4)]


def test_field_mult_reduction():
    # x * x^3 = x^4 = x + 1 under the reduction polynomial 0x3
    assert field_mult(2, 8) == 3


@given(nibble)
def test_field_mult_identity_and_zero(value):
    assert field_mult(1, value) == value
    assert field_mult(value, 1) == value
    assert field_mult(0, value) == 0


@given(nibble, nibble)
def test_field_mult_commutes(a, b):
    assert field_mult(a, b) == field_mult(b, a)


@given(nibble, nibble, nibble)
def test_field_mult_distributes(a, b, c):
    assert field_mult(a, b ^ c) == field_mult(a, b) ^ field_mult(a, c)


def test_field_mult_rejects_wide_values():
    with pytest.raises(ValueError):
        field_mult(16, 1)


def test_led64_round_trip_zero():
    key = [0] * 16
    cipher = encrypt(_zero_state(), key, 64)
    assert decrypt(cipher, key, 64) == tuple(tuple(row) for row in _zero_state())


def test_led64_round_trip_counting():
    key = list(range(16))
    cipher = encrypt(_counting_state(), key, 64)
    assert cipher != tuple(tuple(row) for row in _counting_state())
    assert decrypt(cipher, key, 64) == tuple(tuple(row) for row in _counting_state())


def test_led128_round_trip_zero():
    key = [0] * 32
    cipher = encrypt(_zero_state(), key, 128)
    assert decrypt(cipher, key, 128) == tuple(tuple(row) for row in _zero_state())


@settings(max_examples=30)
@given(state_strategy, st.lists(nibble, min_size=16, max_size=16))
def test_led64_round_trip_property(state, key):
    assert decrypt(encrypt(state, key, 64), key, 64) == tuple(tuple(r) for r in state)


@settings(max_examples=30)
@given(state_strategy, st.lists(nibble, min_size=32, max_size=32))
def test_led128_round_trip_property(state, key):
    assert decrypt(encrypt(state, key, 128), key, 128) == tuple(tuple(r) for r in state)


def test_distinct_plaintexts_give_distinct_ciphertexts():
    key = list(range(16))
    other = _zero_state()
    other[3][3] = 1
    assert encrypt(_zero_state(), key, 64) != encrypt(other, key, 64)


def test_key_changes_ciphertext():
    key_a = [0] * 32
    key_b = [0] * 31 + [1]
    assert encrypt(_zero_state(), key_a, 128) != encrypt(_zero_state(), key_b, 128)


def test_key_size_changes_ciphertext():
    key = [0] * 16
    assert encrypt(_zero_state(), key, 64) != encrypt(_zero_state(), key + key, 128)


def test_input_is_not_modified():
    state = _counting_state()
    encrypt(state, [0] * 16, 64)
    assert state == _counting_state()


def test_bad_key_bits():
    with pytest.raises(ValueError):
        encrypt(_zero_state(), [0] * 16, 96)


def test_bad_key_length():
    with pytest.raises(ValueError):
        encrypt(_zero_state(), [0] * 16, 128)


def test_bad_state_shape():
    with pytest.raises(ValueError):
        decrypt([[0] * 4] * 3, [0] * 16, 64)


def test_bad_state_value():
    state = _zero_state()
    state[0][0] = 16
    with pytest.raises(ValueError):
        encrypt(state, [0] * 16, 64)


def test_bad_key_value():
    with pytest.raises(ValueError):
        encrypt(_zero_state(), [0] * 15 + [20], 64)