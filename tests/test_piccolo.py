import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lightciphers.piccolo import (
    decrypt,
    encrypt,
    f_function,
    piccolo128_decrypt,
    piccolo128_encrypt,
    piccolo80_decrypt,
    piccolo80_encrypt,
    round_keys_128,
    round_keys_80,
    round_permutation,
    whitening_keys_128,
    whitening_keys_80,
)

PLAIN = 0x0123456789ABCDEF
KEY80 = 0x00112233445566778899
KEY128 = 0x00112233445566778899AABBCCDDEEFF
CIPHER80 = 0x8D2BFF9935F84056
CIPHER128 = 0x5EC42CEA657B89FF

words16 = st.integers(min_value=0, max_value=0xFFFF)


def test_piccolo80_vector():
    assert piccolo80_encrypt(PLAIN, KEY80) == CIPHER80


def test_piccolo80_decrypt_vector():
    assert piccolo80_decrypt(CIPHER80, KEY80) == PLAIN


def test_piccolo128_vector():
    assert piccolo128_encrypt(PLAIN, KEY128) == CIPHER128


def test_piccolo128_decrypt_vector():
    assert piccolo128_decrypt(CIPHER128, KEY128) == PLAIN


def test_f_function_of_zero():
    assert f_function(0) == 0x5555


def test_f_function_is_a_permutation():
    assert len({f_function(v) for v in range(1 << 16)}) == 1 << 16


def test_round_permutation_moves_bytes():
    assert round_permutation((0x0001, 0x0203, 0x0405, 0x0607)) == (0x0207, 0x0401, 0x0603, 0x0005)


def test_round_key_counts():
    k80 = (0x0011, 0x2233, 0x4455, 0x6677, 0x8899)
    k128 = (0x0011, 0x2233, 0x4455, 0x6677, 0x8899, 0xAABB, 0xCCDD, 0xEEFF)
    assert len(round_keys_80(k80)) == 50
    assert len(round_keys_128(k128)) == 62
    assert len(whitening_keys_80(k80)) == 4
    assert len(whitening_keys_128(k128)) == 4


def test_whitening_keys_of_uniform_key_equal_key_word():
    assert whitening_keys_80((0xABAB,) * 5) == (0xABAB,) * 4
    assert whitening_keys_128((0xCDCD,) * 8) == (0xCDCD,) * 4


@settings(max_examples=30)
@given(block=st.integers(0, (1 << 64) - 1), key=st.integers(0, (1 << 80) - 1))
def test_piccolo80_round_trip(block, key):
    assert piccolo80_decrypt(piccolo80_encrypt(block, key), key) == block


@settings(max_examples=30)
@given(block=st.integers(0, (1 << 64) - 1), key=st.integers(0, (1 << 128) - 1))
def test_piccolo128_round_trip(block, key):
    assert piccolo128_decrypt(piccolo128_encrypt(block, key), key) == block


@settings(max_examples=30)
@given(
    state=st.tuples(words16, words16, words16, words16),
    key=st.lists(words16, min_size=5, max_size=5),
)
def test_low_level_round_trip(state, key):
    wk = whitening_keys_80(key)
    rk = round_keys_80(key)
    assert decrypt(encrypt(state, wk, rk), wk, rk) == state


def test_encrypt_rejects_odd_round_keys():
    with pytest.raises(ValueError):
        encrypt((0, 0, 0, 0), (0, 0, 0, 0), (1, 2, 3))


def test_encrypt_rejects_short_whitening_keys():
    with pytest.raises(ValueError):
        encrypt((0, 0, 0, 0), (0, 0, 0), (1, 2))


def test_rejects_oversized_key():
    with pytest.raises(ValueError):
        piccolo80_encrypt(PLAIN, 1 << 80)


def test_rejects_negative_block():
    with pytest.raises(ValueError):
        piccolo128_encrypt(-1, KEY128)


def test_f_function_rejects_wide_value():
    with pytest.raises(ValueError):
        f_function(0x10000)


def test_key_schedule_rejects_wrong_length():
    with pytest.raises(ValueError):
        round_keys_128((0,) * 5)