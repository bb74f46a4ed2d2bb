import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lightciphers.sea import ROUNDS, decrypt, encrypt, key_schedule

WORDS = st.lists(st.integers(min_value=0, max_value=0xFFFF), min_size=6, max_size=6)

DEMO_BLOCK = [0, 1, 2, 3, 4, 5]
DEMO_KEY = [0, 2, 4, 6, 8, 10]


def test_key_schedule_shape():
    keys = key_schedule(DEMO_KEY)
    assert len(keys) == ROUNDS == 51
    assert list(keys[0]) == DEMO_KEY
    assert all(len(k) == 6 for k in keys)
    assert all(0 <= w <= 0xFFFF for k in keys for w in k)


def test_key_schedule_is_deterministic():
    assert key_schedule(DEMO_KEY) == key_schedule(list(DEMO_KEY))


def test_demo_round_trip():
    keys = key_schedule(DEMO_KEY)
    cipher = encrypt(DEMO_BLOCK, keys)
    assert list(cipher) != DEMO_BLOCK
    assert list(decrypt(cipher, keys)) == DEMO_BLOCK


@settings(max_examples=40, deadline=None)
@given(block=WORDS, key=WORDS)
def test_round_trip(block, key):
    keys = key_schedule(key)
    cipher = encrypt(block, keys)
    assert all(0 <= w <= 0xFFFF for w in cipher)
    assert list(decrypt(cipher, keys)) == block


def test_different_keys_give_different_ciphertexts():
    other = list(DEMO_KEY)
    other[0] ^= 1
    assert encrypt(DEMO_BLOCK, key_schedule(DEMO_KEY)) != encrypt(
        DEMO_BLOCK, key_schedule(other)
    )


def test_invalid_inputs():
    with pytest.raises(ValueError):
        key_schedule([0] * 5)
    with pytest.raises(ValueError):
        key_schedule([0x10000] + [0] * 5)
    keys = key_schedule(DEMO_KEY)
    with pytest.raises(ValueError):
        encrypt([0] * 7, keys)
    with pytest.raises(ValueError):
        encrypt(DEMO_BLOCK, keys[:-1])
    with pytest.raises(ValueError):
        decrypt([-1] + [0] * 5, keys)