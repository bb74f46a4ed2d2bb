import pytest
from hypothesis import given, strategies as st

from lightciphers.skipjack import Skipjack

KEY = b"\x00\x99\x88\x77\x66\x55\x44\x33\x22\x11"
PLAIN = b"\x33\x22\x11\x00\xdd\xcc\xbb\xaa"
CIPHER = bytes.fromhex("2587cae27a12d300")


def test_known_vector_encrypt():
    assert Skipjack(KEY).encrypt(PLAIN) == CIPHER


def test_known_vector_decrypt():
    assert Skipjack(KEY).decrypt(CIPHER) == PLAIN


def test_encrypt_changes_block():
    assert Skipjack(KEY).encrypt(PLAIN) != PLAIN


@given(st.binary(min_size=10, max_size=10), st.binary(min_size=8, max_size=8))
def test_round_trip(key, block):
    cipher = Skipjack(key)
    assert cipher.decrypt(cipher.encrypt(block)) == block


@given(st.binary(min_size=10, max_size=10), st.binary(min_size=8, max_size=8))
def test_inverse_round_trip(key, block):
    cipher = Skipjack(key)
    assert cipher.encrypt(cipher.decrypt(block)) == block


def test_different_keys_give_different_ciphertexts():
    other = bytes(10)
    assert Skipjack(KEY).encrypt(PLAIN) != Skipjack(other).encrypt(PLAIN)


def test_output_length():
    assert len(Skipjack(bytes(10)).encrypt(bytes(8))) == 8


@pytest.mark.parametrize("size", [0, 9, 11, 16])
def test_bad_key_length(size):
    with pytest.raises(ValueError):
        Skipjack(bytes(size))


@pytest.mark.parametrize("size", [0, 7, 9])
def test_bad_block_length(size):
    cipher = Skipjack(KEY)
    with pytest.raises(ValueError):
        cipher.encrypt(bytes(size))
    with pytest.raises(ValueError):
        cipher.decrypt(bytes(size))