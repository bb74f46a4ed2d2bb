import pytest
from hypothesis import given, strategies as st

from lightciphers.speck import SUPPORTED_SIZES, Speck

# Keys and plaintexts exactly as the reference programs set them up.
SETUPS = {
    (64, 96): (0x131211100B0A090803020100, 0x74614620736E6165),
    (64, 128): (0x1B1A1918131211100B0A090803020100, 0x3B7265747475432D),
    (96, 96): (0x0D0C0B0A0908050403020100, 0x65776F68202C656761737520),
    (96, 144): (0x1514131211100D0C0B0A0908050403020100, 0x74616874207473756420666F),
    (128, 128): (0x0F0E0D0C0B0A09080706050403020100, 0x6C617669757165207469206564616D20),
}

ROUND_COUNTS = {(64, 96): 26, (64, 128): 27, (96, 96): 28, (96, 144): 29, (128, 128): 32}


@pytest.mark.parametrize("sizes", SUPPORTED_SIZES)
def test_round_count(sizes):
    key, _ = SETUPS[sizes]
    assert len(Speck(*sizes, key).round_keys) == ROUND_COUNTS[sizes]


@pytest.mark.parametrize("sizes", SUPPORTED_SIZES)
def test_first_round_key_is_lowest_key_word(sizes):
    key, _ = SETUPS[sizes]
    word_bits = sizes[0] // 2
    assert Speck(*sizes, key).round_keys[0] == key & ((1 << word_bits) - 1)


def test_known_vector_64_96():
    key, plain = SETUPS[(64, 96)]
    assert Speck(64, 96, key).encrypt(plain) == 0x9F7952EC4175946C


def test_known_vector_64_128():
    key, plain = SETUPS[(64, 128)]
    assert Speck(64, 128, key).encrypt(plain) == 0x8C6FA548454E028B


def test_known_vector_128_128():
    key, plain = SETUPS[(128, 128)]
    assert Speck(128, 128, key).encrypt(plain) == 0xA65D9851797832657860FEDF5C570D18


@pytest.mark.parametrize("sizes", SUPPORTED_SIZES)
def test_reference_setup_round_trip(sizes):
    key, plain = SETUPS[sizes]
    cipher = Speck(*sizes, key)
    encrypted = cipher.encrypt(plain)
    assert encrypted != plain
    assert encrypted < (1 << sizes[0])
    assert cipher.decrypt(encrypted) == plain


@pytest.mark.parametrize("sizes", SUPPORTED_SIZES)
@given(data=st.data())
def test_random_round_trip(sizes, data):
    block_size, key_size = sizes
    key = data.draw(st.integers(min_value=0, max_value=(1 << key_size) - 1))
    block = data.draw(st.integers(min_value=0, max_value=(1 << block_size) - 1))
    cipher = Speck(block_size, key_size, key)
    assert cipher.decrypt(cipher.encrypt(block)) == block
    assert cipher.encrypt(cipher.decrypt(block)) == block


@pytest.mark.parametrize("sizes", [(32, 64), (64, 64), (128, 256), ("64", 96)])
def test_unsupported_sizes(sizes):
    with pytest.raises(ValueError):
        Speck(*sizes, 0)


@pytest.mark.parametrize("key", [-1, 1 << 96, "key"])
def test_bad_key(key):
    with pytest.raises(ValueError):
        Speck(64, 96, key)


@pytest.mark.parametrize("block", [-1, 1 << 64])
def test_bad_block(block):
    cipher = Speck(64, 96, 0)
    with pytest.raises(ValueError):
        cipher.encrypt(block)
    with pytest.raises(ValueError):
        cipher.decrypt(block)