# lightciphers

Pure Python reference implementations of lightweight block ciphers. They are
meant for studying the algorithms, checking test vectors and trying out
variants. They are not tuned for speed and make no attempt to resist side
channels, so do not use them to protect real data.

## Ciphers

| Module                     | Cipher   | Block / key sizes                                   |
|----------------------------|----------|-----------------------------------------------------|
| `lightciphers.ktantan`     | KTANTAN  | 48 and 64-bit blocks, 80-bit key (bitsliced)        |
| `lightciphers.led`         | LED      | 64-bit block, 64 or 128-bit key                     |
| `lightciphers.led_tables`  | LED      | Same results as `led`, using combined lookup tables |
| `lightciphers.mibs`        | MIBS     | 64-bit block, 64 or 80-bit key                      |
| `lightciphers.piccolo`     | Piccolo  | 64-bit block, 80 or 128-bit key                     |
| `lightciphers.sea`         | SEA      | 96-bit block and key, 16-bit words, 51 rounds       |
| `lightciphers.simon`       | Simon    | 64/96, 64/128, 96/96, 96/144, 128/128               |
| `lightciphers.speck`       | Speck    | 64/96, 64/128, 96/96, 96/144, 128/128               |
| `lightciphers.skipjack`    | Skipjack | 64-bit block, 80-bit key                            |

Every function checks the size and range of its inputs and raises
`ValueError` when they do not fit.

## Installation

```
pip install lightciphers
```

The package has no runtime dependencies. To run the tests, install the `test`
extra:

```
pip install "lightciphers[test]"
pytest
```

## Examples

### Simon and Speck

`Simon` and `Speck` take the block size, the key size and the key as an
unsigned integer. The key's lowest word is used first. A block is an
integer holding the left (`x`) word in its high half. The supported size
pairs are listed in `SUPPORTED_SIZES`, and the expanded keys are available
as `round_keys`.

```python
from lightciphers.simon import Simon
from lightciphers.speck import Speck

simon = Simon(64, 96, 0x13121110_0B0A0908_03020100)
ct = simon.encrypt(0x6F722067_6E696C63)
assert simon.decrypt(ct) == 0x6F722067_6E696C63

speck = Speck(64, 128, 0x1B1A1918_13121110_0B0A0908_03020100)
ct = speck.encrypt(0x3B726574_7475432D)
assert speck.decrypt(ct) == 0x3B726574_7475432D
```

### Skipjack

`Skipjack` takes a 10-byte key and works on 8-byte blocks:

```python
from lightciphers.skipjack import Skipjack

cipher = Skipjack(bytes.fromhex("00998877665544332211"))
ct = cipher.encrypt(bytes.fromhex("33221100ddccbbaa"))
assert cipher.decrypt(ct) == bytes.fromhex("33221100ddccbbaa")
```

### MIBS

Blocks are 8 bytes. Keys are 8 bytes for MIBS-64 and 10 bytes for MIBS-80.
Both are read little-endian: the first four bytes of a block are its right
half.

```python
from lightciphers import mibs

block = bytes.fromhex("feffffffffffffff")
ct = mibs.mibs80_encrypt(block, b"\xff" * 10)
assert mibs.mibs80_decrypt(ct, b"\xff" * 10) == block
ct = mibs.mibs64_encrypt(block, bytes(8))
assert mibs.mibs64_decrypt(ct, bytes(8)) == block
```

### Piccolo

The one-call functions take the block and key as integers:

```python
from lightciphers import piccolo

key = 0x0011_2233_4455_6677_8899
block = 0x0123_4567_89AB_CDEF
ct = piccolo.piccolo80_encrypt(block, key)
assert piccolo.piccolo80_decrypt(ct, key) == block
```

`piccolo128_encrypt` and `piccolo128_decrypt` do the same with a 128-bit
key. The building blocks are available too, working on 16-bit words with
the most significant word first: `whitening_keys_80`, `round_keys_80`,
`whitening_keys_128`, `round_keys_128`, `encrypt`, `decrypt`, `f_function`
and `round_permutation`.

### LED

LED works on a 4x4 state of nibbles, with the key given as a sequence of
nibbles (16 for a 64-bit key, 32 for a 128-bit key). Results come back as a
tuple of four row tuples.

```python
from lightciphers import led, led_tables

state = ((0, 0, 0, 0),) * 4
key = [0] * 32
ct = led.encrypt(state, key, 128)
assert led.decrypt(ct, key, 128) == state
assert led_tables.encrypt(state, key, 128) == ct
```

`led.field_mult` multiplies two nibbles in GF(2^4).
`led_tables.build_table` and `led_tables.build_inverse_table` return the
lookup tables that `led_tables` uses.

### SEA

SEA works on six 16-bit words. Derive the round keys once with
`key_schedule`, then pass them to `encrypt` and `decrypt`:

```python
from lightciphers import sea

round_keys = sea.key_schedule([0, 2, 4, 6, 8, 10])
ct = sea.encrypt([0, 1, 2, 3, 4, 5], round_keys)
assert sea.decrypt(ct, round_keys) == (0, 1, 2, 3, 4, 5)
```

### KTANTAN

KTANTAN is bitsliced. Each plaintext and key bit is a 64-bit integer, and
every bit position of those integers is a separate cipher instance. To work
with a single instance, use the values 0 and 1. The number of rounds
defaults to the full 254.

```python
from lightciphers import ktantan

plain = [1] * 48
key = [0] * 80
ct = ktantan.ktantan48_encrypt(plain, key, 254)
assert ktantan.ktantan48_decrypt(ct, key, 254) == tuple(plain)
```

`ktantan64_encrypt` and `ktantan64_decrypt` take 64 plaintext words.
`mux4` and `mux16` are the bitsliced multiplexers used by the key schedule.

## What the package does not do

Every function encrypts or decrypts a single block. There are no modes of
operation, no padding and no command-line tool, and nothing for timing or
benchmarking the ciphers.