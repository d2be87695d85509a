# xxhashpy

Pure-Python implementations of the 32-bit (XXH32) and 64-bit (XXH64)
variants of the xxHash non-cryptographic hash function. The package has no
compiled extensions and no third-party dependencies.

## Installation

```
pip install xxhashpy
```

## One-shot hashing

```python
from xxhashpy.xxh32 import sum32
from xxhashpy.xxh64 import sum64

sum32(b"abc")   # 0x32d153ff
sum64(b"abc")
```

Both functions hash with a seed of zero and return an unsigned integer.
They accept any bytes-like object.

## Incremental hashing

`Digest32` (in `xxhashpy.xxh32`) and `Digest64` (in `xxhashpy.xxh64`) accept
data in pieces of any size; the result is the same as hashing all the data
at once. Both take an optional seed, which must fit in 32 bits for
`Digest32` and in 64 bits for `Digest64`; a seed out of range raises
`ValueError`.

```python
from xxhashpy.xxh64 import Digest64

d = Digest64(seed=42)
d.update(b"hello ")
d.update(b"world")

d.intdigest()   # hash as an int
d.digest()      # big-endian bytes (8 bytes for XXH64, 4 for XXH32)
d.hexdigest()   # lower-case hex string (16 digits for XXH64, 8 for XXH32)

d.reset()       # start over with seed 0
d.reset(7)      # start over with seed 7
```

Each class also carries `digest_size` (4 or 8) and `block_size` (16 or 32).

## Saving and restoring state

A digest's running state can be serialised with `to_bytes()` and restored
into another digest of the same kind with `load()`, for example to resume
hashing a large stream later:

```python
from xxhashpy.xxh32 import Digest32

d = Digest32()
d.update(b"first part")
state = d.to_bytes()

resumed = Digest32()
resumed.load(state)
resumed.update(b" and the rest")
```

The state is a fixed-size byte string: 44 bytes for `Digest32`, 76 bytes for
`Digest64`, each starting with its own four-byte identifier. `load` raises
`ValueError` if the state does not carry the right identifier or has the
wrong size.

## What this package does not do

- It offers only XXH32 and XXH64. There is no XXH3 and no 128-bit hash.
- The one-shot functions `sum32` and `sum64` always use a seed of zero; for
  a seeded hash use `Digest32` or `Digest64`.
- It is a library only and installs no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```