# emdb

Read-only value handles for a key-value store.

The package provides one class, `emdb.value_ref.ValueRef`. A handle
either refers to a byte range inside a memory-mapped region (or any
other object that supports the buffer protocol), without copying it, or
owns a `bytes` object. Callers treat both kinds the same way.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Usage

```python
import mmap

from emdb.value_ref import ValueRef

# An owned value; bytes, bytearray and memoryview inputs are copied
# into an immutable bytes object.
value = ValueRef.from_owned(b"hello")
assert len(value) == 5
assert value == b"hello"
assert bytes(value) == b"hello"

# A value inside a memory mapping: bytes [start, end) of the region.
region = mmap.mmap(-1, 16)
region[0:5] = b"world"
ref = ValueRef.from_mmap(region, 0, 5)
assert ref.view().tobytes() == b"world"   # read-only memoryview, no copy
assert ref.to_bytes() == b"world"         # copies into a new bytes object
```

`from_mmap` raises `ValueError` when `start` is negative, when `end` is
less than `start`, or when `end` lies past the end of the mapping.

A mapped handle holds a read-only memoryview of its mapping. While the
handle exists the mapping stays exported, so it cannot be closed or
resized and the referenced bytes stay readable.

`to_bytes()` returns the owned `bytes` object itself for owned handles
and a fresh copy for mapped handles. `view()` returns a read-only
`memoryview` in both cases.

Two handles compare equal when their bytes are equal. A handle also
compares equal to `bytes`, `bytearray` and `memoryview` objects with the
same contents. Its hash is the hash of the equal `bytes` object.
`repr()` shows whether the handle is owned or mapped, and its bytes.

## What this package does not do

This package contains only the value handle. It has no storage engine:
no on-disk file format, no insert, get or remove operations, no
namespaces, expiry, range scans, compaction, backups or locking, and no
command-line tool. Producing memory mappings and deciding which byte
ranges to hand out is left to the caller.