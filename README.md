# chainvarint

Encoding and decoding of `VarUint32`, the variable-length unsigned 32-bit
integer used in blockchain binary serialization. Each byte carries seven bits
of the value, least significant group first; the high bit marks that another
byte follows. Zero is written as a single `0x00` byte.

## Installation

```
pip install chainvarint
```

## Usage

```python
from chainvarint.varint import VarUint32

v = VarUint32(300)
v.value()            # 300
int(v)               # 300
str(v)               # "300"
v.size()             # 2
data = v.pack()      # b"\xac\x02"

decoded, length = VarUint32.unpack(data)
decoded.value()      # 300
length               # 2
```

`VarUint32` is an immutable, ordered dataclass with a single field `n`
(default `0`). Constructing it with something other than an `int` (a `bool`
included) raises `TypeError`; a value outside `0` to `0xFFFFFFFF` raises
`ValueError`.

`VarUint32.unpack` reads from the start of the given bytes and stops at the
first byte whose high bit is clear, or at the end of the data. It returns the
decoded value together with the number of bytes it consumed; trailing bytes
are left untouched. Empty input gives `VarUint32(0)` and a length of `0`.
The decoded value is cut down to its low 32 bits, so over-long input never
produces an out-of-range value.

The largest value, `0xFFFFFFFF`, takes five bytes:

```python
VarUint32(0xFFFFFFFF).pack()   # b"\xff\xff\xff\xff\x0f"
```

## What this package does not do

It handles `VarUint32` alone. There is no general serializer for other types
(names, assets, checksums, keys, transactions), no signed variable-length
integer, and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```