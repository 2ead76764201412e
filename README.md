# scalekit

Building blocks for the SCALE (Simple Concatenated Aggregate Little-Endian) binary
format. The encoded bytes carry no type information. The encoder and the decoder must
agree on the layout in advance.

## Modules

- **`scalekit.compact`**: compact integers, a variable-length encoding for unsigned
  integers.
  - `UIntType` lists the widths: 8, 16, 32, 64 and 128 bits.
  - The functions are `encode_compact(value, width)`, `decode_compact(source, width)`,
    `decode_compact_as(source, width, decode_from)` and `compact_len(value, width)`.
  - The width may be given as a `UIntType` or as a plain bit count. The default is 128.
  - Encoding raises `ValueError` when the value does not fit the width.
  - Decoding raises `CodecError` when the encoding is not canonical, or when the value is
    too large for the requested width.
  - `Compact` is a frozen dataclass holding a value and a width. It has `encode()`,
    `size_hint()` and the class method `decode(source, width)`. It also supports
    `bytes()` and `int()`.
- **`scalekit.inputs`**: byte sources for decoding.
  - `Input` is the base class. Subclasses implement `read(length)`. It also has
    `read_byte`, `remaining_len`, `descend_ref` and `ascend_ref`.
  - `BytesInput` reads from an in-memory buffer and advances as it reads. `rest()`
    returns the bytes not yet read.
  - `as_input` wraps bytes, a `bytearray` or a `memoryview`.
  - `read_uint(source, size)` reads a little-endian unsigned integer.
  - A short read raises `CodecError("Not enough data to fill buffer")`.
- **`scalekit.error`**: `CodecError`.
  - `chain(desc)` returns a new error whose cause is the original error.
  - `str()` prints the whole chain, with each cause indented one tab further.
- **`scalekit.arrays`**: `encode_array(items, encode_item)` and
  `decode_array(source, length, decode_item)`. These handle fixed-length sequences with
  no length prefix.
- **`scalekit.decode_all`**: `decode_all(decode, data)` raises `CodecError` if any bytes
  remain after decoding.
- **`scalekit.depth_limit`**: limits how deeply nested data may go.
  - `DepthTrackingInput` counts `descend_ref` calls. It raises `CodecError` once the
    count exceeds the limit.
  - `decode_with_depth_limit(decode, limit, source)` decodes with that limit.
  - `decode_all_with_depth_limit(decode, limit, data)` does the same and also requires
    that the whole input is consumed.
- **`scalekit.encode_append`**: `append_or_new(self_encoded, items, encode_item)` adds
  items to an already encoded vector. It rewrites only the compact length prefix. If the
  input is empty, it encodes a new vector. A length above the u32 range raises
  `CodecError`.
- **`scalekit.keyed`**:
  - `to_keyed_vec(value, prepend_key, encode)` puts a key in front of an encoding.
  - `join(dest, value, encode)` appends an encoding to `dest`. A `bytearray` is extended
    in place; any other input gives new `bytes`.
- **`scalekit.max_encoded_len`**: upper bounds on encoded size. The functions are
  `primitive_max_len`, `compact_max_len`, `tuple_max_len`, `array_max_len`,
  `option_max_len`, `result_max_len`, `duration_max_len` and `range_max_len`.
  - `primitive_max_len` accepts names such as `"u32"`, `"bool"` and `"NonZeroI64"`.
  - Sums and products saturate at `USIZE_MAX`.

## Example

```python
from scalekit.compact import encode_compact, decode_compact, compact_len
from scalekit.decode_all import decode_all

encoded = encode_compact(16384, 64)      # b"\x02\x00\x01\x00"
assert compact_len(16384, 64) == len(encoded)
assert decode_compact(encoded, 64) == 16384

# Raises CodecError if bytes remain after decoding.
value = decode_all(lambda src: decode_compact(src, 32), encoded)
```

## What it does not do

The package does not encode or decode structs, enums, vectors or fixed-width integers by
itself. There is no automatic derivation from type definitions. The caller supplies the
`encode`/`decode` callables for its own types, and those callables build on the pieces
above. There is no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```