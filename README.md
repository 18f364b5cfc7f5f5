# pngme

Store short text messages inside PNG files as extra chunks, then read them
back or remove them again.

A PNG file is an eight-byte signature followed by chunks. Each chunk has a
four-byte length, a four-byte *chunk type*, its data and a CRC-32 over the
type and data. `pngme` keeps a message as the data of a chunk whose type you
choose; that chunk type is the key you use to find the message later.

On the command line a chunk type must be exactly four ASCII letters
(`a`–`z`, `A`–`Z`), for example `ruSt`.

## Installation

```
pip install .
```

This installs the `pngme` command. There are no runtime dependencies beyond
the standard library.

## Command line

Encode a message. The new chunk is appended after the existing chunks. If no
output file is given, the input file is overwritten:

```
pngme encode picture.png ruSt "meet at noon"
pngme encode picture.png ruSt "meet at noon" hidden.png
```

Decode: print the first chunk stored under a chunk type, or a note that no
such chunk was found:

```
pngme decode hidden.png ruSt
```

Remove the first chunk of a given type. The file is rewritten in place; if no
chunk of that type exists, a message says so and the file is written back
unchanged:

```
pngme remove hidden.png ruSt
```

Print the signature and every chunk in a file:

```
pngme print hidden.png
```

`pngme --version` prints the version. The command exits with status 0 on
success. It exits with status 1 and prints `pngme: <reason>` to standard
error when the file cannot be read or written, lacks the PNG signature, or
holds a chunk that is truncated or fails its CRC check. A chunk type that is
not four ASCII letters is rejected as an argument error.

The same commands are available as functions in `pngme.cli`: `encode`,
`decode`, `remove` and `print_png`, plus `build_parser()` and `main(argv)`.

## Library use

```python
from pngme.chunk import Chunk
from pngme.chunk_type import ChunkType
from pngme.png import Png

with open("picture.png", "rb") as fh:
    image = Png.from_bytes(fh.read())

image.append_chunk(Chunk(ChunkType.from_str("ruSt"), b"meet at noon"))
found = image.chunk_by_type("ruSt")
print(found.data_as_string())

with open("hidden.png", "wb") as fh:
    fh.write(image.as_bytes())
```

- `ChunkType.from_str` accepts only four ASCII letters; `ChunkType.from_bytes`
  takes any four bytes. The property bits are reported by `is_critical`,
  `is_public`, `is_reserved_bit_valid` and `is_safe_to_copy`; `is_valid`
  checks that all four bytes are letters.
- `Chunk` has `length` and `crc` properties, `data_as_string()` (UTF-8) and
  `as_bytes()`; `Chunk.from_bytes` checks the stored CRC.
- `Png` holds its chunks in `chunks`, exposes the signature as `header`, and
  offers `append_chunk`, `chunk_by_type` (returns `None` when absent),
  `remove_first_chunk` (raises `PngError` when absent) and `as_bytes`.
- `pngme.chunk.crc32` computes the CRC-32 used by PNG.

Errors are raised as `ChunkTypeError`, `ChunkError` and `PngError`, all
subclasses of `ValueError`.

## What it does not do

`pngme` does not decode or display image pixels, and it does not check PNG
chunk ordering or the contents of standard chunks such as `IHDR` or `IEND`;
it only checks the signature, chunk lengths and CRCs. Messages are stored as
plain UTF-8 text, without encryption.

## Running the tests

```
pip install ".[test]"
pytest
```