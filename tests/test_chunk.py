import struct

import pytest

from pngme.chunk import Chunk, ChunkError, crc32
from pngme.chunk_type import ChunkType

MESSAGE = "This is where your secret message will be!"
GOOD_CRC = 2882656334


def _chunk_bytes(crc, length=42, type_code=b"RuSt", message=MESSAGE.encode()):
    return struct.pack(">I", length) + type_code + message + struct.pack(">I", crc)


def test_crc():
    assert crc32(b"123456789") == 0xCBF43926


def test_new_chunk():
    chunk = Chunk(ChunkType.from_str("RuSt"), MESSAGE.encode())
    assert chunk.length == 42
    assert chunk.crc == GOOD_CRC


def test_chunk_length():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    assert chunk.length == 42


def test_chunk_type():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    assert str(chunk.chunk_type) == "RuSt"


def test_chunk_string():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    assert chunk.data_as_string() == MESSAGE


def test_chunk_crc():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    assert chunk.crc == GOOD_CRC


def test_valid_chunk_from_bytes():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    assert chunk.length == 42
    assert str(chunk.chunk_type) == "RuSt"
    assert chunk.data_as_string() == MESSAGE
    assert chunk.crc == GOOD_CRC


def test_invalid_chunk_from_bytes():
    with pytest.raises(ChunkError):
        Chunk.from_bytes(_chunk_bytes(2882656333))


def test_chunk_trait_impls():
    chunk = Chunk.from_bytes(_chunk_bytes(GOOD_CRC))
    text = f"{chunk}"
    assert text == (
        "Chunk {\n"
        "  Length: 42\n"
        "  Type: RuSt\n"
        f'  Data: "{MESSAGE}"\n'
        f"  Crc: {GOOD_CRC}\n"
        "}\n"
    )


def test_as_bytes_round_trip():
    raw = _chunk_bytes(GOOD_CRC)
    chunk = Chunk.from_bytes(raw)
    assert chunk.as_bytes() == raw
    assert Chunk.from_bytes(chunk.as_bytes()) == chunk


def test_missing_crc_bytes():
    raw = _chunk_bytes(GOOD_CRC)[:-2]
    with pytest.raises(ChunkError, match="invalid crc bytes"):
        Chunk.from_bytes(raw)


def test_truncated_header():
    with pytest.raises(ChunkError):
        Chunk.from_bytes(b"\x00\x00")


def test_data_as_string_invalid_utf8():
    chunk = Chunk(ChunkType.from_str("RuSt"), b"\xff\xfe")
    with pytest.raises(ChunkError, match="Error converting data to string"):
        chunk.data_as_string()


def test_str_with_binary_data():
    chunk = Chunk(ChunkType.from_str("RuSt"), b"\xff\xfe\xfd")
    assert 'Data: "Can\'t transform into string -> length: 3"' in str(chunk)


def test_str_escapes_quotes_and_newlines():
    chunk = Chunk(ChunkType.from_str("RuSt"), b'a"b\nc')
    assert 'Data: "a\\"b\\nc"' in str(chunk)


def test_empty_chunk_round_trip():
    chunk = Chunk(ChunkType.from_str("IEND"), b"")
    assert chunk.as_bytes() == bytes([0, 0, 0, 0, 73, 69, 78, 68, 174, 66, 96, 130])
    assert Chunk.from_bytes(chunk.as_bytes()) == chunk