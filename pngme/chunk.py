"""PNG chunks: length, type, data and CRC."""

from __future__ import annotations

import struct
import zlib
from dataclasses import dataclass

from pngme.chunk_type import ChunkType

_HEADER = struct.Struct(">I4s")
_CRC = struct.Struct(">I")


class ChunkError(ValueError):
    """Raised when a chunk cannot be parsed or its data decoded."""


def crc32(data: bytes) -> int:
    """Standard CRC-32 as used by PNG."""
    return zlib.crc32(data) & 0xFFFFFFFF


def _debug_quote(text: str) -> str:
    escapes = {"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
    parts = []
    for ch in text:
        if ch in escapes:
            parts.append(escapes[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


@dataclass(frozen=True)
class Chunk:
    """A single PNG chunk; its CRC is derived from type and data."""

    chunk_type: ChunkType
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_bytes(cls, raw) -> Chunk:
        """Parse a chunk from its serialised form, checking the CRC."""
        raw = bytes(raw)
        if len(raw) < _HEADER.size:
            raise ChunkError("chunk is too short for its header")
        length, type_code = _HEADER.unpack_from(raw)
        chunk_type = ChunkType.from_bytes(type_code)
        data_end = _HEADER.size + length
        if len(raw) < data_end:
            raise ChunkError("chunk is too short for its data")
        data = raw[_HEADER.size:data_end]
        if len(raw) < data_end + _CRC.size:
            raise ChunkError("invalid crc bytes")
        (crc,) = _CRC.unpack_from(raw, data_end)
        chunk = cls(chunk_type, data)
        if chunk.crc != crc:
            raise ChunkError("crc bytes does not match")
        return chunk

    @property
    def length(self) -> int:
        """Length of the data in bytes."""
        return len(self.data)

    @property
    def crc(self) -> int:
        """CRC-32 over the type code and the data."""
        return crc32(bytes(self.chunk_type) + self.data)

    def data_as_string(self) -> str:
        """The data decoded as UTF-8."""
        try:
            return self.data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ChunkError(f"Error converting data to string: {err}") from err

    def as_bytes(self) -> bytes:
        """The chunk serialised as length, type, data and CRC."""
        return (
            _HEADER.pack(self.length, bytes(self.chunk_type))
            + self.data
            + _CRC.pack(self.crc)
        )

    def __str__(self) -> str:
        try:
            data_str = self.data_as_string()
        except ChunkError:
            data_str = f"Can't transform into string -> length: {len(self.data)}"
        return (
            "Chunk {\n"
            f"  Length: {self.length}\n"
            f"  Type: {self.chunk_type}\n"
            f"  Data: {_debug_quote(data_str)}\n"
            f"  Crc: {self.crc}\n"
            "}\n"
        )