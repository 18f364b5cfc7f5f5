"""PNG files as a signature followed by a sequence of chunks."""

from __future__ import annotations

from dataclasses import dataclass, field

from pngme.chunk import Chunk, ChunkError
from pngme.chunk_type import ChunkType, ChunkTypeError

STANDARD_HEADER = bytes([137, 80, 78, 71, 13, 10, 26, 10])


class PngError(ValueError):
    """Raised when a PNG cannot be parsed or a chunk cannot be found."""


def _as_chunk_type(chunk_type: str | ChunkType) -> ChunkType:
    if isinstance(chunk_type, ChunkType):
        return chunk_type
    try:
        return ChunkType.from_bytes(chunk_type.encode("utf-8"))
    except ChunkTypeError as err:
        raise PngError(str(err)) from err


@dataclass
class Png:
    """A PNG image: the standard signature and its chunks in file order."""

    STANDARD_HEADER = STANDARD_HEADER

    chunks: list[Chunk] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.chunks = list(self.chunks)

    @classmethod
    def from_bytes(cls, data) -> Png:
        """Parse a PNG file, checking its signature and every chunk's CRC."""
        data = bytes(data)
        if data[: len(STANDARD_HEADER)] != STANDARD_HEADER:
            raise PngError("Invalid signature header for PNG.")
        body = data[len(STANDARD_HEADER):]
        chunks = []
        pos = 0
        while pos < len(body):
            if len(body) - pos < 4:
                raise PngError("truncated chunk length")
            length = int.from_bytes(body[pos:pos + 4], "big")
            end = pos + 12 + length
            try:
                chunks.append(Chunk.from_bytes(body[pos:end]))
            except ChunkError as err:
                raise PngError(str(err)) from err
            pos = end
        return cls(chunks)

    @property
    def header(self) -> bytes:
        """The eight-byte PNG signature."""
        return STANDARD_HEADER

    def append_chunk(self, chunk: Chunk) -> None:
        """Add a chunk at the end of the file."""
        self.chunks.append(chunk)

    def remove_first_chunk(self, chunk_type: str | ChunkType) -> Chunk:
        """Remove and return the first chunk of the given type."""
        wanted = _as_chunk_type(chunk_type)
        for index, chunk in enumerate(self.chunks):
            if chunk.chunk_type == wanted:
                return self.chunks.pop(index)
        raise PngError(f"Error removing first ocurrence of {wanted}.")

    def chunk_by_type(self, chunk_type: str | ChunkType) -> Chunk | None:
        """The first chunk of the given type, or None."""
        wanted = _as_chunk_type(chunk_type)
        return next((c for c in self.chunks if c.chunk_type == wanted), None)

    def as_bytes(self) -> bytes:
        """The whole file: signature followed by every serialised chunk."""
        return STANDARD_HEADER + b"".join(chunk.as_bytes() for chunk in self.chunks)

    def __str__(self) -> str:
        lines = [
            "Png {\n",
            f"   Signature: {list(self.header)}\n",
            "   Chunks: {\n",
        ]
        lines.extend(f"{chunk}\n" for chunk in self.chunks)
        lines.append("   }\n")
        lines.append("}\n")
        return "".join(lines)