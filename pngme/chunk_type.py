"""Four-byte PNG chunk type codes and their property bits."""

from __future__ import annotations

from dataclasses import dataclass

_PROPERTY_BIT = 0b0010_0000


class ChunkTypeError(ValueError):
    """Raised when a chunk type cannot be built or rendered."""


@dataclass(frozen=True)
class ChunkType:
    """A PNG chunk type: exactly four bytes."""

    code: bytes

    def __post_init__(self) -> None:
        code = bytes(self.code)
        if len(code) != 4:
            raise ChunkTypeError(
                f"Chunk type must be exactly 4 bytes, got {len(code)}"
            )
        object.__setattr__(self, "code", code)

    @classmethod
    def from_bytes(cls, raw) -> ChunkType:
        """Build a chunk type from four raw bytes without validating them."""
        return cls(bytes(raw))

    @classmethod
    def from_str(cls, text: str) -> ChunkType:
        """Parse a chunk type from text; only ASCII letters are accepted."""
        raw = text.encode("utf-8")
        if len(raw) > 4:
            raise ChunkTypeError(
                "Error creating ChunkType from str: str is too long"
            )
        if len(raw) < 4:
            raise ChunkTypeError(
                "Error creating ChunkType from str: str is too short"
            )
        chunk_type = cls(raw)
        if not chunk_type.is_valid():
            raise ChunkTypeError(
                "Chunk is invalid, the valid characters are a-z or A-Z."
            )
        return chunk_type

    def is_valid(self) -> bool:
        """True when every byte is an ASCII letter."""
        return self.code.isalpha()

    def is_critical(self) -> bool:
        """True when the ancillary bit of the first byte is clear."""
        return not self.code[0] & _PROPERTY_BIT

    def is_public(self) -> bool:
        """True when the private bit of the second byte is clear."""
        return not self.code[1] & _PROPERTY_BIT

    def is_reserved_bit_valid(self) -> bool:
        """True when the reserved bit of the third byte is clear."""
        return not self.code[2] & _PROPERTY_BIT

    def is_safe_to_copy(self) -> bool:
        """True when the safe-to-copy bit of the fourth byte is set."""
        return bool(self.code[3] & _PROPERTY_BIT)

    def __bytes__(self) -> bytes:
        return self.code

    def __str__(self) -> str:
        try:
            return self.code.decode("utf-8")
        except UnicodeDecodeError as err:
            raise ChunkTypeError(f"Chunk type is not valid UTF-8: {err}") from err