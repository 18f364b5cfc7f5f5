"""Read, add and remove chunks in PNG files, with a command line for hiding text messages."""

__version__ = "0.1.0"
__all__ = ["chunk_type", "chunk", "png", "cli"]