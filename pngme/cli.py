"""Command line interface: hide, reveal, remove and list messages in PNG chunks."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pngme.chunk import Chunk, ChunkError
from pngme.chunk_type import ChunkType, ChunkTypeError
from pngme.png import Png, PngError

_VERSION = "0.1.0"


def _parse_chunk_type(text: str) -> ChunkType:
    try:
        return ChunkType.from_str(text)
    except ChunkTypeError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def _as_chunk_type(chunk_type: str | ChunkType) -> ChunkType:
    if isinstance(chunk_type, ChunkType):
        return chunk_type
    return ChunkType.from_str(chunk_type)


def _load(file_path: str | Path) -> Png:
    return Png.from_bytes(Path(file_path).read_bytes())


def build_parser() -> argparse.ArgumentParser:
    """The argument parser with its encode, decode, remove and print commands."""
    parser = argparse.ArgumentParser(
        prog="pngme", description="Encode messages in PNG files"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    enc = commands.add_parser("encode", help="Encode a message with a ChunkType")
    enc.add_argument("file_path", type=Path, help="Path to the input PNG file")
    enc.add_argument(
        "chunk_type",
        type=_parse_chunk_type,
        help="4-character chunk type (e.g 'ruST'), this is your message 'key' "
        "you will use it to recover the message",
    )
    enc.add_argument("message", help="The message to encode in the PNG file")
    enc.add_argument(
        "output_file",
        type=Path,
        nargs="?",
        default=None,
        help="Optional output file, if you don't pass any, the input file will be updated.",
    )

    dec = commands.add_parser("decode", help="Recovers the first message with a ChunkType")
    dec.add_argument(
        "file_path", type=Path, help="Path to the PNG file that contains the message"
    )
    dec.add_argument(
        "chunk_type", type=_parse_chunk_type, help="The chunk type (message key)"
    )

    rem = commands.add_parser(
        "remove", help="Removes the first chunk with a specific ChunkType from a PNG file"
    )
    rem.add_argument(
        "file_path",
        type=Path,
        help="Path to the PNG file that will have the message removed",
    )
    rem.add_argument(
        "chunk_type", type=_parse_chunk_type, help="The chunk type (message key)"
    )

    prt = commands.add_parser("print", help="Print all chunks")
    prt.add_argument("file_path", type=Path, help="Path for the PNG file")

    return parser


def encode(
    file_path: str | Path,
    chunk_type: str | ChunkType,
    message: str,
    output_file: str | Path | None = None,
) -> Png:
    """Append a message chunk and write the result to output_file or back in place."""
    png = _load(file_path)
    png.append_chunk(Chunk(_as_chunk_type(chunk_type), message.encode("utf-8")))
    target = Path(output_file) if output_file is not None else Path(file_path)
    target.write_bytes(png.as_bytes())
    print("Chunk encoded successfully. Try decoding or printing the output file.")
    return png


def decode(file_path: str | Path, chunk_type: str | ChunkType) -> Chunk | None:
    """Print and return the first chunk of the given type, or None."""
    png = _load(file_path)
    chunk = png.chunk_by_type(_as_chunk_type(chunk_type))
    if chunk is None:
        print("This chunk was not found in the file.")
    else:
        print(f"Encoded chunk is: {chunk}")
    return chunk


def remove(file_path: str | Path, chunk_type: str | ChunkType) -> Chunk | None:
    """Remove the first chunk of the given type and rewrite the file."""
    png = _load(file_path)
    removed: Chunk | None
    try:
        removed = png.remove_first_chunk(_as_chunk_type(chunk_type))
    except PngError as err:
        removed = None
        print(f"This chunk was not found in the file {err}")
    else:
        print(f"Encoded chunk was removed: {removed}")
    Path(file_path).write_bytes(png.as_bytes())
    return removed


def print_png(file_path: str | Path) -> Png:
    """Print every chunk of the file and return the parsed image."""
    png = _load(file_path)
    print(f"Your file: {png}")
    return png


def main(argv: list[str] | None = None) -> int:
    """Run the command line; returns the process exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.command == "encode":
            encode(args.file_path, args.chunk_type, args.message, args.output_file)
        elif args.command == "decode":
            decode(args.file_path, args.chunk_type)
        elif args.command == "remove":
            remove(args.file_path, args.chunk_type)
        else:
            print_png(args.file_path)
    except (PngError, ChunkError, ChunkTypeError, OSError) as err:
        print(f"pngme: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())