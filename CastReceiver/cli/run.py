# 12.10.26

import sys
import json
import argparse
from typing import List, Optional


# External library
from rich import box
from rich.console import Console
from rich.table import Table


# Internal utilities
from CastReceiver import __title__, __version__
from CastReceiver.utils import Logger, DecodeError
from CastReceiver.core.codec.side_channel import decode_object, split_token
from CastReceiver.core.m3u8.attributes import parse_media_line
from CastReceiver.core.m3u8.rewriter import ManifestRewriter, rewritten_lines


# Config
console = Console()


def build_table(original: str, rewritten: str) -> Table:
    """Build a table with one row per rewritten rendition"""
    table = Table(
        box=box.ROUNDED,
        show_header=True,
        header_style="cyan",
        border_style="blue",
        padding=(0, 1)
    )

    cols = [
        ("#", "cyan"),
        ("Type", "cyan"),
        ("Group", "magenta"),
        ("Language", "yellow"),
        ("Tag", "green"),
        ("Name", "blue")
    ]
    for col, color in cols:
        table.add_column(col, style=color, justify="right" if col == "#" else "left")

    before_lines = original.split("\n")
    after_lines = rewritten.split("\n")
    for idx in rewritten_lines(original, rewritten):
        before = parse_media_line(before_lines[idx].rstrip("\r"))
        after = parse_media_line(after_lines[idx].rstrip("\r"))
        table.add_row(
            str(idx + 1),
            after["TYPE"].value,
            after["GROUP-ID"].value if "GROUP-ID" in after else "-",
            before["LANGUAGE"].value if "LANGUAGE" in before else "-",
            after["LANGUAGE"].value,
            after["NAME"].value if "NAME" in after else "-"
        )

    return table


def read_source(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def command_rewrite(args) -> int:
    try:
        original = read_source(args.manifest)
    except OSError as e:
        console.print(f"[red]Cannot read {args.manifest}: {e}")
        return 1

    rewriter = ManifestRewriter()
    rewritten, updated = rewriter.rewrite_with_count(original)

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(rewritten)
        console.print(f"[green]Updated {updated} lines, saved to {args.output}")
    elif not args.table:
        sys.stdout.write(rewritten)

    if args.table:
        console.print(build_table(original, rewritten))
    return 0


def command_decode(args) -> int:
    payload = split_token(args.token)
    if payload is None:
        payload = args.token

    try:
        obj = decode_object(payload)
    except DecodeError as e:
        console.print(f"[red]{e}")
        return 1

    console.print_json(json.dumps(obj, ensure_ascii=False))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cast-receiver",
        description="Rewrite HLS master playlists for the cast receiver and inspect hidden track data.",
        formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--version', action='version', version=f'{__title__} {__version__}')
    subparsers = parser.add_subparsers(dest='command', required=True)

    rewrite = subparsers.add_parser('rewrite', help='Rewrite the #EXT-X-MEDIA lines of a manifest')
    rewrite.add_argument('manifest', help='Path to the m3u8 file, - for stdin')
    rewrite.add_argument('-o', '--output', default=None, help='Write the result here instead of stdout')
    rewrite.add_argument('--table', action='store_true', help='Show a table of the rewritten renditions')
    rewrite.set_defaults(func=command_rewrite)

    decode = subparsers.add_parser('decode', help='Decode a marker token found in CHARACTERISTICS or roles')
    decode.add_argument('token', help='Token with or without the marker prefix')
    decode.set_defaults(func=command_decode)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    Logger(debug=True if args.debug else None)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
