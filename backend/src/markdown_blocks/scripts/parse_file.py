"""Parse a Markdown file and print its blocks as JSON.

Usage:
  python -m markdown_blocks.scripts.parse_file README.md
  python -m markdown_blocks.scripts.parse_file README.md --render
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from ..services.block_converter import build_render_units
from ..services.markdown_parser import parse_markdown_to_blocks


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Split a Markdown file into blocks.")
    parser.add_argument("path", type=Path)
    parser.add_argument("--render", action="store_true", help="print keyed render units instead of blocks")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    if not args.path.exists():
        raise SystemExit(f"File not found: {args.path}")

    blocks = parse_markdown_to_blocks(args.path.read_text(encoding="utf-8"))
    if args.render:
        payload = build_render_units(blocks)
    else:
        payload = [b.to_dict() for b in blocks]
    print(json.dumps(payload, ensure_ascii=False, indent=args.indent))


if __name__ == "__main__":
    main()
