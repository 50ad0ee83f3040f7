"""Line-based Markdown block parser."""

from .blocks import (
    Block,
    BlockType,
    CodeBlock,
    Heading,
    HorizontalRule,
    ListBlock,
    Paragraph,
    Table,
)
from .services.markdown_parser import parse_markdown_to_blocks

parse = parse_markdown_to_blocks

__all__ = [
    "Block",
    "BlockType",
    "CodeBlock",
    "Heading",
    "HorizontalRule",
    "ListBlock",
    "Paragraph",
    "Table",
    "parse",
    "parse_markdown_to_blocks",
]
