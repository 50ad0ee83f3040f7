"""Markdown parsing to blocks (block-level structure only).

This is a single-pass, line-based block parser. Inline formatting (emphasis,
links, inline code) is left as raw text for the inline renderer.
Every input yields at least one block; malformed Markdown never raises.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable

from ..blocks import Block, CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph, Table

logger = logging.getLogger(__name__)

FENCE = "```"
MAX_HEADING_LEVEL = 6

_RULE_CHARS = frozenset("-*_")
_RULE_LINES = ("---", "***", "___")
# A pipe, then only whitespace/dashes, then another pipe: "|---|", "| --- |"
_SEPARATOR_RE = re.compile(r"\|[\s-]+\|")
# Whole-line delimiter rows without an inner pipe pair: "--|--"
_SEPARATOR_LINE_RE = re.compile(r"[\s|-]+")
_UNORDERED_ITEM_RE = re.compile(r"\s*[-*+]\s+(.+)")
_ORDERED_ITEM_RE = re.compile(r"\s*\d+\.\s+(.+)")


class ParserState(str, Enum):
    IDLE = "idle"
    PARAGRAPH = "paragraph"
    LIST = "list"
    CODE_BLOCK = "code_block"
    TABLE = "table"


class LineKind(str, Enum):
    """Line classes in priority order; the first match wins."""

    FENCE = "fence"
    HEADING = "heading"
    TABLE_SEPARATOR = "table_separator"
    TABLE_ROW = "table_row"
    HORIZONTAL_RULE = "horizontal_rule"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    BLANK = "blank"
    TEXT = "text"


_TABLE_KINDS = (LineKind.TABLE_SEPARATOR, LineKind.TABLE_ROW)


def heading_level(trimmed: str) -> int:
    """Number of leading '#' when it is 1..6, else 0."""
    level = len(trimmed) - len(trimmed.lstrip("#"))
    return level if level <= MAX_HEADING_LEVEL else 0


def is_table_separator(trimmed: str) -> bool:
    if "|" not in trimmed or "-" not in trimmed:
        return False
    return bool(_SEPARATOR_RE.search(trimmed) or _SEPARATOR_LINE_RE.fullmatch(trimmed))


def is_horizontal_rule(trimmed: str) -> bool:
    if trimmed in _RULE_LINES:
        return True
    return len(trimmed) >= 3 and all(c in _RULE_CHARS for c in trimmed)


def split_table_cells(trimmed: str) -> list[str]:
    """Split a row on '|'. Empty pieces (outer or doubled pipes) are dropped before trimming."""
    return [cell.strip() for cell in trimmed.split("|") if cell]


def classify_line(trimmed: str) -> LineKind:
    """Classify a trimmed line outside of a fenced code block."""
    if trimmed.startswith(FENCE):
        return LineKind.FENCE
    if heading_level(trimmed):
        return LineKind.HEADING
    if is_table_separator(trimmed):
        return LineKind.TABLE_SEPARATOR
    if "|" in trimmed:
        return LineKind.TABLE_ROW
    if is_horizontal_rule(trimmed):
        return LineKind.HORIZONTAL_RULE
    if _UNORDERED_ITEM_RE.fullmatch(trimmed):
        return LineKind.UNORDERED_ITEM
    if _ORDERED_ITEM_RE.fullmatch(trimmed):
        return LineKind.ORDERED_ITEM
    if not trimmed:
        return LineKind.BLANK
    return LineKind.TEXT


def parse_markdown_to_blocks(markdown: str) -> list[Block]:
    """
    Parse markdown into a flat list of blocks, in source order.
    If nothing structural is found, the whole input becomes one Paragraph.
    """
    scanner = _BlockScanner()
    for line in markdown.split("\n"):
        scanner.feed(line)
    blocks = scanner.finish()
    if not blocks:
        return [Paragraph(content=markdown)]
    return blocks


class _BlockScanner:
    """Accumulates the open block and emits finished ones into `blocks`."""

    def __init__(self) -> None:
        self.blocks: list[Block] = []
        self.state = ParserState.IDLE
        self._lines: list[str] = []  # paragraph or code lines
        self._language = ""
        self._items: list[str] = []
        self._ordered = False
        self._headers: list[str] = []
        self._rows: list[list[str]] = []
        self._transitions: dict[LineKind, Callable[[str, str], None]] = {
            LineKind.FENCE: self._open_code_block,
            LineKind.HEADING: self._heading,
            LineKind.TABLE_SEPARATOR: self._table_separator,
            LineKind.TABLE_ROW: self._table_row,
            LineKind.HORIZONTAL_RULE: self._horizontal_rule,
            LineKind.UNORDERED_ITEM: self._unordered_item,
            LineKind.ORDERED_ITEM: self._ordered_item,
            LineKind.BLANK: self._blank,
            LineKind.TEXT: self._text,
        }

    def feed(self, line: str) -> None:
        trimmed = line.strip()
        if self.state is ParserState.CODE_BLOCK:
            if trimmed.startswith(FENCE):
                self._close_code_block()
            else:
                self._lines.append(line)
            return
        kind = classify_line(trimmed)
        if self.state is ParserState.TABLE and kind not in _TABLE_KINDS:
            self._flush()
        self._transitions[kind](line, trimmed)

    def finish(self) -> list[Block]:
        if self.state is ParserState.CODE_BLOCK:
            logger.debug("Discarding unterminated code block (%d lines)", len(self._lines))
            self._reset()
        else:
            self._flush()
        return self.blocks

    def _reset(self) -> None:
        self.state = ParserState.IDLE
        self._lines = []
        self._language = ""
        self._items = []
        self._ordered = False
        self._headers = []
        self._rows = []

    def _flush(self) -> None:
        """Emit the open paragraph, list or table and return to IDLE."""
        if self.state is ParserState.PARAGRAPH:
            self.blocks.append(Paragraph(content="\n".join(self._lines)))
        elif self.state is ParserState.LIST:
            self.blocks.append(ListBlock(items=tuple(self._items), ordered=self._ordered))
        elif self.state is ParserState.TABLE:
            self.blocks.append(
                Table(headers=tuple(self._headers), rows=tuple(tuple(row) for row in self._rows))
            )
        self._reset()

    def _open_code_block(self, line: str, trimmed: str) -> None:
        self._flush()
        self.state = ParserState.CODE_BLOCK
        self._language = trimmed[len(FENCE) :].strip()

    def _close_code_block(self) -> None:
        self.blocks.append(CodeBlock(content="\n".join(self._lines), language=self._language))
        self._reset()

    def _heading(self, line: str, trimmed: str) -> None:
        self._flush()
        level = heading_level(trimmed)
        content = trimmed[level:].strip()
        if content:
            self.blocks.append(Heading(level=level, content=content))
        else:
            logger.debug("Dropping empty heading line %r", line)

    def _table_separator(self, line: str, trimmed: str) -> None:
        # Confirms a table; carries no cell data and leaves the open block as is.
        return

    def _table_row(self, line: str, trimmed: str) -> None:
        cells = split_table_cells(trimmed)
        if self.state is ParserState.TABLE:
            self._rows.append(cells)
            return
        self._flush()
        self.state = ParserState.TABLE
        self._headers = cells

    def _horizontal_rule(self, line: str, trimmed: str) -> None:
        self._flush()
        self.blocks.append(HorizontalRule())

    def _unordered_item(self, line: str, trimmed: str) -> None:
        match = _UNORDERED_ITEM_RE.fullmatch(trimmed)
        if match:
            self._list_item(match.group(1), ordered=False)

    def _ordered_item(self, line: str, trimmed: str) -> None:
        match = _ORDERED_ITEM_RE.fullmatch(trimmed)
        if match:
            self._list_item(match.group(1), ordered=True)

    def _list_item(self, content: str, ordered: bool) -> None:
        if self.state is not ParserState.LIST or self._ordered != ordered:
            self._flush()
            self.state = ParserState.LIST
            self._ordered = ordered
        self._items.append(content)

    def _blank(self, line: str, trimmed: str) -> None:
        self._flush()

    def _text(self, line: str, trimmed: str) -> None:
        if self.state is not ParserState.PARAGRAPH:
            self._flush()
            self.state = ParserState.PARAGRAPH
        self._lines.append(line)
