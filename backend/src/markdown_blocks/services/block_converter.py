"""Blocks → render units conversion.

Each render unit is a JSON-ready dict describing how one block is presented:
its rendering key, its type and the styling hints a view layer needs.
Text fields are passed through raw; inline formatting belongs to the inline
renderer, not to this module.
"""

from __future__ import annotations

from typing import Any

from ..blocks import Block, CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph, Table
from .block_keys import assign_block_keys

HEADING_FONT_SIZES = {1: 24, 2: 20, 3: 18, 4: 16, 5: 15}
DEFAULT_FONT_SIZE = 14
BULLET = "•"


def build_render_units(blocks: list[Block]) -> list[dict[str, Any]]:
    """Build one render unit per block, keyed for list diffing.

    Unit types:
    - paragraph: text
    - heading: text, level, font_size, font_weight
    - list: ordered, items [{marker, text}]
    - code: text, language, monospace
    - table: headers, rows [{cells, striped}]
    - divider
    """
    keys = assign_block_keys(blocks)
    return [{"key": key, **_unit_for_block(block)} for key, block in zip(keys, blocks)]


def heading_style(level: int) -> tuple[int, str]:
    """Font size and weight for a heading level."""
    size = HEADING_FONT_SIZES.get(level, DEFAULT_FONT_SIZE)
    weight = "bold" if level <= 2 else "semibold"
    return size, weight


def list_markers(count: int, ordered: bool) -> list[str]:
    if ordered:
        return [f"{idx}." for idx in range(1, count + 1)]
    return [BULLET] * count


def _paragraph_unit(block: Paragraph) -> dict[str, Any]:
    return {"type": "paragraph", "text": block.content, "font_size": DEFAULT_FONT_SIZE}


def _heading_unit(block: Heading) -> dict[str, Any]:
    size, weight = heading_style(block.level)
    return {
        "type": "heading",
        "level": block.level,
        "text": block.content,
        "font_size": size,
        "font_weight": weight,
    }


def _list_unit(block: ListBlock) -> dict[str, Any]:
    markers = list_markers(len(block.items), block.ordered)
    return {
        "type": "list",
        "ordered": block.ordered,
        "items": [{"marker": m, "text": it} for m, it in zip(markers, block.items)],
    }


def _code_unit(block: CodeBlock) -> dict[str, Any]:
    return {"type": "code", "language": block.language, "text": block.content, "monospace": True}


def _table_unit(block: Table) -> dict[str, Any]:
    # Rows keep their own width; the view decides how to lay out ragged rows.
    return {
        "type": "table",
        "headers": list(block.headers),
        "rows": [{"cells": list(row), "striped": idx % 2 == 1} for idx, row in enumerate(block.rows)],
    }


def _unit_for_block(block: Block) -> dict[str, Any]:
    if isinstance(block, Paragraph):
        return _paragraph_unit(block)
    if isinstance(block, Heading):
        return _heading_unit(block)
    if isinstance(block, ListBlock):
        return _list_unit(block)
    if isinstance(block, CodeBlock):
        return _code_unit(block)
    if isinstance(block, Table):
        return _table_unit(block)
    if isinstance(block, HorizontalRule):
        return {"type": "divider"}
    raise TypeError(f"Unsupported block: {block!r}")
