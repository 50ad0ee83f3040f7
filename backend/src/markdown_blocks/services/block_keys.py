"""Rendering identities for parsed blocks.

Keys are derived from block content only, so re-parsing the same text yields
the same keys. Identical blocks within one document get a numeric suffix.
"""

from __future__ import annotations

import hashlib

from ..blocks import Block, CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph, Table

TEXT_PREFIX_CHARS = 20
CELL_PREFIX_CHARS = 10


def _digest(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()[:10]


def block_key(block: Block, rule_index: int = 0) -> str:
    """Base key for one block (not yet de-duplicated)."""
    if isinstance(block, Paragraph):
        return f"p-{_digest(block.content[:TEXT_PREFIX_CHARS])}"
    if isinstance(block, Heading):
        return f"h{block.level}-{_digest(block.content[:TEXT_PREFIX_CHARS])}"
    if isinstance(block, ListBlock):
        kind = "o" if block.ordered else "u"
        first = block.items[0][:CELL_PREFIX_CHARS] if block.items else ""
        return f"li-{kind}-{len(block.items)}-{_digest(first)}"
    if isinstance(block, CodeBlock):
        return f"code-{_digest(block.content[:TEXT_PREFIX_CHARS])}"
    if isinstance(block, Table):
        first = block.headers[0][:CELL_PREFIX_CHARS] if block.headers else ""
        return f"table-{len(block.headers)}-{len(block.rows)}-{_digest(first)}"
    if isinstance(block, HorizontalRule):
        return f"hr-{rule_index}"
    raise TypeError(f"Unsupported block: {block!r}")


def assign_block_keys(blocks: list[Block]) -> list[str]:
    """One unique key per block, in order."""
    keys: list[str] = []
    seen: dict[str, int] = {}
    rules = 0
    for block in blocks:
        key = block_key(block, rule_index=rules)
        if isinstance(block, HorizontalRule):
            rules += 1
        count = seen.get(key, 0) + 1
        seen[key] = count
        keys.append(key if count == 1 else f"{key}-{count}")
    return keys
