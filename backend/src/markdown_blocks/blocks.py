"""Block records emitted by the markdown block parser.

Blocks are flat siblings: no block references another one. Sequence fields are
tuples so every block is immutable and hashable.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class BlockType(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    CODE_BLOCK = "code_block"
    TABLE = "table"
    HORIZONTAL_RULE = "horizontal_rule"


@dataclass(frozen=True)
class Paragraph:
    """Untrimmed source lines joined by newlines."""

    content: str
    type: ClassVar[BlockType] = BlockType.PARAGRAPH

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "content": self.content}


@dataclass(frozen=True)
class Heading:
    level: int
    content: str
    type: ClassVar[BlockType] = BlockType.HEADING

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "level": self.level, "content": self.content}


@dataclass(frozen=True)
class ListBlock:
    """A run of items of one kind (ordered or unordered)."""

    items: tuple[str, ...]
    ordered: bool = False
    type: ClassVar[BlockType] = BlockType.LIST

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "ordered": self.ordered, "items": list(self.items)}


@dataclass(frozen=True)
class CodeBlock:
    content: str
    language: str = ""
    type: ClassVar[BlockType] = BlockType.CODE_BLOCK

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value, "language": self.language, "content": self.content}


@dataclass(frozen=True)
class Table:
    """Header cells plus data rows. Rows are not padded to the header width."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()
    type: ClassVar[BlockType] = BlockType.TABLE

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


@dataclass(frozen=True)
class HorizontalRule:
    type: ClassVar[BlockType] = BlockType.HORIZONTAL_RULE

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type.value}


Block = Union[Paragraph, Heading, ListBlock, CodeBlock, Table, HorizontalRule]
