import dataclasses

import pytest

from markdown_blocks.blocks import BlockType, CodeBlock, Heading, HorizontalRule, ListBlock, Paragraph, Table


def test_to_dict_payloads():
    assert Paragraph("p").to_dict() == {"type": "paragraph", "content": "p"}
    assert Heading(2, "h").to_dict() == {"type": "heading", "level": 2, "content": "h"}
    assert ListBlock(("a", "b"), ordered=True).to_dict() == {"type": "list", "ordered": True, "items": ["a", "b"]}
    assert CodeBlock("x", "py").to_dict() == {"type": "code_block", "language": "py", "content": "x"}
    assert Table(("a",), (("1", "2"),)).to_dict() == {"type": "table", "headers": ["a"], "rows": [["1", "2"]]}
    assert HorizontalRule().to_dict() == {"type": "horizontal_rule"}


def test_blocks_are_immutable():
    block = Heading(1, "h")
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.level = 2  # type: ignore[misc]


def test_blocks_are_hashable():
    assert len({Table(("a",), (("1",),)), Table(("a",), (("1",),)), HorizontalRule()}) == 2


def test_block_type_values():
    assert BlockType.CODE_BLOCK == "code_block"
    assert Paragraph.type is BlockType.PARAGRAPH


def test_package_exports_parse():
    import markdown_blocks

    assert markdown_blocks.parse("# x") == [Heading(1, "x")]
