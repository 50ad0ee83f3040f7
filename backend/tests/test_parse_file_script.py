import json

import pytest

from markdown_blocks.scripts.parse_file import main


def test_prints_blocks(tmp_path, capsys):
    path = tmp_path / "doc.md"
    path.write_text("# Hi\n\n- a\n", encoding="utf-8")

    main([str(path)])

    out = json.loads(capsys.readouterr().out)
    assert out == [
        {"type": "heading", "level": 1, "content": "Hi"},
        {"type": "list", "ordered": False, "items": ["a"]},
    ]


def test_prints_render_units(tmp_path, capsys):
    path = tmp_path / "doc.md"
    path.write_text("---\n", encoding="utf-8")

    main([str(path), "--render", "--indent", "0"])

    out = json.loads(capsys.readouterr().out)
    assert out == [{"key": "hr-0", "type": "divider"}]


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "missing.md")])
    assert "File not found" in str(exc.value)
