# tests/test_printer.py

from __future__ import annotations

import io
import re
from typing import List, Tuple

from family_tree.demo_data import EXAMPLE_RENDERING
from family_tree.printer import format_tree, print_tree, render_tree

LINE_RE = re.compile(r"^(?P<prefix>(?:│   |    )*)(?P<glyph>├── |└── )?(?P<label>.*)$")
LABEL_RE = re.compile(r"^(?P<name>.*) \((?P<date>.*), (?P<gender>.)\)$")


def _parse(lines: List[str]) -> List[Tuple[int, str, str, str, str]]:
    """Parse rendered lines into (depth, parent_name, name, date, gender)."""
    rows = []
    stack: List[str] = []
    for line in lines:
        m = LINE_RE.match(line)
        assert m, line
        depth = 0 if m.group("glyph") is None else len(m.group("prefix")) // 4 + 1
        label = LABEL_RE.match(m.group("label"))
        assert label, line

        stack = stack[:depth]
        parent = stack[-1] if stack else ""
        rows.append((depth, parent, label.group("name"), label.group("date"), label.group("gender")))
        stack.append(label.group("name"))
    return rows


def test_example_renders_exactly(example_root) -> None:
    assert format_tree(example_root) == EXAMPLE_RENDERING


def test_print_tree_writes_lines(example_root) -> None:
    buf = io.StringIO()
    print_tree(example_root, out=buf)
    assert buf.getvalue() == EXAMPLE_RENDERING


def test_print_tree_defaults_to_stdout(example_root, capsys) -> None:
    print_tree(example_root)
    assert capsys.readouterr().out == EXAMPLE_RENDERING


def test_none_root_produces_no_output(capsys) -> None:
    assert render_tree(None) == []
    assert format_tree(None) == ""
    print_tree(None)
    assert capsys.readouterr().out == ""


def test_single_node_has_no_prefix_or_glyph(strict_builder) -> None:
    solo = strict_builder.create_person("Solo", "2000-01-01", "F")
    assert render_tree(solo) == ["Solo (2000-01-01, F)"]


def test_last_child_branch_uses_spaces(strict_builder) -> None:
    b = strict_builder
    root = b.create_person("R", "1", "M")
    a = b.create_person("A", "2", "M")
    z = b.create_person("Z", "3", "F")
    z1 = b.create_person("Z1", "4", "F")
    z2 = b.create_person("Z2", "5", "M")
    z1a = b.create_person("Z1a", "6", "M")
    b.add_child(root, a)
    b.add_child(root, z)
    b.add_child(z, z1)
    b.add_child(z, z2)
    b.add_child(z1, z1a)

    assert render_tree(root) == [
        "R (1, M)",
        "├── A (2, M)",
        "└── Z (3, F)",
        "    ├── Z1 (4, F)",
        "    │   └── Z1a (6, M)",
        "    └── Z2 (5, M)",
    ]


def test_rendering_parses_back_to_inserted_structure(example_root) -> None:
    rows = _parse(render_tree(example_root))

    expected = [
        (p.name, p.parent.name if p.parent else "", p.birth_date, p.gender)
        for p in example_root.iter_subtree()
    ]
    assert [(name, parent, date, gender) for _, parent, name, date, gender in rows] == expected


def test_deep_chain_parses_back(strict_builder) -> None:
    b = strict_builder
    root = b.create_person("G0", "1900-01-01", "M")
    node = root
    for i in range(1, 6):
        nxt = b.create_person(f"G{i}", f"19{i}0-01-01", "F" if i % 2 else "M")
        sibling = b.create_person(f"S{i}", f"19{i}5-01-01", "M")
        b.add_child(node, nxt)
        b.add_child(node, sibling)
        node = nxt

    rows = _parse(render_tree(root))
    assert [r[2] for r in rows] == [p.name for p in root.iter_subtree()]
    assert [r[1] for r in rows] == [p.parent.name if p.parent else "" for p in root.iter_subtree()]
