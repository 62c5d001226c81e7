# src/family_tree/printer.py

"""
Box-drawing renderer for person trees.

    Avô (1945-01-01, M)
    ├── Pai (1970-06-15, M)
    │   ├── Filho (1995-03-10, M)
    │   └── Filha (1998-11-05, F)
    └── Tia (1972-09-20, F)

The root line has no prefix. Each descendant line is the running prefix, a
branch glyph and the person's label. The prefix handed to a node's children
grows by ``"    "`` under a last child and by ``"│   "`` otherwise.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from family_tree.models import Person

TEE = "├── "
CORNER = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


def _render_child(node: Person, prefix: str, last: bool, lines: List[str]) -> None:
    lines.append(f"{prefix}{CORNER if last else TEE}{node.label()}")

    child_prefix = prefix + (SPACE_INDENT if last else PIPE_INDENT)
    count = len(node.children)
    for i, child in enumerate(node.children):
        _render_child(child, child_prefix, i + 1 == count, lines)


def render_tree(root: Optional[Person]) -> List[str]:
    """Return the rendered lines for the tree rooted at ``root`` (pre-order)."""
    if root is None:
        return []

    lines = [root.label()]
    count = len(root.children)
    for i, child in enumerate(root.children):
        _render_child(child, "", i + 1 == count, lines)
    return lines


def format_tree(root: Optional[Person]) -> str:
    lines = render_tree(root)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def print_tree(root: Optional[Person], out: Optional[TextIO] = None) -> None:
    """Write the rendered tree to ``out`` (stdout by default), one line per person."""
    stream = out if out is not None else sys.stdout
    for line in render_tree(root):
        print(line, file=stream)
