# src/family_tree/demo_data.py

"""
The fixed three-generation example family.

EXAMPLE_FAMILY maps a parent name to the (name, birth_date, gender) records
of its children, in the order they are attached.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from family_tree.builder import TreeBuilder
from family_tree.models import Person

PersonRecord = Tuple[str, str, str]

EXAMPLE_ROOT: PersonRecord = ("Avô", "1945-01-01", "M")

EXAMPLE_FAMILY: Dict[str, List[PersonRecord]] = {
    "Avô": [
        ("Pai", "1970-06-15", "M"),
        ("Tia", "1972-09-20", "F"),
    ],
    "Pai": [
        ("Filho", "1995-03-10", "M"),
        ("Filha", "1998-11-05", "F"),
    ],
}

EXAMPLE_RENDERING = (
    "Avô (1945-01-01, M)\n"
    "├── Pai (1970-06-15, M)\n"
    "│   ├── Filho (1995-03-10, M)\n"
    "│   └── Filha (1998-11-05, F)\n"
    "└── Tia (1972-09-20, F)\n"
)


def build_example_tree(builder: Optional[TreeBuilder] = None) -> Person:
    """Build the five-person example tree and return its root."""
    builder = builder or TreeBuilder()

    root = builder.create_person(*EXAMPLE_ROOT)
    pending = [root]
    while pending:
        parent = pending.pop(0)
        for record in EXAMPLE_FAMILY.get(parent.name, []):
            child = builder.create_person(*record)
            builder.add_child(parent, child)
            pending.append(child)
    return root
