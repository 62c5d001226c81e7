"""
family_tree: a minimal genealogical tree.

    from family_tree import TreeBuilder, print_tree, destroy_tree
"""

from family_tree.builder import TreeBuilder, add_child, create_person
from family_tree.models import Gender, Person
from family_tree.printer import format_tree, print_tree, render_tree
from family_tree.teardown import destroy_tree

__version__ = "0.1.0"

__all__ = [
    "Gender",
    "Person",
    "TreeBuilder",
    "add_child",
    "create_person",
    "destroy_tree",
    "format_tree",
    "print_tree",
    "render_tree",
]
