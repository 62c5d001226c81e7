# src/family_tree/models.py

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional


class Gender(str, Enum):
    M = "M"
    F = "F"


@dataclass(eq=False)
class Person:
    """
    A node in the genealogical tree.

    Attributes:
        name: Display name, any text.
        birth_date: Birth date as text (e.g. '1945-01-01'); not parsed.
        gender: Single-character code, normally 'M' or 'F'.
        children: Owned child records, in insertion order.

    The parent back-reference is held through a weak reference: a parent
    owns its children, a child never owns its parent.
    """

    name: str
    birth_date: str
    gender: str
    children: List["Person"] = field(default_factory=list, init=False, repr=False)

    _parent_ref: Optional["weakref.ReferenceType[Person]"] = field(
        default=None, init=False, repr=False
    )

    # ---------- Parent link ----------

    @property
    def parent(self) -> Optional["Person"]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, value: Optional["Person"]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    # ---------- Helpers ----------

    def label(self) -> str:
        """Return the display line for this person: 'name (birth_date, gender)'."""
        return f"{self.name} ({self.birth_date}, {self.gender})"

    def iter_subtree(self) -> Iterator["Person"]:
        """Yield this person and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def iter_postorder(self) -> Iterator["Person"]:
        """Yield all descendants before this person (children first)."""
        for child in self.children:
            yield from child.iter_postorder()
        yield self

    def depth(self) -> int:
        """Number of generations in the subtree rooted here (1 for a leaf)."""
        if not self.children:
            return 1
        return 1 + max(child.depth() for child in self.children)
