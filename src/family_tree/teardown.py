# src/family_tree/teardown.py

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from family_tree.logging import get_logger
from family_tree.models import Person

log = get_logger(__name__)

ReleaseHook = Callable[[Person], None]


def _release_subtree(root: Person, on_release: Optional[ReleaseHook]) -> int:
    """
    Release ``root`` and its descendants in post-order.

    Uses an explicit stack of (node, expanded) pairs so depth is bounded only
    by memory.
    """
    released = 0
    stack: List[Tuple[Person, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        if not expanded:
            stack.append((node, True))
            # Reversed so the first child is released first.
            for child in reversed(node.children):
                stack.append((child, False))
            continue

        node.children = []
        node.parent = None
        if on_release is not None:
            on_release(node)
        released += 1

    return released


def destroy_tree(root: Optional[Person], on_release: Optional[ReleaseHook] = None) -> int:
    """
    Release every person in the subtree rooted at ``root``, children first.

    Each node is released exactly once: its child list is cleared, its parent
    link dropped and ``on_release`` (if given) called with it. A root that is
    still attached to a parent is removed from that parent's children once
    the subtree has been released.

    Returns the number of released persons (0 for ``None``).
    """
    if root is None:
        return 0

    owner = root.parent
    released = _release_subtree(root, on_release)

    if owner is not None:
        owner.children = [c for c in owner.children if c is not root]

    log.debug(f"Released {released} person(s) under {root.name!r}")
    return released
