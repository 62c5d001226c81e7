
from __future__ import annotations

import time
from collections import Counter
from typing import Any, Dict

from rich.console import Console

from family_tree.builder import TreeBuilder
from family_tree.demo_data import build_example_tree
from family_tree.models import Person

console = Console(stderr=True)


def load_example(*, verbose: bool = False) -> Person:
    """
    Build the example family under the configured policy.
    """
    t0 = time.perf_counter()

    root = build_example_tree(TreeBuilder())

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Built example tree in {elapsed * 1000:.2f}ms")

    return root


def tree_summary(root: Person) -> Dict[str, Any]:
    """
    Count persons, generations, leaves and genders in the tree.
    """
    people = list(root.iter_subtree())
    genders = Counter(p.gender for p in people)

    return {
        "persons": len(people),
        "generations": root.depth(),
        "leaves": sum(1 for p in people if p.is_leaf),
        "genders": dict(sorted(genders.items())),
    }
