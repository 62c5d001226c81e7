"""
Main entry for the family_tree project.

This module is intentionally thin:
- configuration setup
- pipeline orchestration

It takes no command-line arguments: it builds the example family, prints it
to stdout, tears it down and exits with status 0.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from family_tree.config import get_config
from family_tree.logging import get_logger

from family_tree.core.context import TreeContext
from family_tree.core.pipeline import Pipeline

log = get_logger("main")


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(out: Optional[TextIO] = None) -> TreeContext:
    """
    Prepare context and execute the build/print/teardown pipeline.
    """

    cfg = get_config()

    ctx = TreeContext(
        config=cfg,
        logger=log,
        out=out if out is not None else sys.stdout,
    )

    Pipeline(ctx).run()

    log.info(f"Main pipeline complete. Stats: {ctx.stats}")
    return ctx


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main() -> int:
    try:
        run()
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
