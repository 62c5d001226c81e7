from __future__ import annotations

from family_tree.builder import TreeBuilder
from family_tree.core.context import TreeContext
from family_tree.core.exceptions import PipelineError
from family_tree.demo_data import build_example_tree
from family_tree.printer import print_tree
from family_tree.teardown import destroy_tree


class Pipeline:
    """
    Runs the example family through build -> print -> teardown.
    No tree logic lives here.
    """

    def __init__(self, context: TreeContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> int:
        self.log.info("Pipeline starting")

        try:
            builder = TreeBuilder()
            root = build_example_tree(builder)
            self.ctx.stats["persons"] = builder.created
            self.log.info(f"Built example tree: {builder.created} person(s)")

            print_tree(root, out=self.ctx.out)

            released = destroy_tree(root)
            self.ctx.stats["released"] = released
            self.log.info(f"Teardown released {released} person(s)")

            if released != builder.created:
                self.log.warning(
                    f"Released {released} person(s) but created {builder.created}"
                )

            self.log.info("Pipeline completed successfully")
            return released

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc
