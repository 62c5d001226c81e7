# tests/test_main.py

from __future__ import annotations

import io

import pytest
from typer.testing import CliRunner

from family_tree.cli import app
from family_tree.core.context import TreeContext
from family_tree.core.exceptions import PipelineError
from family_tree.core.pipeline import Pipeline
from family_tree.demo_data import EXAMPLE_RENDERING
from family_tree.logging import get_logger
from family_tree.main import main, run

runner = CliRunner()


def test_main_prints_example_and_returns_zero(capsys) -> None:
    assert main() == 0
    assert capsys.readouterr().out == EXAMPLE_RENDERING


def test_run_records_stats() -> None:
    buf = io.StringIO()
    ctx = run(out=buf)

    assert buf.getvalue() == EXAMPLE_RENDERING
    assert ctx.stats == {"persons": 5, "released": 5}


def test_pipeline_wraps_failures(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise RuntimeError("printer exploded")

    monkeypatch.setattr("family_tree.core.pipeline.print_tree", boom)
    ctx = TreeContext(config=None, logger=get_logger("tests"), out=io.StringIO())

    with pytest.raises(PipelineError, match="printer exploded"):
        Pipeline(ctx).run()


def test_cli_show() -> None:
    result = runner.invoke(app, ["show"])
    assert result.exit_code == 0
    assert result.stdout == EXAMPLE_RENDERING


def test_cli_stats() -> None:
    result = runner.invoke(app, ["stats"])
    assert result.exit_code == 0
    assert "Persons" in result.stdout
    assert "Generations" in result.stdout
