import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from family_tree.builder import TreeBuilder  # noqa: E402
from family_tree.demo_data import build_example_tree  # noqa: E402


@pytest.fixture
def strict_builder() -> TreeBuilder:
    return TreeBuilder(strict=True, allowed_genders=["M", "F"], validate_dates=False)


@pytest.fixture
def lenient_builder() -> TreeBuilder:
    return TreeBuilder(strict=False, allowed_genders=["M", "F"], validate_dates=False)


@pytest.fixture
def example_root(strict_builder):
    return build_example_tree(strict_builder)
