# tests/conftest.py

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

# Ensure src/ is on sys.path for test imports like `import nav`, `import heightmap`.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


EXAMPLE_MAP: List[str] = [
    "Sabqponm",
    "abcryxxl",
    "accszExk",
    "acctuvwj",
    "abdefghi",
]


@pytest.fixture
def example_text() -> str:
    """The canonical 5x8 puzzle map, indented like a pasted block."""
    return "\n".join("    " + line for line in EXAMPLE_MAP) + "\n"


@pytest.fixture
def example_map(example_text: str):
    from heightmap import parse_height_map

    return parse_height_map(example_text)
