# tests/test_heightmap_parser.py

from __future__ import annotations

from pathlib import Path

import pytest

from heightmap import HeightMapParseError, load_height_map, parse_height_map


def test_example_parses(example_map) -> None:
    grid = example_map.grid

    assert grid.shape == (5, 8)
    assert example_map.start == (0, 0)
    assert example_map.goal == (2, 5)
    # S has the height of 'a', E the height of 'z'
    assert grid.height(example_map.start) == 0
    assert grid.height(example_map.goal) == 25
    assert grid.height((0, 3)) == ord("q") - ord("a")


def test_blank_lines_are_ignored() -> None:
    hm = parse_height_map("\n\nSb\n\ncE\n\n")

    assert hm.grid.heights == [[0, 1], [2, 25]]


@pytest.mark.parametrize(
    "text, fragment",
    [
        ("", "empty"),
        ("abc\nabE", "No start"),
        ("Sbc\nabc", "No goal"),
        ("SbS\nabE", "Duplicate start"),
        ("SbE\nabE", "Duplicate goal"),
        ("Sb1\nabE", "Unknown map character"),
        ("SbA\nabE", "Unknown map character"),
    ],
)
def test_parse_errors(text: str, fragment: str) -> None:
    with pytest.raises(HeightMapParseError, match=fragment):
        parse_height_map(text)


def test_ragged_rows_are_parse_errors() -> None:
    with pytest.raises(HeightMapParseError):
        parse_height_map("Sabc\nabE")


def test_load_height_map(tmp_path: Path, example_text: str) -> None:
    path = tmp_path / "map.txt"
    path.write_text(example_text, encoding="utf-8")

    hm = load_height_map(path)

    assert hm.goal == (2, 5)


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_height_map(tmp_path / "nope.txt")
