# src/cli/hill_climb.py

import argparse
import json
import sys
from typing import List, Optional

from app.logging_config import configure_logging
from heightmap import HeightMapParseError, load_height_map
from nav import AStar, find_shortest_from_any, lowest_points, path_length
from settings import DEFAULT_SETTINGS_PATH, load_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Shortest hill-climb paths over a letter height map."
    )
    parser.add_argument("input", help="Height map file (rows of a-z, with S and E)")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Settings YAML (default: {DEFAULT_SETTINGS_PATH} if present, else built-in defaults)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured logging level (e.g. DEBUG)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
        configure_logging(args.log_level or settings.logging.level, stream=sys.stderr)
        height_map = load_height_map(args.input)
    except (OSError, ValueError, HeightMapParseError) as e:
        print("Hill climb FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        return 1

    engine = AStar(
        max_climb=settings.search.max_climb,
        max_expansions=settings.search.max_expansions,
    )

    # Part 1: from the marked start
    path = engine.find_path(height_map.grid, height_map.start, height_map.goal)
    from_start = path_length(path) if path is not None else None

    # Part 2: from every lowest cell, same engine
    from_lowest = find_shortest_from_any(
        height_map.grid,
        lowest_points(height_map.grid),
        height_map.goal,
        engine=engine,
    )

    print(json.dumps(
        {
            "shortest_from_start": from_start,
            "shortest_from_lowest": from_lowest,
        },
        indent=2,
        sort_keys=True,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
