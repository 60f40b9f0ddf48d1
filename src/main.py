"""
Main entry point for tracing ASCII path maps.

Usage:
    python -m src.main map.txt
    python -m src.main map.txt --config config.yaml --verbose
    cat map.txt | python -m src.main - --json --output results/trace.json
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

import yaml

from .pathfinding import TracerConfig, InvalidMapError, run, load_map, render_path


def load_config(config_path: str) -> TracerConfig:
    """Load tracer configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return TracerConfig(**(data or {}))


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Trace the path drawn on an ASCII map",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  max_steps: 10000
  detect_cycles: true
        """
    )
    parser.add_argument(
        "map",
        help="Path to the map file ('-' reads from stdin)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        help="Give up after this many steps (overrides the config file)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full trace as JSON"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the trace JSON"
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print the map with only the traced cells kept"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print every step to stdout"
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else TracerConfig()
        if args.max_steps is not None:
            config = TracerConfig(**{**config.model_dump(), "max_steps": args.max_steps})
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        grid = load_map(args.map)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading map: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Map: {args.map} ({len(grid)} rows)")
        if config.max_steps:
            print(f"Max steps: {config.max_steps}")
        print()

    try:
        trace = run(grid, config)
    except InvalidMapError as e:
        location = ""
        if e.failure.position is not None:
            location = f" at row {e.failure.position.row}, column {e.failure.position.column}"
        print(f"Error: {e}{location}", file=sys.stderr)
        return 1

    if args.verbose:
        for i, (position, character) in enumerate(zip(trace.positions, trace.character_path)):
            print(f"Step {i}: ({position.row}, {position.column}) '{character}'")
        print()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(trace.model_dump_json(indent=2))
        if args.verbose:
            print(f"Trace saved to: {output_path}")

    if args.json:
        print(trace.model_dump_json(indent=2))
    else:
        print(f"Path: {trace.path_string}")
        print(f"Letters: {trace.letters_string}")

    if args.render:
        print()
        print(render_path(grid, trace.positions))

    return 0


if __name__ == "__main__":
    sys.exit(main())
