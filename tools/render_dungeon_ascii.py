#!/usr/bin/env python3
"""
Render a generated dungeon as ASCII art for debugging.

Legend: '#' wall, '.' floor, '^' spikes, b/s/t/m monsters.

Usage:
    uv run tools/render_dungeon_ascii.py [--map-width N] [--map-height N] [--seed S]
    uv run tools/render_dungeon_ascii.py --seed 42 --json dungeon.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path so we can import bsp_dungeon
sys.path.insert(0, str(Path(__file__).parent.parent))

from bsp_dungeon.config import add_dungeon_arguments, args_from_namespace
from bsp_dungeon.dungeon_gen import generate_dungeon
from bsp_dungeon.errors import GenerationError
from bsp_dungeon.log_utils import setup_logging
from bsp_dungeon.rendering import render_ascii

logger = logging.getLogger("bsp_dungeon.tools")


def main() -> int:
    parser = argparse.ArgumentParser(description="Render dungeon as ASCII art")
    add_dungeon_arguments(parser)
    parser.add_argument("--seed", type=int, help="Random seed for reproducible generation")
    parser.add_argument("--json", type=str, help="Also write the dungeon as JSON to this path")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each generation stage")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        dungeon = generate_dungeon(args_from_namespace(args), args.seed)
    except GenerationError as e:
        logger.error("No dungeon generated: %s", e)
        return 1

    print(render_ascii(dungeon))

    # Print some debug info
    print(f"\n--- Debug Info ---")
    print(f"Map size: {dungeon.width}x{dungeon.height} tiles")
    print(f"Leaves: {len(dungeon.tree.leaves)}, rooms: {len(dungeon.rooms)}")
    print(f"Corridors: {len(dungeon.corridors)}, monsters: {len(dungeon.monsters)}")

    if args.json:
        output_path = Path(args.json)
        output_path.write_text(json.dumps(dungeon.to_dict()))
        print(f"Saved to: {output_path.absolute()}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
