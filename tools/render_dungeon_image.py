#!/usr/bin/env python3
"""
Render a dungeon to an image file for visual inspection.

Useful for:
- Tuning generation parameters
- Checking hole and trap patterns
- Debugging the partition tree (--debug outlines containers, rooms and corridors)

Usage:
    uv run tools/render_dungeon_image.py                    # Default parameters, random seed
    uv run tools/render_dungeon_image.py --iterations 5     # Deeper partition
    uv run tools/render_dungeon_image.py --seed 42          # Reproducible dungeon
    uv run tools/render_dungeon_image.py --output my.png    # Custom output path
"""

import argparse
import cv2
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bsp_dungeon.config import add_dungeon_arguments, args_from_namespace
from bsp_dungeon.dungeon_gen import generate_dungeon
from bsp_dungeon.errors import GenerationError
from bsp_dungeon.log_utils import setup_logging
from bsp_dungeon.rendering import render_image

logger = logging.getLogger("bsp_dungeon.tools")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Render a dungeon to an image file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    add_dungeon_arguments(parser)
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible dungeons",
    )
    parser.add_argument(
        "--output", "-o",
        type=str,
        default="dungeon_render.png",
        help="Output image path (default: dungeon_render.png)",
    )
    parser.add_argument(
        "--tile-width",
        type=int,
        default=16,
        help="Pixels per tile (default: 16)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Outline containers, rooms and corridors",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log each generation stage")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.seed is not None:
        logger.info("Using random seed: %d", args.seed)

    try:
        dungeon = generate_dungeon(args_from_namespace(args), args.seed)
    except GenerationError as e:
        logger.error("No dungeon generated: %s", e)
        return 1

    image = render_image(dungeon, tile_size=args.tile_width, debug=args.debug)

    output_path = Path(args.output)
    cv2.imwrite(str(output_path), image)
    logger.info("Saved to: %s", output_path.absolute())

    logger.info("Rooms (%d):", len(dungeon.rooms))
    for room in dungeon.rooms:
        holes = f", holes '{room.holes.name}'" if room.holes else ""
        logger.info("  room at tile (%d, %d), size %dx%d%s", room.x, room.y, room.width, room.height, holes)

    return 0


if __name__ == "__main__":
    sys.exit(main())
