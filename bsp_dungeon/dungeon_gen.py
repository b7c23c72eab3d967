"""
Dungeon Generation Algorithm
============================

We carve the dungeon out of a solid map by recursive binary space
partitioning.

1. Inset the map by its gutter and split that rectangle in two, at a random
   point along a random axis. Recurse into both halves `iterations` times,
   retrying splits that would leave a half too thin.
2. Inset a room inside every leaf of the tree, with some random jitter.
   Leaves too small for a room stay empty. Some rooms get a hole pattern
   (pillars, a pit...) stamped into their middle.
3. At every internal node, join the centers of its two halves with a
   straight corridor. Some corridors get a strip of spikes.
4. Scatter monsters over each room with a Poisson disk sampler.
5. Rasterize everything into a tile grid and a prop grid, then autotile
   the walls (see tilemap.py).

All randomness comes from a single random.Random, so a seed and a set of
parameters always produce the same dungeon.
"""

import logging
import random
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Union

from .config import DungeonArgs
from .corridors import place_corridors
from .geometry import TreeNode
from .monsters import Monster, ScatterSampler, place_monsters, poisson_disc_points
from .partition import build_tree
from .patterns import HOLES, TRAPS, Pattern
from .rooms import place_rooms
from .tilemap import TileMap, rasterize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dungeon:
    """A generated dungeon. Built once by generate_dungeon(); its grids are read-only."""

    # Size in tiles
    width: int
    height: int
    # The partition tree, with rooms on its leaves and corridors on its nodes
    tree: TreeNode
    # Autotiled walls and floors, indexed [y, x]
    tilemap: TileMap
    # Traps and other props, indexed [y, x]
    props: TileMap
    monsters: List[Monster]

    @property
    def rooms(self):
        """All rooms, in leaf order."""
        return [c.room for c in self.tree.leaves if c.room is not None]

    @property
    def corridors(self):
        """All corridors, in pre-order."""
        return [n.corridor for n in self.tree.walk() if n.corridor is not None]

    def to_dict(self) -> Dict[str, Any]:
        """A JSON-ready copy of the dungeon."""
        return {
            "width": self.width,
            "height": self.height,
            "tree": _node_to_dict(self.tree),
            "tilemap": self.tilemap.tolist(),
            "props": self.props.tolist(),
            "monsters": [
                {"x": m.x, "y": m.y, "radius": m.radius, "type": m.type.value}
                for m in self.monsters
            ],
        }


def _rect_to_dict(rect) -> Dict[str, Any]:
    return {"x": rect.x, "y": rect.y, "width": rect.width, "height": rect.height}


def _node_to_dict(node: TreeNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {"container": _rect_to_dict(node.container)}

    room = node.container.room
    if room is not None:
        data["room"] = _rect_to_dict(room)
        data["room"]["holes"] = room.holes.name if room.holes else None

    if node.corridor is not None:
        data["corridor"] = _rect_to_dict(node.corridor)
        data["corridor"]["direction"] = node.corridor.direction
        data["corridor"]["traps"] = (
            node.corridor.traps.name if node.corridor.traps else None
        )

    if node.left is not None and node.right is not None:
        data["left"] = _node_to_dict(node.left)
        data["right"] = _node_to_dict(node.right)

    return data


def generate_dungeon(
    args: Union[DungeonArgs, Mapping[str, Any]],
    rng: Union[random.Random, int, None] = None,
    holes: Sequence[Pattern] = HOLES,
    traps: Mapping[str, Pattern] = TRAPS,
    sampler: ScatterSampler = poisson_disc_points,
) -> Dungeon:
    """
    Generates a dungeon.

    Parameters:
        args: Generation parameters, or a mapping accepted by
              DungeonArgs.from_dict()
        rng: Random source; an int is used as a seed, None seeds from the OS
        holes: Hole pattern library, in the order rooms try them
        traps: Trap pattern library, keyed by "small_wide" and "small_long"
        sampler: Point sampler used to scatter monsters

    Returns:
        The complete Dungeon

    Raises:
        GenerationError: If the parameters make generation impossible
    """
    if not isinstance(args, DungeonArgs):
        args = DungeonArgs.from_dict(args)
    args.validate()

    if not isinstance(rng, random.Random):
        rng = random.Random(rng)

    start_at = time.perf_counter()

    tree = build_tree(args.root_container(), args.iterations, args, rng)
    place_rooms(tree, args, rng, holes)
    place_corridors(tree, args, rng, traps)
    monsters = place_monsters(tree, args, rng, sampler)
    tilemap, props = rasterize(tree, args)

    elapsed_ms = (time.perf_counter() - start_at) * 1000
    logger.info(
        "Dungeon %dx%d generated in %.1fms (%d leaves, %d monsters)",
        args.map_width,
        args.map_height,
        elapsed_ms,
        len(tree.leaves),
        len(monsters),
    )

    tilemap.flags.writeable = False
    props.flags.writeable = False

    return Dungeon(
        width=args.map_width,
        height=args.map_height,
        tree=tree,
        tilemap=tilemap,
        props=props,
        monsters=monsters,
    )
