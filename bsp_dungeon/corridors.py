import logging
import math
import random
from typing import Mapping

from .config import DungeonArgs
from .geometry import Corridor, TreeNode
from .patterns import TRAPS, Pattern

logger = logging.getLogger(__name__)

# Trap shape used for each corridor direction
TRAP_FOR_DIRECTION = {
    "horizontal": "small_wide",
    "vertical": "small_long",
}


def place_corridors(
    node: TreeNode,
    args: DungeonArgs,
    rng: random.Random,
    traps: Mapping[str, Pattern] = TRAPS,
) -> None:
    """
    Joins the two children of every internal node with a straight corridor.

    The corridor runs from the left child's anchor to the right child's
    anchor. Both anchors come from the same split, so they line up on
    one axis.
    """
    # Leaves have nothing to join
    if node.left is None or node.right is None:
        return

    corridor = make_corridor(node, args.corridor_width)

    has_trap = rng.choices(
        [True, False],
        weights=[args.corridor_trap_chance, 1 - args.corridor_trap_chance],
    )[0]
    if has_trap:
        corridor.traps = traps[TRAP_FOR_DIRECTION[corridor.direction]]

    node.corridor = corridor
    logger.debug(
        "Corridor %s at (%d, %d) size %dx%d%s",
        corridor.direction,
        corridor.x,
        corridor.y,
        corridor.width,
        corridor.height,
        " with traps" if corridor.traps else "",
    )

    place_corridors(node.left, args, rng, traps)
    place_corridors(node.right, args, rng, traps)


def make_corridor(node: TreeNode, corridor_width: float) -> Corridor:
    """
    Builds the corridor between the children of an internal node.

    Raises:
        ValueError: If the node is a leaf.
    """
    if node.left is None or node.right is None:
        raise ValueError("Leaf nodes have no children to join")

    left_center = node.left.anchor
    right_center = node.right.anchor
    x = math.ceil(left_center.x)
    y = math.ceil(left_center.y)

    if left_center.x == right_center.x:
        return Corridor(
            x,
            y,
            math.ceil(corridor_width),
            math.ceil(right_center.y) - y,
            direction="vertical",
        )

    return Corridor(
        x,
        y,
        math.ceil(right_center.x) - x,
        math.ceil(corridor_width),
        direction="horizontal",
    )
