"""
Recursive binary space partitioning of the map.

Each container is split in two along a random axis until the requested
depth is reached. A split is only kept if both halves stay reasonably
proportioned (see DungeonArgs.container_width_ratio and
container_height_ratio); otherwise a new axis and split point are drawn.
"""

import logging
import random
from typing import Optional, Tuple

from .config import DungeonArgs
from .errors import GenerationError
from .geometry import Container, TreeNode

logger = logging.getLogger(__name__)

# Upper bound on split attempts for a single container
MAX_SPLIT_ATTEMPTS = 100


def build_tree(
    container: Container,
    iterations: int,
    args: DungeonArgs,
    rng: random.Random,
    max_attempts: int = MAX_SPLIT_ATTEMPTS,
) -> TreeNode:
    """
    Builds a full binary tree of depth `iterations` rooted at `container`.

    Raises:
        GenerationError: If some container cannot be split within
            max_attempts tries.
    """
    node = TreeNode(container)

    if iterations > 0:
        left, right = split_container(container, args, rng, max_attempts)
        node.left = build_tree(left, iterations - 1, args, rng, max_attempts)
        node.right = build_tree(right, iterations - 1, args, rng, max_attempts)

    return node


def split_container(
    container: Container,
    args: DungeonArgs,
    rng: random.Random,
    max_attempts: int = MAX_SPLIT_ATTEMPTS,
) -> Tuple[Container, Container]:
    """
    Splits a container into two children that exactly partition it.

    Raises:
        GenerationError: If no acceptable split is found in max_attempts tries.
    """
    for _ in range(max_attempts):
        halves = _try_split(container, args, rng)
        if halves is not None:
            return halves

    logger.debug(
        "Gave up splitting %dx%d container at (%d, %d) after %d attempts",
        container.width,
        container.height,
        container.x,
        container.y,
        max_attempts,
    )
    raise GenerationError(
        f"Could not split a {container.width}x{container.height} container "
        f"at ({container.x}, {container.y}) with width ratio "
        f"{args.container_width_ratio} and height ratio "
        f"{args.container_height_ratio} after {max_attempts} attempts; "
        f"try a larger map, fewer iterations or smaller ratios"
    )


def _try_split(
    container: Container, args: DungeonArgs, rng: random.Random
) -> Optional[Tuple[Container, Container]]:
    """One split attempt. Returns None if the halves are badly proportioned."""
    direction = rng.choices(["vertical", "horizontal"], weights=[0.5, 0.5])[0]

    if direction == "vertical":
        if container.width < 2:
            return None
        left = Container(
            container.x,
            container.y,
            rng.randint(1, container.width - 1),
            container.height,
        )
        right = Container(
            container.x + left.width,
            container.y,
            container.width - left.width,
            container.height,
        )

        left_width_ratio = left.width / left.height
        right_width_ratio = right.width / right.height
        if (
            left_width_ratio < args.container_width_ratio
            or right_width_ratio < args.container_width_ratio
        ):
            return None
    else:
        if container.height < 2:
            return None
        left = Container(
            container.x,
            container.y,
            container.width,
            rng.randint(1, container.height - 1),
        )
        right = Container(
            container.x,
            container.y + left.height,
            container.width,
            container.height - left.height,
        )

        left_height_ratio = left.height / left.width
        right_height_ratio = right.height / right.width
        if (
            left_height_ratio < args.container_height_ratio
            or right_height_ratio < args.container_height_ratio
        ):
            return None

    return left, right
