import logging
import random
from typing import Optional, Sequence

from .config import DungeonArgs
from .geometry import Container, Room, TreeNode
from .patterns import HOLES, Pattern

logger = logging.getLogger(__name__)


def place_rooms(
    tree: TreeNode,
    args: DungeonArgs,
    rng: random.Random,
    holes: Sequence[Pattern] = HOLES,
) -> None:
    """
    Gives every leaf container a room, where one fits.

    The room is inset from its container by the container gutter plus up
    to a quarter of the container's size on each side. Leaves whose room
    would be smaller than args.room_min_size on either axis get no room.
    """
    placed = 0
    for container in tree.leaves:
        room = _make_room(container, args, rng)
        if room is None:
            continue

        has_hole = rng.choices(
            [True, False],
            weights=[args.room_hole_chance, 1 - args.room_hole_chance],
        )[0]
        if has_hole:
            room.holes = find_hole(room, holes)

        container.room = room
        placed += 1

    logger.debug("Placed %d rooms in %d leaves", placed, len(tree.leaves))


def _make_room(
    container: Container, args: DungeonArgs, rng: random.Random
) -> Optional[Room]:
    gutter = args.container_gutter_width

    x = container.x + gutter + rng.randint(0, container.width // 4)
    y = container.y + gutter + rng.randint(0, container.height // 4)
    width = (
        container.width
        - (x - container.x)
        - gutter
        - rng.randint(0, container.width // 4)
    )
    height = (
        container.height
        - (y - container.y)
        - gutter
        - rng.randint(0, container.height // 4)
    )

    if width < args.room_min_size or height < args.room_min_size:
        return None

    return Room(x, y, width, height)


def find_hole(room: Room, holes: Sequence[Pattern]) -> Optional[Pattern]:
    """Returns the first hole in library order that fits the room, if any."""
    for hole in holes:
        if hole.fits_in(room.width, room.height):
            return hole
    return None
