"""
Debug renderers for generated dungeons.

These are for eyeballing the generator's output, not for the game itself:
render_ascii() prints to a terminal and render_image() produces an OpenCV
(BGR) image that can be written with cv2.imwrite().
"""

import cv2
import numpy as np

from .dungeon_gen import Dungeon
from .tiles import MonsterType, PropType

# Type Definition
Image = np.ndarray

FLOOR_CHAR = "."
WALL_CHAR = "#"
SPIKES_CHAR = "^"
MONSTER_CHARS = {
    MonsterType.BANDIT: "b",
    MonsterType.SKELETON: "s",
    MonsterType.TROLL: "t",
    MonsterType.MUSHROOM: "m",
}

# BGR colors
FLOOR_COLOR = (200, 200, 200)
WALL_COLOR = (40, 40, 40)
SPIKES_COLOR = (0, 0, 220)
CONTAINER_COLOR = (128, 128, 128)
ROOM_COLOR = (0, 200, 0)
CORRIDOR_COLOR = (220, 0, 0)
MONSTER_COLORS = {
    MonsterType.BANDIT: (0, 140, 255),
    MonsterType.SKELETON: (240, 240, 240),
    MonsterType.TROLL: (0, 100, 0),
    MonsterType.MUSHROOM: (180, 0, 180),
}


def render_ascii(dungeon: Dungeon) -> str:
    """Renders the dungeon as one character per tile."""
    grid = [
        [FLOOR_CHAR if tile == 0 else WALL_CHAR for tile in row]
        for row in dungeon.tilemap.tolist()
    ]

    rows, cols = dungeon.props.shape
    for y in range(rows):
        for x in range(cols):
            if dungeon.props[y, x] == PropType.SPIKES:
                grid[y][x] = SPIKES_CHAR

    for monster in dungeon.monsters:
        x, y = int(monster.x), int(monster.y)
        if 0 <= y < rows and 0 <= x < cols:
            grid[y][x] = MONSTER_CHARS[monster.type]

    return "\n".join("".join(row) for row in grid)


def _draw_rect(image: Image, rect, tile_size: int, color, thickness: int = 1) -> None:
    cv2.rectangle(
        image,
        (rect.x * tile_size, rect.y * tile_size),
        (rect.right * tile_size - 1, rect.down * tile_size - 1),
        color,
        thickness,
    )


def render_image(dungeon: Dungeon, tile_size: int = 16, debug: bool = False) -> Image:
    """
    Renders the dungeon to a BGR image, tile_size pixels per tile.

    With debug=True the partition containers, rooms and corridors are
    outlined on top of the tiles.
    """
    height_pixels = dungeon.height * tile_size
    width_pixels = dungeon.width * tile_size
    image = np.zeros((height_pixels, width_pixels, 3), dtype=np.uint8)

    floor = dungeon.tilemap == 0
    spikes = dungeon.props == PropType.SPIKES
    # Blow each tile up to a tile_size x tile_size block
    scale = np.ones((tile_size, tile_size), dtype=bool)
    image[np.kron(floor, scale).astype(bool)] = FLOOR_COLOR
    image[np.kron(~floor, scale).astype(bool)] = WALL_COLOR
    image[np.kron(spikes, scale).astype(bool)] = SPIKES_COLOR

    for monster in dungeon.monsters:
        cv2.circle(
            image,
            (int(monster.x * tile_size), int(monster.y * tile_size)),
            max(1, monster.radius * tile_size // 8),
            MONSTER_COLORS[monster.type],
            -1,
        )

    if debug:
        for node in dungeon.tree.walk():
            if node.is_leaf:
                _draw_rect(image, node.container, tile_size, CONTAINER_COLOR)
            if node.corridor is not None:
                _draw_rect(image, node.corridor, tile_size, CORRIDOR_COLOR)
        for room in dungeon.rooms:
            _draw_rect(image, room, tile_size, ROOM_COLOR)

    return image
