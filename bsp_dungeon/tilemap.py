"""
Tilemap Rasterization
=====================

Turns the partition tree into two grids of shape (map_height, map_width):

- the tile grid, which starts fully solid and is carved out by rooms and
  corridors, then autotiled;
- the prop grid, which starts empty and receives trap spikes.

Stages run in this order:

1. Carve rooms to floor
2. Carve corridors to floor
3. Stamp hole patterns into the middle of their rooms
4. Stamp trap spikes into the middle of their corridors (prop grid)
5. Clean up one-tile-wide wall slivers and spikes that ended up in rooms
6. Replace each solid tile with a mask of its solid neighbors
7. Normalize outer corners the tileset draws with dedicated sprites

Grids are indexed [y, x]. Stages 5-7 update the grid in place while
scanning row by row, so a tile sees the already-updated values of the
tiles above it and to its left.
"""

import logging
import math
from typing import Tuple

import numpy as np

from .config import DungeonArgs
from .geometry import Rect, TreeNode
from .patterns import Pattern
from .tiles import DIRECTION_NES, DIRECTION_NWS, PropType, Tile, TileDirection

logger = logging.getLogger(__name__)

# Type Definition
TileMap = np.ndarray


def create_tilemap(width: int, height: int, fill: int) -> TileMap:
    return np.full((height, width), fill, dtype=int)


def rasterize(tree: TreeNode, args: DungeonArgs) -> Tuple[TileMap, TileMap]:
    """Builds the autotiled tile grid and the prop grid for a tree."""
    tilemap = create_tilemap(args.map_width, args.map_height, Tile.SOLID)
    props = create_tilemap(args.map_width, args.map_height, PropType.EMPTY)

    carve_rooms(tree, tilemap)
    carve_corridors(tree, tilemap)
    carve_patterns(tree, tilemap)
    carve_traps(tree, props)
    clean_tilemap(tree, tilemap, props)
    generate_tile_mask(tilemap)
    normalize_tile_mask(tilemap)

    return tilemap, props


def _fill_rect(grid: TileMap, rect: Rect, value: int) -> None:
    rows, cols = grid.shape
    y0, y1 = max(rect.y, 0), min(rect.down, rows)
    x0, x1 = max(rect.x, 0), min(rect.right, cols)
    if y0 < y1 and x0 < x1:
        grid[y0:y1, x0:x1] = value


def _stamp(grid: TileMap, pattern: Pattern, start_x: int, start_y: int, value=None) -> None:
    """
    Writes a pattern onto the grid with its top-left at (start_x, start_y).

    With value=None the pattern's own tiles are written; otherwise every
    cell of the footprint gets value. Cells outside the grid are dropped.
    """
    rows, cols = grid.shape
    for py in range(pattern.height):
        for px in range(pattern.width):
            y = start_y + py
            x = start_x + px
            if 0 <= y < rows and 0 <= x < cols:
                grid[y, x] = pattern.tiles[py][px] if value is None else value


def carve_rooms(tree: TreeNode, tilemap: TileMap) -> None:
    for container in tree.leaves:
        if container.room is not None:
            _fill_rect(tilemap, container.room, Tile.FLOOR)


def carve_corridors(node: TreeNode, tilemap: TileMap) -> None:
    corridor = node.corridor
    if corridor is None:
        return

    _fill_rect(tilemap, corridor, Tile.FLOOR)

    if node.left is not None:
        carve_corridors(node.left, tilemap)
    if node.right is not None:
        carve_corridors(node.right, tilemap)


def carve_patterns(tree: TreeNode, tilemap: TileMap) -> None:
    """Stamps each room's hole pattern, centered on the room."""
    for container in tree.leaves:
        room = container.room
        if room is None or room.holes is None:
            continue

        holes = room.holes
        center = room.center
        start_y = math.ceil(center.y - holes.height / 2)
        start_x = math.ceil(center.x - holes.width / 2)
        _stamp(tilemap, holes, start_x, start_y)


def carve_traps(node: TreeNode, props: TileMap) -> None:
    """Stamps spikes in the shape of each corridor's trap, centered on it."""
    corridor = node.corridor
    if corridor is None:
        return

    if corridor.traps is not None:
        traps = corridor.traps
        center = corridor.center
        start_y = math.ceil(center.y - traps.height / 2)
        start_x = math.ceil(center.x - traps.width / 2)
        _stamp(props, traps, start_x, start_y, value=PropType.SPIKES)

    if node.left is not None:
        carve_traps(node.left, props)
    if node.right is not None:
        carve_traps(node.right, props)


def clean_tilemap(tree: TreeNode, tilemap: TileMap, props: TileMap) -> None:
    """Removes one-tile-wide walls, then spikes that sit inside rooms."""
    rows, cols = tilemap.shape
    for y in range(rows):
        for x in range(cols):
            if tilemap[y, x] <= 0:
                continue

            # Off-grid neighbors never count as floor
            west_floor = x > 0 and tilemap[y, x - 1] == 0
            east_floor = x < cols - 1 and tilemap[y, x + 1] == 0
            if west_floor and east_floor:
                tilemap[y, x] = Tile.FLOOR
                continue

            north_floor = y > 0 and tilemap[y - 1, x] == 0
            south_floor = y < rows - 1 and tilemap[y + 1, x] == 0
            if north_floor and south_floor:
                tilemap[y, x] = Tile.FLOOR

    for container in tree.leaves:
        room = container.room
        if room is None:
            continue
        area = props[room.y:room.down, room.x:room.right]
        area[area == PropType.SPIKES] = PropType.EMPTY


def is_colliding(x: int, y: int, side: TileDirection, tilemap: TileMap) -> bool:
    """True if the neighbor on `side` is solid. The grid edge counts as solid."""
    rows, cols = tilemap.shape
    if side == TileDirection.NORTH:
        return y == 0 or tilemap[y - 1, x] > 0
    if side == TileDirection.EAST:
        return x == cols - 1 or tilemap[y, x + 1] > 0
    if side == TileDirection.WEST:
        return x == 0 or tilemap[y, x - 1] > 0
    if side == TileDirection.SOUTH:
        return y == rows - 1 or tilemap[y + 1, x] > 0
    raise ValueError(f"Not a cardinal direction: {side!r}")


def get_tile_mask(x: int, y: int, tilemap: TileMap) -> int:
    mask = TileDirection.NONE
    for side in (
        TileDirection.WEST,
        TileDirection.EAST,
        TileDirection.NORTH,
        TileDirection.SOUTH,
    ):
        if is_colliding(x, y, side, tilemap):
            mask |= side
    return int(mask)


def generate_tile_mask(tilemap: TileMap) -> None:
    rows, cols = tilemap.shape
    for y in range(rows):
        for x in range(cols):
            if tilemap[y, x] > 0:
                tilemap[y, x] = get_tile_mask(x, y, tilemap)


def normalize_tile_mask(tilemap: TileMap) -> None:
    """
    Rewrites interior tiles that sit on an outer corner of a wall.

    The first matching rule wins:

        [x][ ]     [ ][x]     [ ]           [ ]
        [ ]           [ ]     [x][ ]     [ ][x]
         NWS         NES     |= NE        |= NW

    where [ ] is solid and the missing diagonal is floor.
    """
    rows, cols = tilemap.shape
    for y in range(1, rows - 1):
        for x in range(1, cols - 1):
            west = tilemap[y, x - 1] > 0
            east = tilemap[y, x + 1] > 0
            north = tilemap[y - 1, x] > 0
            south = tilemap[y + 1, x] > 0

            if east and south and tilemap[y + 1, x + 1] <= 0:
                tilemap[y, x] = DIRECTION_NWS
            elif west and south and tilemap[y + 1, x - 1] <= 0:
                tilemap[y, x] = DIRECTION_NES
            elif north and east and tilemap[y - 1, x + 1] <= 0:
                tilemap[y, x] = tilemap[y, x] | TileDirection.NORTH_EAST
            elif north and west and tilemap[y - 1, x - 1] <= 0:
                tilemap[y, x] = tilemap[y, x] | TileDirection.NORTH_WEST

    logger.debug("Normalized %dx%d tile mask", cols, rows)
