"""Procedural BSP dungeon generation."""

from bsp_dungeon.config import DungeonArgs
from bsp_dungeon.errors import GenerationError
from bsp_dungeon.geometry import Container, Corridor, Point, Rect, Room, TreeNode
from bsp_dungeon.tiles import (
    DIRECTION_NES,
    DIRECTION_NWS,
    MASK_VALUES,
    MonsterType,
    PropType,
    Tile,
    TileDirection,
)
from bsp_dungeon.patterns import HOLES, TRAPS, Pattern
from bsp_dungeon.partition import build_tree, split_container
from bsp_dungeon.rooms import place_rooms
from bsp_dungeon.corridors import place_corridors
from bsp_dungeon.monsters import Monster, place_monsters, poisson_disc_points
from bsp_dungeon.tilemap import TileMap, rasterize
from bsp_dungeon.dungeon_gen import Dungeon, generate_dungeon
from bsp_dungeon.rendering import render_ascii, render_image
