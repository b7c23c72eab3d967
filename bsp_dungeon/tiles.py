from enum import Enum, IntEnum, IntFlag
from typing import Dict, FrozenSet


class Tile(IntEnum):
    """
    Raw tile ids used while carving, before the mask pass.

    Once generate_tile_mask() has run, solid cells hold a TileDirection
    mask instead of SOLID, and floor cells stay at FLOOR.
    """

    FLOOR = 0
    SOLID = 1


class TileDirection(IntFlag):
    """
    Bit flags for the autotiling mask of a solid tile.

    A flag is set when the neighbor on that side is also solid.
    The grid boundary always counts as solid.
    """

    NONE = 0

    # Cardinal neighbors (the 16 combinations of these are the plain masks)
    WEST = 1
    EAST = 2
    NORTH = 4
    SOUTH = 8

    # Diagonal notches, OR'd in by normalize_tile_mask()
    NORTH_EAST = 16
    NORTH_WEST = 32


# Outer corner overrides forced by normalize_tile_mask()
DIRECTION_NWS = TileDirection.NORTH | TileDirection.WEST | TileDirection.SOUTH
DIRECTION_NES = TileDirection.NORTH | TileDirection.EAST | TileDirection.SOUTH

# Every value a tile can hold after normalization
CARDINAL_MASKS: FrozenSet[int] = frozenset(range(16))
MASK_VALUES: FrozenSet[int] = frozenset(
    CARDINAL_MASKS
    | {mask | TileDirection.NORTH_EAST for mask in CARDINAL_MASKS}
    | {mask | TileDirection.NORTH_WEST for mask in CARDINAL_MASKS}
)


class PropType(IntEnum):
    """Prop ids stored in the prop grid."""

    EMPTY = 0
    SPIKES = 1


class MonsterType(Enum):
    """Monster kinds, with the weights used when rolling a monster."""

    BANDIT = "bandit"
    SKELETON = "skeleton"
    TROLL = "troll"
    MUSHROOM = "mushroom"


MONSTER_WEIGHTS: Dict[MonsterType, float] = {
    MonsterType.BANDIT: 0.5,
    MonsterType.SKELETON: 0.3,
    MonsterType.TROLL: 0.15,
    MonsterType.MUSHROOM: 0.05,
}
