from dataclasses import dataclass
from typing import Dict, Mapping, Sequence, Tuple

from .tiles import PropType, Tile


# ASCII Art Dialect for Patterns
# ==============================
#
# Hole patterns are stamped into the middle of a room, tile for tile:
#   # = solid (Tile.SOLID)
#   . = floor (Tile.FLOOR)
#
# Trap patterns only contribute their shape. Every cell of the footprint
# becomes PropType.SPIKES when stamped, whatever character it holds, so
# traps are drawn with 'x' throughout.
#
# A hole must be at most half the room's width and height to be used,
# so the library is ordered largest first and the first fit wins.
#
# Clean-up erases any solid tile with floor on both sides, so every solid
# cell needs a solid neighbor both horizontally and vertically. Pillars
# are 2x2 blocks.

HOLE_LEGEND: Dict[str, int] = {
    "#": Tile.SOLID,
    ".": Tile.FLOOR,
}

TRAP_LEGEND: Dict[str, int] = {
    "x": PropType.SPIKES,
}


@dataclass(frozen=True)
class Pattern:
    """A small fixed stamp of tile or prop ids. Never mutated."""

    name: str
    width: int
    height: int
    tiles: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_ascii(
        cls, name: str, rows: Sequence[str], legend: Mapping[str, int]
    ) -> "Pattern":
        """
        Build a pattern from ASCII art rows.

        Raises:
            ValueError: If the rows are ragged, empty, or use a character
                missing from the legend.
        """
        if not rows or not rows[0]:
            raise ValueError(f"Pattern '{name}' is empty")
        width = len(rows[0])
        parsed = []
        for row_idx, line in enumerate(rows):
            if len(line) != width:
                raise ValueError(
                    f"Pattern '{name}' row {row_idx}: expected {width} columns, "
                    f"found {len(line)}"
                )
            try:
                parsed.append(tuple(int(legend[char]) for char in line))
            except KeyError as e:
                raise ValueError(
                    f"Pattern '{name}' row {row_idx}: unknown character {e}"
                ) from None
        return cls(name=name, width=width, height=len(rows), tiles=tuple(parsed))

    def fits_in(self, width: int, height: int) -> bool:
        """True if this pattern is at most half of the given width and height."""
        return self.width * 2 <= width and self.height * 2 <= height


HOLES: Tuple[Pattern, ...] = (
    Pattern.from_ascii(
        "pillars_large",
        [
            "##.##.##",
            "##.##.##",
            "........",
            "##.##.##",
            "##.##.##",
        ],
        HOLE_LEGEND,
    ),
    Pattern.from_ascii(
        "pit_large",
        [
            ".####.",
            "######",
            "######",
            ".####.",
        ],
        HOLE_LEGEND,
    ),
    Pattern.from_ascii(
        "pillars_small",
        [
            "##.##",
            "##.##",
        ],
        HOLE_LEGEND,
    ),
    Pattern.from_ascii(
        "pit_small",
        [
            "##",
            "##",
        ],
        HOLE_LEGEND,
    ),
)


TRAPS: Dict[str, Pattern] = {
    # Horizontal corridors
    "small_wide": Pattern.from_ascii(
        "small_wide",
        [
            "xxxx",
            "xxxx",
        ],
        TRAP_LEGEND,
    ),
    # Vertical corridors
    "small_long": Pattern.from_ascii(
        "small_long",
        [
            "xx",
            "xx",
            "xx",
            "xx",
        ],
        TRAP_LEGEND,
    ),
}
