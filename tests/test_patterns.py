"""Tests for the hole and trap pattern libraries."""

import dataclasses

import pytest

from bsp_dungeon.patterns import HOLE_LEGEND, HOLES, TRAP_LEGEND, TRAPS, Pattern
from bsp_dungeon.tiles import PropType, Tile


class TestPatternLibraries:
    """Validate the shipped patterns are well formed."""

    @pytest.mark.parametrize("pattern", HOLES + tuple(TRAPS.values()), ids=lambda p: p.name)
    def test_dimensions_match_tiles(self, pattern: Pattern):
        assert len(pattern.tiles) == pattern.height
        for row in pattern.tiles:
            assert len(row) == pattern.width

    def test_holes_are_ordered_largest_first(self):
        areas = [hole.width * hole.height for hole in HOLES]

        assert areas == sorted(areas, reverse=True)

    @pytest.mark.parametrize("hole", HOLES, ids=lambda p: p.name)
    def test_holes_only_hold_tiles(self, hole: Pattern):
        values = {value for row in hole.tiles for value in row}

        assert values <= {Tile.FLOOR, Tile.SOLID}
        assert Tile.SOLID in values

    @pytest.mark.parametrize("hole", HOLES, ids=lambda p: p.name)
    def test_hole_walls_are_never_one_tile_thick(self, hole: Pattern):
        def solid(x, y):
            return 0 <= x < hole.width and 0 <= y < hole.height and hole.tiles[y][x] == Tile.SOLID

        for y in range(hole.height):
            for x in range(hole.width):
                if solid(x, y):
                    assert solid(x - 1, y) or solid(x + 1, y)
                    assert solid(x, y - 1) or solid(x, y + 1)

    def test_trap_shapes(self):
        assert set(TRAPS) == {"small_wide", "small_long"}
        assert (TRAPS["small_wide"].width, TRAPS["small_wide"].height) == (4, 2)
        assert (TRAPS["small_long"].width, TRAPS["small_long"].height) == (2, 4)

    def test_traps_hold_spikes(self):
        for trap in TRAPS.values():
            assert {value for row in trap.tiles for value in row} == {PropType.SPIKES}


class TestFromAscii:
    def test_parses_rows(self):
        pattern = Pattern.from_ascii("test", ["#.", ".#"], HOLE_LEGEND)

        assert (pattern.width, pattern.height) == (2, 2)
        assert pattern.tiles == ((1, 0), (0, 1))

    def test_ragged_rows_raise(self):
        with pytest.raises(ValueError, match="row 1"):
            Pattern.from_ascii("ragged", ["###", "##"], HOLE_LEGEND)

    def test_unknown_character_raises(self):
        with pytest.raises(ValueError, match="unknown character"):
            Pattern.from_ascii("bad", ["#?"], HOLE_LEGEND)

    def test_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            Pattern.from_ascii("empty", [], TRAP_LEGEND)

    def test_patterns_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            HOLES[0].width = 1

    def test_fits_in_half_the_size(self):
        pattern = Pattern.from_ascii("block", ["xx"] * 3, TRAP_LEGEND)

        assert pattern.fits_in(4, 6)
        assert not pattern.fits_in(3, 6)
        assert not pattern.fits_in(4, 5)
