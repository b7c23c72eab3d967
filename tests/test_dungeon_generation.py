"""Tests for whole-dungeon generation."""

import json
import random

import numpy as np
import pytest

from bsp_dungeon.config import DEFAULT_ARGS, DungeonArgs
from bsp_dungeon.dungeon_gen import Dungeon, generate_dungeon
from bsp_dungeon.errors import GenerationError
from bsp_dungeon.patterns import TRAPS
from bsp_dungeon.tiles import MASK_VALUES, PropType


def make_args(**overrides) -> DungeonArgs:
    return DungeonArgs(**{**DEFAULT_ARGS, **overrides})


class TestDungeonGeneration:
    """Test the complete pipeline with the command-line defaults."""

    def test_default_dungeon(self):
        dungeon = generate_dungeon(make_args(), rng=42)

        assert isinstance(dungeon, Dungeon)
        assert (dungeon.width, dungeon.height) == (64, 48)
        assert dungeon.tilemap.shape == (48, 64)
        assert dungeon.props.shape == (48, 64)
        assert len(dungeon.tree.leaves) == 16
        assert len(dungeon.rooms) <= 16
        assert len(dungeon.corridors) == 15

    @pytest.mark.parametrize("seed", range(10))
    def test_tile_values_are_known_masks(self, seed: int):
        dungeon = generate_dungeon(make_args(), rng=seed)

        assert set(np.unique(dungeon.tilemap).tolist()) <= MASK_VALUES
        assert set(np.unique(dungeon.props).tolist()) <= {PropType.EMPTY, PropType.SPIKES}

    def test_map_has_floor_and_walls(self):
        dungeon = generate_dungeon(make_args(), rng=42)

        assert (dungeon.tilemap == 0).any()
        assert (dungeon.tilemap > 0).any()

    def test_same_seed_same_dungeon(self):
        first = generate_dungeon(make_args(), rng=123)
        second = generate_dungeon(make_args(), rng=123)

        assert np.array_equal(first.tilemap, second.tilemap)
        assert np.array_equal(first.props, second.props)
        assert first.to_dict() == second.to_dict()

    def test_random_instance_is_accepted(self):
        first = generate_dungeon(make_args(), rng=random.Random(8))
        second = generate_dungeon(make_args(), rng=8)

        assert first.to_dict() == second.to_dict()

    def test_different_seeds_differ(self):
        first = generate_dungeon(make_args(), rng=1)
        second = generate_dungeon(make_args(), rng=2)

        assert first.to_dict() != second.to_dict()


class TestChances:
    def test_no_holes(self):
        dungeon = generate_dungeon(make_args(room_hole_chance=0), rng=42)

        assert all(room.holes is None for room in dungeon.rooms)

    def test_every_corridor_trapped(self):
        dungeon = generate_dungeon(make_args(corridor_trap_chance=1), rng=42)

        for corridor in dungeon.corridors:
            assert corridor.traps in (TRAPS["small_wide"], TRAPS["small_long"])
        for room in dungeon.rooms:
            area = dungeon.props[room.y:room.down, room.x:room.right]
            assert not (area == PropType.SPIKES).any()

    def test_no_traps(self):
        dungeon = generate_dungeon(make_args(corridor_trap_chance=0), rng=42)

        assert all(corridor.traps is None for corridor in dungeon.corridors)
        assert (dungeon.props == PropType.EMPTY).all()


class TestMonsters:
    @pytest.mark.parametrize("seed", range(5))
    def test_monsters_inside_room_interiors(self, seed: int):
        args = make_args()
        dungeon = generate_dungeon(args, rng=seed)
        gutter = args.room_gutter_width

        per_room = {id(room): 0 for room in dungeon.rooms}
        for monster in dungeon.monsters:
            owners = [
                room
                for room in dungeon.rooms
                if room.x + gutter <= monster.x <= room.right - gutter
                and room.y + gutter <= monster.y <= room.down - gutter
            ]
            assert len(owners) == 1
            per_room[id(owners[0])] += 1

        assert all(count <= args.room_max_monsters for count in per_room.values())

    def test_no_monsters(self):
        dungeon = generate_dungeon(make_args(room_max_monsters=0), rng=42)

        assert dungeon.monsters == []


class TestParameters:
    def test_camel_case_mapping(self):
        camel = {
            "mapWidth": 64,
            "mapHeight": 48,
            "mapGutterWidth": 1,
            "iterations": 4,
            "containerGutterWidth": 1,
            "containerWidthRatio": 0.45,
            "containerHeightRatio": 0.45,
            "roomGutterWidth": 1,
            "roomMaxMonsters": 3,
            "roomMinSize": 4,
            "roomHoleChance": 0.5,
            "corridorWidth": 2,
            "corridorTrapChance": 0.3,
        }

        from_camel = generate_dungeon(camel, rng=5)
        from_args = generate_dungeon(make_args(), rng=5)

        assert from_camel.to_dict() == from_args.to_dict()

    def test_impossible_ratios(self):
        args = make_args(container_width_ratio=0.99, container_height_ratio=0.99)

        with pytest.raises(GenerationError, match="Could not split"):
            generate_dungeon(args, rng=42)

    def test_bad_chance(self):
        with pytest.raises(GenerationError, match="room_hole_chance"):
            generate_dungeon(make_args(room_hole_chance=1.5), rng=42)

    def test_missing_parameter(self):
        data = dict(DEFAULT_ARGS)
        del data["iterations"]

        with pytest.raises(GenerationError, match="iterations"):
            generate_dungeon(data, rng=42)

    def test_unknown_parameter(self):
        with pytest.raises(GenerationError, match="Unknown"):
            generate_dungeon({**DEFAULT_ARGS, "lava_chance": 0.5}, rng=42)

    def test_zero_iterations(self):
        dungeon = generate_dungeon(make_args(iterations=0), rng=42)

        assert dungeon.tree.is_leaf
        assert dungeon.corridors == []
        assert len(dungeon.rooms) == 1


class TestExport:
    def test_grids_are_read_only(self):
        dungeon = generate_dungeon(make_args(), rng=42)

        with pytest.raises(ValueError):
            dungeon.tilemap[0, 0] = 0
        with pytest.raises(ValueError):
            dungeon.props[0, 0] = PropType.SPIKES

    def test_to_dict_is_json_ready(self):
        dungeon = generate_dungeon(make_args(corridor_trap_chance=1, room_hole_chance=1), rng=42)

        data = json.loads(json.dumps(dungeon.to_dict()))

        assert data["width"] == 64
        assert len(data["tilemap"]) == 48
        assert len(data["tilemap"][0]) == 64
        assert data["tree"]["corridor"]["traps"] in ("small_wide", "small_long")
        assert len(data["monsters"]) == len(dungeon.monsters)
        for monster in data["monsters"]:
            assert monster["type"] in ("bandit", "skeleton", "troll", "mushroom")
