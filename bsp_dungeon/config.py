import argparse
import re
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping

from .errors import GenerationError
from .geometry import Container


@dataclass
class DungeonArgs:
    """Tunable parameters for one dungeon generation. All are required."""

    map_width: int
    map_height: int
    # Inset of the top-most container from the map edges
    map_gutter_width: int
    # Depth of the partition tree
    iterations: int
    container_gutter_width: int
    # Minimum width/height of a child after a vertical split
    container_width_ratio: float
    # Minimum height/width of a child after a horizontal split
    container_height_ratio: float
    room_gutter_width: int
    room_max_monsters: int
    # Rooms narrower or shorter than this are discarded
    room_min_size: int
    room_hole_chance: float
    corridor_width: int
    corridor_trap_chance: float

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DungeonArgs":
        """
        Build args from a mapping with snake_case or camelCase keys.

        Raises:
            GenerationError: If a key is unknown or a parameter is missing.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _snake_case(key)
            if name not in known:
                raise GenerationError(f"Unknown dungeon parameter '{key}'")
            values[name] = value
        missing = known - values.keys()
        if missing:
            raise GenerationError(
                f"Missing dungeon parameters: {', '.join(sorted(missing))}"
            )
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def root_container(self) -> Container:
        """The map rectangle, inset by the map gutter on every side."""
        return Container(
            x=self.map_gutter_width,
            y=self.map_gutter_width,
            width=self.map_width - self.map_gutter_width * 2,
            height=self.map_height - self.map_gutter_width * 2,
        )

    def validate(self) -> None:
        """
        Reject parameter sets that make generation structurally impossible.

        Parameters that merely produce small or empty dungeons (no rooms,
        no holes, no monsters) are accepted.

        Raises:
            GenerationError: Describing the first offending parameter.
        """
        if self.map_width < 1 or self.map_height < 1:
            raise GenerationError(
                f"Map must be at least 1x1, got {self.map_width}x{self.map_height}"
            )
        if self.map_gutter_width < 0:
            raise GenerationError("map_gutter_width must not be negative")
        root = self.root_container()
        if root.width < 1 or root.height < 1:
            raise GenerationError(
                f"Map gutter {self.map_gutter_width} leaves no room inside a "
                f"{self.map_width}x{self.map_height} map"
            )
        if self.iterations < 0:
            raise GenerationError("iterations must not be negative")
        for name in ("container_gutter_width", "room_gutter_width", "room_max_monsters"):
            if getattr(self, name) < 0:
                raise GenerationError(f"{name} must not be negative")
        if self.container_width_ratio < 0 or self.container_height_ratio < 0:
            raise GenerationError("Container ratios must not be negative")
        for name in ("room_hole_chance", "corridor_trap_chance"):
            chance = getattr(self, name)
            if not 0 <= chance <= 1:
                raise GenerationError(f"{name} must be between 0 and 1, got {chance}")
        if self.corridor_width <= 0:
            raise GenerationError("corridor_width must be positive")


def _snake_case(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


# Defaults offered by the command-line tools. The generator itself has none.
DEFAULT_ARGS: Dict[str, Any] = {
    "map_width": 64,
    "map_height": 48,
    "map_gutter_width": 1,
    "iterations": 4,
    "container_gutter_width": 1,
    "container_width_ratio": 0.45,
    "container_height_ratio": 0.45,
    "room_gutter_width": 1,
    "room_max_monsters": 3,
    "room_min_size": 4,
    "room_hole_chance": 0.5,
    "corridor_width": 2,
    "corridor_trap_chance": 0.3,
}


def add_dungeon_arguments(parser: argparse.ArgumentParser) -> None:
    """Adds one --flag per DungeonArgs field, defaulting to DEFAULT_ARGS."""
    group = parser.add_argument_group("dungeon parameters")
    for f in fields(DungeonArgs):
        default = DEFAULT_ARGS[f.name]
        group.add_argument(
            "--" + f.name.replace("_", "-"),
            type=type(default),
            default=default,
            help=f"(default: {default})",
        )


def args_from_namespace(namespace: argparse.Namespace) -> DungeonArgs:
    return DungeonArgs(**{f.name: getattr(namespace, f.name) for f in fields(DungeonArgs)})
