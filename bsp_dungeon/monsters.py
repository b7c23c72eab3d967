"""
Monster placement.

Monsters are scattered over each room's interior with a blue-noise point
sampler, so they never spawn on top of each other. The default sampler is
scipy's Poisson disk sampler; anything matching ScatterSampler can stand
in for it (tests use fixed point lists).
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np
from scipy.stats import qmc

from .config import DungeonArgs
from .geometry import TreeNode
from .tiles import MONSTER_WEIGHTS, MonsterType

logger = logging.getLogger(__name__)

MONSTER_MIN_SPACING: float = 1.5
MONSTER_MAX_SPACING: float = 4.0
MONSTER_SAMPLE_TRIES: int = 10
MONSTER_RADIUS: int = 3

# (shape, min_distance, max_distance, tries, rng) -> array of (x, y) points
ScatterSampler = Callable[
    [Tuple[float, float], float, float, int, np.random.Generator], np.ndarray
]


@dataclass
class Monster:
    x: float
    y: float
    radius: int
    type: MonsterType


def poisson_disc_points(
    shape: Tuple[float, float],
    min_distance: float,
    max_distance: float,
    tries: int,
    rng: np.random.Generator,
) -> np.ndarray:
    """
    Fills a width x height box with Poisson disk distributed points.

    No two points are closer than min_distance. scipy draws each new
    candidate from the annulus [min_distance, 2 * min_distance] around an
    existing point, so max_distance is not passed through.

    Returns:
        Array of shape (n, 2) with x in [0, width) and y in [0, height).
    """
    width, height = shape
    sampler = qmc.PoissonDisk(
        d=2,
        radius=min_distance,
        ncandidates=tries,
        rng=rng,
        l_bounds=[0, 0],
        u_bounds=[width, height],
    )
    return sampler.fill_space()


def place_monsters(
    tree: TreeNode,
    args: DungeonArgs,
    rng: random.Random,
    sampler: ScatterSampler = poisson_disc_points,
) -> List[Monster]:
    """Scatters up to args.room_max_monsters monsters in every room."""
    monsters: List[Monster] = []
    types = list(MONSTER_WEIGHTS)
    weights = list(MONSTER_WEIGHTS.values())

    for container in tree.leaves:
        room = container.room
        if room is None:
            continue

        gutter = args.room_gutter_width
        shape = (room.width - gutter * 2, room.height - gutter * 2)
        if shape[0] <= 0 or shape[1] <= 0:
            continue

        points = sampler(
            shape,
            MONSTER_MIN_SPACING,
            MONSTER_MAX_SPACING,
            MONSTER_SAMPLE_TRIES,
            np.random.default_rng(rng.getrandbits(64)),
        )
        points = [(float(px), float(py)) for px, py in points]
        rng.shuffle(points)

        for px, py in points[: args.room_max_monsters]:
            monsters.append(
                Monster(
                    x=room.x + gutter + px,
                    y=room.y + gutter + py,
                    radius=MONSTER_RADIUS,
                    type=rng.choices(types, weights=weights)[0],
                )
            )

    logger.debug("Placed %d monsters", len(monsters))
    return monsters
