"""
Geometry primitives for the partition tree.

Everything is measured in tiles. Rectangles are half-open: a rect covers
columns x .. right - 1 and rows y .. down - 1.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Iterator, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .patterns import Pattern


@dataclass(frozen=True)
class Point:
    """A point on the map, in tiles. Centers may be fractional."""

    x: float
    y: float


@dataclass
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def down(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(x=self.x + self.width / 2, y=self.y + self.height / 2)

    def contains_rect(self, other: "Rect") -> bool:
        """True if other lies entirely inside this rect."""
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.down <= self.down
        )

    def contains_point(self, x: float, y: float) -> bool:
        return self.x <= x <= self.right and self.y <= y <= self.down


@dataclass
class Room(Rect):
    holes: Optional["Pattern"] = None


@dataclass
class Corridor(Rect):
    # "horizontal" or "vertical", fixed when the corridor is built
    direction: str = "horizontal"
    traps: Optional["Pattern"] = None


@dataclass
class Container(Rect):
    """A rectangle of the spatial partition. Leaves may own a room."""

    room: Optional[Room] = None


@dataclass(eq=False)
class TreeNode:
    """
    A node of the partition tree.

    Internal nodes have both children and, once corridors are placed,
    a corridor joining them. Leaves have neither.
    """

    container: Container
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None
    corridor: Optional[Corridor] = field(default=None)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def leaves(self) -> List[Container]:
        """Leaf containers of this subtree, left to right."""
        if self.left is None or self.right is None:
            return [self.container]
        return self.left.leaves + self.right.leaves

    @cached_property
    def anchor(self) -> Point:
        """
        Representative point of this subtree, used as a corridor endpoint.

        This is the center of the rectangle covered by the subtree. Siblings
        come from one axis-aligned split, so their anchors always share
        either x or y.
        """
        return self.container.center

    def walk(self) -> Iterator["TreeNode"]:
        """Yields every node of this subtree in pre-order."""
        yield self
        if self.left is not None:
            yield from self.left.walk()
        if self.right is not None:
            yield from self.right.walk()

    @property
    def depth(self) -> int:
        """Number of levels below this node (0 for a leaf)."""
        if self.left is None or self.right is None:
            return 0
        return 1 + max(self.left.depth, self.right.depth)
