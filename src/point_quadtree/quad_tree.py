import copy
import logging
from typing import Generic, Optional, TypeVar

import pyarrow as pa

from point_quadtree import columnar
from point_quadtree.point import Point
from point_quadtree.region import Region

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_CAPACITY = 4
DEFAULT_MAX_DEPTH = 32


def _halves_tile(center: float, half: float) -> bool:
    """True if the two halves of [center - half, center + half] leave no gap"""
    quarter = half / 2
    lo, hi = center - quarter, center + quarter
    return (lo != center and hi != center and
            lo - quarter <= center - half and
            hi + quarter >= center + half and
            lo + quarter >= hi - quarter)


class QuadTree(Generic[T]):
    """Point quadtree with rectangle and circle region queries.

    Each node stores up to ``capacity`` points directly. The first insert
    that finds a node full splits it into four equal quadrants (top-left,
    top-right, bottom-left, bottom-right; y grows downward) and every later
    point is routed to the first quadrant whose boundary contains it. Points
    already stored in a node stay where they are.

    Queries walk the tree recursively and skip every subtree whose boundary
    does not intersect the query region. Results are copies of the stored
    points, ordered by node (own points first, then TL, TR, BL, BR).

    Attributes:
        boundary (Region): Area covered by this node, fixed for its lifetime.
        capacity (int): Points stored directly before routing to children.
        depth (int): Distance from the root (internal use).
        max_depth (int): Depth at which nodes stop subdividing and store
            points past ``capacity``. Nodes too small to split exactly in
            floating point behave the same way.
        points (list[Point]): Points held by this node, in insertion order.
        children (tuple[QuadTree, ...] | None): The four quadrants in TL, TR,
            BL, BR order once subdivided, otherwise ``None``.

    Example:
        >>> qt = QuadTree(Region(50, 50, 50, 50), capacity=4)
        >>> qt.insert(Point(25, 25, 'a'))
        True
        >>> qt.insert(Point(150, 25, 'b'))  # outside the boundary
        False
        >>> [p.data for p in qt.query_circle(20, 20, 10)]
        ['a']

    """
    def __init__(self, boundary: Region, capacity: int = DEFAULT_CAPACITY,
                 max_depth: int = DEFAULT_MAX_DEPTH, depth: int = 0):
        if not isinstance(boundary, Region):
            raise TypeError("boundary must be a Region")
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity!r}")
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth!r}")
        self.boundary = boundary
        self.capacity = capacity
        self.max_depth = max_depth
        self.depth = depth
        self.points: list[Point[T]] = []
        self.children: Optional[tuple['QuadTree[T]', ...]] = None

    @property
    def divided(self) -> bool:
        return self.children is not None

    @property
    def top_left(self) -> Optional['QuadTree[T]']:
        return self.children[0] if self.children else None

    @property
    def top_right(self) -> Optional['QuadTree[T]']:
        return self.children[1] if self.children else None

    @property
    def bottom_left(self) -> Optional['QuadTree[T]']:
        return self.children[2] if self.children else None

    @property
    def bottom_right(self) -> Optional['QuadTree[T]']:
        return self.children[3] if self.children else None

    def __len__(self) -> int:
        total = len(self.points)
        if self.children:
            total += sum(len(child) for child in self.children)
        return total

    def __repr__(self) -> str:
        return (f"QuadTree(boundary={self.boundary!r}, capacity={self.capacity}, "
                f"points={len(self)}, divided={self.divided})")

    def insert(self, point: Point[T]) -> bool:
        """Store a copy of ``point``.

        Walks down to the node that keeps the point: a leaf with room, or a
        leaf that may not split further (``max_depth`` reached, or halving
        its boundary would not tile it exactly in floating point).

        Returns:
            True if the point was stored, False if it lies outside this
            node's boundary.
        """
        if not self.boundary.contains_point(point):
            if self.depth == 0:
                logger.debug("Rejected point (%s, %s) outside %r",
                             point.x, point.y, self.boundary)
            return False

        node = self
        while True:
            if node.children is None:
                if len(node.points) < node.capacity or not node.can_subdivide():
                    node.points.append(point.copy())
                    return True
                node.subdivide()

            for child in node.children:
                if child.boundary.contains_point(point):
                    node = child
                    break
            else:
                return False

    def can_subdivide(self) -> bool:
        """Whether splitting this node yields four quadrants covering it exactly"""
        if self.depth >= self.max_depth:
            return False
        return (_halves_tile(self.boundary.x, self.boundary.w) and
                _halves_tile(self.boundary.y, self.boundary.h))

    def subdivide(self):
        """Create the four quadrant children. Only valid once per node."""
        if self.children is not None:
            raise RuntimeError("node is already subdivided")

        x, y = self.boundary.x, self.boundary.y
        hw, hh = self.boundary.w / 2, self.boundary.h / 2
        quadrants = (
            Region(x - hw, y - hh, hw, hh),  # top left
            Region(x + hw, y - hh, hw, hh),  # top right
            Region(x - hw, y + hh, hw, hh),  # bottom left
            Region(x + hw, y + hh, hw, hh)   # bottom right
        )
        self.children = tuple(
            QuadTree(q, self.capacity, self.max_depth, self.depth + 1)
            for q in quadrants
        )
        logger.debug("Subdivided %r at depth %d", self.boundary, self.depth)

    def query_rect(self, region: Region) -> list[Point[T]]:
        """Copies of every stored point inside ``region`` (edges inclusive)"""
        found = []
        if not self.boundary.intersects(region):
            return found

        if self.points:
            mask = columnar.region_mask(self.points, region)
            found.extend(p.copy() for p in columnar.select(self.points, mask))

        if self.children:
            for child in self.children:
                found.extend(child.query_rect(region))
        return found

    def query_circle(self, x: float, y: float, radius: float) -> list[Point[T]]:
        """Copies of every stored point strictly closer than ``radius`` to (x, y)"""
        candidates = self.query_rect(Region.range(x, y, radius))
        if not candidates:
            return candidates
        mask = columnar.circle_mask(candidates, x, y, radius)
        return columnar.select(candidates, mask)

    def collect(self) -> list[Point[T]]:
        """Copies of every point in this subtree, in query order"""
        return self.query_rect(self.boundary)

    def enumerate_boundaries(self) -> list[Region]:
        """This node's boundary followed by every descendant's, depth first"""
        rects = [self.boundary]
        if self.children:
            for child in self.children:
                rects.extend(child.enumerate_boundaries())
        return rects

    def reset(self):
        """Drop all points and children, keeping boundary and capacity"""
        self.points = []
        self.children = None
        if self.depth == 0:
            logger.debug("Reset quadtree over %r", self.boundary)

    def copy(self) -> 'QuadTree[T]':
        """Deep, independent clone of this subtree"""
        return copy.deepcopy(self)

    def to_arrow(self) -> pa.Table:
        """Points of this subtree as an Arrow table (x, y, data)"""
        return columnar.points_to_table(self.collect())

    def boundaries_to_arrow(self) -> pa.Table:
        """Node boundaries of this subtree as an Arrow table"""
        return columnar.boundaries_to_table(self.enumerate_boundaries())
