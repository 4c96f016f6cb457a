import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class Point(Generic[T]):
    """A 2D location carrying an arbitrary payload.

    Points are immutable values. The quadtree stores a copy of every
    inserted point and hands out fresh copies from every query, so mutating
    a payload obtained from a query never reaches into the tree.

    Attributes:
        x (float): Horizontal coordinate, converted to ``float``.
        y (float): Vertical coordinate, growing downward.
        data: Payload attached to the location.

    Example:
        >>> p = Point(25.0, 25.0, {'id': 7})
        >>> q = p.copy()
        >>> q == p, q.data is p.data
        (True, False)

    """
    x: float
    y: float
    data: T = None

    def __post_init__(self):
        # coordinates are always plain floats
        object.__setattr__(self, 'x', float(self.x))
        object.__setattr__(self, 'y', float(self.y))

    def copy(self) -> 'Point[T]':
        """Independent copy, payload included"""
        return Point(self.x, self.y, copy.deepcopy(self.data))
