from dataclasses import dataclass

from point_quadtree.point import Point


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle anchored on its center.

    A region is stored as center coordinates plus half-extents, so the
    rectangle spans ``[x - w, x + w] x [y - h, y + h]``. The y axis grows
    downward (screen convention): ``top`` is the smaller y value.

    Attributes:
        x (float): Center x coordinate.
        y (float): Center y coordinate.
        w (float): Half-width, must be >= 0.
        h (float): Half-height, must be >= 0.

    Example:
        >>> Region(50, 50, 50, 50).contains_point(Point(0, 100))
        True
        >>> Region.screen_size(100, 50)
        Region(x=50.0, y=25.0, w=50.0, h=25.0)
        >>> Region.corners((10, 10), (0, 0)) == Region(5, 5, 5, 5)
        True

    """
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self):
        if not (self.w >= 0 and self.h >= 0):
            raise ValueError(
                f"half-extents must be non-negative, got w={self.w!r}, h={self.h!r}"
            )

    @classmethod
    def range(cls, x: float, y: float, radius: float) -> 'Region':
        """Square of half-extent ``radius`` centered on (x, y)"""
        return cls(x, y, radius, radius)

    @classmethod
    def corners(cls, top_left: tuple[float, float],
                bottom_right: tuple[float, float]) -> 'Region':
        """Rectangle spanning two opposite corners, in either order"""
        x = (top_left[0] + bottom_right[0]) / 2
        y = (top_left[1] + bottom_right[1]) / 2
        w = abs(top_left[0] - bottom_right[0]) / 2
        h = abs(top_left[1] - bottom_right[1]) / 2
        return cls(x, y, w, h)

    @classmethod
    def screen_size(cls, width: float, height: float) -> 'Region':
        """Rectangle covering [0, width] x [0, height]"""
        return cls(width / 2, height / 2, width / 2, height / 2)

    @property
    def left(self) -> float:
        return self.x - self.w

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y - self.h

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def as_corners(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """((left, top), (right, bottom)), handy for drawing outlines"""
        return (self.left, self.top), (self.right, self.bottom)

    def contains_point(self, point: Point) -> bool:
        """Inclusive containment: points on any edge are inside"""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def intersects(self, other: 'Region') -> bool:
        """Separating-axis overlap test; touching edges count as intersecting"""
        return not (other.left > self.right or
                    other.right < self.left or
                    other.top > self.bottom or
                    other.bottom < self.top)
