import pyarrow as pa
import pyarrow.compute as pc

from point_quadtree.point import Point
from point_quadtree.region import Region

BOUNDARY_SCHEMA = pa.schema([
    ('x', pa.float64()),
    ('y', pa.float64()),
    ('w', pa.float64()),
    ('h', pa.float64()),
    ('left', pa.float64()),
    ('top', pa.float64()),
    ('right', pa.float64()),
    ('bottom', pa.float64())
])


def coordinates(points: list[Point]) -> tuple[pa.DoubleArray, pa.DoubleArray]:
    """Split points into x and y float64 columns"""
    xs = pa.array([p.x for p in points], type=pa.float64())
    ys = pa.array([p.y for p in points], type=pa.float64())
    return xs, ys


def region_mask(points: list[Point], region: Region) -> pa.BooleanArray:
    """Arrow-vectorized inclusive containment check.

    Matches ``region.contains_point`` element-wise: a point lying on any of
    the four edges is inside.
    """
    xs, ys = coordinates(points)
    return pc.and_(
        pc.and_(
            pc.greater_equal(xs, region.left),
            pc.less_equal(xs, region.right)
        ),
        pc.and_(
            pc.greater_equal(ys, region.top),
            pc.less_equal(ys, region.bottom)
        )
    )


def circle_mask(points: list[Point], x: float, y: float,
                radius: float) -> pa.BooleanArray:
    """Points strictly closer than ``radius`` to (x, y).

    Compares squared distances, so no square root is taken per point.
    """
    xs, ys = coordinates(points)
    dx = pc.subtract(xs, x)
    dy = pc.subtract(ys, y)
    dist = pc.add(pc.multiply(dx, dx), pc.multiply(dy, dy))
    return pc.less(dist, radius * radius)


def select(points: list[Point], mask: pa.BooleanArray) -> list[Point]:
    """Points whose mask entry is true, in their original order"""
    return [p for p, keep in zip(points, mask.to_pylist()) if keep]


def points_to_table(points: list[Point]) -> pa.Table:
    """Columnar view of points: x, y and the payload column.

    The payload column type is inferred by Arrow; payloads Arrow cannot
    convert raise ``pa.ArrowInvalid`` / ``pa.ArrowTypeError``.
    """
    xs, ys = coordinates(points)
    return pa.table({
        'x': xs,
        'y': ys,
        'data': pa.array([p.data for p in points])
    })


def boundaries_to_table(regions: list[Region]) -> pa.Table:
    """Columnar view of regions with their edges precomputed"""
    xs = pa.array([r.x for r in regions], type=pa.float64())
    ys = pa.array([r.y for r in regions], type=pa.float64())
    ws = pa.array([r.w for r in regions], type=pa.float64())
    hs = pa.array([r.h for r in regions], type=pa.float64())
    return pa.Table.from_arrays([
        xs, ys, ws, hs,
        pc.subtract(xs, ws),
        pc.subtract(ys, hs),
        pc.add(xs, ws),
        pc.add(ys, hs)
    ], schema=BOUNDARY_SCHEMA)
