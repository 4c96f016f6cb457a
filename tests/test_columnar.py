import pytest
import pyarrow as pa
import numpy as np
from hypothesis import given, strategies as st

from point_quadtree.columnar import (
    boundaries_to_table,
    circle_mask,
    coordinates,
    points_to_table,
    region_mask,
    select,
)
from point_quadtree.point import Point
from point_quadtree.region import Region

points_st = st.lists(
    st.builds(Point, st.floats(-100, 100), st.floats(-100, 100), st.integers()),
    min_size=1,
    max_size=50
)


class TestColumnar:
    def test_coordinates(self):
        xs, ys = coordinates([Point(1, 2), Point(3.5, -4)])
        assert xs.type == pa.float64()
        assert xs.to_pylist() == [1.0, 3.5]
        assert ys.to_pylist() == [2.0, -4.0]

    @given(points_st, st.floats(-100, 100), st.floats(-100, 100),
           st.floats(0, 100), st.floats(0, 100))
    def test_region_mask_matches_contains_point(self, points, x, y, w, h):
        region = Region(x, y, w, h)
        mask = region_mask(points, region).to_pylist()
        assert mask == [region.contains_point(p) for p in points]

    def test_region_mask_edges(self):
        points = [Point(0, 0), Point(10, 10), Point(10.5, 5)]
        mask = region_mask(points, Region(5, 5, 5, 5))
        assert mask.to_pylist() == [True, True, False]

    def test_circle_mask_is_strict(self):
        points = [Point(60, 50), Point(59.999, 50), Point(50, 40), Point(50, 50)]
        mask = circle_mask(points, 50, 50, 10)
        assert mask.to_pylist() == [False, True, False, True]

    @given(points_st, st.floats(-100, 100), st.floats(-100, 100), st.floats(0, 100))
    def test_circle_mask_matches_numpy(self, points, x, y, r):
        xs = np.array([p.x for p in points], dtype=np.float64)
        ys = np.array([p.y for p in points], dtype=np.float64)
        dx, dy = xs - x, ys - y
        expected = (dx * dx + dy * dy) < r * r
        assert circle_mask(points, x, y, r).to_pylist() == expected.tolist()

    def test_select_keeps_order_and_identity(self):
        points = [Point(i, i, i) for i in range(5)]
        picked = select(points, pa.array([True, False, True, False, True]))
        assert [p.data for p in picked] == [0, 2, 4]
        assert picked[0] is points[0]

    def test_points_to_table(self):
        table = points_to_table([Point(1, 2, 'a'), Point(3, 4, 'b')])
        assert table.column_names == ['x', 'y', 'data']
        assert table.to_pydict() == {
            'x': [1.0, 3.0], 'y': [2.0, 4.0], 'data': ['a', 'b']
        }

    def test_points_to_table_empty(self):
        assert points_to_table([]).num_rows == 0

    def test_points_to_table_unconvertible_payload(self):
        with pytest.raises((pa.ArrowInvalid, pa.ArrowTypeError)):
            points_to_table([Point(0, 0, object())])

    def test_boundaries_to_table(self):
        table = boundaries_to_table([Region(50, 50, 50, 50), Region(25, 75, 25, 25)])
        assert table.column_names == [
            'x', 'y', 'w', 'h', 'left', 'top', 'right', 'bottom'
        ]
        cols = table.to_pydict()
        assert cols['left'] == [0.0, 0.0]
        assert cols['top'] == [0.0, 50.0]
        assert cols['right'] == [100.0, 50.0]
        assert cols['bottom'] == [100.0, 100.0]

# --------------------------
# Running Tests
# --------------------------
#if __name__ == "__main__":
#    pytest.main([
#        "-v", 
#        "--hypothesis-show-statistics",
#        "--cov=columnar",
#        "--cov-report=html:coverage"
#    ])
# --------------------------
