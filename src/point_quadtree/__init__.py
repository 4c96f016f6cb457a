"""Point quadtree with rectangle and circle region queries."""
from point_quadtree.columnar import boundaries_to_table, points_to_table
from point_quadtree.point import Point
from point_quadtree.quad_tree import DEFAULT_CAPACITY, DEFAULT_MAX_DEPTH, QuadTree
from point_quadtree.region import Region

__all__ = [
    'DEFAULT_CAPACITY',
    'DEFAULT_MAX_DEPTH',
    'Point',
    'QuadTree',
    'Region',
    'boundaries_to_table',
    'points_to_table',
]
