"""Board geometry: ray directions and distance-to-edge tables."""

from __future__ import annotations

from termchess.core.types import Square, file_of, row_of

# south north east west south-east north-west south-west north-east
DIRECTION_OFFSETS: tuple[int, ...] = (8, -8, 1, -1, 9, -9, 7, -7)

ORTHOGONAL = range(0, 4)
DIAGONAL = range(4, 8)
ALL_DIRECTIONS = range(0, 8)


def _edge_distances(sq: Square) -> tuple[int, ...]:
    file_idx = file_of(sq)
    row_idx = row_of(sq)

    south = 7 - row_idx
    north = row_idx
    east = 7 - file_idx
    west = file_idx

    return (
        south,
        north,
        east,
        west,
        min(south, east),
        min(north, west),
        min(south, west),
        min(north, east),
    )


_DISTANCE_TO_EDGE: tuple[tuple[int, ...], ...] = tuple(
    _edge_distances(sq) for sq in range(64)
)


def distance_to_edge(sq: Square) -> tuple[int, ...]:
    """Squares between *sq* and the edge in each of the eight directions.

    Ordered like :data:`DIRECTION_OFFSETS`.
    """
    return _DISTANCE_TO_EDGE[sq]
