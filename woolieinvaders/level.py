"""The fixed layout of the shop level: solid tiles and enemy spawn points."""

from __future__ import annotations

from .rng import make_generator
from .vectors import Vector2Int

LEVEL_WIDTH = 25
LEVEL_HEIGHT = 19

# Tile indices in row-major order. A further row below the bottom wall is
# unreachable and therefore left out.
_SOLID_TILE_INDICES: tuple[int, ...] = (
    *range(0, 62), *range(71, 76),
    *range(89, 95), 98, 99,
    100, 124,
    125, 149,
    150, 160, 163, 166, 169, 171, 174,
    175, 185, 188, 191, 194, 196, 199,
    200, 203, 204, 206, 207, 210, 213, 216, 219, 221, 224,
    225, 235, 238, 241, 249,
    250, 260, 263, 266, 269, 271, 274,
    275, 278, 279, 281, 282, 285, 288, 291, 294, 296, 299,
    300, 310, 313, 316, 319, 321, 324,
    325, 335, 338, 349,
    350, 353, 354, 356, 357, 374,
    375, 399,
    400, 424,
    *range(425, 450),
)

_SPAWN_POINT_INDICES: tuple[int, ...] = (69, 103, 121, 192, 220, 255, 265, 337, 371, 378, 390)


def index_to_cell(index: int, width: int = LEVEL_WIDTH) -> Vector2Int:
    """Convert a row-major tile index to its grid cell."""
    row, column = divmod(index, width)
    return Vector2Int(column, row)


class LevelGrid:
    """The game world: which tiles are solid, and where enemies may spawn."""

    def __init__(self) -> None:
        self.width = LEVEL_WIDTH
        self.height = LEVEL_HEIGHT
        self.solid_tiles = frozenset(index_to_cell(i, self.width) for i in _SOLID_TILE_INDICES)
        self.spawn_points = [index_to_cell(i, self.width) for i in _SPAWN_POINT_INDICES]

    def is_tile_solid(self, position: Vector2Int) -> bool:
        """True if the tile at the given grid position cannot be walked on."""
        return position in self.solid_tiles

    def random_spawn_points(self, count: int) -> list[Vector2Int]:
        """Return up to count distinct spawn points in random order."""
        if count < 0:
            raise ValueError(f"spawn point count must not be negative: {count}")
        count = min(count, len(self.spawn_points))
        make_generator().shuffle(self.spawn_points)
        return self.spawn_points[:count]