"""
Tile coordinate iterator.

Walks the city grid in raster order: x runs 0..N-1 for a fixed y, then y
steps by one. Stepping past the last tile is an error rather than a wrap
back to (0, 0); an oversized segment must fail instead of overwriting the
first tiles again.
"""

from typing import Iterator

from .errors import TileRangeError
from ...entities.city import TILES_PER_SIDE, TILE_COUNT


class TileIterator:
    """Cursor over (x, y) tile coordinates."""

    def __init__(self, tiles_per_side: int = TILES_PER_SIDE):
        if tiles_per_side <= 0:
            raise ValueError(f"tiles_per_side must be positive, got {tiles_per_side}")
        self.tiles_per_side = tiles_per_side
        self.x = 0
        self.y = 0

    @property
    def tile_number(self) -> int:
        """Raster index of the current tile."""
        return self.x + self.y * self.tiles_per_side

    @property
    def tile_count(self) -> int:
        return self.tiles_per_side * self.tiles_per_side

    @property
    def is_last(self) -> bool:
        """True when positioned on the final tile."""
        last = self.tiles_per_side - 1
        return self.x == last and self.y == last

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def increment(self):
        """Step to the next tile. Raises TileRangeError past the final tile."""
        if self.x < self.tiles_per_side - 1:
            self.x += 1
        elif self.y < self.tiles_per_side - 1:
            self.y += 1
            self.x = 0
        else:
            raise TileRangeError(
                f"Tile iterator advanced past ({self.x}, {self.y}), "
                f"the last of {self.tile_count} tiles"
            )

    def reset(self):
        """Set X and Y back to 0."""
        self.x = 0
        self.y = 0

    def __iter__(self) -> Iterator[tuple[int, int]]:
        """Yield every coordinate from (0, 0), restarting on each call."""
        self.reset()
        yield self.position
        while not self.is_last:
            self.increment()
            yield self.position

    def __len__(self) -> int:
        return self.tile_count

    def __repr__(self) -> str:
        return f"TileIterator(x={self.x}, y={self.y}, tiles_per_side={self.tiles_per_side})"
