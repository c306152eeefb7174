"""
Building descriptors.

The decoder hands every XBLD byte to a building factory together with the
tile position. What the byte means is the factory's business; the default
just keeps the raw code.
"""

from dataclasses import dataclass
from typing import Any, Callable


BuildingFactory = Callable[[int, int, int], Any]


@dataclass(frozen=True)
class Building:
    """Opaque building code at a tile."""
    code: int
    x: int
    y: int

    @property
    def is_empty(self) -> bool:
        """Code 0x00 is bare ground."""
        return self.code == 0

    def __str__(self) -> str:
        return f"Building {self.code:#04x} at ({self.x}, {self.y})"


def default_building_factory(code: int, x: int, y: int) -> Building:
    return Building(code=code, x=x, y=y)
