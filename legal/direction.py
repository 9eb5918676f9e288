"""Eight-point compass directions."""
import math
from enum import IntEnum

from .errors import InvalidDirection


class Direction(IntEnum):
    """Compass direction, ordered clockwise from North in 45° steps."""
    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7

    @classmethod
    def from_string(cls, s: str) -> "Direction":
        """Match a full name or two-letter abbreviation, ignoring case."""
        token = s.strip().upper()
        try:
            return _BY_NAME[token]
        except KeyError:
            raise InvalidDirection(f"direction not recognized: {s!r}") from None

    @classmethod
    def from_angle(cls, angle: float) -> "Direction":
        """Classify an angle in radians into a 45° sector.

        Only the cardinal directions are hit on an exact boundary; the
        diagonals cover the open intervals below each boundary.
        """
        angle = angle % (2 * math.pi)
        if angle == 0.0:
            return cls.NORTH
        if angle < math.pi/4:
            return cls.NORTHEAST
        if angle == math.pi/4:
            return cls.EAST
        if angle < math.pi/2:
            return cls.SOUTHEAST
        if angle == math.pi/2:
            return cls.SOUTH
        if angle < math.pi*3/4:
            return cls.SOUTHWEST
        if angle == math.pi*3/4:
            return cls.WEST
        return cls.NORTHWEST

    def describe(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


_ABBREV = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")
_BY_NAME = {d.name: d for d in Direction}
_BY_NAME.update(zip(_ABBREV, Direction))
