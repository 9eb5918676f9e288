"""Degrees-minutes-seconds survey bearings and their radian equivalents."""
import math
import re
from dataclasses import dataclass

from .direction import Direction
from .errors import InvalidBearingComponent, InvalidBearingString

# {primary}{filler}{deg}{D|°}{min}{M|'}{sec}{S|"}{secondary}, after
# whitespace removal and upper-casing.
_BEARING_RE = re.compile(
    r"(?P<primary>[NS])\D*(?P<deg>\d+)[D°](?P<min>\d+)[M'](?P<sec>\d+\.?\d*)[S\"](?P<secondary>[EW])"
)

_PRIMARY = (Direction.NORTH, Direction.SOUTH)
_SECONDARY = (Direction.EAST, Direction.WEST)

_MICRO_PER_SEC = 1_000_000
_MICRO_PER_MIN = 60 * _MICRO_PER_SEC
_MICRO_PER_DEG = 60 * _MICRO_PER_MIN


@dataclass(frozen=True)
class Bearing:
    """A direction measured from North or South toward East or West.

    Component bounds are inclusive at both ends, so 90°, 60' and 60"
    are all accepted.
    """
    primary: Direction
    degrees: int
    minutes: int
    seconds: float
    secondary: Direction

    def __post_init__(self):
        if not (isinstance(self.primary, Direction) and isinstance(self.secondary, Direction)):
            raise InvalidBearingComponent(
                f"{self.primary!r} - {self.secondary!r} are not compass directions")
        if self.primary not in _PRIMARY or self.secondary not in _SECONDARY:
            raise InvalidBearingComponent(
                f"{self.primary} - {self.secondary} are not valid directions for a bearing")
        for name, value, kinds in (("degrees", self.degrees, int),
                                   ("minutes", self.minutes, int),
                                   ("seconds", self.seconds, (int, float))):
            if isinstance(value, bool) or not isinstance(value, kinds):
                raise InvalidBearingComponent(f"Non-numeric {name}: {value!r}")
        if not (0 <= self.degrees <= 90 and 0 <= self.minutes <= 60
                and 0.0 <= self.seconds <= 60.0):
            raise InvalidBearingComponent(
                f"{self.degrees} {self.minutes} {self.seconds:f} is not a valid bearing")

    def describe(self) -> str:
        """Legal-description text, e.g. 'SOUTH 87°30'54.00" EAST'."""
        return (f"{self.primary.describe()} {self.degrees:d}°{self.minutes:d}'"
                f"{self.seconds:.2f}\" {self.secondary.describe()}")

    def __str__(self) -> str:
        return self.describe()

    def to_angle(self) -> float:
        """Signed angle in radians, clockwise from North, in [-pi, pi]."""
        start = 0.0 if self.primary == Direction.NORTH else 180.0
        if (self.primary, self.secondary) in ((Direction.NORTH, Direction.EAST),
                                              (Direction.SOUTH, Direction.WEST)):
            rotation = 1.0
        else:
            rotation = -1.0
        dms = self.degrees + self.minutes/60.0 + self.seconds/3600.0
        return (start + rotation*dms) / 180.0 * math.pi

    @classmethod
    def from_angle(cls, theta: float) -> "Bearing":
        """Bearing for an angle in radians.

        Negative angles are reflected (|theta| + pi) before reduction.
        DMS components are truncated, never rounded, after snapping to
        the nearest micro-arcsecond.
        """
        if theta < 0.0:
            theta = abs(theta) + math.pi
        theta = theta % (2*math.pi)
        if theta < math.pi/2:
            primary, secondary = Direction.NORTH, Direction.EAST
        elif theta < math.pi:
            primary, secondary = Direction.SOUTH, Direction.EAST
            theta = math.pi - theta
        elif theta < math.pi*3/2:
            primary, secondary = Direction.SOUTH, Direction.WEST
            theta = theta - math.pi
        else:
            primary, secondary = Direction.NORTH, Direction.WEST
            theta = 2*math.pi - theta
        # snap to whole micro-arcseconds so float noise below a whole
        # minute does not truncate to x°59'59.99999"
        micro = round(theta * 180.0 / math.pi * _MICRO_PER_DEG)
        degrees, rem = divmod(micro, _MICRO_PER_DEG)
        minutes, rem = divmod(rem, _MICRO_PER_MIN)
        return cls(primary, degrees, minutes, rem / _MICRO_PER_SEC, secondary)

    @classmethod
    def from_string(cls, text: str) -> "Bearing":
        """Parse 'N10d15m30sW' or 'South 87°30'54" East' style text."""
        src = "".join(text.split()).upper()
        m = _BEARING_RE.search(src)
        if m is None:
            raise InvalidBearingString(f"Invalid bearing string: {text!r}")
        try:
            degrees = int(m.group("deg"))
            minutes = int(m.group("min"))
            seconds = float(m.group("sec"))
        except ValueError as e:
            raise InvalidBearingString(f"Invalid bearing component in {text!r}: {e}") from e
        return cls(Direction.from_string(m.group("primary")), degrees, minutes, seconds,
                   Direction.from_string(m.group("secondary")))
