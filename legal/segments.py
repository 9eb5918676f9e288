"""Boundary segments (metes): straight lines and circular arcs.

Every segment renders its own THENCE clause, renders the transition
clause that introduces it, and reports the tangent angle used when
comparing it with the next segment. All angles are in radians,
measured clockwise from North.
"""
import logging
import math
import re
from enum import IntEnum
from typing import NamedTuple

from .bearing import Bearing
from .constants import TANGENT_TOLERANCE
from .direction import Direction
from .errors import InvalidSegmentDescription

logger = logging.getLogger(__name__)

_DIST_RE = re.compile(r"(\d+\.?\d*)\s?([a-zA-Z]+)")


class Rotation(IntEnum):
    """Direction of travel along an arc; the value is the sign of the turn."""
    CLOCKWISE = 1
    COUNTERCLOCKWISE = -1


def angles_match(a: float, b: float, tol: float = TANGENT_TOLERANCE) -> bool:
    """True if two tangent angles agree within *tol* radians."""
    return abs(a - b) <= tol


# ============================================================
# Linear Segment
# ============================================================
class LinearSegment(NamedTuple):
    """Straight boundary leg along a constant bearing."""
    bearing_angle: float
    distance: float
    unit: str

    @classmethod
    def from_bearing(cls, bearing: Bearing, distance: float, unit: str) -> "LinearSegment":
        return cls(bearing.to_angle(), distance, unit)

    @classmethod
    def from_report_line(cls, line: str) -> "LinearSegment":
        """Parse an AutoCAD 'THENCE (n) North 1°38'38" East, 65.00 feet' line.

        The bearing sits between the first ')' and the first ','; distance
        and unit follow the comma, up to any 'to a point ...' trailer.
        """
        bearing_start = line.find(")")
        bearing_end = line.find(",")
        if bearing_start == -1 or bearing_end == -1:
            raise InvalidSegmentDescription(f"Invalid mete description: {line}")
        bearing = Bearing.from_string(line[bearing_start:bearing_end])
        to = line.find("to", bearing_end)
        dist_src = line[bearing_end+1:] if to == -1 else line[bearing_end+1:to]
        m = _DIST_RE.search(dist_src)
        if m is None:
            raise InvalidSegmentDescription(f"Invalid distance and units: {line}")
        seg = cls(bearing.to_angle(), float(m.group(1)), m.group(2))
        logger.debug("segment %s %.2f %s", bearing.describe(), seg.distance, seg.unit)
        return seg

    @property
    def bearing(self) -> Bearing:
        return Bearing.from_angle(self.bearing_angle)

    def exit_tangent(self) -> float:
        return self.bearing_angle

    def render(self) -> str:
        return f"{self.bearing.describe()} A DISTANCE OF {self.distance:.2f} {self.unit.upper()}"

    def transition_preamble(self, prev_tangent: float) -> str:
        if angles_match(prev_tangent, self.bearing_angle):
            return "A POINT OF TANGENCY"
        return "A POINT OF NON-TANGENCY"


# ============================================================
# Arc Segment
# ============================================================
class ArcSegment(NamedTuple):
    """Circular boundary leg.

    Chord, concavity and arc length are all derived from the central
    angle, radius and the entry tangent, which may or may not match
    the bearing of the previous segment.
    """
    central_angle: float
    radius: float
    unit: str
    tangent_angle: float      # direction of travel at the start of the arc
    rotation: Rotation

    @property
    def chord_length(self) -> float:
        """Straight-line distance between the arc's endpoints."""
        return 2.0 * self.radius * math.sin(self.central_angle / 2.0)

    @property
    def chord_angle(self) -> float:
        """Angle of the chord; also the tangent angle at the arc midpoint."""
        return self.tangent_angle + int(self.rotation) * self.central_angle / 2.0

    @property
    def concavity_angle(self) -> float:
        # fixed 45° offset from the chord, not an exact radial
        return self.chord_angle + int(self.rotation) * math.pi / 4.0

    @property
    def concavity(self) -> Direction:
        """Compass direction from the arc midpoint toward the circle's center."""
        return Direction.from_angle(self.concavity_angle)

    @property
    def arc_length(self) -> float:
        return self.radius * self.central_angle

    def exit_tangent(self) -> float:
        # the entry tangent is carried forward unchanged
        return self.tangent_angle

    def render(self) -> str:
        # central angle goes through the bearing formatter, direction words included
        central = Bearing.from_angle(self.central_angle).describe()
        return (f"{self.concavity.describe()}ERLY ALONG SAID CURVE THROUGH A CENTRAL ANGLE OF "
                f"{central} AN ARC DISTANCE OF {self.arc_length:.2f} {self.unit.upper()}")

    def transition_preamble(self, prev_tangent: float) -> str:
        conc = self.concavity.describe()
        unit = self.unit.upper()
        if angles_match(prev_tangent, self.tangent_angle):
            return (f"THE BEGINNING OF A CURVE CONCAVE {conc}ERLY, "
                    f"SAID CURVE HAS A RADIUS OF {self.radius:.2f} {unit}")
        radial = self.tangent_angle + int(self.rotation) * math.pi / 4.0 + math.pi / 2.0
        return (f"THE BEGINNING OF A NON-TANGENT CURVE CONCAVE {conc}ERLY, "
                f"SAID CURVE HAS A RADIUS OF {self.radius:.2f} {unit}, "
                f"TO WHICH A RADIAL LINE BEARS {Bearing.from_angle(radial).describe()}")


Segment = LinearSegment | ArcSegment
