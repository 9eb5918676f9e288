"""Read AutoCAD 'metes and bounds report' text into segments and area.

The line formats handled here are the ones AutoCAD writes, e.g.

    THENCE (1) North 1°38'38" East, 65.00 feet to a point of non-tangency;
    Containing 1234.56 square feet

Anything else in a report is ignored.
"""
import logging
import re
from typing import NamedTuple

from .bearing import Bearing
from .constants import DEFAULT_COMMENCEMENT_UNIT
from .description import Description
from .direction import Direction
from .errors import InvalidSegmentDescription
from .segments import LinearSegment

logger = logging.getLogger(__name__)

_AREA_RE = re.compile(r"(\d+\.?\d*)\s?([A-Za-z ]+)")


class Report(NamedTuple):
    segments: list[LinearSegment]
    area: float
    unit: str


parse_segment_line = LinearSegment.from_report_line


def parse_area_line(line: str) -> tuple[float, str]:
    """(area, unit) from a 'Containing 1234.56 square feet' line."""
    m = _AREA_RE.search(line)
    if m is None:
        raise InvalidSegmentDescription(f"Invalid area description: {line}")
    return float(m.group(1)), m.group(2).strip()


def parse_report(text: str) -> Report:
    """Collect THENCE segments and the area line; the title line is skipped."""
    segments = []
    area, unit = 0.0, ""
    for i, line in enumerate(text.splitlines()):
        if i == 0 or not line:
            continue
        if line[0] == "T":
            segments.append(LinearSegment.from_report_line(line))
        elif line[0] == "C":
            area, unit = parse_area_line(line)
        else:
            logger.warning("skipping report line %d: %r", i + 1, line)
    logger.debug("report: %d segments, area %s %s", len(segments), area, unit)
    return Report(segments, area, unit)


def commencement_segment(cdir: str, cdist: float,
                         unit: str = DEFAULT_COMMENCEMENT_UNIT) -> LinearSegment:
    """Leg from the point of commencement to the point of beginning."""
    return LinearSegment.from_bearing(Bearing.from_string(cdir), cdist, unit)


def describe_report(
    report: Report, *, kind: str, subdivision: str, origin: str,
    county: str, state: str, city: str = "", lot: str = "", block: str = "",
    cdir: str = "", cdist: float = 0.0,
) -> Description:
    """Description for a parsed report; metadata is upper-cased.

    A commencement bearing adds a leading segment; either a bearing or a
    non-zero distance marks the description as commencing.
    """
    segments = list(report.segments)
    if cdir:
        segments.insert(0, commencement_segment(cdir, cdist))
    return Description(
        kind=kind.upper(),
        subdivision=subdivision.upper(),
        county=county.upper(),
        state=state.upper(),
        start=Direction.from_string(origin),
        area=report.area,
        unit=report.unit.upper(),
        segments=tuple(segments),
        lot=lot.upper(),
        block=block.upper(),
        city=city.upper(),
        commencement=bool(cdir) or cdist != 0.0,
    )
