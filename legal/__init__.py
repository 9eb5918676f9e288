"""Metes and bounds legal descriptions: bearings, segments, and the composer."""

from .errors import (
    LegalError, InvalidDirection, InvalidBearing, InvalidBearingComponent,
    InvalidBearingString, InvalidSegmentDescription,
)
from .direction import Direction
from .bearing import Bearing
from .segments import Rotation, LinearSegment, ArcSegment, Segment, angles_match
from .description import Description, drop_last_semicolon, fmt_area
from .report import (
    Report, parse_segment_line, parse_area_line, parse_report,
    commencement_segment, describe_report,
)
