"""Shared test fixtures for legal description tests."""
import math
import pytest
from legal.bearing import Bearing
from legal.description import Description
from legal.direction import Direction
from legal.segments import LinearSegment, ArcSegment, Rotation


@pytest.fixture(scope="session")
def east_leg():
    """S 87°30'54" E, 5.00 feet."""
    return LinearSegment.from_bearing(
        Bearing(Direction.SOUTH, 87, 30, 54.0, Direction.EAST), 5.0, "feet")


@pytest.fixture(scope="session")
def north_leg():
    """N 2°02'36" E, 99.88 feet."""
    return LinearSegment.from_bearing(
        Bearing(Direction.NORTH, 2, 2, 36.0, Direction.EAST), 99.88, "feet")


@pytest.fixture(scope="session")
def curve():
    """45° clockwise curve, 25' radius, entering at 30°."""
    return ArcSegment(math.pi/4, 25.0, "feet", math.pi/6, Rotation.CLOCKWISE)


@pytest.fixture(scope="session")
def witt_metadata():
    """Keyword arguments for a Description on lot 11, block 15 of Witt's Addition."""
    return dict(
        kind="TEMPORARY CONSTRUCTION EASEMENT",
        lot="11", block="15",
        subdivision="WITT'S ADDITION",
        city="NORTH LITTLE ROCK", county="PULASKI", state="ARKANSAS",
        start=Direction.NORTHEAST, commencement=True,
        area=100.0, unit="SQUARE FEET",
    )


@pytest.fixture(scope="session")
def witt_description(witt_metadata, east_leg, curve, north_leg):
    """Line, curve, line."""
    return Description(segments=(east_leg, curve, north_leg), **witt_metadata)
