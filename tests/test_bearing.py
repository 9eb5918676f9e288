"""Tests for legal/bearing.py — construction, text, and angle conversion."""
import math
import pytest
from legal.bearing import Bearing
from legal.direction import Direction
from legal.errors import InvalidBearing, InvalidBearingComponent, InvalidBearingString

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def _dms(b):
    return b.degrees + b.minutes/60.0 + b.seconds/3600.0


class TestConstruction:
    def test_inclusive_upper_bounds(self):
        b = Bearing(N, 90, 60, 60.0, E)
        assert (b.degrees, b.minutes, b.seconds) == (90, 60, 60.0)

    def test_zero(self):
        assert Bearing(S, 0, 0, 0.0, W).degrees == 0

    @pytest.mark.parametrize("deg,mn,sec", [(91, 0, 0.0), (0, 61, 0.0), (0, 0, -1.0),
                                            (-1, 0, 0.0), (0, 0, 60.5)])
    def test_out_of_range(self, deg, mn, sec):
        with pytest.raises(InvalidBearingComponent, match="not a valid bearing"):
            Bearing(N, deg, mn, sec, E)

    def test_bad_quadrant(self):
        with pytest.raises(InvalidBearing, match="not valid directions"):
            Bearing(E, 10, 0, 0.0, N)
        with pytest.raises(InvalidBearing):
            Bearing(N, 10, 0, 0.0, Direction.NORTHEAST)

    def test_non_numeric(self):
        with pytest.raises(InvalidBearingComponent, match="Non-numeric"):
            Bearing(N, "10", 0, 0.0, E)

    def test_float_degrees_rejected(self):
        with pytest.raises(InvalidBearingComponent, match="Non-numeric degrees"):
            Bearing(N, 10.0, 15, 30.0, E)
        with pytest.raises(InvalidBearingComponent, match="Non-numeric minutes"):
            Bearing(N, 10, 15.0, 30.0, E)

    def test_bool_rejected(self):
        with pytest.raises(InvalidBearingComponent):
            Bearing(N, True, 0, 0.0, E)

    def test_int_seconds_accepted(self):
        assert Bearing(N, 10, 15, 30, E).describe() == "NORTH 10°15'30.00\" EAST"

    def test_raw_int_directions_rejected(self):
        # IntEnum values compare equal to plain ints
        with pytest.raises(InvalidBearingComponent, match="not compass directions"):
            Bearing(0, 1, 0, 0.0, 2)

    def test_immutable(self):
        b = Bearing(N, 10, 0, 0.0, E)
        with pytest.raises(AttributeError):
            b.degrees = 11


def test_describe():
    b = Bearing(S, 87, 30, 54.0, E)
    assert b.describe() == "SOUTH 87°30'54.00\" EAST"
    assert str(Bearing(N, 1, 2, 3.456, W)) == "NORTH 1°2'3.46\" WEST"


class TestFromString:
    def test_compact(self):
        assert Bearing.from_string("N10d15m30sW") == Bearing(N, 10, 15, 30.0, W)

    def test_words_and_symbols(self):
        assert Bearing.from_string("South 87°30'54\" East") == Bearing(S, 87, 30, 54.0, E)

    def test_fractional_seconds(self):
        b = Bearing.from_string("South 88°21'22.1\" East")
        assert b == Bearing(S, 88, 21, 22.1, E)

    def test_trailing_text_ignored(self):
        b = Bearing.from_string("South 87°30'54\" East, 5.00 feet")
        assert b == Bearing(S, 87, 30, 54.0, E)

    def test_lower_case(self):
        assert Bearing.from_string("s 5d6m7.5s e") == Bearing(S, 5, 6, 7.5, E)

    @pytest.mark.parametrize("text", ["", "East 10d0m0sN", "N10d15mW", "hello"])
    def test_mismatch(self, text):
        with pytest.raises(InvalidBearingString, match="Invalid bearing"):
            Bearing.from_string(text)

    def test_out_of_range_component(self):
        with pytest.raises(InvalidBearingComponent):
            Bearing.from_string("N95d0m0sE")


class TestToAngle:
    def test_southeast_quadrant(self):
        b = Bearing(S, 45, 5, 5.0, E)
        expected = 3*math.pi/4 - (5.0/60.0 + 5.0/3600.0)*math.pi/180.0
        assert abs(b.to_angle() - expected) < 1e-6

    def test_north_east(self):
        assert abs(Bearing(N, 30, 0, 0.0, E).to_angle() - math.pi/6) < 1e-12

    def test_north_west_is_negative(self):
        assert abs(Bearing(N, 30, 0, 0.0, W).to_angle() + math.pi/6) < 1e-12

    def test_south_west(self):
        assert abs(Bearing(S, 30, 0, 0.0, W).to_angle() - 7*math.pi/6) < 1e-12


class TestFromAngle:
    def test_southeast(self):
        b = Bearing.from_angle(3*math.pi/4 - (10.0/60.0 + 10.0/3600.0)/180.0*math.pi)
        assert (b.primary, b.degrees, b.minutes, b.secondary) == (S, 45, 10, E)
        assert abs(b.seconds - 10.0) < 1e-6

    def test_quadrants(self):
        for deg, quadrant, magnitude in [(20, (N, E), 20), (160, (S, E), 20),
                                         (200, (S, W), 20), (290, (N, W), 70)]:
            b = Bearing.from_angle(math.radians(deg))
            assert (b.primary, b.secondary) == quadrant
            assert abs(_dms(b) - magnitude) < 1e-9

    def test_negative_reflected(self):
        # -30° becomes 30° + 180° -> S 30° W
        b = Bearing.from_angle(-math.pi/6)
        assert (b.primary, b.secondary) == (S, W)
        assert (b.degrees, b.minutes) == (30, 0)
        assert abs(b.seconds) < 1e-6

    def test_components_truncated(self):
        b = Bearing.from_angle(math.radians(10.999999))
        assert b.degrees == 10
        assert b.minutes == 59
        assert b.seconds < 60.0


class TestRoundTrip:
    @pytest.mark.parametrize("quadrant", [(N, E), (S, E), (S, W)])
    def test_every_whole_minute(self, quadrant):
        primary, secondary = quadrant
        failures = []
        for deg in range(90):
            for mn in range(60):
                b = Bearing(primary, deg, mn, 0.0, secondary)
                back = Bearing.from_angle(b.to_angle())
                # S 0°0'0" E lands on pi, which reads as S 0°0'0" W
                same_quadrant = (back.primary, back.secondary) == quadrant or deg == mn == 0
                if not (same_quadrant and back.degrees == deg and back.minutes == mn
                        and abs(back.seconds) < 1e-6):
                    failures.append((deg, mn, back.describe()))
        assert failures == []

    @pytest.mark.parametrize("bearing", [
        Bearing(S, 87, 30, 54.0, E),
        Bearing(S, 12, 45, 17.25, W),
        Bearing(N, 45, 10, 10.0, E),
    ])
    def test_fractional_seconds(self, bearing):
        back = Bearing.from_angle(bearing.to_angle())
        assert (back.primary, back.secondary) == (bearing.primary, bearing.secondary)
        assert back.degrees == bearing.degrees
        assert back.minutes == bearing.minutes
        assert abs(back.seconds - bearing.seconds) < 1e-6

    def test_whole_degree_not_rendered_as_sixty_seconds(self):
        b = Bearing.from_angle(Bearing(S, 1, 0, 0.0, E).to_angle())
        assert b.describe() == "SOUTH 1°0'0.00\" EAST"

    def test_north_west_keeps_magnitude(self):
        # negative angle is reflected into the southwest quadrant
        b = Bearing(N, 10, 15, 30.0, W)
        back = Bearing.from_angle(b.to_angle())
        assert (back.primary, back.secondary) == (S, W)
        assert (back.degrees, back.minutes) == (10, 15)
        assert abs(back.seconds - 30.0) < 1e-6

    def test_out_of_canonical_range_normalizes(self):
        b = Bearing.from_angle(Bearing(N, 10, 60, 0.0, E).to_angle())
        assert (b.degrees, b.minutes) == (11, 0)
        assert abs(b.seconds) < 1e-6
