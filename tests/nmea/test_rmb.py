"""Tests for RMB sentence accessors."""

import pytest

from marinenmea.nmea import (
    CompassPoint,
    DataStatus,
    Direction,
    FieldNotAvailableError,
    FormatError,
    InvalidArgumentError,
    RangeError,
    RMBSentence,
    Waypoint,
)

RMB_VALID = "$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58"


@pytest.fixture
def rmb():
    return RMBSentence.parse(RMB_VALID)


class TestRMBGetters:
    """Reading typed values from a parsed RMB sentence."""

    def test_status_fields(self, rmb):
        assert rmb.arrival_status is DataStatus.VALID
        assert rmb.status is DataStatus.INVALID
        assert rmb.has_arrived() is True

    def test_cross_track_and_steering(self, rmb):
        assert rmb.cross_track_error == pytest.approx(0.0)
        assert rmb.steer_to is Direction.RIGHT

    def test_destination(self, rmb):
        destination = rmb.destination
        assert destination.id == "RUSKI"
        assert destination.latitude == pytest.approx(55 + 36.200 / 60, abs=1e-7)
        assert destination.lat_hemisphere is CompassPoint.NORTH
        assert destination.longitude == pytest.approx(14 + 36.500 / 60, abs=1e-7)
        assert destination.lon_hemisphere is CompassPoint.EAST

    def test_range_and_bearing(self, rmb):
        assert rmb.range == pytest.approx(432.3)
        assert rmb.bearing == pytest.approx(234.9)

    def test_empty_origin(self, rmb):
        with pytest.raises(FieldNotAvailableError) as info:
            rmb.origin_id
        assert info.value.index == 3

    def test_empty_velocity(self, rmb):
        with pytest.raises(FieldNotAvailableError) as info:
            rmb.velocity
        assert info.value.index == 11

    def test_south_west_destination(self):
        rmb = RMBSentence.parse(
            "$GPRMB,V,1.25,L,START,DEST,3356.123,S,15112.456,W,10.5,90.0,5.2,A*71"
        )
        assert rmb.has_arrived() is False
        assert rmb.steer_to is Direction.LEFT
        assert rmb.origin_id == "START"
        assert rmb.destination.lat_hemisphere is CompassPoint.SOUTH
        assert rmb.destination.signed_longitude == pytest.approx(-151.2076, rel=1e-6)
        assert rmb.velocity == pytest.approx(5.2)

    def test_has_arrived_with_empty_status(self):
        rmb = RMBSentence.parse(
            "$GPRMB,,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*19"
        )
        with pytest.raises(FieldNotAvailableError) as info:
            rmb.has_arrived()
        assert info.value.index == 0

    def test_unknown_steering_letter(self):
        rmb = RMBSentence.parse(
            "$GPRMB,A,0.00,X,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*52"
        )
        with pytest.raises(FormatError):
            rmb.steer_to

    def test_non_numeric_bearing(self):
        rmb = RMBSentence.parse(
            "$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,abc,,V*1A"
        )
        with pytest.raises(FormatError):
            rmb.bearing

    def test_wrong_latitude_hemisphere(self):
        rmb = RMBSentence.parse(
            "$GPRMB,A,0.00,R,,RUSKI,5536.200,E,01436.500,E,432.3,234.9,,V*53"
        )
        with pytest.raises(FormatError):
            rmb.destination

    def test_empty_hemisphere_reports_its_index(self):
        rmb = RMBSentence.parse(
            "$GPRMB,A,0.00,R,,RUSKI,5536.200,,01436.500,E,432.3,234.9,,V*16"
        )
        with pytest.raises(FieldNotAvailableError) as info:
            rmb.destination
        assert info.value.index == 6


class TestRMBSetters:
    """Writing typed values back into an RMB sentence."""

    def test_bearing(self, rmb):
        rmb.bearing = 180.0
        assert rmb.bearing == pytest.approx(180.0)
        assert ",180.0," in rmb.to_sentence()

    @pytest.mark.parametrize("value", [-0.1, 360.1, 720.0])
    def test_bearing_out_of_range_leaves_field_unchanged(self, rmb, value):
        rmb.bearing = 180.0
        with pytest.raises(RangeError, match="out of bounds"):
            rmb.bearing = value
        assert rmb.bearing == pytest.approx(180.0)
        assert ",180.0," in rmb.to_sentence()

    def test_huge_integer_bearing(self, rmb):
        with pytest.raises(RangeError, match=r"0\.\.360"):
            rmb.bearing = 10**400
        assert rmb.fields[10] == "234.9"

    def test_huge_integer_range(self, rmb):
        with pytest.raises(InvalidArgumentError):
            rmb.range = 10**400
        assert rmb.fields[9] == "432.3"

    def test_cross_track_error(self, rmb):
        rmb.cross_track_error = 1.111
        assert ",1.111," in rmb.to_sentence()

    def test_range(self, rmb):
        rmb.range = 12.345
        assert rmb.range == pytest.approx(12.345)
        assert ",12.345," in rmb.to_sentence()

    def test_velocity_accepts_negative(self, rmb):
        rmb.velocity = 40.5
        assert ",40.5," in rmb.to_sentence()
        rmb.velocity = -0.123
        assert rmb.velocity == pytest.approx(-0.123)
        assert ",-0.123," in rmb.to_sentence()

    def test_origin(self, rmb):
        rmb.origin_id = "ORIGIN"
        assert rmb.origin_id == "ORIGIN"
        assert ",ORIGIN,RUSKI," in rmb.to_sentence()

    def test_destination(self, rmb):
        rmb.destination = Waypoint(
            "MYDEST", 61 + 1.111 / 60, CompassPoint.NORTH,
            27 + 7.777 / 60, CompassPoint.EAST,
        )
        assert ",MYDEST,6101.111,N,02707.777,E," in rmb.to_sentence()
        assert rmb.destination.id == "MYDEST"

    def test_destination_not_a_waypoint(self, rmb):
        with pytest.raises(InvalidArgumentError):
            rmb.destination = "RUSKI"
        assert rmb.fields[4:9] == ("RUSKI", "5536.200", "N", "01436.500", "E")

    def test_destination_id_with_delimiter(self, rmb):
        with pytest.raises(InvalidArgumentError):
            rmb.destination = Waypoint(
                "A,B", 1.0, CompassPoint.NORTH, 1.0, CompassPoint.EAST
            )
        assert rmb.destination.id == "RUSKI"

    def test_steer_to(self, rmb):
        rmb.steer_to = Direction.LEFT
        assert rmb.steer_to is Direction.LEFT
        assert rmb.fields[2] == "L"

    def test_steer_to_none(self, rmb):
        with pytest.raises(InvalidArgumentError, match="LEFT or RIGHT"):
            rmb.steer_to = None
        assert rmb.steer_to is Direction.RIGHT

    def test_status_and_arrival(self, rmb):
        rmb.arrival_status = DataStatus.INVALID
        rmb.status = DataStatus.VALID
        assert rmb.has_arrived() is False
        assert rmb.fields[0] == "V"
        assert rmb.fields[12] == "A"

    def test_single_field_write_leaves_others_alone(self, rmb):
        before = rmb.fields
        rmb.range = 1.5
        after = rmb.fields
        assert [i for i in range(13) if before[i] != after[i]] == [9]

    def test_delete_clears_field(self, rmb):
        rmb.velocity = 3.0
        del rmb.velocity
        with pytest.raises(FieldNotAvailableError):
            rmb.velocity
        assert rmb.to_sentence() == RMB_VALID

    def test_build_from_empty(self):
        rmb = RMBSentence()
        rmb.arrival_status = DataStatus.INVALID
        rmb.cross_track_error = 1.25
        rmb.steer_to = Direction.LEFT
        rmb.origin_id = "START"
        rmb.destination = Waypoint(
            "DEST", 33 + 56.123 / 60, CompassPoint.SOUTH,
            151 + 12.456 / 60, CompassPoint.WEST,
        )
        rmb.range = 10.5
        rmb.bearing = 90
        rmb.velocity = 5.2
        rmb.status = DataStatus.VALID
        assert rmb.to_sentence() == (
            "$GPRMB,V,1.25,L,START,DEST,3356.123,S,15112.456,W,10.5,90.0,5.2,A*71"
        )
