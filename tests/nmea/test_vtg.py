"""Tests for VTG sentence accessors."""

import pytest

from marinenmea.nmea import (
    ChecksumError,
    FaaMode,
    FieldCountError,
    FieldNotAvailableError,
    RangeError,
    SentenceTypeError,
    VTGSentence,
)

VTG_VALID = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"


class TestParseVTG:
    """Tests for VTGSentence.parse and its getters."""

    def test_valid_vtg_autonomous(self):
        result = VTGSentence.parse(VTG_VALID)
        assert result.true_course == pytest.approx(54.7)
        assert result.magnetic_course == pytest.approx(34.4)
        assert result.speed_knots == pytest.approx(5.5)
        assert result.speed_kilometers_per_hour == pytest.approx(10.2)
        assert result.speed_meters_per_second == pytest.approx(10.2 / 3.6)
        assert result.mode is FaaMode.AUTONOMOUS
        assert result.is_valid() is True

    def test_vtg_differential_mode(self):
        result = VTGSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,D*3E")
        assert result.mode is FaaMode.DIFFERENTIAL
        assert result.is_valid()

    def test_vtg_not_valid_mode(self):
        result = VTGSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,N*34")
        assert result.mode is FaaMode.NONE
        assert not result.is_valid()

    def test_vtg_stationary_empty_track(self):
        result = VTGSentence.parse("$GNVTG,,T,,M,0.0,N,0.0,K,A*3D")
        with pytest.raises(FieldNotAvailableError):
            result.true_course
        assert result.speed_knots == pytest.approx(0.0)
        assert result.speed_meters_per_second == pytest.approx(0.0)
        assert result.is_valid()

    def test_vtg_all_empty_fields(self):
        result = VTGSentence.parse("$GNVTG,,T,,M,,N,,K,N*32")
        with pytest.raises(FieldNotAvailableError):
            result.speed_knots
        with pytest.raises(FieldNotAvailableError):
            result.speed_meters_per_second
        assert not result.is_valid()

    def test_vtg_no_mode_indicator_rejected(self):
        with pytest.raises(FieldCountError) as info:
            VTGSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K*56")
        assert info.value.actual == 8

    def test_vtg_empty_mode_is_not_available(self):
        result = VTGSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,*7A")
        with pytest.raises(FieldNotAvailableError) as info:
            result.is_valid()
        assert info.value.index == 8

    def test_vtg_invalid_checksum(self):
        with pytest.raises(ChecksumError):
            VTGSentence.parse(VTG_VALID[:-2] + "FF")

    def test_vtg_too_few_fields(self):
        with pytest.raises(FieldCountError):
            VTGSentence.parse("$GNVTG,054.7,T*30")

    def test_vtg_wrong_sentence_type(self):
        with pytest.raises(SentenceTypeError):
            VTGSentence.parse(
                "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
            )

    @pytest.mark.parametrize(
        ("prefix", "checksum"),
        [("GP", "25"), ("GN", "3B"), ("GL", "39"),
         ("GA", "34"), ("GB", "37"), ("GQ", "24")],
    )
    def test_vtg_multi_constellation_prefixes(self, prefix, checksum):
        sentence = f"${prefix}VTG,054.7,T,034.4,M,005.5,N,010.2,K,A*{checksum}"
        assert VTGSentence.parse(sentence).talker_id == prefix

    def test_vtg_speed_meters_per_second(self):
        result = VTGSentence.parse("$GNVTG,000.0,T,000.0,M,000.0,N,036.0,K,A*38")
        assert result.speed_meters_per_second == pytest.approx(10.0)

    def test_vtg_speed_mps_unavailable_when_kmh_empty(self):
        result = VTGSentence.parse("$GNVTG,054.7,T,034.4,M,005.5,N,,K,A*16")
        with pytest.raises(FieldNotAvailableError) as info:
            result.speed_meters_per_second
        assert info.value.index == 6

    def test_zedf9p_vtg_moving(self):
        result = VTGSentence.parse("$GNVTG,325.5,T,337.8,M,0.5,N,0.9,K,D*3A")
        assert result.mode is FaaMode.DIFFERENTIAL
        assert result.true_course == pytest.approx(325.5)


class TestBuildVTG:
    """Tests for writing VTG fields."""

    def test_course_range_checked(self):
        vtg = VTGSentence()
        with pytest.raises(RangeError):
            vtg.true_course = 361.0
        with pytest.raises(RangeError):
            vtg.magnetic_course = -1.0
        assert vtg.fields == ("", "T", "", "M", "", "N", "", "K", "")

    def test_build_from_empty(self):
        vtg = VTGSentence(talker_id="GN")
        vtg.true_course = 325.5
        vtg.magnetic_course = 337.8
        vtg.speed_knots = 0.5
        vtg.speed_kilometers_per_hour = 0.9
        vtg.mode = FaaMode.DIFFERENTIAL
        assert vtg.to_sentence() == "$GNVTG,325.5,T,337.8,M,0.5,N,0.9,K,D*3A"
