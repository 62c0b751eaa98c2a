"""GGA sentence definition.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |    | ||
           |         |        | |         | | |  |   |     | |    | |+-- DGPS station ID
           |         |        | |         | | |  |   |     | |    | +-- DGPS age (s)
           |         |        | |         | | |  |   |     | +----+-- Geoid height + unit
           |         |        | |         | | |  |   +-----+-- Altitude above MSL + unit
           |         |        | |         | | |  +-- HDOP (horizontal dilution)
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-8)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

Fix Quality Values:
    0 = Invalid (no fix)
    1 = GPS fix (SPS - Standard Positioning Service)
    2 = DGPS fix (Differential GPS)
    4 = RTK Fixed (Real-Time Kinematic, cm-level accuracy)
    5 = RTK Float (RTK converging, dm-level accuracy)
    6 = Dead reckoning mode
"""

from marinenmea.nmea.fields import (
    EnumField,
    FloatField,
    IntField,
    PositionField,
    StringField,
)
from marinenmea.nmea.sentence import Sentence
from marinenmea.nmea.types import GpsFixQuality, SentenceType

_METERS = "M"


class GGASentence(Sentence):
    """Global Positioning System fix data.

    A new, empty GGA sentence has its two unit fields preset to "M" (meters).

    Example:
        >>> gga = GGASentence.parse(
        ...     "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
        ... )
        >>> round(gga.position.latitude, 4)
        48.1173
        >>> gga.fix_quality
        <GpsFixQuality.GPS: 1>
        >>> gga.dgps_age
        Traceback (most recent call last):
        ...
        marinenmea.nmea.errors.FieldNotAvailableError: Field 12 is empty
    """

    sentence_type = SentenceType.GGA
    fixed_fields = {9: _METERS, 11: _METERS}

    utc_time = StringField(0, doc="UTC time of the fix, HHMMSS.ss.")
    position = PositionField(1, doc="Fix position; written to fields 1-4 at once.")
    fix_quality = EnumField(5, GpsFixQuality)
    satellite_count = IntField(6, width_digits=2)
    horizontal_dilution = FloatField(7, doc="HDOP, lower is better.")
    altitude = FloatField(8, doc="Antenna altitude above mean sea level.")
    altitude_units = StringField(9)
    geoid_height = FloatField(10, doc="Geoid separation above the WGS84 ellipsoid.")
    geoid_height_units = StringField(11)
    dgps_age = FloatField(12, doc="Seconds since the last DGPS update.")
    dgps_station_id = StringField(13)

    def has_fix(self) -> bool:
        """Navigation validity: True only if the fix quality is not INVALID.

        Raises:
            FieldNotAvailableError: If the fix quality field is empty
        """
        return self.fix_quality is not GpsFixQuality.INVALID
