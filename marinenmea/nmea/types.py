"""NMEA value types used by typed field accessors.

This module defines the enums and dataclasses that sentence accessors return
and accept.

Design Decisions:
    1. Single-character enums (DataStatus, Direction, CompassPoint, FaaMode):
       the enum value is the wire character, so encoding is ``member.value``
       and decoding is ``EnumType(token)``.

    2. Unsigned coordinates: Position and Waypoint store latitude and
       longitude as non-negative magnitudes with the hemisphere kept in a
       separate CompassPoint, matching the wire format which never carries a
       sign. ``signed_latitude``/``signed_longitude`` give the conventional
       negative-for-South/West view.

    3. Closed set of sentence types: SentenceType tags every supported
       sentence with its ID and declared field count. Field counts never
       change after a sentence is constructed.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum

from marinenmea.nmea.errors import InvalidArgumentError, RangeError

# --- coordinate limits --------------------------------------------------------

_MAX_LATITUDE = 90.0
_MAX_LONGITUDE = 180.0


class DataStatus(Enum):
    """Validity flag, 'A' for valid data and 'V' for invalid (void)."""

    VALID = "A"
    INVALID = "V"


class Direction(Enum):
    """Steer-to direction."""

    LEFT = "L"
    RIGHT = "R"


class CompassPoint(Enum):
    """Cardinal point, used as latitude/longitude hemisphere indicator."""

    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"


LATITUDE_HEMISPHERES = (CompassPoint.NORTH, CompassPoint.SOUTH)
LONGITUDE_HEMISPHERES = (CompassPoint.EAST, CompassPoint.WEST)


class FaaMode(Enum):
    """FAA mode indicator (NMEA 2.3+).

    AUTONOMOUS is standard GPS positioning; DIFFERENTIAL covers DGPS and RTK;
    ESTIMATED is dead reckoning; NONE means the data is not valid.
    """

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    MANUAL = "M"
    SIMULATED = "S"
    NONE = "N"


class GpsFixQuality(IntEnum):
    """GGA fix quality indicator."""

    INVALID = 0
    GPS = 1
    DGPS = 2
    PPS = 3
    RTK = 4
    FLOAT_RTK = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATED = 8


class SentenceType(Enum):
    """Supported sentence types and their declared field counts.

    The field count excludes the address field and the checksum.
    """

    GGA = ("GGA", 14)
    RMB = ("RMB", 13)
    VTG = ("VTG", 9)

    def __init__(self, sentence_id: str, field_count: int) -> None:
        self.sentence_id = sentence_id
        self.field_count = field_count


def _check_hemisphere(
    hemisphere: CompassPoint,
    allowed: tuple[CompassPoint, ...],
    label: str,
) -> None:
    if hemisphere not in allowed:
        names = " or ".join(point.name for point in allowed)
        raise InvalidArgumentError(
            f"{label} hemisphere must be {names}, got {hemisphere!r}"
        )


def _check_magnitude(value: float, maximum: float, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{label} must be a number, got {value!r}")
    if not 0.0 <= value <= maximum:
        raise RangeError(f"{label} {value!r} out of bounds 0..{maximum:g}")


def _check_coordinates(
    latitude: float,
    lat_hemisphere: CompassPoint,
    longitude: float,
    lon_hemisphere: CompassPoint,
) -> None:
    _check_magnitude(latitude, _MAX_LATITUDE, "Latitude")
    _check_magnitude(longitude, _MAX_LONGITUDE, "Longitude")
    _check_hemisphere(lat_hemisphere, LATITUDE_HEMISPHERES, "Latitude")
    _check_hemisphere(lon_hemisphere, LONGITUDE_HEMISPHERES, "Longitude")


def _signed(magnitude: float, hemisphere: CompassPoint) -> float:
    if hemisphere in (CompassPoint.SOUTH, CompassPoint.WEST):
        return -magnitude
    return magnitude


@dataclass(frozen=True)
class Position:
    """Geographic position in unsigned decimal degrees plus hemispheres.

    Attributes:
        latitude: Latitude magnitude in decimal degrees, 0.0 to 90.0.
        lat_hemisphere: CompassPoint.NORTH or CompassPoint.SOUTH.
        longitude: Longitude magnitude in decimal degrees, 0.0 to 180.0.
        lon_hemisphere: CompassPoint.EAST or CompassPoint.WEST.

    Example:
        >>> p = Position(48.1173, CompassPoint.NORTH, 11.5167, CompassPoint.WEST)
        >>> p.signed_longitude
        -11.5167
    """

    latitude: float
    lat_hemisphere: CompassPoint
    longitude: float
    lon_hemisphere: CompassPoint

    def __post_init__(self) -> None:
        _check_coordinates(
            self.latitude, self.lat_hemisphere, self.longitude, self.lon_hemisphere
        )

    @classmethod
    def from_signed(cls, latitude: float, longitude: float) -> "Position":
        """Build a position from signed decimal degrees (negative = South/West)."""
        return cls(
            latitude=abs(latitude),
            lat_hemisphere=CompassPoint.SOUTH if latitude < 0 else CompassPoint.NORTH,
            longitude=abs(longitude),
            lon_hemisphere=CompassPoint.WEST if longitude < 0 else CompassPoint.EAST,
        )

    @property
    def signed_latitude(self) -> float:
        return _signed(self.latitude, self.lat_hemisphere)

    @property
    def signed_longitude(self) -> float:
        return _signed(self.longitude, self.lon_hemisphere)


@dataclass(frozen=True)
class Waypoint:
    """A named geographic point.

    Coordinates follow the same convention as Position: unsigned magnitudes
    with the hemisphere recorded separately.

    Attributes:
        id: Waypoint identifier, e.g. "RUSKI".
        latitude: Latitude magnitude in decimal degrees, 0.0 to 90.0.
        lat_hemisphere: CompassPoint.NORTH or CompassPoint.SOUTH.
        longitude: Longitude magnitude in decimal degrees, 0.0 to 180.0.
        lon_hemisphere: CompassPoint.EAST or CompassPoint.WEST.
    """

    id: str
    latitude: float
    lat_hemisphere: CompassPoint
    longitude: float
    lon_hemisphere: CompassPoint

    def __post_init__(self) -> None:
        if not isinstance(self.id, str):
            raise InvalidArgumentError(f"Waypoint id must be a str, got {self.id!r}")
        _check_coordinates(
            self.latitude, self.lat_hemisphere, self.longitude, self.lon_hemisphere
        )

    @classmethod
    def from_position(cls, id: str, position: Position) -> "Waypoint":
        return cls(
            id=id,
            latitude=position.latitude,
            lat_hemisphere=position.lat_hemisphere,
            longitude=position.longitude,
            lon_hemisphere=position.lon_hemisphere,
        )

    @classmethod
    def from_signed(cls, id: str, latitude: float, longitude: float) -> "Waypoint":
        """Build a waypoint from signed decimal degrees (negative = South/West)."""
        return cls.from_position(id, Position.from_signed(latitude, longitude))

    @property
    def position(self) -> Position:
        return Position(
            latitude=self.latitude,
            lat_hemisphere=self.lat_hemisphere,
            longitude=self.longitude,
            lon_hemisphere=self.lon_hemisphere,
        )

    @property
    def signed_latitude(self) -> float:
        return self.position.signed_latitude

    @property
    def signed_longitude(self) -> float:
        return self.position.signed_longitude
