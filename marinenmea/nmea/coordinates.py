r"""Coordinate codecs between NMEA degrees-minutes tokens and decimal degrees.

NMEA carries coordinates as unsigned degrees and decimal minutes followed by
a hemisphere letter:

    5536.200,N,01436.500,E
    ||\____/ | |||\____/ |
    ||  |    | |||  |    +-- longitude hemisphere (E/W)
    ||  |    | |||  +-- minutes (36.500')
    ||  |    | +++-- degrees, 3 digits (014)
    ||  |    +-- latitude hemisphere (N/S)
    ||  +-- minutes (36.200')
    ++-- degrees, 2 digits (55)

The conversion formula is:
    decimal_degrees = degrees + (minutes / 60)

The decimal value is never negated for South/West: the hemisphere stays a
separate attribute, exactly as on the wire.
"""

import math
import re
from collections.abc import Sequence

from marinenmea.nmea.errors import FieldNotAvailableError, FormatError
from marinenmea.nmea.types import (
    LATITUDE_HEMISPHERES,
    LONGITUDE_HEMISPHERES,
    CompassPoint,
    Position,
    Waypoint,
)

# --- wire format --------------------------------------------------------------

LATITUDE_DEGREE_DIGITS = 2
LONGITUDE_DEGREE_DIGITS = 3
MINUTE_DECIMALS = 3

_MINUTES_PER_DEGREE = 60.0
_DEGREES_MINUTES_PATTERN = re.compile(r"\d{3,}(\.\d*)?")


def _parse_coordinate_parts(value: str, index: int) -> tuple[int, float]:
    """Parse NMEA coordinate into degrees and minutes components.

    The 2 digits before the decimal point are always whole minutes; everything
    before them is degrees.

    Example:
        >>> _parse_coordinate_parts("5536.200", 5)
        (55, 36.2)
        >>> _parse_coordinate_parts("01436.500", 7)
        (14, 36.5)
    """
    if not _DEGREES_MINUTES_PATTERN.fullmatch(value):
        raise FormatError(
            f"Field {index} is not in degrees-minutes format: {value!r}"
        )

    dot_position = value.find(".")
    if dot_position < 0:
        dot_position = len(value)

    degrees = int(value[: dot_position - 2])
    minutes = float(value[dot_position - 2 :])
    if minutes >= _MINUTES_PER_DEGREE:
        raise FormatError(f"Field {index} has minutes >= 60: {value!r}")
    return degrees, minutes


def _parse_hemisphere(
    value: str,
    allowed: tuple[CompassPoint, ...],
    index: int,
) -> CompassPoint:
    for point in allowed:
        if point.value == value:
            return point
    raise FormatError(f"Field {index} is not a valid hemisphere: {value!r}")


def _parse_coordinate(
    value: str,
    hemisphere: str,
    index: int,
    allowed: tuple[CompassPoint, ...],
    maximum: float,
) -> tuple[float, CompassPoint]:
    if not value:
        raise FieldNotAvailableError(index)
    if not hemisphere:
        raise FieldNotAvailableError(index + 1)

    degrees, minutes = _parse_coordinate_parts(value, index)
    decimal_degrees = degrees + minutes / _MINUTES_PER_DEGREE
    if decimal_degrees > maximum:
        raise FormatError(f"Field {index} exceeds {maximum:g} degrees: {value!r}")

    return decimal_degrees, _parse_hemisphere(hemisphere, allowed, index + 1)


def parse_latitude(
    value: str,
    hemisphere: str,
    index: int = 0,
) -> tuple[float, CompassPoint]:
    """Convert an NMEA latitude (DDMM.mmm) and N/S letter to decimal degrees.

    Args:
        value: Latitude token, e.g. "5536.200"
        hemisphere: "N" or "S"
        index: Field index of ``value``, reported in errors

    Returns:
        Tuple of (unsigned decimal degrees, hemisphere)

    Raises:
        FieldNotAvailableError: If either token is empty
        FormatError: If a token is malformed or out of range

    Example:
        >>> parse_latitude("5536.200", "N")
        (55.60333333333333, <CompassPoint.NORTH: 'N'>)
    """
    return _parse_coordinate(value, hemisphere, index, LATITUDE_HEMISPHERES, 90.0)


def parse_longitude(
    value: str,
    hemisphere: str,
    index: int = 0,
) -> tuple[float, CompassPoint]:
    """Convert an NMEA longitude (DDDMM.mmm) and E/W letter to decimal degrees.

    Same contract as parse_latitude, with a 180 degree limit.
    """
    return _parse_coordinate(value, hemisphere, index, LONGITUDE_HEMISPHERES, 180.0)


def _format_degrees_minutes(magnitude: float, degree_digits: int) -> str:
    degrees = math.floor(magnitude)
    minutes = round((magnitude - degrees) * _MINUTES_PER_DEGREE, MINUTE_DECIMALS)
    # 59.9996' rounds up to 60.000'
    if minutes >= _MINUTES_PER_DEGREE:
        degrees += 1
        minutes = 0.0
    minutes_width = MINUTE_DECIMALS + 3
    return (
        f"{degrees:0{degree_digits}d}"
        f"{minutes:0{minutes_width}.{MINUTE_DECIMALS}f}"
    )


def format_latitude(magnitude: float) -> str:
    """Format unsigned decimal degrees as DDMM.mmm.

    Example:
        >>> format_latitude(61 + 1.111 / 60)
        '6101.111'
    """
    return _format_degrees_minutes(magnitude, LATITUDE_DEGREE_DIGITS)


def format_longitude(magnitude: float) -> str:
    """Format unsigned decimal degrees as DDDMM.mmm.

    Example:
        >>> format_longitude(27 + 7.777 / 60)
        '02707.777'
    """
    return _format_degrees_minutes(magnitude, LONGITUDE_DEGREE_DIGITS)


def decode_position(tokens: Sequence[str], index: int = 0) -> Position:
    """Decode [lat, N/S, lon, E/W] tokens starting at field ``index``."""
    latitude, lat_hemisphere = parse_latitude(tokens[0], tokens[1], index)
    longitude, lon_hemisphere = parse_longitude(tokens[2], tokens[3], index + 2)
    return Position(
        latitude=latitude,
        lat_hemisphere=lat_hemisphere,
        longitude=longitude,
        lon_hemisphere=lon_hemisphere,
    )


def encode_position(position: Position) -> list[str]:
    """Encode a position as [lat, N/S, lon, E/W] tokens."""
    return [
        format_latitude(position.latitude),
        position.lat_hemisphere.value,
        format_longitude(position.longitude),
        position.lon_hemisphere.value,
    ]


def decode_waypoint(tokens: Sequence[str], index: int = 0) -> Waypoint:
    """Decode [id, lat, N/S, lon, E/W] tokens starting at field ``index``.

    Raises:
        FieldNotAvailableError: If any of the five tokens is empty
        FormatError: If a coordinate token is malformed
    """
    if not tokens[0]:
        raise FieldNotAvailableError(index)
    return Waypoint.from_position(tokens[0], decode_position(tokens[1:], index + 1))


def encode_waypoint(waypoint: Waypoint) -> list[str]:
    """Encode a waypoint as [id, lat, N/S, lon, E/W] tokens.

    Example:
        >>> wp = Waypoint("MYDEST", 61 + 1.111 / 60, CompassPoint.NORTH,
        ...               27 + 7.777 / 60, CompassPoint.EAST)
        >>> ",".join(encode_waypoint(wp))
        'MYDEST,6101.111,N,02707.777,E'
    """
    return [waypoint.id, *encode_position(waypoint.position)]
