"""Typed, mutable NMEA 0183 sentences with round-trip wire encoding."""

import logging

from marinenmea.nmea import (
    ChecksumError,
    CompassPoint,
    DataStatus,
    Direction,
    FaaMode,
    FieldCountError,
    FieldNotAvailableError,
    FormatError,
    FramingError,
    GGASentence,
    GpsFixQuality,
    InvalidArgumentError,
    NMEAError,
    Position,
    RangeError,
    RMBSentence,
    Sentence,
    SentenceType,
    SentenceTypeError,
    VTGSentence,
    Waypoint,
    validate_checksum,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChecksumError",
    "CompassPoint",
    "DataStatus",
    "Direction",
    "FaaMode",
    "FieldCountError",
    "FieldNotAvailableError",
    "FormatError",
    "FramingError",
    "GGASentence",
    "GpsFixQuality",
    "InvalidArgumentError",
    "NMEAError",
    "Position",
    "RMBSentence",
    "RangeError",
    "Sentence",
    "SentenceType",
    "SentenceTypeError",
    "VTGSentence",
    "Waypoint",
    "validate_checksum",
]
