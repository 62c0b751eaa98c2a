"""NMEA 0183 sentence field engine and sentence definitions (RMB, GGA, VTG)."""

from marinenmea.nmea.checksum import (
    calculate_checksum,
    validate_checksum,
    verify_checksum,
)
from marinenmea.nmea.coordinates import (
    decode_position,
    decode_waypoint,
    encode_position,
    encode_waypoint,
)
from marinenmea.nmea.errors import (
    ChecksumError,
    FieldCountError,
    FieldNotAvailableError,
    FormatError,
    FramingError,
    InvalidArgumentError,
    NMEAError,
    RangeError,
    SentenceTypeError,
)
from marinenmea.nmea.gga import GGASentence
from marinenmea.nmea.rmb import RMBSentence
from marinenmea.nmea.sentence import Sentence
from marinenmea.nmea.tokenizer import RawSentence, tokenize
from marinenmea.nmea.types import (
    CompassPoint,
    DataStatus,
    Direction,
    FaaMode,
    GpsFixQuality,
    Position,
    SentenceType,
    Waypoint,
)
from marinenmea.nmea.vtg import VTGSentence

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
    "RawSentence",
    "Sentence",
    "SentenceType",
    "SentenceTypeError",
    "VTGSentence",
    "Waypoint",
    "calculate_checksum",
    "decode_position",
    "decode_waypoint",
    "encode_position",
    "encode_waypoint",
    "tokenize",
    "validate_checksum",
    "verify_checksum",
]
