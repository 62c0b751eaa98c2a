"""RMB sentence definition.

RMB (Recommended Minimum Navigation Information) is sent by a navigation
receiver when a destination waypoint is active. It reports cross-track error,
steering direction and range/bearing/closing velocity to the destination.

RMB Sentence Format:
    $GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58
           | |    | | |     |        | |         | |     |     | |
           | |    | | |     |        | |         | |     |     | +-- Status (A/V)
           | |    | | |     |        | |         | |     |     +-- Velocity toward dest.
           | |    | | |     |        | |         | |     +-- Bearing to dest. (0..360)
           | |    | | |     |        | |         | +-- Range to destination
           | |    | | |     +--------+-+---------+-- Destination lat/lon + N/S, E/W
           | |    | | +-- Destination waypoint ID
           | |    | +-- Origin waypoint ID (often blank)
           | |    +-- Steer to correct (L/R)
           | +-- Cross-track error
           +-- Arrival status (A = arrived, V = not arrived)

Only the bearing is range-checked on write. Range, velocity and cross-track
error accept any finite number, negative values included.
"""

from marinenmea.nmea.fields import (
    EnumField,
    FloatField,
    StringField,
    WaypointField,
)
from marinenmea.nmea.sentence import Sentence
from marinenmea.nmea.types import DataStatus, Direction, SentenceType

# --- field indices ------------------------------------------------------------

_ARRIVAL_STATUS = 0
_CROSS_TRACK_ERROR = 1
_STEER_TO = 2
_ORIGIN_ID = 3
_DESTINATION = 4  # ID, latitude, N/S, longitude, E/W (indices 4-8)
_RANGE = 9
_BEARING = 10
_VELOCITY = 11
_STATUS = 12


class RMBSentence(Sentence):
    """Recommended minimum navigation information.

    Every accessor raises FieldNotAvailableError when its field is empty;
    ``del`` on an accessor clears the field.

    Example:
        >>> rmb = RMBSentence.parse(
        ...     "$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58"
        ... )
        >>> rmb.destination.id
        'RUSKI'
        >>> rmb.steer_to
        <Direction.RIGHT: 'R'>
        >>> rmb.has_arrived()
        True
    """

    sentence_type = SentenceType.RMB

    arrival_status = EnumField(
        _ARRIVAL_STATUS,
        DataStatus,
        doc="VALID once the destination circle has been entered.",
    )
    cross_track_error = FloatField(
        _CROSS_TRACK_ERROR,
        doc="Distance off the intended course line, nautical miles.",
    )
    steer_to = EnumField(
        _STEER_TO,
        Direction,
        doc="Direction to steer to get back on course, LEFT or RIGHT.",
    )
    origin_id = StringField(_ORIGIN_ID, doc="ID of the origin waypoint.")
    destination = WaypointField(
        _DESTINATION,
        doc="Destination waypoint; written to all five fields at once.",
    )
    range = FloatField(_RANGE, doc="Range to destination, nautical miles.")
    bearing = FloatField(
        _BEARING,
        minimum=0.0,
        maximum=360.0,
        doc="True bearing to destination, degrees 0..360.",
    )
    velocity = FloatField(
        _VELOCITY,
        doc="Velocity toward destination (closing velocity), knots.",
    )
    status = EnumField(_STATUS, DataStatus, doc="Validity of the sentence data.")

    def has_arrived(self) -> bool:
        """Whether the arrival status reports the destination reached.

        Raises:
            FieldNotAvailableError: If the arrival status field is empty
        """
        return self.arrival_status is DataStatus.VALID
