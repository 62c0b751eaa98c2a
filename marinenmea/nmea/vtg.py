"""VTG sentence definition.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.
This is essential for navigation and sensor fusion applications that need
ground speed and heading data.

VTG Sentence Format:
    $GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (A/D/E/M/S/N)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
Pre-2.3 receivers omit the mode indicator; such 8-field sentences are rejected
with FieldCountError because the field count of a sentence type is fixed.
"""

from marinenmea.nmea.fields import EnumField, FloatField
from marinenmea.nmea.sentence import Sentence
from marinenmea.nmea.types import FaaMode, SentenceType

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


class VTGSentence(Sentence):
    """Track made good and ground speed.

    The unit letters (T, M, N, K) are fixed and preset on a new sentence.
    Both course fields are checked against 0..360 on write.
    """

    sentence_type = SentenceType.VTG
    fixed_fields = {1: "T", 3: "M", 5: "N", 7: "K"}

    true_course = FloatField(0, minimum=0.0, maximum=360.0)
    magnetic_course = FloatField(2, minimum=0.0, maximum=360.0)
    speed_knots = FloatField(4)
    speed_kilometers_per_hour = FloatField(6)
    mode = EnumField(8, FaaMode)

    @property
    def speed_meters_per_second(self) -> float:
        """Ground speed in m/s, derived from the km/h field.

        Many robotics and sensor fusion algorithms expect SI units (m/s).

        Raises:
            FieldNotAvailableError: If the km/h field is empty
        """
        return (
            self.speed_kilometers_per_hour / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND
        )

    def is_valid(self) -> bool:
        """Navigation validity: the mode indicator is not NONE (not valid).

        Raises:
            FieldNotAvailableError: If the mode field is empty
        """
        return self.mode is not FaaMode.NONE
