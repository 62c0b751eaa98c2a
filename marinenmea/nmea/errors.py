"""Exceptions raised while parsing, reading and writing NMEA sentences.

Parse-time errors (framing, checksum, sentence type, field count) abort the
construction of a sentence. Read-time errors (missing or malformed field) are
local to a single accessor call. Write-time errors (range, invalid argument)
are raised before anything is written, so the sentence is left unmodified.
"""


class NMEAError(Exception):
    """Base class for all errors raised by this package."""


class FramingError(NMEAError, ValueError):
    """The start delimiter, address or checksum delimiter is missing or malformed."""


class ChecksumError(NMEAError, ValueError):
    """The checksum computed over the sentence body differs from the received one.

    Attributes:
        computed: Two-digit uppercase hex checksum calculated from the body.
        received: Two-digit hex checksum found after the '*' delimiter.
    """

    def __init__(self, computed: str, received: str) -> None:
        super().__init__(
            f"Checksum mismatch: computed {computed}, received {received}"
        )
        self.computed = computed
        self.received = received


class SentenceTypeError(NMEAError, ValueError):
    """The parsed sentence ID is not the one the sentence class implements."""


class FieldCountError(NMEAError, ValueError):
    """The number of fields does not match the declared count for the sentence type.

    Attributes:
        expected: Field count declared by the sentence type.
        actual: Field count found in the parsed line.
    """

    def __init__(self, sentence_id: str, expected: int, actual: int) -> None:
        super().__init__(
            f"{sentence_id} requires {expected} fields, got {actual}"
        )
        self.expected = expected
        self.actual = actual


class FieldNotAvailableError(NMEAError, LookupError):
    """A typed read found the field empty ("not available" on the wire)."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Field {index} is empty")
        self.index = index


class FormatError(NMEAError, ValueError):
    """A field's content cannot be parsed as its declared type."""


class RangeError(NMEAError, ValueError):
    """A setter received a number outside the field's valid interval."""


class InvalidArgumentError(NMEAError, ValueError):
    """A setter received a value of the wrong type or outside the accepted set."""
