"""Sentence base class: construction, parsing and serialization.

A Sentence holds the begin character, the address (talker ID + sentence ID)
and a fixed-size list of field tokens. Concrete sentence classes bind one
SentenceType member and declare typed accessors with the descriptors from
``marinenmea.nmea.fields``:

    >>> rmb = RMBSentence.parse(
    ...     "$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58"
    ... )
    >>> rmb.bearing = 180.0
    >>> rmb.to_sentence()
    '$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,180.0,,V*5D'

Parsing runs tokenize -> checksum -> sentence ID -> field count and raises on
the first failure. Serialization always recomputes the checksum.
"""

import logging
import re
from collections.abc import Sequence
from typing import ClassVar, TypeVar

from marinenmea.nmea.checksum import calculate_checksum, verify_checksum
from marinenmea.nmea.errors import (
    ChecksumError,
    FieldCountError,
    InvalidArgumentError,
    SentenceTypeError,
)
from marinenmea.nmea.tokenizer import (
    BEGIN_CHARS,
    CHECKSUM_DELIMITER,
    FIELD_DELIMITER,
    tokenize,
)
from marinenmea.nmea.types import SentenceType

logger = logging.getLogger(__name__)

# --- sentence defaults --------------------------------------------------------

DEFAULT_TALKER_ID = "GP"
TERMINATOR = "\r\n"
# Including begin char, checksum and terminator, per NMEA 0183.
MAX_SENTENCE_LENGTH = 82
PROPRIETARY_PREFIX = "P"

# Common talker IDs. Others are accepted as long as they are well formed:
#   GP = GPS (USA)            GN = Multi-GNSS (combined solution)
#   GL = GLONASS (Russia)     GA = Galileo (Europe)
#   GB = BeiDou (China)       GQ = QZSS (Japan)
#   II = Integrated instrumentation
#   EC = Electronic chart display (ECDIS)
KNOWN_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ", "II", "EC")

_TALKER_ID_PATTERN = re.compile(r"[A-Z0-9]{2}")

SentenceT = TypeVar("SentenceT", bound="Sentence")


def _split_address(address: str) -> tuple[str, str]:
    """Split an address into (talker ID, sentence ID).

    Proprietary sentences use the single letter 'P' as their talker.

    Example:
        >>> _split_address("GPRMB")
        ('GP', 'RMB')
        >>> _split_address("PGRME")
        ('P', 'GRME')
    """
    if address.startswith(PROPRIETARY_PREFIX):
        return PROPRIETARY_PREFIX, address[1:]
    return address[:2], address[2:]


class Sentence:
    """Base class for NMEA sentences with a fixed field layout.

    Subclasses set ``sentence_type`` and may set ``fixed_fields`` for tokens
    that are constant for the type (unit letters and the like); these are
    written on construction and on ``reset()``.

    Args:
        talker_id: Two-character talker ID for a new, empty sentence.
        begin_char: '$' for regular sentences, '!' for encapsulation.
    """

    sentence_type: ClassVar[SentenceType]
    fixed_fields: ClassVar[dict[int, str]] = {}

    def __init__(
        self,
        talker_id: str = DEFAULT_TALKER_ID,
        begin_char: str = "$",
    ) -> None:
        if begin_char not in BEGIN_CHARS:
            raise InvalidArgumentError(
                f"begin_char must be one of {BEGIN_CHARS}, got {begin_char!r}"
            )
        self._begin_char = begin_char
        self._talker_id = ""
        self.talker_id = talker_id
        self._fields = [""] * self.field_count
        self._apply_fixed_fields()

    @classmethod
    def parse(cls: type[SentenceT], line: str) -> SentenceT:
        """Parse a raw line into a sentence of this class.

        Args:
            line: Raw NMEA sentence, with or without CR/LF terminator

        Returns:
            A new sentence holding the line's tokens verbatim

        Raises:
            FramingError: Start delimiter, address or checksum malformed
            ChecksumError: Checksum does not match the body
            FormatError: The sentence body is not 7-bit ASCII
            SentenceTypeError: Sentence ID differs from ``cls.sentence_type``
            FieldCountError: Field count differs from the declared count
        """
        raw = tokenize(line)
        try:
            verify_checksum(raw.content, raw.checksum)
        except ChecksumError:
            logger.debug("Rejected sentence with bad checksum: %r", line)
            raise

        talker_id, sentence_id = _split_address(raw.address)
        expected = cls.sentence_type
        if sentence_id != expected.sentence_id:
            raise SentenceTypeError(
                f"Expected {expected.sentence_id} sentence, got {sentence_id}"
            )
        if len(raw.fields) != expected.field_count:
            raise FieldCountError(sentence_id, expected.field_count, len(raw.fields))

        sentence = cls.__new__(cls)
        sentence._begin_char = raw.begin_char
        sentence._talker_id = talker_id
        sentence._fields = list(raw.fields)
        logger.debug("Parsed %s sentence from talker %s", sentence_id, talker_id)
        return sentence

    # --- address --------------------------------------------------------------

    @property
    def begin_char(self) -> str:
        return self._begin_char

    @property
    def talker_id(self) -> str:
        """Talker ID, e.g. "GP". Settable to any two uppercase alphanumerics."""
        return self._talker_id

    @talker_id.setter
    def talker_id(self, value: str) -> None:
        if not isinstance(value, str) or not _TALKER_ID_PATTERN.fullmatch(value):
            raise InvalidArgumentError(
                f"talker_id must be two uppercase letters or digits, got {value!r}"
            )
        self._talker_id = value

    @property
    def sentence_id(self) -> str:
        return self.sentence_type.sentence_id

    @property
    def address(self) -> str:
        return f"{self._talker_id}{self.sentence_id}"

    def is_proprietary(self) -> bool:
        return self._talker_id == PROPRIETARY_PREFIX

    # --- fields ---------------------------------------------------------------

    @property
    def field_count(self) -> int:
        return self.sentence_type.field_count

    @property
    def fields(self) -> tuple[str, ...]:
        """Current field tokens, read-only."""
        return tuple(self._fields)

    def reset(self) -> None:
        """Clear every field to empty, keeping the type's fixed tokens."""
        self._fields = [""] * self.field_count
        self._apply_fixed_fields()

    def _apply_fixed_fields(self) -> None:
        for index, token in self.fixed_fields.items():
            self._fields[index] = token

    def _read_fields(self, start: int, count: int) -> tuple[str, ...]:
        return tuple(self._fields[start : start + count])

    def _write_fields(self, start: int, tokens: Sequence[str]) -> None:
        end = start + len(tokens)
        if start < 0 or end > self.field_count:
            raise IndexError(
                f"Fields {start}..{end - 1} outside {self.sentence_id} layout"
            )
        # One slice assignment: readers never see a partially written composite.
        self._fields[start:end] = tokens

    # --- serialization --------------------------------------------------------

    def to_sentence(self) -> str:
        """Serialize to wire format without terminator, checksum recomputed."""
        content = FIELD_DELIMITER.join((self.address, *self._fields))
        return (
            f"{self._begin_char}{content}"
            f"{CHECKSUM_DELIMITER}{calculate_checksum(content)}"
        )

    def to_line(self) -> str:
        """Serialize to wire format including the CR/LF terminator."""
        return self.to_sentence() + TERMINATOR

    def exceeds_max_length(self) -> bool:
        """Whether the serialized line is longer than NMEA 0183 allows."""
        return len(self.to_line()) > MAX_SENTENCE_LENGTH

    def __str__(self) -> str:
        return self.to_sentence()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_sentence()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sentence):
            return NotImplemented
        return self.to_sentence() == other.to_sentence()

    __hash__ = None  # type: ignore[assignment]
