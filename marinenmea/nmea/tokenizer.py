"""Sentence tokenizer.

Splits a raw NMEA line into its framing parts and field tokens:

    $GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58
    |  |   |                                                  |  |
    |  |   +-- fields (empty strings preserved) --------------+  +-- checksum
    |  +-- address: talker ID (GP) + sentence ID (RMB)
    +-- start delimiter ('$', or '!' for encapsulation sentences)

Only the framing is validated here. Checking the field count against the
sentence type is left to the sentence definition.
"""

import re
from dataclasses import dataclass

from marinenmea.nmea.errors import FramingError

BEGIN_CHARS = ("$", "!")
FIELD_DELIMITER = ","
CHECKSUM_DELIMITER = "*"

_ADDRESS_PATTERN = re.compile(r"[A-Z0-9]{3,10}")
_CHECKSUM_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")


@dataclass(frozen=True)
class RawSentence:
    """Framing parts of a tokenized sentence.

    Attributes:
        begin_char: '$' or '!'.
        address: Talker ID followed by sentence ID, e.g. "GPRMB".
        fields: Tokens between the address and '*', in wire order.
        checksum: The two hex digits after '*', exactly as received.
    """

    begin_char: str
    address: str
    fields: tuple[str, ...]
    checksum: str

    @property
    def content(self) -> str:
        """The checksummed body: address and fields joined by commas."""
        return FIELD_DELIMITER.join((self.address, *self.fields))


def tokenize(line: str) -> RawSentence:
    """Split a raw sentence line into begin char, address, fields and checksum.

    Surrounding whitespace, including the CR/LF terminator, is ignored.

    Args:
        line: Raw NMEA sentence as received from a transport

    Returns:
        RawSentence with every field token in order, including trailing
        empty fields

    Raises:
        FramingError: If the start delimiter, address, or checksum delimiter
            is missing or malformed.

    Example:
        >>> tokenize("$GPRMB,A,,V*71").fields
        ('A', '', 'V')
    """
    sentence = line.strip()

    if not sentence:
        raise FramingError("Empty sentence")
    if sentence[0] not in BEGIN_CHARS:
        raise FramingError(
            f"Sentence must start with one of {BEGIN_CHARS}: {sentence!r}"
        )

    delimiter_count = sentence.count(CHECKSUM_DELIMITER)
    if delimiter_count != 1:
        raise FramingError(
            f"Expected exactly one '{CHECKSUM_DELIMITER}', found {delimiter_count}: "
            f"{sentence!r}"
        )

    body, checksum = sentence[1:].split(CHECKSUM_DELIMITER)
    if not _CHECKSUM_PATTERN.fullmatch(checksum):
        raise FramingError(f"Malformed checksum {checksum!r}: {sentence!r}")

    address, *fields = body.split(FIELD_DELIMITER)
    if not _ADDRESS_PATTERN.fullmatch(address):
        raise FramingError(f"Malformed address {address!r}: {sentence!r}")

    return RawSentence(
        begin_char=sentence[0],
        address=address,
        fields=tuple(fields),
        checksum=checksum,
    )
