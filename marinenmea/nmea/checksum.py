"""NMEA checksum calculation and validation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the start delimiter
('$' or '!') and '*' (both exclusive), then represented as a two-digit
uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58
     ^                      checksum content                   ^^
     address                                       checksum (0x58 = 88)
"""

from marinenmea.nmea.errors import ChecksumError, FormatError
from marinenmea.nmea.tokenizer import BEGIN_CHARS, CHECKSUM_DELIMITER


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Raw NMEA sentence string (e.g., "$GPRMB,...*58")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' (or '!') start delimiter
        - Missing '*' checksum delimiter
        - Checksum is not exactly 2 characters (truncated sentence)

    Example:
        >>> _extract_checksum_parts("$GPRMB,A*58")
        ('GPRMB,A', '58')
    """
    if not sentence.startswith(BEGIN_CHARS) or CHECKSUM_DELIMITER not in sentence:
        return None

    end = sentence.index(CHECKSUM_DELIMITER)
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if len(provided) != 2:
        return None

    return content, provided


def _calculate_xor_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The string between the start delimiter and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)

    Raises:
        FormatError: If the content is not 7-bit ASCII
    """
    try:
        data = content.encode("ascii")
    except UnicodeEncodeError:
        raise FormatError(f"Sentence body is not ASCII: {content!r}") from None

    result = 0
    for byte in data:
        result ^= byte
    return result


def calculate_checksum(content: str) -> str:
    """Calculate the checksum of a sentence body as two uppercase hex digits.

    Args:
        content: Address and fields, without start delimiter or '*'

    Returns:
        Two-character checksum string, e.g. "58"

    Raises:
        FormatError: If the content is not 7-bit ASCII

    Example:
        >>> calculate_checksum("GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V")
        '58'
    """
    return f"{_calculate_xor_checksum(content):02X}"


def verify_checksum(content: str, provided: str) -> None:
    """Verify a received checksum against the one computed from the body.

    Lowercase hex digits are accepted.

    Args:
        content: Address and fields, without start delimiter or '*'
        provided: The two hex digits received after '*'

    Raises:
        ChecksumError: If the checksums differ or ``provided`` is not hex.
        FormatError: If the content is not 7-bit ASCII
    """
    computed = calculate_checksum(content)
    if provided.upper() != computed:
        raise ChecksumError(computed=computed, received=provided)


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Lenient check for callers that only need to filter lines; it never raises.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if:
        - Sentence is malformed (missing delimiters)
        - Checksum is truncated or non-hexadecimal
        - Calculated checksum doesn't match provided checksum
        - Content contains non-ASCII characters

    Example:
        >>> validate_checksum("$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*58")
        True
        >>> validate_checksum("$GPRMB,A,0.00,R,,RUSKI,5536.200,N,01436.500,E,432.3,234.9,,V*FF")
        False
    """
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return False

    content, provided = parts

    try:
        verify_checksum(content, provided)
    except (ChecksumError, FormatError):
        return False
    return True
