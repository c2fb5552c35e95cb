"""Forgiving integer parsing for noisy command and file output."""

from ..errors import NumericParseError
from ..types import Data, Number, Text

ASCII_DIGITS = frozenset("0123456789")

# Largest value a numeric widget accepts (signed 32-bit range)
MAX_NUMBER = 2**31 - 1


def strip_newline(raw: str) -> str:
    """Remove exactly one trailing newline, if present."""
    if raw.endswith("\n"):
        return raw[:-1]
    return raw


def scrape_digits(raw: str) -> str:
    """Keep only ASCII decimal digits, in their original order.

    Letters, whitespace, punctuation and signs are all discarded, so
    ``"-12 of 3"`` scrapes to ``"123"``.
    """
    return "".join(c for c in raw if c in ASCII_DIGITS)


def parse_number(raw: str, source: str = "") -> int:
    """Parse the digits scraped from raw text as a non-negative integer.

    Args:
        raw: Text sampled from a widget source
        source: Description of the source, used in error messages

    Returns:
        Integer formed by every digit in raw

    Raises:
        NumericParseError: If raw holds no digits or the value exceeds MAX_NUMBER
    """
    digits = scrape_digits(raw)
    if not digits:
        raise NumericParseError(source, raw)

    # Reject long digit runs before int() so huge inputs never reach the
    # interpreter's digit limit
    significant = digits.lstrip("0") or "0"
    if len(significant) > len(str(MAX_NUMBER)) or int(significant) > MAX_NUMBER:
        raise NumericParseError(source, raw, reason=f"value exceeds {MAX_NUMBER}")
    return int(significant)


def to_data(raw: str, is_numeric: bool, source: str = "") -> Data:
    """Convert one sampled line into a Number or Text value."""
    text = strip_newline(raw)
    if is_numeric:
        return Number(parse_number(text, source))
    return Text(text)
