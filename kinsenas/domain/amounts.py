"""Parsing of user-entered monetary text."""

import math
import re

# Plain ASCII decimal literal: optional sign, digits with optional fraction, optional exponent.
# Whitespace, digit separators, non-ASCII digits, inf and nan are not numbers here.
_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_amount(text: str) -> float:
    """Parse monetary text, falling back to zero.

    The text itself is never modified, so an invalid entry stays visible for
    further editing while counting as 0 in every total.

    Args:
        text: Text as typed by the user (e.g., "26000", "1157.50").

    Returns:
        Parsed amount, or 0.0 if the text is not a plain decimal number or
        overflows to infinity (e.g., "1e400").
    """
    if not _AMOUNT_RE.fullmatch(text):
        return 0.0
    value = float(text)
    if not math.isfinite(value):
        return 0.0
    return value
