"""Base-36 text form of druuids, for URLs and other compact contexts."""

import re

from druuid.core.errors import ParseError
from druuid.internal.logging import get_logger

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"
_BASE36_RE = re.compile(r"[0-9a-zA-Z]+")


def encode(druuid):
    """Encode a druuid as a lowercase base-36 string."""
    if druuid < 0:
        raise ValueError(f"druuid must be non-negative, got {druuid}")
    if druuid == 0:
        return "0"

    chars = []
    n = druuid
    while n > 0:
        n, remainder = divmod(n, 36)
        chars.append(BASE36[remainder])

    return "".join(reversed(chars))


def decode(text):
    """Decode a base-36 string (any case) back to a druuid."""
    if not isinstance(text, str) or not _BASE36_RE.fullmatch(text):
        get_logger().debug("druuid decode rejected", value=text)
        raise ParseError(f"not a base-36 druuid: {text!r}", value=text)
    try:
        return int(text, 36)
    except ValueError as exc:
        # int() refuses overly long digit strings
        raise ParseError(f"not a base-36 druuid: {text[:32]!r}...", value=text, cause=exc) from exc
