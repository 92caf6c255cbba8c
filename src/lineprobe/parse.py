"""Strict unsigned integer parsing for whitespace-delimited tokens."""

from __future__ import annotations

from .errors import ParseError

U64_MAX = 2**64 - 1

_DIGITS = frozenset("0123456789")


def parse_u64(token: str) -> int:
    """Parse ``token`` as an unsigned 64-bit integer.

    Accepts an optional leading ``+`` followed by ASCII digits, the same
    shape C's ``strtoull`` accepts for a base-10 unsigned value. The whole
    token must be consumed: ``"12abc"`` is rejected rather than read as 12.

    Args:
        token: A single token with no surrounding whitespace

    Returns:
        The parsed value, in ``[0, U64_MAX]``

    Raises:
        ParseError: If the token is empty, signed negative, contains anything
            other than ASCII digits, or does not fit in 64 bits
    """
    digits = token[1:] if token.startswith("+") else token
    if not digits:
        raise ParseError(token, "cannot parse integer from empty string")
    # str.isdigit() also accepts non-ASCII digits such as "²" or "٣"
    if not set(digits) <= _DIGITS:
        raise ParseError(token, "invalid digit found in string")

    significant = digits.lstrip("0") or "0"
    # int() refuses very long digit strings (sys.set_int_max_str_digits)
    if len(significant) > len(str(U64_MAX)) or int(significant) > U64_MAX:
        raise ParseError(token, "number too large to fit in target type")
    return int(significant)


__all__ = ["U64_MAX", "parse_u64"]
