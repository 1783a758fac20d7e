"""
Numeric Coercion - Lenient integer parsing for loosely-typed record fields.

Upstream CSV/JSON exports store scores as ints, floats, numeric strings,
"NaN", "" or null. Two flavours:

- to_int_or_zero: missing means 0 (rank arithmetic, display defaults)
- to_int_or_none: missing means unknown (None), distinct from a real 0

Both stringify first and parse a leading base-10 integer ("12abc" -> 12,
"3.9" -> 3), so every input type is handled the same way. Neither raises.
"""

import re
from typing import Optional

_LEADING_INT_RE = re.compile(r"^[+-]?[0-9]+")


def _parse_leading_int(value) -> Optional[int]:
    if value is None:
        return None
    match = _LEADING_INT_RE.match(str(value).strip())
    if not match:
        return None
    try:
        return int(match.group())
    except ValueError:
        # Past the interpreter's int-string digit limit; no real score is that long
        return None


def to_int_or_zero(value) -> int:
    """Parse an integer; anything unparseable (None, "", "n/a") gives 0."""
    parsed = _parse_leading_int(value)
    return parsed if parsed is not None else 0


def to_int_or_none(value) -> Optional[int]:
    """Parse an integer; None, "", "NaN" and junk give None (unknown)."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text.lower() == "nan":
        return None
    return _parse_leading_int(text)
