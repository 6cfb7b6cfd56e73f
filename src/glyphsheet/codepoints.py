"""Code-point enumeration.

:func:`enumerate_code_points` produces the ordered sequence of code points a
sheet covers.  The result is a :class:`range`: lazy, finite, indexable and
restartable, holding every value of the closed interval ``[low, high]`` once
in ascending order.  An inverted interval (``low > high``) yields the empty
sequence rather than an error; configuration loading is where such a range is
rejected for the command line.
"""

from __future__ import annotations

from collections.abc import Sequence

from glyphsheet.utils.errors import ConfigError

MAX_CODE_POINT = 0x10FFFF
SURROGATE_FIRST = 0xD800
SURROGATE_LAST = 0xDFFF


def check_code_point(value: int, *, name: str = "code point") -> int:
    """Return ``value`` if it lies in ``[0, MAX_CODE_POINT]``."""

    if not 0 <= value <= MAX_CODE_POINT:
        raise ConfigError(f"{name} {value:#x} outside [0x0, {MAX_CODE_POINT:#x}]")
    return value


def enumerate_code_points(low: int, high: int) -> Sequence[int]:
    """Return the code points ``low`` through ``high`` inclusive.

    Parameters
    ----------
    low, high:
        Closed bounds of the interval.  Both must be valid code points.

    Returns
    -------
    Sequence[int]
        ``high - low + 1`` ascending values, or an empty sequence when
        ``low > high``.
    """

    check_code_point(low, name="low bound")
    check_code_point(high, name="high bound")
    return range(low, high + 1)


def parse_code_point(text: str) -> int:
    """Parse ``text`` as a decimal, ``0x`` hex or ``U+`` code point."""

    raw = text.strip()
    try:
        if raw[:2].upper() == "U+":
            return int(raw[2:], 16)
        return int(raw, 0)
    except ValueError as exc:
        raise ConfigError(f"invalid code point {text!r}", cause=exc) from exc


__all__ = [
    "MAX_CODE_POINT",
    "SURROGATE_FIRST",
    "SURROGATE_LAST",
    "check_code_point",
    "enumerate_code_points",
    "parse_code_point",
]
