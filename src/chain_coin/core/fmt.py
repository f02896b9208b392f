"""
Decimal helpers for parsing and rendering (non-core arithmetic).

Core arithmetic on coins uses Python integers. Decimal here is only used to
read base-10 literals and to render CRO values for display; every helper is
exact and never consults the global Decimal context.
"""

import logging
import re
from decimal import Decimal, localcontext
from typing import Optional, Tuple

from .constants import DEFAULT_DECIMAL_PRECISION
from .exc import InvalidFormat

_log = logging.getLogger(__name__)

# Plain base-10 literal: optional sign, ASCII digits with optional fraction, optional exponent.
# Decimal() alone would also accept whitespace, underscores, NaN and Infinity.
_NUMERIC = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_literal(value: str, *, unit: Optional[str] = None) -> Decimal:
    """Parse a base-10 numeric literal into an exact Decimal.

    Raises TypeError for non-str input and InvalidFormat for anything that is
    not a plain numeric literal.
    """
    if not isinstance(value, str):
        raise TypeError(f"amount must be a str, got {type(value).__name__}")
    if _NUMERIC.fullmatch(value) is None:
        _log.debug("rejected literal %r (unit=%s): not base-10", value, unit)
        raise InvalidFormat(
            f"Expected amount to be a base10 number represented as string, got '{value}'",
            value=value,
            unit=unit,
        )
    # Decimal construction from str is exact regardless of context precision.
    return Decimal(value)


def scale_exact(x: Decimal, places: int, *, limit: int) -> Tuple[int, bool]:
    """Return ``(n, exact)`` where n is ``x * 10**places`` truncated toward zero.

    `exact` is True iff no fractional part was dropped. Magnitudes above
    `limit` are reported as ``limit + 1`` (sign preserved). Work is done on the
    digit tuple, so neither huge exponents nor very long literals ever
    materialise an integer wider than `limit`.
    """
    if not x.is_finite():
        raise InvalidFormat(f"Expected a finite amount, got '{x}'", value=x)
    sign, digits, exp = x.as_tuple()
    if not any(digits):
        return 0, True

    # The coefficient tuple carries no leading zeros once it is non-zero.
    width = len(digits)
    max_width = len(str(limit))
    e = exp + places
    if e >= 0:
        if width + e > max_width:
            n = limit + 1
        else:
            n = min(int("".join(map(str, digits))) * 10 ** e, limit + 1)
        exact = True
    elif -e >= width:
        # Entirely fractional: integer part is zero, remainder non-zero.
        n, exact = 0, False
    else:
        head, tail = digits[: width + e], digits[width + e :]
        exact = not any(tail)
        if len(head) > max_width:
            n = limit + 1
        else:
            n = min(int("".join(map(str, head))), limit + 1)
    return (-n if sign else n), exact


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def shift_down(n: int, quantum: Decimal) -> Decimal:
    """Return ``n * quantum`` as an exact Decimal (e.g. base units -> CRO)."""
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_DECIMAL_PRECISION, len(str(abs(n))) + len(quantum.as_tuple().digits))
        return Decimal(n) * quantum


def fmt_plain(x: Decimal) -> str:
    """Render a Decimal in positional notation with trailing zeros trimmed.

      Decimal('1.00000000') -> '1'
      Decimal('1E-8')       -> '0.00000001'
      Decimal('1.2E+3')     -> '1200'
    """
    if x.is_zero():
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(DEFAULT_DECIMAL_PRECISION, len(x.as_tuple().digits))
        return format(x.normalize(), "f")


__all__ = [
    "parse_literal",
    "scale_exact",
    "shift_down",
    "fmt_plain",
]
