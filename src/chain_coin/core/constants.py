"""
Chain Coin Core Constants (integer domain)
==========================================

Network-fixed integer constants live here. The display precision ceiling is
derived from the unit ratio, never configured on its own.
"""

# NOTE: All bounds are expressed in base units; CRO values only exist at the I/O boundary.

from decimal import Decimal

# ---------------------------------------------------------------------------
# Supply and unit bridge
# ---------------------------------------------------------------------------

#: Total supply of the network in base units.
TOTAL_SUPPLY_BASE_UNITS: int = 10_000_000_000_000_000_000
TOTAL_SUPPLY_STRING: str = str(TOTAL_SUPPLY_BASE_UNITS)

#: Integer bridge: number of base units per 1 CRO.
UNITS_PER_DISPLAY: int = 100_000_000


def _trailing_zeros(n: int) -> int:
    if n <= 0:
        raise ValueError("unit ratio must be a positive power of ten")
    k = 0
    while n % 10 == 0:
        n //= 10
        k += 1
    if n != 1:
        raise ValueError("unit ratio must be a positive power of ten")
    return k


#: Maximum number of decimal places a CRO amount may carry (8).
DISPLAY_DECIMAL_PLACES: int = _trailing_zeros(UNITS_PER_DISPLAY)


# ---------------------------------------------------------------------------
# Decimal quanta and precision (formatting helpers)
# ---------------------------------------------------------------------------

# One base unit expressed in CRO (1e-8).
BASE_QUANTUM: Decimal = Decimal(1).scaleb(-DISPLAY_DECIMAL_PLACES)

# Precision of the local Decimal context used for rendering; the total supply
# has 20 significant digits, so 28 never rounds.
DEFAULT_DECIMAL_PRECISION: int = 28


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "TOTAL_SUPPLY_BASE_UNITS",
    "TOTAL_SUPPLY_STRING",
    "UNITS_PER_DISPLAY",
    "DISPLAY_DECIMAL_PLACES",
    "BASE_QUANTUM",
    "DEFAULT_DECIMAL_PRECISION",
]
