"""
Chain Coin Core
===============

Unified exports for the integer-domain Coin primitive and its helpers.
All arithmetic is exact on Python integers in base units; Decimal helpers are
provided *only* for parsing literals and for display.
"""

# Integer-domain constants
from .constants import (
    TOTAL_SUPPLY_BASE_UNITS,
    TOTAL_SUPPLY_STRING,
    UNITS_PER_DISPLAY,
    DISPLAY_DECIMAL_PLACES,
)

# Decimal quanta and precision (formatting helpers)
from .constants import (
    BASE_QUANTUM,
    DEFAULT_DECIMAL_PRECISION,
)

# Decimal parsing/formatting helpers (non-core arithmetic)
from .fmt import (
    parse_literal,
    fmt_plain,
)

# Coin primitive and bridges
from .coin import (
    Unit,
    Coin,
    cro_from_base,
    base_from_cro,
)

# Core exceptions
from .exc import (
    CoinError,
    CoinValidationError,
    CoinArithmeticError,
    InvalidFormat,
    FractionalBaseUnit,
    ExcessPrecision,
    NegativeAmount,
    ExceedsTotalSupply,
    TotalSupplyExceeded,
    NegativeResult,
)

__all__ = [
    # constants
    "TOTAL_SUPPLY_BASE_UNITS",
    "TOTAL_SUPPLY_STRING",
    "UNITS_PER_DISPLAY",
    "DISPLAY_DECIMAL_PLACES",
    "BASE_QUANTUM",
    "DEFAULT_DECIMAL_PRECISION",
    # fmt
    "parse_literal",
    "fmt_plain",
    # coin
    "Unit",
    "Coin",
    "cro_from_base",
    "base_from_cro",
    # exceptions
    "CoinError",
    "CoinValidationError",
    "CoinArithmeticError",
    "InvalidFormat",
    "FractionalBaseUnit",
    "ExcessPrecision",
    "NegativeAmount",
    "ExceedsTotalSupply",
    "TotalSupplyExceeded",
    "NegativeResult",
]
