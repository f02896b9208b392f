"""
Top-level API for chain_coin.

Exposes the Coin value type used wherever the SDK states balances, fees or
transfer amounts, together with its unit enumeration, network constants and
error taxonomy. Key derivation, keypairs and address encoding live elsewhere
and do not depend on this package.
"""

from __future__ import annotations

from .core import (
    TOTAL_SUPPLY_BASE_UNITS,
    TOTAL_SUPPLY_STRING,
    UNITS_PER_DISPLAY,
    DISPLAY_DECIMAL_PLACES,
    Unit,
    Coin,
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

__version__ = "0.1.0"

__all__ = [
    # network constants
    "TOTAL_SUPPLY_BASE_UNITS",
    "TOTAL_SUPPLY_STRING",
    "UNITS_PER_DISPLAY",
    "DISPLAY_DECIMAL_PLACES",
    # value type
    "Unit",
    "Coin",
    # errors
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
