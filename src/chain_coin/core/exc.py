"""
Core exception types for chain_coin.core.

These are dependency-free and may be imported by all core modules.
Construction-level failures derive from CoinValidationError; failures of an
operation on two valid coins derive from CoinArithmeticError.
"""

__all__ = [
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


class CoinError(Exception):
    """Base class for every amount error raised by chain_coin."""
    pass


class CoinValidationError(CoinError):
    """Raised when an input cannot become a valid Coin.

    Attributes
    ----------
    value : Any
        The offending input (string literal or candidate base amount).
    unit : str | None
        Unit the input was expressed in ("base" or "cro"), when known.
    """

    def __init__(self, message, *, value=None, unit=None):
        super().__init__(message)
        self.value = value
        self.unit = unit


class CoinArithmeticError(CoinError):
    """Raised when an operation on two valid coins would break an invariant."""

    def __init__(self, message, *, left=None, right=None):
        super().__init__(message)
        self.left = left
        self.right = right


class InvalidFormat(CoinValidationError):
    """Raised when the input is not a base-10 numeric literal."""
    pass


class FractionalBaseUnit(CoinValidationError):
    """Raised when a base-unit amount is not an integer."""
    pass


class ExcessPrecision(CoinValidationError):
    """Raised when a CRO amount carries more decimals than base units can hold."""
    pass


class NegativeAmount(CoinValidationError):
    """Raised when an amount is below zero."""
    pass


class ExceedsTotalSupply(CoinValidationError):
    """Raised when an amount is above the network total supply."""
    pass


class TotalSupplyExceeded(ExceedsTotalSupply, CoinArithmeticError):
    """Raised when adding two valid coins would exceed the total supply."""

    def __init__(self, message, *, left=None, right=None, value=None):
        CoinValidationError.__init__(self, message, value=value, unit="base")
        self.left = left
        self.right = right


class NegativeResult(CoinArithmeticError):
    """Raised when subtracting would produce a negative coin."""
    pass
