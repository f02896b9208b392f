"""
Coin primitive: an immutable, non-negative amount of the native token held as
integer base units.

- Base units are Python integers (arbitrary precision); Decimal is only used to
  read literals and to render CRO values.
- Bounded domain: 0 <= base_amount <= TOTAL_SUPPLY_BASE_UNITS. Inputs outside
  it are rejected, never clamped or rounded.
- One validated path per unit: base-unit literals and CRO literals are both
  scaled to an exact integer candidate and run through the same checks.
- Arithmetic is limited to exact add/sub; results are re-validated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Type, Union

from .constants import (
    BASE_QUANTUM,
    DISPLAY_DECIMAL_PLACES,
    TOTAL_SUPPLY_BASE_UNITS,
)
from .exc import (
    ExceedsTotalSupply,
    ExcessPrecision,
    FractionalBaseUnit,
    NegativeAmount,
    NegativeResult,
    TotalSupplyExceeded,
)
from .fmt import fmt_plain, parse_literal, scale_exact, shift_down

_log = logging.getLogger(__name__)


# ----------------------------
# Units
# ----------------------------

class Unit(str, Enum):
    """Denomination of an amount: indivisible base unit or CRO (display unit)."""

    BASE = "base"
    CRO = "cro"

    # Alias: CRO is the human-facing display unit.
    DISPLAY = "cro"

    @classmethod
    def parse(cls, unit: Union["Unit", str]) -> "Unit":
        if isinstance(unit, cls):
            return unit
        if isinstance(unit, str):
            try:
                return cls(unit.lower())
            except ValueError:
                pass
        raise TypeError(f"Expected unit to be one of {[u.value for u in cls]}, got {unit!r}")

    @property
    def decimal_places(self) -> int:
        return 0 if self is Unit.BASE else DISPLAY_DECIMAL_PLACES

    @property
    def quantum(self) -> Decimal:
        """Value of one base unit expressed in this unit."""
        return Decimal(1) if self is Unit.BASE else BASE_QUANTUM


# ----------------------------
# Validation (shared by every construction path)
# ----------------------------

def _validate_candidate(candidate: int, exact: bool, *, value, unit: Unit) -> int:
    """Run the supply/sign rules on a scaled base-unit candidate."""
    label = "base" if unit is Unit.BASE else "CRO"
    if not exact:
        _log.debug("rejected %s amount %r: fractional base units", label, value)
        if unit is Unit.BASE:
            raise FractionalBaseUnit(
                f"Expected base amount to be an integer, got '{value}'", value=value, unit=unit.value
            )
        raise ExcessPrecision(
            f"Expected CRO amount to have at most {DISPLAY_DECIMAL_PLACES} decimal places, got '{value}'",
            value=value,
            unit=unit.value,
        )
    if candidate < 0:
        _log.debug("rejected %s amount %r: negative", label, value)
        raise NegativeAmount(
            f"Expected {label} amount to be positive, got '{value}'", value=value, unit=unit.value
        )
    if candidate > TOTAL_SUPPLY_BASE_UNITS:
        _log.debug("rejected %s amount %r: above total supply", label, value)
        raise ExceedsTotalSupply(
            f"Expected {label} amount to be within total supply, got '{value}'", value=value, unit=unit.value
        )
    return candidate


def _parse(value: str, unit: Unit) -> int:
    amount = parse_literal(value, unit=unit.value)
    candidate, exact = scale_exact(amount, unit.decimal_places, limit=TOTAL_SUPPLY_BASE_UNITS)
    return _validate_candidate(candidate, exact, value=value, unit=unit)


# ----------------------------
# Coin
# ----------------------------

@dataclass(frozen=True, order=True)
class Coin:
    """Native token amount in integer base units (bounded, non-negative domain)."""

    base_amount: int

    TOTAL_SUPPLY: ClassVar["Coin"]
    UNITS: ClassVar[Type[Unit]] = Unit
    UNIT_BASE: ClassVar[Unit] = Unit.BASE
    UNIT_CRO: ClassVar[Unit] = Unit.CRO

    def __post_init__(self):
        # bool is an int subclass but never a meaningful amount.
        if not isinstance(self.base_amount, int) or isinstance(self.base_amount, bool):
            raise TypeError(f"base_amount must be an int, got {type(self.base_amount).__name__}")
        _validate_candidate(self.base_amount, True, value=self.base_amount, unit=Unit.BASE)

    # ------------- constructors -------------

    @staticmethod
    def zero() -> "Coin":
        return Coin(0)

    @classmethod
    def parse(cls, value: str, unit: Union[Unit, str] = Unit.BASE) -> "Coin":
        """Create a Coin from a base-10 literal expressed in `unit`."""
        return cls(_parse(value, Unit.parse(unit)))

    @classmethod
    def from_base_unit(cls, value: str) -> "Coin":
        """Create a Coin from a base-unit literal, e.g. "100000000"."""
        return cls(_parse(value, Unit.BASE))

    @classmethod
    def from_display_unit(cls, value: str) -> "Coin":
        """Create a Coin from a CRO literal with at most 8 decimal places, e.g. "1.5"."""
        return cls(_parse(value, Unit.CRO))

    from_cro = from_display_unit

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.base_amount == 0

    # ------------- arithmetic (integer domain) -------------

    def add(self, other: "Coin") -> "Coin":
        """Return self + other; raises TotalSupplyExceeded above total supply."""
        if not isinstance(other, Coin):
            raise TypeError("Coin arithmetic requires Coin operands")
        total = self.base_amount + other.base_amount
        if total > TOTAL_SUPPLY_BASE_UNITS:
            _log.debug("add overflow: %d + %d", self.base_amount, other.base_amount)
            raise TotalSupplyExceeded(
                "Adding two Coin together exceed total supply", left=self, right=other, value=total
            )
        return Coin.from_base_unit(str(total))

    def sub(self, other: "Coin") -> "Coin":
        """Return self - other; raises NegativeResult below zero."""
        if not isinstance(other, Coin):
            raise TypeError("Coin arithmetic requires Coin operands")
        diff = self.base_amount - other.base_amount
        if diff < 0:
            _log.debug("sub underflow: %d - %d", self.base_amount, other.base_amount)
            raise NegativeResult(
                "Subtracting the Coin results in negative Coin", left=self, right=other
            )
        return Coin.from_base_unit(str(diff))

    __add__ = add
    __sub__ = sub

    # ------------- conversions -------------

    def to_decimal(self, unit: Union[Unit, str] = Unit.BASE) -> Decimal:
        """Exact Decimal value of the coin in `unit`."""
        return shift_down(self.base_amount, Unit.parse(unit).quantum)

    def to_string(self, unit: Union[Unit, str] = Unit.BASE) -> str:
        """Canonical string in `unit`: integer for base, trimmed positional for CRO."""
        unit = Unit.parse(unit)
        if unit is Unit.BASE:
            return str(self.base_amount)
        return fmt_plain(self.to_decimal(unit))

    def __str__(self) -> str:
        return self.to_string(Unit.BASE)


Coin.TOTAL_SUPPLY = Coin(TOTAL_SUPPLY_BASE_UNITS)


# ----------------------------
# Decimal bridges (I/O only)
# ----------------------------

def cro_from_base(base: int) -> Decimal:
    """Return the CRO Decimal equivalent of an integer base amount."""
    return Coin(base).to_decimal(Unit.CRO)


def base_from_cro(cro: Decimal) -> int:
    """Return the integer base amount of a CRO Decimal; never rounds."""
    if not isinstance(cro, Decimal):
        raise TypeError(f"base_from_cro expects Decimal, got {type(cro).__name__}")
    candidate, exact = scale_exact(cro, DISPLAY_DECIMAL_PLACES, limit=TOTAL_SUPPLY_BASE_UNITS)
    return _validate_candidate(candidate, exact, value=cro, unit=Unit.CRO)


__all__ = [
    "Unit",
    "Coin",
    "cro_from_base",
    "base_from_cro",
]
