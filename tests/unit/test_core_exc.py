import pytest

from chain_coin.core.exc import (
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


@pytest.mark.parametrize(
    "cls",
    [InvalidFormat, FractionalBaseUnit, ExcessPrecision, NegativeAmount, ExceedsTotalSupply],
)
def test_construction_errors_are_validation_errors(cls):
    err = cls("boom", value="1.5", unit="base")
    assert isinstance(err, CoinValidationError)
    assert isinstance(err, CoinError)
    assert not isinstance(err, CoinArithmeticError)
    assert (err.value, err.unit) == ("1.5", "base")
    assert str(err) == "boom"


def test_total_supply_exceeded_is_both_kinds():
    print("[exc] add overflow is catchable as ExceedsTotalSupply and as an arithmetic error")
    err = TotalSupplyExceeded("overflow", left="a", right="b", value=11)
    assert isinstance(err, ExceedsTotalSupply)
    assert isinstance(err, CoinArithmeticError)
    assert (err.left, err.right, err.value, err.unit) == ("a", "b", 11, "base")
    assert str(err) == "overflow"


def test_negative_result_is_arithmetic_only():
    err = NegativeResult("underflow", left="a", right="b")
    assert isinstance(err, CoinArithmeticError)
    assert not isinstance(err, CoinValidationError)
    assert (err.left, err.right) == ("a", "b")
