def _banner(title: str):
    print("\n" + "="*12 + f" {title} " + "="*12)


# Stage 1: import self-check
def test_sanity_imports():
    """Verify that core submodules and the top-level API import without circular errors."""
    from chain_coin.core import (
        Coin,
        Unit,
        CoinError,
        parse_literal,
        fmt_plain,
        cro_from_base,
        base_from_cro,
    )
    import chain_coin

    _banner("SANITY: imports")
    assert chain_coin.Coin is Coin
    assert chain_coin.Unit is Unit
    assert issubclass(chain_coin.NegativeResult, CoinError)
    assert callable(parse_literal) and callable(fmt_plain)
    assert callable(cro_from_base) and callable(base_from_cro)


# Stage 2: constants baseline tests
def test_sanity_constants_alignment():
    """Check network constants and the derived display precision."""
    from decimal import Decimal
    from chain_coin.core import (
        TOTAL_SUPPLY_BASE_UNITS,
        TOTAL_SUPPLY_STRING,
        UNITS_PER_DISPLAY,
        DISPLAY_DECIMAL_PLACES,
        BASE_QUANTUM,
    )

    _banner("SANITY: constants baseline")
    print(f"[DEBUG] TOTAL_SUPPLY={TOTAL_SUPPLY_STRING}, UNITS_PER_DISPLAY={UNITS_PER_DISPLAY}, DP={DISPLAY_DECIMAL_PLACES}")

    assert TOTAL_SUPPLY_BASE_UNITS == 10 ** 19
    assert TOTAL_SUPPLY_STRING == "10000000000000000000"
    assert UNITS_PER_DISPLAY == 10 ** 8
    assert DISPLAY_DECIMAL_PLACES == 8
    assert BASE_QUANTUM == Decimal("0.00000001")


def test_sanity_unit_enum():
    from decimal import Decimal
    from chain_coin.core import BASE_QUANTUM, Coin, Unit

    _banner("SANITY: units")
    assert [u.value for u in Unit] == ["base", "cro"]
    assert Unit.DISPLAY is Unit.CRO
    assert Coin.UNITS is Unit
    assert Coin.UNIT_BASE is Unit.BASE
    assert Coin.UNIT_CRO is Unit.CRO
    assert Unit.parse("CRO") is Unit.CRO
    assert Unit.parse(Unit.BASE) is Unit.BASE
    assert Unit.BASE.decimal_places == 0
    assert Unit.CRO.decimal_places == 8
    assert Unit.BASE.quantum == Decimal(1)
    assert Unit.CRO.quantum == BASE_QUANTUM
