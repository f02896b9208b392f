from __future__ import annotations

import pytest

from chain_coin.core import Coin, TOTAL_SUPPLY_STRING


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def one_cro() -> Coin:
    return Coin.from_display_unit("1")


@pytest.fixture()
def one_base() -> Coin:
    return Coin.from_base_unit("1")


@pytest.fixture()
def total_supply() -> Coin:
    return Coin.from_base_unit(TOTAL_SUPPLY_STRING)
