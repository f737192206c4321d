from __future__ import annotations

from decimal import Decimal

import pytest

from app.domain.entities.pair_query import Category, SortKey, SortOrder
from app.domain.services.query_params import parse_pair_query


def test_defaults_when_nothing_is_given():
    query = parse_pair_query()

    assert query.page == 1
    assert query.limit == 50
    assert query.filters.search == ""
    assert query.filters.min_liquidity == Decimal("0")
    assert query.filters.category is Category.ALL
    assert query.filters.sort_by is SortKey.LIQUIDITY
    assert query.filters.sort_order is SortOrder.DESC


def test_valid_values_are_parsed():
    query = parse_pair_query(
        page="3",
        limit="20",
        search=" ton ",
        sort_by="volume",
        sort_order="asc",
        min_liquidity="1500.5",
        category="meme",
    )

    assert query.page == 3
    assert query.limit == 20
    assert query.filters.search == "ton"
    assert query.filters.sort_by is SortKey.VOLUME
    assert query.filters.sort_order is SortOrder.ASC
    assert query.filters.min_liquidity == Decimal("1500.5")
    assert query.filters.category is Category.MEME


@pytest.mark.parametrize("raw", ["abc", "", "0", "-2", "1.5"])
def test_bad_page_and_limit_fall_back_to_defaults(raw: str):
    query = parse_pair_query(page=raw, limit=raw)

    assert query.page == 1
    assert query.limit == 50


def test_bad_min_liquidity_falls_back_to_zero():
    assert parse_pair_query(min_liquidity="lots").filters.min_liquidity == Decimal("0")
    assert parse_pair_query(min_liquidity="Infinity").filters.min_liquidity == Decimal("0")


def test_unknown_sort_key_and_category_resolve_to_defaults():
    query = parse_pair_query(sort_by="marketcap", category="nfts")

    assert query.filters.sort_by is SortKey.LIQUIDITY
    assert query.filters.category is Category.ALL


def test_enum_values_are_case_insensitive():
    query = parse_pair_query(sort_by="APY", sort_order="ASC", category="StableCoins")

    assert query.filters.sort_by is SortKey.APY
    assert query.filters.sort_order is SortOrder.ASC
    assert query.filters.category is Category.STABLECOINS


def test_any_order_other_than_asc_is_desc():
    assert parse_pair_query(sort_order="sideways").filters.sort_order is SortOrder.DESC
