from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from app.domain.entities.pair_query import Category, PairFilters, SortKey, SortOrder
from app.domain.entities.trading_pair import TradingPair
from app.domain.services.pair_category import matches_category


NUMERIC_SORT_FIELDS: dict[SortKey, Callable[[TradingPair], Decimal]] = {
    SortKey.LIQUIDITY: lambda pair: pair.liquidity,
    SortKey.VOLUME: lambda pair: pair.volume_24h,
    SortKey.APY: lambda pair: pair.apy,
    SortKey.PRICE: lambda pair: pair.price,
}


def matches_search(pair: TradingPair, search: str) -> bool:
    term = search.lower()
    candidates = (
        pair.name,
        pair.token0.symbol,
        pair.token1.symbol,
        pair.token0.name,
        pair.token1.name,
        pair.pool_address,
    )
    return any(term in candidate.lower() for candidate in candidates)


def search_pairs(pairs: list[TradingPair], search: str) -> list[TradingPair]:
    if not search:
        return list(pairs)
    return [pair for pair in pairs if matches_search(pair, search)]


def sort_pairs(pairs: list[TradingPair], *, sort_by: SortKey, sort_order: SortOrder) -> list[TradingPair]:
    """Stable sort; numeric fields run high to low and names A to Z by default.

    ``asc`` is the exact reverse of the default ordering, ties included.
    """
    if sort_by is SortKey.NAME:
        ordered = sorted(pairs, key=lambda pair: pair.name.casefold())
    else:
        field = NUMERIC_SORT_FIELDS.get(sort_by, NUMERIC_SORT_FIELDS[SortKey.LIQUIDITY])
        ordered = sorted(pairs, key=field, reverse=True)
    if sort_order is SortOrder.ASC:
        ordered.reverse()
    return ordered


def query_pairs(pairs: list[TradingPair], filters: PairFilters) -> list[TradingPair]:
    filtered = search_pairs(pairs, filters.search)

    if filters.min_liquidity > 0:
        filtered = [pair for pair in filtered if pair.liquidity >= filters.min_liquidity]

    if filters.category is not Category.ALL:
        filtered = [pair for pair in filtered if matches_category(pair, filters.category)]

    return sort_pairs(filtered, sort_by=filters.sort_by, sort_order=filters.sort_order)
