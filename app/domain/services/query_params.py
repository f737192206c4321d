from __future__ import annotations

from decimal import Decimal

from app.domain.entities.pair_query import Category, PairFilters, PairQuery, SortKey, SortOrder
from app.domain.services.numbers import parse_decimal, parse_int


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50


def _positive_int(value: str | None, default: int) -> int:
    parsed = parse_int(value, default)
    return parsed if parsed >= 1 else default


def parse_category(value: str | None) -> Category:
    try:
        return Category((value or "").strip().lower())
    except ValueError:
        return Category.ALL


def parse_sort_key(value: str | None) -> SortKey:
    try:
        return SortKey((value or "").strip().lower())
    except ValueError:
        return SortKey.LIQUIDITY


def parse_sort_order(value: str | None) -> SortOrder:
    if (value or "").strip().lower() == SortOrder.ASC.value:
        return SortOrder.ASC
    return SortOrder.DESC


def parse_pair_filters(
    *,
    search: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    min_liquidity: str | None = None,
    category: str | None = None,
) -> PairFilters:
    return PairFilters(
        search=(search or "").strip(),
        min_liquidity=parse_decimal(min_liquidity, Decimal("0")),
        category=parse_category(category),
        sort_by=parse_sort_key(sort_by),
        sort_order=parse_sort_order(sort_order),
    )


def parse_pair_query(
    *,
    page: str | None = None,
    limit: str | None = None,
    search: str | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    min_liquidity: str | None = None,
    category: str | None = None,
) -> PairQuery:
    """Typed query from raw transport values; bad input falls back to defaults."""
    return PairQuery(
        page=_positive_int(page, DEFAULT_PAGE),
        limit=_positive_int(limit, DEFAULT_LIMIT),
        filters=parse_pair_filters(
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            min_liquidity=min_liquidity,
            category=category,
        ),
    )
