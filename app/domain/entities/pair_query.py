from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class Category(str, Enum):
    ALL = "all"
    STABLECOINS = "stablecoins"
    MEME = "meme"
    DEFI = "defi"


class SortKey(str, Enum):
    LIQUIDITY = "liquidity"
    VOLUME = "volume"
    APY = "apy"
    NAME = "name"
    PRICE = "price"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class PairFilters:
    search: str = ""
    min_liquidity: Decimal = field(default_factory=lambda: Decimal("0"))
    category: Category = Category.ALL
    sort_by: SortKey = SortKey.LIQUIDITY
    sort_order: SortOrder = SortOrder.DESC


@dataclass(frozen=True)
class PairQuery:
    page: int
    limit: int
    filters: PairFilters
