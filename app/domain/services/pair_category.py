from __future__ import annotations

from app.domain.entities.pair_query import Category
from app.domain.entities.trading_pair import TradingPair


# Plain substring matches, so "cat" also hits symbols like "CATALYST".
CATEGORY_KEYWORDS: dict[Category, tuple[str, ...]] = {
    Category.STABLECOINS: (
        "usdt",
        "usd",
        "usdc",
        "dai",
        "busd",
        "tusd",
        "tether",
        "usd coin",
    ),
    Category.MEME: (
        "not",
        "notcoin",
        "hmstr",
        "hamster",
        "dogs",
        "dog",
        "fish",
        "tpet",
        "doge",
        "shib",
        "pepe",
        "wojak",
        "cat",
        "duck",
        "frog",
        "bear",
        "meme",
        "moon",
        "inu",
        "floki",
        "elon",
        "baby",
        "safe",
        "rocket",
    ),
    Category.DEFI: (
        "ton",
        "ston",
        "hton",
        "tston",
        "uni",
        "cake",
        "aave",
        "comp",
        "curve",
        "bal",
        "sushi",
        "1inch",
        "dedust",
        "storm",
        "lp",
        "pool",
        "defi",
        "staked",
        "liquid",
        "vault",
    ),
}


def _haystacks(pair: TradingPair) -> tuple[str, str]:
    symbols = f"{pair.token0.symbol}{pair.token1.symbol}".lower()
    names = f"{pair.token0.name}{pair.token1.name}".lower()
    return symbols, names


def matches_category(pair: TradingPair, category: Category) -> bool:
    if category is Category.ALL:
        return True
    keywords = CATEGORY_KEYWORDS.get(category, ())
    symbols, names = _haystacks(pair)
    return any(keyword in symbols or keyword in names for keyword in keywords)
