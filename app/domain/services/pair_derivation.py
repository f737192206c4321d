from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation, Overflow, localcontext

from app.domain.entities.market_data import Asset, Pool
from app.domain.entities.trading_pair import PairReserves, PairToken, TradingPair
from app.domain.services.numbers import parse_decimal_or_zero
from app.domain.services.price_format import format_price


DEFAULT_TOKEN_DECIMALS = 9


def build_asset_index(assets: Iterable[Asset]) -> dict[str, Asset]:
    index: dict[str, Asset] = {}
    for asset in assets:
        if asset.contract_address:
            index[asset.contract_address] = asset
    return index


def calculate_pair_price(
    *,
    token0_usd_price: Decimal,
    token1_usd_price: Decimal,
    reserve0: Decimal,
    reserve1: Decimal,
    token0_decimals: int | None,
    token1_decimals: int | None,
) -> Decimal:
    """Pair price expressed as token1 per token0.

    USD prices win when both are known; otherwise the pool reserves are used,
    adjusted by the decimals difference between the two tokens.
    """
    try:
        with localcontext() as ctx:
            ctx.traps[Overflow] = True
            ctx.traps[InvalidOperation] = True
            if token0_usd_price > 0 and token1_usd_price > 0:
                price = token1_usd_price / token0_usd_price
            elif reserve0 > 0:
                decimals0 = token0_decimals if token0_decimals is not None else DEFAULT_TOKEN_DECIMALS
                decimals1 = token1_decimals if token1_decimals is not None else DEFAULT_TOKEN_DECIMALS
                price = (reserve1 / reserve0) * (Decimal("10") ** (decimals0 - decimals1))
            else:
                price = Decimal("0")
    except ArithmeticError:
        # Out-of-range inputs degrade this pair only.
        return Decimal("0")
    if price < 0:
        return Decimal("0")
    return price


def _pair_token(asset: Asset, usd_price: Decimal) -> PairToken:
    return PairToken(
        symbol=asset.symbol,
        name=asset.display_name or asset.symbol,
        address=asset.contract_address,
        decimals=asset.decimals,
        usd_price=usd_price,
    )


def _pool_liquidity(pool: Pool) -> Decimal:
    return parse_decimal_or_zero(pool.lp_total_supply_usd or pool.lp_total_supply)


def build_trading_pair(*, pool: Pool, token0: Asset, token1: Asset) -> TradingPair:
    reserve0 = parse_decimal_or_zero(pool.reserve0)
    reserve1 = parse_decimal_or_zero(pool.reserve1)
    token0_usd_price = parse_decimal_or_zero(token0.dex_usd_price)
    token1_usd_price = parse_decimal_or_zero(token1.dex_usd_price)

    price = calculate_pair_price(
        token0_usd_price=token0_usd_price,
        token1_usd_price=token1_usd_price,
        reserve0=reserve0,
        reserve1=reserve1,
        token0_decimals=token0.decimals,
        token1_decimals=token1.decimals,
    )

    return TradingPair(
        id=pool.address,
        name=f"{token0.symbol}/{token1.symbol}",
        token0=_pair_token(token0, token0_usd_price),
        token1=_pair_token(token1, token1_usd_price),
        price=price,
        formatted_price=format_price(price),
        liquidity=_pool_liquidity(pool),
        volume_24h=parse_decimal_or_zero(pool.volume_24h_usd),
        apy=parse_decimal_or_zero(pool.apy_1d),
        pool_address=pool.address,
        reserves=PairReserves(token0=reserve0, token1=reserve1),
        popularity_index=parse_decimal_or_zero(pool.popularity_index),
    )


def canonical_order_key(pair: TradingPair) -> tuple[Decimal, Decimal]:
    return pair.liquidity, pair.popularity_index


def derive_trading_pairs(assets: Iterable[Asset], pools: Iterable[Pool]) -> list[TradingPair]:
    asset_index = build_asset_index(assets)

    pairs: list[TradingPair] = []
    for pool in pools:
        if not (pool.address and pool.token0_address and pool.token1_address):
            continue
        token0 = asset_index.get(pool.token0_address)
        token1 = asset_index.get(pool.token1_address)
        if token0 is None or token1 is None:
            continue
        pairs.append(build_trading_pair(pool=pool, token0=token0, token1=token1))

    return sorted(pairs, key=canonical_order_key, reverse=True)
