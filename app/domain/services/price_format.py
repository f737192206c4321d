from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext


def _fixed(price: Decimal, places: int) -> str:
    with localcontext() as ctx:
        ctx.rounding = ROUND_HALF_UP
        return f"{price:.{places}f}"


def format_price(price: Decimal) -> str:
    if price == 0:
        return "0.00"
    if price < Decimal("0.000001"):
        with localcontext() as ctx:
            ctx.rounding = ROUND_HALF_UP
            return f"{price:.2e}"
    if price < Decimal("0.01"):
        return _fixed(price, 6)
    if price < Decimal("1"):
        return _fixed(price, 4)
    if price < Decimal("100"):
        return _fixed(price, 2)
    return _fixed(price, 0)
