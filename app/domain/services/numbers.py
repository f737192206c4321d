from __future__ import annotations

from decimal import Decimal, InvalidOperation


def parse_decimal(value: object, default: Decimal) -> Decimal:
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return default
    if not parsed.is_finite():
        return default
    return parsed


def parse_decimal_or_zero(value: object) -> Decimal:
    return parse_decimal(value, Decimal("0"))


def parse_int(value: object, default: int) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        return default
