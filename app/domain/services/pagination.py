from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from app.domain.entities.pagination import Page, Pagination


T = TypeVar("T")


def paginate(items: Sequence[T], *, page: int, limit: int) -> Page[T]:
    if limit < 1:
        raise ValueError("limit must be >= 1.")

    total_items = len(items)
    total_pages = math.ceil(total_items / limit)
    start = (page - 1) * limit
    end = start + limit
    data = list(items[start:end]) if page >= 1 else []

    return Page(
        data=data,
        pagination=Pagination(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
            start_index=start + 1,
            end_index=min(end, total_items),
        ),
    )
