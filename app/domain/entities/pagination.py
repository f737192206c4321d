from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool
    start_index: int
    end_index: int


@dataclass(frozen=True)
class Page(Generic[T]):
    data: list[T]
    pagination: Pagination
