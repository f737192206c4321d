from __future__ import annotations

from typing import Protocol


class MetadataCachePort(Protocol):
    def is_valid(self) -> bool:
        ...

    def last_updated_ms(self) -> int | None:
        ...
