from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from app.application.dto.pairs import HealthOutput
from app.application.ports.metadata_cache_port import MetadataCachePort


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GetHealthUseCase:
    def __init__(
        self,
        *,
        environment: str,
        metadata_cache: MetadataCachePort | None,
        now: Callable[[], datetime] = _utc_now,
    ):
        self._environment = environment
        self._metadata_cache = metadata_cache
        self._now = now

    def execute(self) -> HealthOutput:
        cache = self._metadata_cache
        return HealthOutput(
            message=f"DEX pairs API is running ({self._environment}) - always fresh price data",
            timestamp=self._now().isoformat(),
            environment=self._environment,
            assets_metadata_cached=cache.is_valid() if cache is not None else False,
            last_metadata_update=cache.last_updated_ms() if cache is not None else None,
        )
