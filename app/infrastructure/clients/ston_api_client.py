from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Any

import httpx


logger = logging.getLogger(__name__)


class StonApiError(RuntimeError):
    pass


@dataclass(frozen=True)
class StonApiClientSettings:
    api_base: str
    timeout_seconds: float


class StonApiClient:
    def __init__(
        self,
        settings: StonApiClientSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._settings = settings
        self._transport = transport

    async def get_assets(self) -> Any:
        return await self._request("GET", "/v1/assets")

    async def get_pools(self) -> Any:
        return await self._request("GET", "/v1/pools")

    async def simulate_swap(
        self,
        *,
        offer_address: str,
        ask_address: str,
        units: str,
        slippage_tolerance: str,
    ) -> Any:
        return await self._request(
            "POST",
            "/v1/swap/simulate",
            params={
                "offer_address": offer_address,
                "ask_address": ask_address,
                "units": units,
                "slippage_tolerance": slippage_tolerance,
            },
        )

    async def _request(self, method: str, path: str, *, params: dict | None = None) -> Any:
        url = f"{self._settings.api_base.rstrip('/')}{path}"
        started_at = time.monotonic()
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, params=params)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "ston_api_client: request_failed method=%s path=%s error=%s",
                method,
                path,
                exc,
            )
            raise StonApiError(f"{method} {path} failed: {exc}") from exc

        logger.info(
            "ston_api_client: request_ok method=%s path=%s elapsed_ms=%s",
            method,
            path,
            int((time.monotonic() - started_at) * 1000),
        )
        return payload
