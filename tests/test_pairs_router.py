from __future__ import annotations

import sys

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_market_data_cache, get_market_data_port
from app.domain.entities.market_data import Asset, Pool
from app.domain.exceptions import UpstreamFetchError
from app.main import app, create_app


class FakeMarketDataPort:
    def __init__(self, *, fail: bool = False):
        self._fail = fail
        self.swap_requests: list[dict] = []

    async def fetch_assets(self) -> list[Asset]:
        if self._fail:
            raise UpstreamFetchError("GET /v1/assets failed: 502 Bad Gateway")
        return [
            Asset(contract_address="TON", symbol="TON", display_name="Toncoin", decimals=9, dex_usd_price="5"),
            Asset(contract_address="USDT", symbol="USDT", display_name="Tether USD", decimals=6, dex_usd_price="1"),
        ]

    async def fetch_pools(self) -> list[Pool]:
        return [
            Pool(
                address="EQpool",
                token0_address="TON",
                token1_address="USDT",
                reserve0="1000",
                reserve1="5000",
                lp_total_supply_usd="10000",
                volume_24h_usd="250",
                apy_1d="0.12",
                popularity_index="3",
            )
        ]

    async def simulate_swap(self, **kwargs) -> dict:
        self.swap_requests.append(kwargs)
        return {"ask_units": "4990000"}


@pytest.fixture
def client():
    port = FakeMarketDataPort()
    app.dependency_overrides[get_market_data_port] = lambda: port
    app.dependency_overrides[get_market_data_cache] = lambda: None
    yield TestClient(app), port
    app.dependency_overrides.clear()


def test_list_pairs_returns_camel_case_payload(client):
    test_client, _port = client

    response = test_client.get("/api/pairs")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["totalPairs"] == 1
    assert body["cached"] is False
    assert body["priceDataFresh"] is True
    pair = body["data"][0]
    assert pair["name"] == "TON/USDT"
    assert pair["formattedPrice"] == "0.2000"
    assert pair["poolAddress"] == "EQpool"
    assert pair["volume24h"] == 250
    assert pair["token0"]["usdPrice"] == 5
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["startIndex"] == 1
    assert body["filters"] == {
        "search": "",
        "sortBy": "liquidity",
        "sortOrder": "desc",
        "minLiquidity": 0,
        "category": "all",
    }


def test_list_pairs_malformed_page_falls_back_to_default(client):
    test_client, _port = client

    response = test_client.get("/api/pairs", params={"page": "abc", "sortBy": "NAME", "minLiquidity": "20000"})

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["currentPage"] == 1
    assert body["filters"]["sortBy"] == "name"
    assert body["data"] == []
    assert body["pagination"]["totalItems"] == 0


def test_list_pairs_upstream_failure_returns_500():
    app.dependency_overrides[get_market_data_port] = lambda: FakeMarketDataPort(fail=True)
    app.dependency_overrides[get_market_data_cache] = lambda: None
    try:
        response = TestClient(app).get("/api/pairs")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "GET /v1/assets failed: 502 Bad Gateway"}


def test_get_pair_by_address(client):
    test_client, _port = client

    found = test_client.get("/api/pairs/EQpool")
    missing = test_client.get("/api/pairs/EQnope")

    assert found.status_code == 200
    assert found.json()["data"]["poolAddress"] == "EQpool"
    assert missing.status_code == 404
    assert missing.json()["success"] is False
    assert "EQnope" in missing.json()["error"]


def test_search_pairs_route_is_not_shadowed_by_pool_lookup(client):
    test_client, _port = client

    response = test_client.get("/api/pairs/search/usdt")

    assert response.status_code == 200
    body = response.json()
    assert body["query"] == "usdt"
    assert body["totalResults"] == 1


def test_assets_and_pools_endpoints(client):
    test_client, _port = client

    assets = test_client.get("/api/assets").json()
    pools = test_client.get("/api/pools").json()

    assert assets["totalAssets"] == 2
    assert assets["data"][0]["contractAddress"] == "TON"
    assert pools["totalPools"] == 1
    assert pools["data"][0]["volume24hUsd"] == "250"
    assert pools["data"][0]["apy1D"] == "0.12"


def test_simulate_swap_requires_parameters(client):
    test_client, port = client

    response = test_client.post("/api/simulate-swap", json={"tokenAAddress": "TON"})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert port.swap_requests == []


def test_simulate_swap_passes_request_upstream(client):
    test_client, port = client

    response = test_client.post(
        "/api/simulate-swap",
        json={"tokenAAddress": "TON", "tokenBAddress": "USDT", "amountIn": 1000000000},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"ask_units": "4990000"}}
    assert port.swap_requests == [
        {
            "offer_address": "TON",
            "ask_address": "USDT",
            "units": "1000000000",
            "slippage_tolerance": "0.001",
        }
    ]


def test_stateless_app_reports_serverless_health():
    stateless_app = create_app(stateless=True)

    response = TestClient(stateless_app).get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["environment"] == "serverless"
    assert body["cache"]["assetsMetadataCached"] is False
    assert body["cache"]["priceDataCached"] is False
    assert body["cache"]["lastMetadataUpdate"] is None


class BrokenMarketDataPort(FakeMarketDataPort):
    async def fetch_pools(self) -> list[Pool]:
        raise RuntimeError("pool payload shape changed")


def test_unexpected_error_renders_json_body():
    app.dependency_overrides[get_market_data_port] = lambda: BrokenMarketDataPort()
    app.dependency_overrides[get_market_data_cache] = lambda: None
    try:
        response = TestClient(app, raise_server_exceptions=False).get("/api/pairs")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Internal server error",
        "message": "pool payload shape changed",
    }


class OversizedMarketDataPort(FakeMarketDataPort):
    async def fetch_pools(self) -> list[Pool]:
        return [
            Pool(
                address="EQhuge",
                token0_address="TON",
                token1_address="USDT",
                reserve0="1e400",
                reserve1="-1e400",
                lp_total_supply_usd="1e400",
            )
        ]


def test_out_of_float_range_numbers_saturate():
    app.dependency_overrides[get_market_data_port] = lambda: OversizedMarketDataPort()
    app.dependency_overrides[get_market_data_cache] = lambda: None
    try:
        response = TestClient(app).get("/api/pairs")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    pair = response.json()["data"][0]
    assert pair["liquidity"] == sys.float_info.max
    assert pair["reserves"] == {"token0": sys.float_info.max, "token1": -sys.float_info.max}
