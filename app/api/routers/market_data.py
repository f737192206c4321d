from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import (
    get_list_assets_use_case,
    get_list_pools_use_case,
    get_simulate_swap_use_case,
)
from app.api.schemas.pairs import (
    AssetListResponse,
    AssetResponse,
    PoolListResponse,
    PoolResponse,
    SimulateSwapRequest,
    SimulateSwapResponse,
)
from app.application.dto.pairs import SimulateSwapInput
from app.application.use_cases.list_market_data import ListAssetsUseCase, ListPoolsUseCase
from app.application.use_cases.simulate_swap import SimulateSwapUseCase
from app.domain.exceptions import SwapSimulationInputError, UpstreamFetchError


logger = logging.getLogger(__name__)

router = APIRouter()


def _optional_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


@router.get("/api/assets", response_model=AssetListResponse)
async def list_assets(use_case: ListAssetsUseCase = Depends(get_list_assets_use_case)):
    try:
        result = await use_case.execute()
    except UpstreamFetchError as exc:
        logger.error("market_data_router: list_assets_failed error=%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return AssetListResponse(
        data=[
            AssetResponse(
                contract_address=asset.contract_address,
                symbol=asset.symbol,
                display_name=asset.display_name,
                decimals=asset.decimals,
                dex_usd_price=asset.dex_usd_price,
            )
            for asset in result.data
        ],
        total_assets=result.total,
    )


@router.get("/api/pools", response_model=PoolListResponse)
async def list_pools(use_case: ListPoolsUseCase = Depends(get_list_pools_use_case)):
    try:
        result = await use_case.execute()
    except UpstreamFetchError as exc:
        logger.error("market_data_router: list_pools_failed error=%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return PoolListResponse(
        data=[
            PoolResponse(
                address=pool.address,
                token0_address=pool.token0_address,
                token1_address=pool.token1_address,
                reserve0=pool.reserve0,
                reserve1=pool.reserve1,
                lp_total_supply_usd=pool.lp_total_supply_usd,
                lp_total_supply=pool.lp_total_supply,
                volume_24h_usd=pool.volume_24h_usd,
                apy_1d=pool.apy_1d,
                popularity_index=pool.popularity_index,
            )
            for pool in result.data
        ],
        total_pools=result.total,
    )


@router.post("/api/simulate-swap", response_model=SimulateSwapResponse)
async def simulate_swap(
    req: SimulateSwapRequest,
    use_case: SimulateSwapUseCase = Depends(get_simulate_swap_use_case),
):
    try:
        result = await use_case.execute(
            SimulateSwapInput(
                offer_address=req.token_a_address,
                ask_address=req.token_b_address,
                units=_optional_text(req.amount_in),
                slippage_tolerance=_optional_text(req.slippage_tolerance),
            )
        )
    except SwapSimulationInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UpstreamFetchError as exc:
        logger.error("market_data_router: simulate_swap_failed error=%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return SimulateSwapResponse(data=result.data)
