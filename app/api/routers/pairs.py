from __future__ import annotations

from decimal import Decimal
import logging
import math
import sys

from fastapi import APIRouter, Depends, HTTPException, Query

from app.api.deps import (
    get_list_pairs_use_case,
    get_pair_by_address_use_case,
    get_search_pairs_use_case,
)
from app.api.schemas.pairs import (
    PairDetailResponse,
    PairFiltersResponse,
    PairListResponse,
    PairReservesResponse,
    PairSearchResponse,
    PairTokenResponse,
    PaginationResponse,
    TradingPairResponse,
)
from app.application.dto.pairs import GetPairByAddressInput, ListPairsInput, SearchPairsInput
from app.application.use_cases.get_pair_by_address import GetPairByAddressUseCase
from app.application.use_cases.list_pairs import ListPairsUseCase
from app.application.use_cases.search_pairs import SearchPairsUseCase
from app.domain.entities.trading_pair import PairToken, TradingPair
from app.domain.exceptions import PairNotFoundError, UpstreamFetchError


logger = logging.getLogger(__name__)

router = APIRouter()


def _json_number(value: Decimal) -> float:
    # JSON has no infinity; out-of-range values saturate at the largest finite float.
    number = float(value)
    if math.isinf(number):
        return math.copysign(sys.float_info.max, number)
    return number


def _token_response(token: PairToken) -> PairTokenResponse:
    return PairTokenResponse(
        symbol=token.symbol,
        name=token.name,
        address=token.address,
        decimals=token.decimals,
        usd_price=_json_number(token.usd_price),
    )


def _pair_response(pair: TradingPair) -> TradingPairResponse:
    return TradingPairResponse(
        id=pair.id,
        name=pair.name,
        token0=_token_response(pair.token0),
        token1=_token_response(pair.token1),
        price=_json_number(pair.price),
        formatted_price=pair.formatted_price,
        liquidity=_json_number(pair.liquidity),
        volume_24h=_json_number(pair.volume_24h),
        apy=_json_number(pair.apy),
        pool_address=pair.pool_address,
        reserves=PairReservesResponse(
            token0=_json_number(pair.reserves.token0),
            token1=_json_number(pair.reserves.token1),
        ),
        popularity_index=_json_number(pair.popularity_index),
    )


@router.get("/api/pairs", response_model=PairListResponse)
async def list_pairs(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    search: str | None = Query(default=None),
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_order: str | None = Query(default=None, alias="sortOrder"),
    min_liquidity: str | None = Query(default=None, alias="minLiquidity"),
    category: str | None = Query(default=None),
    use_case: ListPairsUseCase = Depends(get_list_pairs_use_case),
):
    try:
        result = await use_case.execute(
            ListPairsInput(
                page=page,
                limit=limit,
                search=search,
                sort_by=sort_by,
                sort_order=sort_order,
                min_liquidity=min_liquidity,
                category=category,
            )
        )
    except UpstreamFetchError as exc:
        logger.error("pairs_router: list_pairs_failed error=%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    pagination = result.pagination
    filters = result.filters
    return PairListResponse(
        data=[_pair_response(pair) for pair in result.data],
        pagination=PaginationResponse(
            current_page=pagination.current_page,
            total_pages=pagination.total_pages,
            total_items=pagination.total_items,
            items_per_page=pagination.items_per_page,
            has_next_page=pagination.has_next_page,
            has_prev_page=pagination.has_prev_page,
            start_index=pagination.start_index,
            end_index=pagination.end_index,
        ),
        filters=PairFiltersResponse(
            search=filters.search,
            sort_by=filters.sort_by.value,
            sort_order=filters.sort_order.value,
            min_liquidity=_json_number(filters.min_liquidity),
            category=filters.category.value,
        ),
        total_pairs=result.total_pairs,
        last_updated=result.last_updated,
    )


@router.get("/api/pairs/search/{query}", response_model=PairSearchResponse)
async def search_pairs(
    query: str,
    use_case: SearchPairsUseCase = Depends(get_search_pairs_use_case),
):
    try:
        result = await use_case.execute(SearchPairsInput(query=query))
    except UpstreamFetchError as exc:
        logger.error("pairs_router: search_pairs_failed error=%s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return PairSearchResponse(
        data=[_pair_response(pair) for pair in result.data],
        query=result.query,
        total_results=result.total_results,
        last_updated=result.last_updated,
    )


@router.get("/api/pairs/{pool_address}", response_model=PairDetailResponse)
async def get_pair_by_address(
    pool_address: str,
    use_case: GetPairByAddressUseCase = Depends(get_pair_by_address_use_case),
):
    try:
        result = await use_case.execute(GetPairByAddressInput(pool_address=pool_address))
    except PairNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except UpstreamFetchError as exc:
        logger.error("pairs_router: get_pair_failed pool=%s error=%s", pool_address, exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return PairDetailResponse(data=_pair_response(result.pair), last_updated=result.last_updated)
