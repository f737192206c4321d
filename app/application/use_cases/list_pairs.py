from __future__ import annotations

from collections.abc import Callable

from app.application.dto.pairs import ListPairsInput, ListPairsOutput
from app.application.ports.market_data_port import MarketDataPort
from app.application.use_cases.pairs_common import epoch_millis, load_trading_pairs
from app.domain.services.pagination import paginate
from app.domain.services.pair_query import query_pairs
from app.domain.services.query_params import parse_pair_query


class ListPairsUseCase:
    def __init__(
        self,
        *,
        market_data_port: MarketDataPort,
        clock: Callable[[], int] = epoch_millis,
    ):
        self._market_data_port = market_data_port
        self._clock = clock

    async def execute(self, command: ListPairsInput) -> ListPairsOutput:
        query = parse_pair_query(
            page=command.page,
            limit=command.limit,
            search=command.search,
            sort_by=command.sort_by,
            sort_order=command.sort_order,
            min_liquidity=command.min_liquidity,
            category=command.category,
        )

        pairs = await load_trading_pairs(self._market_data_port)
        filtered = query_pairs(pairs, query.filters)
        page = paginate(filtered, page=query.page, limit=query.limit)

        # total_pairs counts every derived pair; the filtered count is pagination.total_items.
        return ListPairsOutput(
            data=page.data,
            pagination=page.pagination,
            filters=query.filters,
            total_pairs=len(pairs),
            last_updated=self._clock(),
        )
