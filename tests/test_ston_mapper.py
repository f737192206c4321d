from __future__ import annotations

import unittest

from app.infrastructure.mappers.ston_mapper import (
    map_assets_payload,
    map_pools_payload,
    map_record_to_asset,
    map_record_to_pool,
    unwrap_records,
)


class StonMapperTests(unittest.TestCase):
    def test_unwrap_accepts_bare_and_wrapped_lists(self):
        records = [{"symbol": "TON"}]

        self.assertEqual(unwrap_records(records, ("asset_list",)), records)
        self.assertEqual(unwrap_records({"asset_list": records}, ("asset_list",)), records)
        self.assertEqual(unwrap_records({"assetList": records}, ("asset_list", "assetList")), records)

    def test_unwrap_returns_empty_list_for_unexpected_payloads(self):
        self.assertEqual(unwrap_records(None, ("asset_list",)), [])
        self.assertEqual(unwrap_records({"asset_list": "nope"}, ("asset_list",)), [])
        self.assertEqual(unwrap_records(["x", {"symbol": "TON"}], ("asset_list",)), [{"symbol": "TON"}])

    def test_map_snake_case_asset(self):
        asset = map_record_to_asset(
            {
                "contract_address": "EQton",
                "symbol": "TON",
                "display_name": "Toncoin",
                "decimals": 9,
                "dex_usd_price": "5.1",
            }
        )

        self.assertEqual(asset.contract_address, "EQton")
        self.assertEqual(asset.symbol, "TON")
        self.assertEqual(asset.display_name, "Toncoin")
        self.assertEqual(asset.decimals, 9)
        self.assertEqual(asset.dex_usd_price, "5.1")

    def test_map_camel_case_asset(self):
        asset = map_record_to_asset(
            {
                "contractAddress": "EQusdt",
                "symbol": "USDT",
                "displayName": "Tether USD",
                "decimals": "6",
                "dexUsdPrice": 1,
            }
        )

        self.assertEqual(asset.contract_address, "EQusdt")
        self.assertEqual(asset.display_name, "Tether USD")
        self.assertEqual(asset.decimals, 6)
        self.assertEqual(asset.dex_usd_price, "1")

    def test_asset_without_address_is_skipped(self):
        self.assertIsNone(map_record_to_asset({"symbol": "GHOST"}))
        self.assertEqual(map_assets_payload({"asset_list": [{"symbol": "GHOST"}]}), [])

    def test_invalid_decimals_become_none(self):
        self.assertIsNone(map_record_to_asset({"contract_address": "A", "decimals": "nine"}).decimals)
        self.assertIsNone(map_record_to_asset({"contract_address": "A", "decimals": -1}).decimals)
        self.assertIsNone(map_record_to_asset({"contract_address": "A", "decimals": "10000000"}).decimals)
        self.assertEqual(map_record_to_asset({"contract_address": "A", "decimals": 255}).decimals, 255)

    def test_map_pool_in_both_spellings(self):
        snake = map_record_to_pool(
            {
                "address": "EQpool",
                "token0_address": "EQton",
                "token1_address": "EQusdt",
                "reserve0": "100",
                "reserve1": "500",
                "lp_total_supply_usd": "1000",
                "volume_24h_usd": "50",
                "apy_1d": "0.12",
                "popularity_index": "7",
            }
        )
        camel = map_record_to_pool(
            {
                "address": "EQpool",
                "token0Address": "EQton",
                "token1Address": "EQusdt",
                "reserve0": "100",
                "reserve1": "500",
                "lpTotalSupplyUsd": "1000",
                "volume24hUsd": "50",
                "apy1D": "0.12",
                "popularityIndex": "7",
            }
        )

        self.assertEqual(snake, camel)
        self.assertEqual(snake.token0_address, "EQton")
        self.assertEqual(snake.apy_1d, "0.12")
        self.assertIsNone(snake.lp_total_supply)

    def test_map_pools_payload_keeps_incomplete_pools(self):
        pools = map_pools_payload({"pool_list": [{"address": "EQpool"}]})

        self.assertEqual(len(pools), 1)
        self.assertIsNone(pools[0].token0_address)


if __name__ == "__main__":
    unittest.main()
