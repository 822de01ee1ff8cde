"""Shared Bybit wire frames for unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def ticker_snapshot_frame():
    return {
        "topic": "tickers.BTCUSDT",
        "type": "snapshot",
        "ts": 1673272861686,
        "cs": 24987956059,
        "data": {
            "symbol": "BTCUSDT",
            "tickDirection": "PlusTick",
            "price24hPcnt": "0.017103",
            "lastPrice": "17216.00",
            "prevPrice24h": "16926.50",
            "highPrice24h": "17281.50",
            "lowPrice24h": "16915.00",
            "prevPrice1h": "17238.00",
            "markPrice": "17217.33",
            "indexPrice": "17227.36",
            "openInterest": "68744.761",
            "openInterestValue": "1183601235.91",
            "turnover24h": "1570383121.943499",
            "volume24h": "91705.276",
            "nextFundingTime": "1673280000000",
            "fundingRate": "-0.000212",
            "bid1Price": "17215.50",
            "bid1Size": "84.489",
            "ask1Price": "17216.00",
            "ask1Size": "83.020",
        },
    }


@pytest.fixture
def ticker_delta_frame():
    return {
        "topic": "tickers.BTCUSDT",
        "type": "delta",
        "ts": 1673272861786,
        "cs": 24987956060,
        "data": {"symbol": "BTCUSDT", "bid1Price": "17215.00", "bid1Size": "84.000"},
    }


@pytest.fixture
def orderbook_frame():
    return {
        "topic": "orderbook.50.BTCUSDT",
        "type": "snapshot",
        "ts": 1672304484978,
        "data": {
            "s": "BTCUSDT",
            "b": [["16493.50", "0.006"], ["16493.00", "0.100"]],
            "a": [["16611.00", "0.029"], ["16612.00", "0.213"]],
            "u": 18521288,
            "seq": 7961638724,
        },
        "cts": 1672304484976,
    }


@pytest.fixture
def trade_frame():
    return {
        "topic": "publicTrade.BTCUSDT",
        "type": "snapshot",
        "ts": 1672304486868,
        "data": [
            {
                "T": 1672304486865,
                "s": "BTCUSDT",
                "S": "Buy",
                "v": "0.001",
                "p": "16578.50",
                "L": "PlusTick",
                "i": "20f43950-d8dd-5b31-9112-a178eb6023af",
                "BT": False,
            }
        ],
    }


@pytest.fixture
def kline_frame():
    return {
        "topic": "kline.5.BTCUSDT",
        "type": "snapshot",
        "ts": 1672324988882,
        "data": [
            {
                "start": 1672324800000,
                "end": 1672325099999,
                "interval": "5",
                "open": "16649.5",
                "close": "16677",
                "high": "16677",
                "low": "16608",
                "volume": "2.081",
                "turnover": "34666.4005",
                "confirm": False,
                "timestamp": 1672324988882,
            }
        ],
    }


@pytest.fixture
def liquidation_frame():
    return {
        "topic": "liquidation.ROSEUSDT",
        "type": "snapshot",
        "ts": 1673251091822,
        "data": {
            "price": "0.03803",
            "side": "Buy",
            "size": "1637",
            "symbol": "ROSEUSDT",
            "updatedTime": 1673251091822,
        },
    }


@pytest.fixture
def position_frame():
    return {
        "id": "1003076014fb7eedb-c7e6-45d6-a8c1-270f0169171a",
        "topic": "position",
        "creationTime": 1697682317044,
        "data": [
            {
                "positionIdx": 2,
                "tradeMode": 0,
                "riskId": 1,
                "riskLimitValue": "2000000",
                "symbol": "BTCUSDT",
                "side": "",
                "size": "0",
                "entryPrice": "0",
                "leverage": "10",
                "positionValue": "0",
                "positionBalance": "0",
                "markPrice": "28184.5",
                "positionIM": "0",
                "positionMM": "0",
                "takeProfit": "0",
                "stopLoss": "0",
                "trailingStop": "0",
                "unrealisedPnl": "0",
                "cumRealisedPnl": "-25.06579337",
                "createdTime": "1694402496913",
                "updatedTime": "1697682317038",
                "tpslMode": "Full",
                "liqPrice": "",
                "bustPrice": "",
                "category": "linear",
                "positionStatus": "Normal",
                "adlRankIndicator": 0,
                "autoAddMargin": 0,
                "seq": 8172241024,
                "isReduceOnly": False,
            }
        ],
    }


@pytest.fixture
def execution_frame():
    return {
        "id": "592324803b2785-26fa-4214-9963-bdd4727f07be",
        "topic": "execution",
        "creationTime": 1672364174455,
        "data": [
            {
                "category": "linear",
                "symbol": "XRPUSDT",
                "execFee": "0.005061",
                "execId": "7e2ae69c-4edf-5800-a352-893d52b446aa",
                "execPrice": "0.3374",
                "execQty": "25",
                "execType": "Trade",
                "execValue": "8.435",
                "isMaker": False,
                "feeRate": "0.0006",
                "tradeIv": "",
                "markIv": "",
                "blockTradeId": "",
                "markPrice": "0.3391",
                "indexPrice": "",
                "underlyingPrice": "",
                "leavesQty": "0",
                "orderId": "f6e324ff-99c2-4e89-9739-3086e47f9381",
                "orderLinkId": "",
                "orderPrice": "0.3207",
                "orderQty": "25",
                "orderType": "Market",
                "stopOrderType": "UNKNOWN",
                "side": "Sell",
                "execTime": "1672364174443",
                "isLeverage": "0",
                "closedSize": "",
                "seq": 4688002127,
            }
        ],
    }


@pytest.fixture
def fast_execution_frame():
    return {
        "topic": "execution.fast",
        "creationTime": 1716800399338,
        "data": [
            {
                "category": "linear",
                "symbol": "ICPUSDT",
                "execId": "3510f361-0add-5c7b-a2e7-9679810944fc",
                "execPrice": "12.015",
                "execQty": "3000",
                "orderId": "443d63fa-b4c3-4297-b7b1-23bca88b04dc",
                "isMaker": False,
                "orderLinkId": "test-00001",
                "side": "Sell",
                "execTime": "1716800399334",
                "seq": 34771365464,
            }
        ],
    }


@pytest.fixture
def order_frame():
    return {
        "id": "5923240c6880ab-c59f-420b-9adb-3639adc9dd90",
        "topic": "order",
        "creationTime": 1672364262474,
        "data": [
            {
                "symbol": "ETH-30DEC22-1400-C",
                "orderId": "5cf98598-39a7-459e-97bf-76ca765ee020",
                "side": "Sell",
                "orderType": "Market",
                "cancelType": "UNKNOWN",
                "price": "72.5",
                "qty": "1",
                "orderIv": "",
                "timeInForce": "IOC",
                "orderStatus": "Filled",
                "orderLinkId": "",
                "lastPriceOnCreated": "",
                "reduceOnly": False,
                "leavesQty": "",
                "leavesValue": "",
                "cumExecQty": "1",
                "cumExecValue": "75",
                "avgPrice": "75",
                "blockTradeId": "",
                "positionIdx": 0,
                "cumExecFee": "0.358635",
                "createdTime": "1672364262444",
                "updatedTime": "1672364262457",
                "rejectReason": "EC_NoError",
                "stopOrderType": "",
                "tpslMode": "",
                "triggerPrice": "",
                "takeProfit": "",
                "stopLoss": "",
                "tpTriggerBy": "",
                "slTriggerBy": "",
                "tpLimitPrice": "",
                "slLimitPrice": "",
                "triggerDirection": 0,
                "triggerBy": "",
                "closeOnTrigger": False,
                "category": "option",
                "placeType": "price",
                "smpType": "None",
                "smpGroup": 0,
                "smpOrderId": "",
                "feeCurrency": "",
            }
        ],
    }


@pytest.fixture
def wallet_frame():
    return {
        "id": "5923242c464be9-25ca-483d-a743-c60101fc656f",
        "topic": "wallet",
        "creationTime": 1672364262482,
        "data": [
            {
                "accountIMRate": "0.016",
                "accountMMRate": "0.003",
                "totalEquity": "12837.78330098",
                "totalWalletBalance": "12840.4045924",
                "totalMarginBalance": "12837.78330188",
                "totalAvailableBalance": "12632.05767702",
                "totalPerpUPL": "-2.62129051",
                "totalInitialMargin": "205.72562486",
                "totalMaintenanceMargin": "39.42876721",
                "coin": [
                    {
                        "coin": "USDC",
                        "equity": "200.62572554",
                        "usdValue": "200.62572554",
                        "walletBalance": "201.34882644",
                        "availableToWithdraw": "0",
                        "availableToBorrow": "1500000",
                        "borrowAmount": "0",
                        "accruedInterest": "0",
                        "totalOrderIM": "0",
                        "totalPositionIM": "202.99874213",
                        "totalPositionMM": "39.14289747",
                        "unrealisedPnl": "74.2768991",
                        "cumRealisedPnl": "-209.1544627",
                        "bonus": "0",
                        "collateralSwitch": True,
                        "marginCollateral": True,
                        "locked": "",
                        "spotHedgingQty": "0.01592413",
                    }
                ],
                "accountLTV": "0",
                "accountType": "UNIFIED",
            }
        ],
    }


@pytest.fixture
def public_pong_frame():
    return {
        "success": True,
        "ret_msg": "pong",
        "conn_id": "0970e817-426e-429a-a679-ff7f55e0b16a",
        "req_id": "100001",
        "op": "ping",
    }


@pytest.fixture
def private_pong_frame():
    return {
        "req_id": "test",
        "op": "pong",
        "args": ["1675418560633"],
        "conn_id": "cfcb4ocsvfriu23r3er0-1b",
    }


@pytest.fixture
def order_ack_frame():
    return {
        "reqId": "test-005",
        "retCode": 0,
        "retMsg": "OK",
        "op": "order.create",
        "data": {
            "orderId": "a4c1718c-fe02-41ee-9b6b-9c7d5f5e2b43",
            "orderLinkId": "",
        },
        "header": {
            "X-Bapi-Limit": "10",
            "X-Bapi-Limit-Status": "9",
            "X-Bapi-Limit-Reset-Timestamp": "1711001595208",
            "Traceid": "38ae6fdfad19f8ad7fa4e3c1c3d1e8a3",
            "Timenow": "1711001595212",
        },
        "connId": "cnt5leec0hvan15eukcg-2t",
    }


@pytest.fixture
def order_reject_frame():
    return {
        "reqId": "test-006",
        "retCode": 10001,
        "retMsg": "Order does not exist.",
        "op": "order.cancel",
        "data": {},
        "header": {
            "X-Bapi-Limit": "10",
            "X-Bapi-Limit-Status": "9",
            "X-Bapi-Limit-Reset-Timestamp": "1711001595208",
            "Traceid": "a1ef2f1f4a14f5a6e1f5ba3e4f0c9d11",
            "Timenow": "1711001595212",
        },
        "connId": "cnt5leec0hvan15eukcg-2t",
    }
