"""Private-channel payloads: positions, executions, orders and wallet.

These frames carry ``id``, ``topic``, ``creationTime`` and a ``data`` list,
and no snapshot/delta marker. Every update is a full record for its entity.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from pydantic import Field

from ..core.enums import EventKind
from .base import BybitModel, Num, OptInt, OptNum, OptStr


class PositionData(BybitModel):
    symbol: str
    category: str = ""
    side: str = ""
    size: Num = Decimal("0")
    position_idx: int = 0
    trade_mode: int = 0
    risk_id: int = 0
    risk_limit_value: OptStr = None
    entry_price: Num = Decimal("0")
    mark_price: Num = Decimal("0")
    leverage: OptStr = None
    position_value: Num = Decimal("0")
    position_balance: Num = Decimal("0")
    position_im: OptStr = Field(default=None, alias="positionIM")
    position_mm: OptStr = Field(default=None, alias="positionMM")
    take_profit: Num = Decimal("0")
    stop_loss: Num = Decimal("0")
    trailing_stop: OptNum = None
    unrealised_pnl: OptStr = None
    cum_realised_pnl: OptStr = None
    created_time: OptInt = None
    updated_time: OptInt = None
    tpsl_mode: OptStr = None
    liq_price: OptNum = None
    bust_price: OptNum = None
    position_status: OptStr = None
    adl_rank_indicator: int = 0
    auto_add_margin: int = 0
    mmr_sys_updated_time: OptInt = None
    leverage_sys_updated_time: OptInt = None
    seq: int = 0
    is_reduce_only: bool = False


class ExecutionData(BybitModel):
    category: str
    symbol: str
    exec_id: str
    exec_price: Num = Decimal("0")
    exec_qty: Num = Decimal("0")
    exec_fee: Num = Decimal("0")
    exec_type: str = ""
    exec_value: Num = Decimal("0")
    exec_time: OptInt = None
    is_maker: bool = False
    fee_rate: Num = Decimal("0")
    trade_iv: OptStr = None
    mark_iv: OptStr = None
    block_trade_id: OptStr = None
    mark_price: Num = Decimal("0")
    index_price: Num = Decimal("0")
    underlying_price: OptNum = None
    leaves_qty: Num = Decimal("0")
    order_id: str = ""
    order_link_id: str = ""
    order_price: Num = Decimal("0")
    order_qty: Num = Decimal("0")
    order_type: str = ""
    stop_order_type: OptStr = None
    side: str = ""
    is_leverage: OptStr = None
    closed_size: OptStr = None
    seq: int = 0


class FastExecData(BybitModel):
    category: str
    symbol: str
    exec_id: str
    exec_price: Decimal
    exec_qty: Decimal
    order_id: str = ""
    order_link_id: str = ""
    side: str = ""
    exec_time: OptInt = None
    seq: int = 0


class OrderData(BybitModel):
    symbol: str
    order_id: str
    category: str = ""
    side: str = ""
    order_type: str = ""
    cancel_type: OptStr = None
    price: Num = Decimal("0")
    qty: Num = Decimal("0")
    order_iv: OptStr = None
    time_in_force: str = ""
    order_status: str = ""
    order_link_id: str = ""
    last_price_on_created: Num = Decimal("0")
    reduce_only: bool = False
    leaves_qty: Num = Decimal("0")
    leaves_value: Num = Decimal("0")
    cum_exec_qty: Num = Decimal("0")
    cum_exec_value: Num = Decimal("0")
    cum_exec_fee: Num = Decimal("0")
    avg_price: Num = Decimal("0")
    block_trade_id: OptStr = None
    position_idx: int = 0
    created_time: OptInt = None
    updated_time: OptInt = None
    reject_reason: OptStr = None
    stop_order_type: OptStr = None
    tpsl_mode: OptStr = None
    trigger_price: Num = Decimal("0")
    take_profit: Num = Decimal("0")
    stop_loss: Num = Decimal("0")
    tp_trigger_by: OptStr = None
    sl_trigger_by: OptStr = None
    tp_limit_price: Num = Decimal("0")
    sl_limit_price: Num = Decimal("0")
    trigger_direction: int = 0
    trigger_by: OptStr = None
    close_on_trigger: bool = False
    place_type: OptStr = None
    smp_type: OptStr = None
    smp_group: int = 0
    smp_order_id: OptStr = None
    fee_currency: OptStr = None


class CoinData(BybitModel):
    coin: str
    equity: Num = Decimal("0")
    usd_value: Num = Decimal("0")
    wallet_balance: Num = Decimal("0")
    available_to_withdraw: OptNum = None
    available_to_borrow: OptNum = None
    borrow_amount: Num = Decimal("0")
    accrued_interest: Num = Decimal("0")
    total_order_im: Num = Field(default=Decimal("0"), alias="totalOrderIM")
    total_position_im: Num = Field(default=Decimal("0"), alias="totalPositionIM")
    total_position_mm: Num = Field(default=Decimal("0"), alias="totalPositionMM")
    unrealised_pnl: Num = Decimal("0")
    cum_realised_pnl: Num = Decimal("0")
    bonus: Num = Decimal("0")
    collateral_switch: bool = False
    margin_collateral: bool = False
    locked: Num = Decimal("0")
    spot_hedging_qty: Num = Decimal("0")


class WalletData(BybitModel):
    account_type: OptStr = None
    account_im_rate: OptNum = Field(default=None, alias="accountIMRate")
    account_mm_rate: OptNum = Field(default=None, alias="accountMMRate")
    account_ltv: OptNum = Field(default=None, alias="accountLTV")
    total_equity: Num = Decimal("0")
    total_wallet_balance: Num = Decimal("0")
    total_margin_balance: OptNum = None
    total_available_balance: OptNum = None
    total_perp_upl: Num = Field(default=Decimal("0"), alias="totalPerpUPL")
    total_initial_margin: OptNum = None
    total_maintenance_margin: OptNum = None
    coin: list[CoinData] = Field(default_factory=list)


class _PrivateEvent(BybitModel):
    id: str = ""
    topic: str
    creation_time: int = 0


class PositionEvent(_PrivateEvent):
    kind: ClassVar[EventKind] = EventKind.POSITION

    data: list[PositionData]


class ExecutionEvent(_PrivateEvent):
    kind: ClassVar[EventKind] = EventKind.EXECUTION

    data: list[ExecutionData]


class FastExecEvent(_PrivateEvent):
    kind: ClassVar[EventKind] = EventKind.FAST_EXECUTION

    data: list[FastExecData]


class OrderEvent(_PrivateEvent):
    kind: ClassVar[EventKind] = EventKind.ORDER

    data: list[OrderData]


class WalletEvent(_PrivateEvent):
    kind: ClassVar[EventKind] = EventKind.WALLET

    data: list[WalletData]
