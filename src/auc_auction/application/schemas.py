"""Pydantic response schemas for the auction API.

Bodies are flat; errors use the ApiResponse envelope instead.
"""

from pydantic import BaseModel


class PingResponse(BaseModel):
    now_nanos: int
    trade_start_nanos: int
    balance: int


class AskLevel(BaseModel):
    price: int
    vol: int


class CheckAsksResponse(BaseModel):
    asks: list[AskLevel]


class PlaceBidResponse(BaseModel):
    trade_succ: bool


class AccountView(BaseModel):
    balance: int
    done_trade: bool


class BoardResponse(BaseModel):
    """Users split by done_trade, each group ranked by descending balance."""

    done_users: list[tuple[str, AccountView]]
    running_users: list[tuple[str, AccountView]]
