"""Participant API — every route charges the user's fee.

Handlers are sync so FastAPI dispatches them onto its worker threadpool;
AuctionState's lock serialises them.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.auc_auction.api.dependencies import get_auction_service
from src.auc_auction.application.schemas import (
    CheckAsksResponse,
    PingResponse,
    PlaceBidResponse,
)
from src.auc_auction.application.service import AuctionService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/{uname}/ping")
def ping(
    uname: str,
    service: Annotated[AuctionService, Depends(get_auction_service)],
) -> PingResponse:
    return service.ping(uname)


@router.post("/{uname}/check_asks")
def check_asks(
    uname: str,
    service: Annotated[AuctionService, Depends(get_auction_service)],
) -> CheckAsksResponse:
    return service.check_asks(uname)


@router.post("/{uname}/place_bid/{price}")
def place_bid(
    uname: str,
    price: int,
    service: Annotated[AuctionService, Depends(get_auction_service)],
) -> PlaceBidResponse:
    return service.place_bid(uname, price)
