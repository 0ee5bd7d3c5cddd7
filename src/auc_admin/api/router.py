"""Admin REST API."""
from typing import Annotated

from fastapi import APIRouter, Depends

from src.auc_auction.api.dependencies import get_auction_service
from src.auc_auction.application.schemas import BoardResponse
from src.auc_auction.application.service import AuctionService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/board")
def board(
    service: Annotated[AuctionService, Depends(get_auction_service)],
) -> BoardResponse:
    return service.board()
