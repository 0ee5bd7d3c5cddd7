"""FastAPI dependency: the process-wide AuctionService."""

from fastapi import Request

from src.auc_auction.application.service import AuctionService
from src.auc_common.errors import InternalError


def get_auction_service(request: Request) -> AuctionService:
    service: AuctionService | None = getattr(request.app.state, "auction_service", None)
    if service is None:
        raise InternalError("Auction service is not initialised")
    return service
