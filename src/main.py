"""FastAPI application entry point.

Run with: uvicorn src.main:app --port 5000
    or:   auction-server   (binds settings.HOST:settings.PORT)
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.auc_admin.api.router import router as admin_router
from src.auc_auction.api.router import router as user_router
from src.auc_auction.application.service import AuctionService
from src.auc_auction.domain.config import load_auction_config
from src.auc_auction.engine.state import AuctionState
from src.auc_common.errors import AppError
from src.auc_common.log_config import configure_logging
from src.auc_common.response import error_response
from src.auc_gateway.middleware.operation_log import OperationLogMiddleware

logger = logging.getLogger(__name__)

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build auction state from the seed file unless one was injected."""
    if getattr(app.state, "auction_service", None) is None:
        configure_logging(settings.LOG_LEVEL)
        config = load_auction_config(settings.AUCTION_CONFIG_PATH)
        app.state.auction_service = AuctionService(AuctionState.from_config(config))
        logger.info(
            "Auction loaded: %d users, %d ask levels, fee=%d, trade_start=%d",
            len(config.users), len(config.asks), config.fee, config.trade_start_nanos,
        )
    yield


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.debug("Request rejected: %s %s -> %d", request.method, request.url.path, exc.code)
    resp = error_response(exc.code, exc.message)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    request.state.error_code = exc.code
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


def create_app(service: AuctionService | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=VERSION,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    app.state.auction_service = service

    app.add_middleware(OperationLogMiddleware)
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]

    app.include_router(user_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": VERSION}

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, loop="auto")


if __name__ == "__main__":
    run()
