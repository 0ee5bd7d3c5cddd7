"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.auc_auction.application.service import AuctionService
from src.auc_auction.domain.config import AuctionConfig
from src.auc_auction.engine.state import AuctionState
from src.main import create_app

TRADE_START = 1_000


class FakeClock:
    """Settable epoch-nanosecond clock."""

    def __init__(self, now: int = TRADE_START) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now


@pytest.fixture
def auction_config() -> AuctionConfig:
    return AuctionConfig(
        users=["a", "b", "c"],
        trade_start_nanos=TRADE_START,
        init_balance=100,
        fee=10,
        asks=[{"price": 50, "vol": 1}, {"price": 30, "vol": 2}],
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def state(auction_config: AuctionConfig) -> AuctionState:
    return AuctionState.from_config(auction_config)


@pytest.fixture
def service(state: AuctionState, clock: FakeClock) -> AuctionService:
    return AuctionService(state, clock=clock)


@pytest.fixture
async def client(service: AuctionService) -> AsyncClient:
    """Async HTTP client over an app wired to the fixture service."""
    transport = ASGITransport(app=create_app(service))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
