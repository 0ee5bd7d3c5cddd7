"""Concurrent bids against one AuctionService from a worker threadpool."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.auc_auction.application.service import AuctionService
from src.auc_auction.domain.config import AuctionConfig
from src.auc_auction.engine.state import AuctionState
from src.auc_common.errors import AppError


def _build(n_users: int, vol: int) -> tuple[AuctionState, AuctionService]:
    cfg = AuctionConfig(
        users=[f"u{i}" for i in range(n_users)],
        trade_start_nanos=0,
        init_balance=1_000,
        fee=1,
        asks=[{"price": 100, "vol": vol}],
    )
    state = AuctionState.from_config(cfg)
    return state, AuctionService(state, clock=lambda: 1)


class TestSingleWinner:
    @pytest.mark.parametrize(("n_users", "vol"), [(50, 1), (50, 7), (10, 25)])
    def test_matches_equal_min_of_volume_and_bidders(self, n_users: int, vol: int) -> None:
        state, svc = _build(n_users, vol)
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(lambda u: svc.place_bid(u, 100).trade_succ,
                                    [f"u{i}" for i in range(n_users)]))
        matched = sum(results)
        assert matched == min(vol, n_users)
        with state.exclusive() as txn:
            assert txn.book.volume_at(100) == max(0, vol - matched)
            winners = [a for a in txn.ledger if a.done_trade]
        assert len(winners) == matched
        assert all(a.balance == 1_000 - 1 - 100 for a in winners)


class TestOneTradePerUser:
    def test_same_user_wins_at_most_once(self) -> None:
        state, svc = _build(1, 20)

        def attempt(_: int) -> str:
            try:
                return "won" if svc.place_bid("u0", 100).trade_succ else "lost"
            except AppError as exc:
                return str(exc.code)

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(attempt, range(30)))
        assert outcomes.count("won") == 1
        assert outcomes.count("3002") == 29
        with state.exclusive() as txn:
            assert txn.book.volume_at(100) == 19
            assert txn.ledger.get("u0").balance == 1_000 - 30 - 100
