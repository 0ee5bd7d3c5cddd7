"""AuctionService — ping, check_asks, place_bid and board.

Each operation is one transaction: it enters AuctionState.exclusive() once
and holds it until the result is built, so no caller ever sees a bid half
applied.

Charging order differs per operation:
  ping        check fee -> debit -> respond (no trading-hours gate)
  check_asks  check fee -> debit -> gate on trading hours
  place_bid   check fee -> debit -> gate on trading hours -> gate on done_trade
              -> check price is affordable (live levels only) -> claim one unit at that price
A fee debited before a later gate rejects the request stays charged.
"""

import logging
from collections.abc import Callable

from src.auc_auction.application.schemas import (
    AccountView,
    AskLevel,
    BoardResponse,
    CheckAsksResponse,
    PingResponse,
    PlaceBidResponse,
)
from src.auc_auction.engine.state import AuctionState, AuctionTxn
from src.auc_common.datetime_utils import now_nanos
from src.auc_common.enums import MatchOutcome
from src.auc_common.errors import AlreadyTradedError, NotYetOpenError

logger = logging.getLogger(__name__)


class AuctionService:
    def __init__(
        self,
        state: AuctionState,
        clock: Callable[[], int] = now_nanos,
    ) -> None:
        self._state = state
        self._clock = clock

    def _check_open(self, txn: AuctionTxn, now: int) -> None:
        if now < txn.trade_start_nanos:
            raise NotYetOpenError(txn.trade_start_nanos)

    def ping(self, username: str) -> PingResponse:
        with self._state.exclusive() as txn:
            balance = txn.ledger.debit_fee(username, txn.fee)
            return PingResponse(
                now_nanos=self._clock(),
                trade_start_nanos=txn.trade_start_nanos,
                balance=balance,
            )

    def check_asks(self, username: str) -> CheckAsksResponse:
        with self._state.exclusive() as txn:
            txn.ledger.debit_fee(username, txn.fee)
            self._check_open(txn, self._clock())
            return CheckAsksResponse(
                asks=[AskLevel(price=p, vol=v) for p, v in txn.book.snapshot()]
            )

    def place_bid(self, username: str, price: int) -> PlaceBidResponse:
        with self._state.exclusive() as txn:
            txn.ledger.debit_fee(username, txn.fee)
            self._check_open(txn, self._clock())
            if txn.ledger.get(username).done_trade:
                raise AlreadyTradedError(username)
            # unaffordable claims on a live level leave the book untouched
            if txn.book.volume_at(price) > 0:
                txn.ledger.ensure_funds(username, price)

            outcome = txn.book.decrement_ask(price)
            if outcome is not MatchOutcome.MATCHED:
                logger.debug("Bid not matched: user=%s price=%d outcome=%s",
                             username, price, outcome.value)
                return PlaceBidResponse(trade_succ=False)

            account = txn.ledger.settle_trade(username, price)
            logger.info(
                "Bid matched: user=%s price=%d balance=%d remaining=%d",
                username, price, account.balance, txn.book.volume_at(price),
            )
            return PlaceBidResponse(trade_succ=True)

    def board(self) -> BoardResponse:
        with self._state.exclusive() as txn:
            ranked = sorted(txn.ledger, key=lambda a: a.balance, reverse=True)
            done: list[tuple[str, AccountView]] = []
            running: list[tuple[str, AccountView]] = []
            for account in ranked:
                view = AccountView(balance=account.balance, done_trade=account.done_trade)
                (done if account.done_trade else running).append((account.username, view))
            return BoardResponse(done_users=done, running_users=running)
