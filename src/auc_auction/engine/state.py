"""AuctionState — the shared ledger, ask book and trading parameters."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from src.auc_account.domain.ledger import AccountLedger
from src.auc_auction.domain.config import AuctionConfig
from src.auc_book.domain.ask_book import AskBook


@dataclass(frozen=True)
class AuctionTxn:
    """Handle on the mutable state; only valid inside AuctionState.exclusive()."""

    ledger: AccountLedger
    book: AskBook
    fee: int
    trade_start_nanos: int


class AuctionState:
    """Owns every mutable field behind one lock.

    The ledger and book are reachable only through the AuctionTxn yielded by
    exclusive(), so readers and writers alike hold the lock while touching them.
    """

    def __init__(
        self,
        ledger: AccountLedger,
        book: AskBook,
        fee: int,
        trade_start_nanos: int,
    ) -> None:
        self._ledger = ledger
        self._book = book
        self._fee = fee
        self._trade_start_nanos = trade_start_nanos
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: AuctionConfig) -> "AuctionState":
        return cls(
            ledger=AccountLedger(config.users, config.init_balance),
            book=AskBook.from_levels((ask.price, ask.vol) for ask in config.asks),
            fee=config.fee,
            trade_start_nanos=config.trade_start_nanos,
        )

    @property
    def fee(self) -> int:
        return self._fee

    @property
    def trade_start_nanos(self) -> int:
        return self._trade_start_nanos

    @contextmanager
    def exclusive(self) -> Iterator[AuctionTxn]:
        with self._lock:
            yield AuctionTxn(
                ledger=self._ledger,
                book=self._book,
                fee=self._fee,
                trade_start_nanos=self._trade_start_nanos,
            )
