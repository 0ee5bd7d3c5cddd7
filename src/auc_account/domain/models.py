"""Domain models for auc_account — pure dataclasses."""

from dataclasses import dataclass


@dataclass
class Account:
    username: str
    balance: int
    done_trade: bool = False  # monotonic: False -> True, never reset
