"""AccountLedger — per-user balances for a closed set of usernames.

Not thread-safe on its own; callers go through AuctionState.exclusive().
Every debit is preceded by a sufficiency check, so balances never go negative.
"""

from collections.abc import Iterable, Iterator

from src.auc_account.domain.models import Account
from src.auc_common.errors import InsufficientFundsError, UserNotFoundError


class AccountLedger:
    def __init__(self, usernames: Iterable[str], init_balance: int) -> None:
        self._accounts: dict[str, Account] = {
            name: Account(username=name, balance=init_balance) for name in usernames
        }

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())

    def __contains__(self, username: object) -> bool:
        return username in self._accounts

    def get(self, username: str) -> Account:
        account = self._accounts.get(username)
        if account is None:
            raise UserNotFoundError(username)
        return account

    def ensure_funds(self, username: str, amount: int) -> Account:
        account = self.get(username)
        if account.balance < amount:
            raise InsufficientFundsError(required=amount, available=account.balance)
        return account

    def debit_fee(self, username: str, fee: int) -> int:
        """Charge ``fee`` and return the new balance.

        A failed check leaves the balance untouched. Once charged the fee is
        never refunded, even if the calling operation rejects the request
        afterwards.
        """
        account = self.ensure_funds(username, fee)
        account.balance -= fee
        return account.balance

    def settle_trade(self, username: str, price: int) -> Account:
        """Pay ``price`` for a matched unit and close the user's trading."""
        account = self.ensure_funds(username, price)
        account.balance -= price
        account.done_trade = True
        return account
