from collections.abc import Iterable
from dataclasses import dataclass, field

from src.auc_common.enums import MatchOutcome


@dataclass
class AskBook:
    """Remaining volume per ask price. Levels at zero volume are removed."""

    _levels: dict[int, int] = field(default_factory=dict)

    @classmethod
    def from_levels(cls, levels: Iterable[tuple[int, int]]) -> "AskBook":
        book = cls()
        for price, vol in levels:
            if vol <= 0:
                raise ValueError(f"Ask volume must be positive: price={price} vol={vol}")
            if price in book._levels:
                raise ValueError(f"Duplicate ask price: {price}")
            book._levels[price] = vol
        return book

    def __len__(self) -> int:
        return len(self._levels)

    def volume_at(self, price: int) -> int:
        return self._levels.get(price, 0)

    def decrement_ask(self, price: int) -> MatchOutcome:
        """Claim one unit at ``price``; lookup, decrement and removal are one step."""
        vol = self._levels.get(price)
        if vol is None:
            return MatchOutcome.NO_SUCH_PRICE_LEVEL
        if vol <= 0:
            # unreachable while the removal invariant holds
            del self._levels[price]
            return MatchOutcome.EXHAUSTED
        if vol == 1:
            del self._levels[price]
        else:
            self._levels[price] = vol - 1
        return MatchOutcome.MATCHED

    def snapshot(self) -> list[tuple[int, int]]:
        """(price, volume) pairs in ascending price order."""
        return sorted(self._levels.items())
