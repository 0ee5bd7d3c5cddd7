"""Global enums."""

from enum import Enum


class MatchOutcome(str, Enum):
    """Result of claiming one unit from an ask level."""
    MATCHED = "MATCHED"
    NO_SUCH_PRICE_LEVEL = "NO_SUCH_PRICE_LEVEL"
    EXHAUSTED = "EXHAUSTED"
