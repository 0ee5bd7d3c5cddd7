"""Auction seed configuration: registered users, fee, opening time and asks."""

from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.auc_common.errors import AuctionConfigError


class AskSeed(BaseModel):
    price: int
    vol: int = Field(..., gt=0)


class AuctionConfig(BaseModel):
    users: list[str] = Field(..., min_length=1)
    trade_start_nanos: int
    init_balance: int = Field(..., ge=0)
    fee: int = Field(..., ge=0)
    asks: list[AskSeed] = Field(default_factory=list)

    @field_validator("users")
    @classmethod
    def users_unique(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError("Usernames must be unique")
        return v

    @field_validator("asks")
    @classmethod
    def prices_unique(cls, v: list[AskSeed]) -> list[AskSeed]:
        prices = [ask.price for ask in v]
        if len(set(prices)) != len(prices):
            raise ValueError("Ask prices must be unique")
        return v


def load_auction_config(path: str | Path) -> AuctionConfig:
    """Read and validate the seed file. Any failure is fatal at startup."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise AuctionConfigError(f"cannot read {path}: {exc}") from exc
    try:
        return AuctionConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise AuctionConfigError(f"{path}: {exc}") from exc
