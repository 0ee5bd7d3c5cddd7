"""Tests for auc_common.errors and auc_common.response."""

from src.auc_common.errors import (
    AlreadyTradedError,
    AppError,
    AuctionConfigError,
    InsufficientFundsError,
    NotYetOpenError,
    UserNotFoundError,
)
from src.auc_common.response import ApiResponse, error_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=9002, message="Internal error")
        assert err.code == 9002
        assert err.message == "Internal error"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        assert isinstance(AppError(code=1001, message="test"), Exception)


class TestSpecificErrors:
    def test_user_not_found(self) -> None:
        err = UserNotFoundError("ghost")
        assert err.code == 1001
        assert err.http_status == 404
        assert "ghost" in err.message

    def test_insufficient_funds(self) -> None:
        err = InsufficientFundsError(required=10, available=3)
        assert err.code == 2001
        assert err.http_status == 403
        assert "10" in err.message
        assert "3" in err.message

    def test_not_yet_open(self) -> None:
        err = NotYetOpenError(12345)
        assert err.code == 3001
        assert err.http_status == 403

    def test_already_traded(self) -> None:
        err = AlreadyTradedError("a")
        assert err.code == 3002
        assert err.http_status == 403

    def test_config_error(self) -> None:
        err = AuctionConfigError("bad")
        assert err.code == 9001
        assert "bad" in err.message


class TestApiResponse:
    def test_error(self) -> None:
        resp = error_response(2001, "Insufficient funds")
        assert resp.code == 2001
        assert resp.message == "Insufficient funds"
        assert resp.data is None

    def test_serialization(self) -> None:
        d = ApiResponse().model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}
        assert d["request_id"].startswith("req_")
