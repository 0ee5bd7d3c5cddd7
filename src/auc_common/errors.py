"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: User
  2xxx: Account
  3xxx: Trading
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: User ---

class UserNotFoundError(AppError):
    def __init__(self, username: str) -> None:
        super().__init__(1001, f"User not found: {username}", 404)


# --- 2xxx: Account ---

class InsufficientFundsError(AppError):
    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            2001,
            f"Insufficient funds: required {required}, available {available}",
            403,
        )


# --- 3xxx: Trading ---

class NotYetOpenError(AppError):
    def __init__(self, trade_start_nanos: int) -> None:
        super().__init__(3001, f"Trading opens at {trade_start_nanos}", 403)


class AlreadyTradedError(AppError):
    def __init__(self, username: str) -> None:
        super().__init__(3002, f"User {username} has already traded", 403)


# --- 9xxx: System ---

class AuctionConfigError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(9001, f"Invalid auction config: {detail}", 500)


class InternalError(AppError):
    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(9002, detail, 500)
