"""Errors raised by the routing and reward contracts."""

from __future__ import annotations


def _debug(text: str) -> str:
    """Quote a string the way a debug formatter shows it."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class ContractError(Exception):
    """Base class for every error a contract call raises."""

    def __init__(self, message: str = "contract error") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class StdError(ContractError):
    """A standard error, by default a generic one."""

    def __init__(self, detail: str, kind: str = "Generic error") -> None:
        self.detail = detail
        self.kind = kind
        super().__init__(f"{kind}: {detail}")


class Unauthorized(ContractError):
    def __init__(self) -> None:
        super().__init__("Unauthorized")


class InvalidPoolRoute(ContractError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid Pool Route: {_debug(reason)}")


class FailedSwap(ContractError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed Swap: {_debug(reason)}")


class InsufficientFunds(ContractError):
    def __init__(self) -> None:
        super().__init__("Insufficient Funds")


class QueryError(ContractError):
    def __init__(self, val: str) -> None:
        self.val = val
        super().__init__(f"Query Error: {_debug(val)}")


class TwapNotFound(ContractError):
    def __init__(self, denom: str, sell_denom: str, pool_id: int) -> None:
        self.denom = denom
        self.sell_denom = sell_denom
        self.pool_id = pool_id
        super().__init__(
            f"TwapNotFound: Twap price not found for {denom} in {sell_denom} "
            f"via pool {pool_id}"
        )


class InvalidTwapString(ContractError):
    def __init__(self, twap: str) -> None:
        self.twap = twap
        super().__init__(
            f"InvalidTwap: Invalid twap value received from the chain: {twap}. "
            "Should be a Decimal"
        )


class InvalidTwapOperation(ContractError):
    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"InvalidTwap: Invalid value for twap price: {operation}.")


class CustomError(ContractError):
    def __init__(self, val: str) -> None:
        self.val = val
        super().__init__(f"Custom Error: {_debug(val)}")


class NoSwapOperation(ContractError):
    def __init__(self) -> None:
        super().__init__("must provide operations")


class PoolWhitelisted(ContractError):
    def __init__(self) -> None:
        super().__init__(
            "This pool is not open to everyone, only whitelisted traders can swap"
        )


class SwapAssertionFailure(ContractError):
    def __init__(self, minimum_receive: int, swap_amount: int) -> None:
        self.minimum_receive = minimum_receive
        self.swap_amount = swap_amount
        super().__init__(
            f"Assertion failed; minimum receive amount: {minimum_receive}, "
            f"swap amount: {swap_amount}"
        )