import pytest

from dexroutes.errors import (
    ContractError,
    CustomError,
    FailedSwap,
    InsufficientFunds,
    InvalidPoolRoute,
    InvalidTwapOperation,
    InvalidTwapString,
    NoSwapOperation,
    PoolWhitelisted,
    QueryError,
    StdError,
    SwapAssertionFailure,
    TwapNotFound,
    Unauthorized,
)


def test_unauthorized_message():
    assert str(Unauthorized()) == "Unauthorized"


def test_generic_std_error_message():
    err = StdError("Could not find route given the route index")
    assert str(err) == "Generic error: Could not find route given the route index"
    assert err.detail == "Could not find route given the route index"


def test_std_error_custom_kind():
    err = StdError("Cannot Sub with 1 and 2", kind="Overflow")
    assert str(err).startswith("Overflow: ")
    assert err.kind == "Overflow"


def test_no_swap_operation_message():
    assert "must provide operations" in str(NoSwapOperation())


def test_pool_whitelisted_message():
    assert str(PoolWhitelisted()) == (
        "This pool is not open to everyone, only whitelisted traders can swap"
    )


@pytest.mark.parametrize(
    "err, needle",
    [
        (InvalidPoolRoute("loop"), "loop"),
        (FailedSwap("slippage"), "slippage"),
        (QueryError("missing pair"), "missing pair"),
        (CustomError("oops"), "oops"),
        (InvalidTwapString("abc"), "abc"),
        (InvalidTwapOperation("div"), "div"),
        (TwapNotFound("uatom", "orai", 7), "via pool 7"),
        (SwapAssertionFailure(10, 3), "swap amount: 3"),
    ],
)
def test_errors_carry_their_details(err, needle):
    message = str(err)
    assert needle in message
    assert isinstance(err, ContractError)


def test_debug_quoting_escapes_quotes():
    err = InvalidPoolRoute('say "hi"')
    assert str(err).endswith('"say \\"hi\\""')
    assert err.reason == 'say "hi"'


def test_insufficient_funds_message_and_base():
    err = InsufficientFunds()
    assert str(err) == "Insufficient Funds"
    assert isinstance(err, ContractError)


def test_swap_assertion_failure_fields():
    err = SwapAssertionFailure(100, 40)
    assert (err.minimum_receive, err.swap_amount) == (100, 40)
    assert "100" in str(err)