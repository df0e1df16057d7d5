import pytest

from dexroutes.errors import StdError
from dexroutes.messages import (
    Asset,
    Coin,
    MessageInfo,
    NativeToken,
    Response,
    SwapOperation,
    Token,
    WasmExecute,
    asset_info_from_dict,
)

ORAI = NativeToken("orai")
USDC = Token("usdc")


@pytest.mark.parametrize("info", [ORAI, USDC])
def test_asset_info_round_trip(info):
    assert asset_info_from_dict(info.to_dict()) == info


def test_asset_info_str_is_identifier():
    assert str(ORAI) == "orai"
    assert str(USDC) == "usdc"


def test_unknown_asset_info_raises():
    with pytest.raises(StdError):
        asset_info_from_dict({"something": {}})


def test_asset_str_joins_amount_and_info():
    assert str(Asset(ORAI, 100)) == "100orai"


def test_asset_to_dict_amount_is_string():
    data = Asset(USDC, 42).to_dict()
    assert data["amount"] == "42"
    assert asset_info_from_dict(data["info"]) == USDC


def test_swap_operation_round_trip():
    op = SwapOperation(ORAI, USDC)
    assert SwapOperation.from_dict(op.to_dict()) == op


def test_swap_operation_target_and_reverse():
    op = SwapOperation(ORAI, USDC)
    assert op.target_asset_info() == USDC
    assert op.reversed() == SwapOperation(USDC, ORAI)
    assert op.reversed().reversed() == op


def test_swap_operation_from_bad_dict():
    with pytest.raises(StdError):
        SwapOperation.from_dict({"orai_swap": {"offer_asset_info": ORAI.to_dict()}})


def test_response_chaining_collects_items():
    message = WasmExecute("contract", {"noop": {}}, (Coin("orai", 5),))
    response = Response().add_attribute("action", "distribute").add_message(message)
    assert response.attributes == [("action", "distribute")]
    assert response.messages == [message]


def test_response_attribute_value_stringified():
    response = Response().add_attribute("amount", 7)
    assert response.attributes[0][1] == "7"


def test_message_info_defaults_to_no_funds():
    assert MessageInfo("addr0000").funds == ()