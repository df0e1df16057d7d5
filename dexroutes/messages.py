"""Assets, swap operations and the message types contracts exchange."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from dexroutes.errors import StdError


@dataclass(frozen=True)
class NativeToken:
    """A chain-native coin identified by its denomination."""

    denom: str

    def __str__(self) -> str:
        return self.denom

    def to_dict(self) -> dict[str, Any]:
        return {"native_token": {"denom": self.denom}}


@dataclass(frozen=True)
class Token:
    """A token contract identified by its address."""

    contract_addr: str

    def __str__(self) -> str:
        return self.contract_addr

    def to_dict(self) -> dict[str, Any]:
        return {"token": {"contract_addr": self.contract_addr}}


AssetInfo = Union[NativeToken, Token]


def asset_info_from_dict(data: dict[str, Any]) -> AssetInfo:
    """Build an asset info from its JSON form."""
    if not isinstance(data, dict):
        raise StdError("expected an object for AssetInfo", kind="Parse error")
    if "native_token" in data:
        return NativeToken(str(data["native_token"]["denom"]))
    if "token" in data:
        return Token(str(data["token"]["contract_addr"]))
    raise StdError(f"unknown AssetInfo variant: {sorted(data)}", kind="Parse error")


@dataclass(frozen=True)
class Asset:
    """An amount of some asset."""

    info: AssetInfo
    amount: int

    def __str__(self) -> str:
        return f"{self.amount}{self.info}"

    def to_dict(self) -> dict[str, Any]:
        return {"info": self.info.to_dict(), "amount": str(self.amount)}


@dataclass(frozen=True)
class Coin:
    """Native funds attached to a message."""

    denom: str
    amount: int

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


@dataclass(frozen=True)
class SwapOperation:
    """One hop of a route: swap the offer asset for the ask asset."""

    offer_asset_info: AssetInfo
    ask_asset_info: AssetInfo

    def target_asset_info(self) -> AssetInfo:
        return self.ask_asset_info

    def reversed(self) -> SwapOperation:
        return SwapOperation(self.ask_asset_info, self.offer_asset_info)

    def to_dict(self) -> dict[str, Any]:
        return {
            "orai_swap": {
                "offer_asset_info": self.offer_asset_info.to_dict(),
                "ask_asset_info": self.ask_asset_info.to_dict(),
            }
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> SwapOperation:
        try:
            body = data["orai_swap"]
            return SwapOperation(
                asset_info_from_dict(body["offer_asset_info"]),
                asset_info_from_dict(body["ask_asset_info"]),
            )
        except (KeyError, TypeError) as exc:
            raise StdError(
                f"invalid SwapOperation: {exc}", kind="Parse error"
            ) from exc


@dataclass
class WasmExecute:
    """A call to execute another contract."""

    contract_addr: str
    msg: dict[str, Any]
    funds: tuple[Coin, ...] = ()


@dataclass
class Response:
    """What a successful contract call returns."""

    messages: list[WasmExecute] = field(default_factory=list)
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> Response:
        self.attributes.append((key, str(value)))
        return self

    def add_message(self, message: WasmExecute) -> Response:
        self.messages.append(message)
        return self


@dataclass(frozen=True)
class MessageInfo:
    """Who sent a message and the funds sent with it."""

    sender: str
    funds: tuple[Coin, ...] = ()


@dataclass(frozen=True)
class Env:
    """The environment a contract runs in."""

    contract_address: str
    height: int = 0
    time: int = 0