"""A router that chains swaps across pairs found through factories."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, TypeVar

from dexroutes.errors import (
    NoSwapOperation,
    PoolWhitelisted,
    StdError,
    SwapAssertionFailure,
    Unauthorized,
)
from dexroutes.messages import (
    Asset,
    AssetInfo,
    Coin,
    MessageInfo,
    NativeToken,
    Response,
    SwapOperation,
    Token,
    WasmExecute,
)

_T = TypeVar("_T")


class SwapQuerier(Protocol):
    """Read access to the chain that the router needs."""

    def pair_config(self, factory_addr: str) -> str:
        """Return the oracle address a factory's pairs use."""

    def pair_info(self, factory_addr: str, asset_infos: Sequence[AssetInfo]) -> str:
        """Return the address of the pair trading the two assets."""

    def compute_tax(self, oracle_addr: str, asset: Asset) -> int:
        """Return the tax charged on moving the asset."""

    def simulate(self, pair_addr: str, offer_asset: Asset) -> int:
        """Return what the pair would pay out for the offer."""

    def is_trader_whitelisted(self, pair_addr: str, trader: str) -> bool:
        """Tell whether the trader may trade on the pair."""

    def balance(self, asset_info: AssetInfo, address: str) -> int:
        """Return the address's balance of the asset."""


@dataclass(frozen=True)
class RouterConfig:
    factory_addr: str
    factory_addr_v2: str


def _checked_sub(left: int, right: int) -> int:
    if right > left:
        raise StdError(f"Cannot Sub with {left} and {right}", kind="Overflow")
    return left - right


def _validate_addr(addr: str) -> str:
    if not addr or addr != addr.strip() or addr != addr.lower():
        raise StdError(f"Invalid input: address not normalized: {addr!r}")
    return addr


def _encode(msg: dict[str, Any]) -> str:
    return base64.b64encode(json.dumps(msg).encode()).decode()


def assert_operations(operations: Sequence[SwapOperation]) -> None:
    """Check that the operations end in exactly one output asset."""
    outputs: dict[str, bool] = {}
    for operation in operations:
        outputs.pop(str(operation.offer_asset_info), None)
        outputs[str(operation.ask_asset_info)] = True
    if len(outputs) != 1:
        raise StdError("invalid operations; multiple output token")


class Router:
    """Splits a multi-hop swap into single swaps against pair contracts."""

    def __init__(
        self,
        address: str,
        factory_addr: str,
        factory_addr_v2: str,
        querier: SwapQuerier,
    ) -> None:
        self.address = address
        self._config = RouterConfig(factory_addr, factory_addr_v2)
        self.querier = querier

    def config(self) -> RouterConfig:
        return self._config

    def _from_factories(self, lookup: Callable[[str], _T]) -> _T:
        try:
            return lookup(self._config.factory_addr)
        except Exception:
            return lookup(self._config.factory_addr_v2)

    def _pair_for(self, operation: SwapOperation) -> str:
        infos = [operation.offer_asset_info, operation.ask_asset_info]
        return self._from_factories(lambda f: self.querier.pair_info(f, infos))

    def _oracle(self) -> str:
        return self._from_factories(self.querier.pair_config)

    def receive_cw20(self, sender: str, msg: bytes | str) -> Response:
        """Handle a token transfer carrying an execute_swap_operations hook."""
        sender = _validate_addr(sender)
        try:
            payload = json.loads(msg)
        except (ValueError, TypeError) as exc:
            raise StdError(str(exc), kind="Parse error") from exc
        if not isinstance(payload, dict) or "execute_swap_operations" not in payload:
            raise StdError("unknown variant of Cw20HookMsg", kind="Parse error")
        body = payload["execute_swap_operations"]
        operations = [SwapOperation.from_dict(op) for op in body.get("operations", [])]
        minimum = body.get("minimum_receive")
        receiver = body.get("to")
        if receiver is not None:
            try:
                receiver = _validate_addr(receiver)
            except StdError:
                receiver = None
        return self.execute_swap_operations(
            sender,
            operations,
            int(minimum) if minimum is not None else None,
            receiver,
        )

    def execute_swap_operations(
        self,
        sender: str,
        operations: Sequence[SwapOperation],
        minimum_receive: Optional[int] = None,
        to: Optional[str] = None,
    ) -> Response:
        """Queue one swap message per operation, plus an optional check."""
        if not operations:
            raise NoSwapOperation()
        assert_operations(operations)

        receiver = to if to is not None else sender
        target = operations[-1].target_asset_info()
        last = len(operations) - 1

        response = Response()
        for position, operation in enumerate(operations):
            response.add_message(
                WasmExecute(
                    self.address,
                    {
                        "execute_swap_operation": {
                            "operation": operation.to_dict(),
                            "to": receiver if position == last else None,
                            "sender": sender,
                        }
                    },
                )
            )

        if minimum_receive is not None:
            prev_balance = self.querier.balance(target, receiver)
            response.add_message(
                WasmExecute(
                    self.address,
                    {
                        "assert_minimum_receive": {
                            "asset_info": target.to_dict(),
                            "prev_balance": str(prev_balance),
                            "minimum_receive": str(minimum_receive),
                            "receiver": receiver,
                        }
                    },
                )
            )
        return response

    def execute_swap_operation(
        self,
        info: MessageInfo,
        operation: SwapOperation,
        to: Optional[str],
        sender: str,
    ) -> Response:
        """Swap the router's whole balance of the offer asset on one pair."""
        if info.sender != self.address:
            raise Unauthorized()

        oracle = self._oracle()
        pair = self._pair_for(operation)

        try:
            whitelisted = self.querier.is_trader_whitelisted(pair, sender)
        except Exception:
            whitelisted = True
        if not whitelisted:
            raise PoolWhitelisted()

        offer_info = operation.offer_asset_info
        amount = self.querier.balance(offer_info, self.address)
        message = self._swap_message(oracle, pair, Asset(offer_info, amount), None, to)
        return Response().add_message(message)

    def _swap_message(
        self,
        oracle: str,
        pair: str,
        offer: Asset,
        max_spread: Optional[str],
        to: Optional[str],
    ) -> WasmExecute:
        if isinstance(offer.info, NativeToken):
            tax = self.querier.compute_tax(oracle, offer)
            amount = _checked_sub(offer.amount, tax)
            return WasmExecute(
                pair,
                {
                    "swap": {
                        "offer_asset": Asset(offer.info, amount).to_dict(),
                        "belief_price": None,
                        "max_spread": max_spread,
                        "to": to,
                    }
                },
                (Coin(offer.info.denom, amount),),
            )
        assert isinstance(offer.info, Token)
        hook = {"swap": {"belief_price": None, "max_spread": max_spread, "to": to}}
        return WasmExecute(
            offer.info.contract_addr,
            {
                "send": {
                    "contract": pair,
                    "amount": str(offer.amount),
                    "msg": _encode(hook),
                }
            },
        )

    def assert_minimum_receive(
        self,
        asset_info: AssetInfo,
        prev_balance: int,
        minimum_receive: int,
        receiver: str,
    ) -> Response:
        """Fail unless the receiver gained at least the minimum amount."""
        balance = self.querier.balance(asset_info, receiver)
        swapped = _checked_sub(balance, prev_balance)
        if swapped < minimum_receive:
            raise SwapAssertionFailure(minimum_receive, swapped)
        return Response()

    def simulate_swap_operations(
        self, offer_amount: int, operations: Sequence[SwapOperation]
    ) -> int:
        """Estimate the final amount a chain of swaps would yield."""
        if not operations:
            raise StdError(str(NoSwapOperation()))

        amount = offer_amount
        for operation in operations:
            oracle = self._oracle()
            pair = self._pair_for(operation)
            offer_info = operation.offer_asset_info
            amount = _checked_sub(
                amount, self.querier.compute_tax(oracle, Asset(offer_info, amount))
            )
            returned = self.querier.simulate(pair, Asset(offer_info, amount))
            ask_tax = self.querier.compute_tax(
                oracle, Asset(operation.ask_asset_info, returned)
            )
            amount = _checked_sub(returned, ask_tax)
        return amount