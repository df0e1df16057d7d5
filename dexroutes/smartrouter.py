"""A smart router that stores candidate routes and picks the best one."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Protocol, Sequence

from dexroutes.errors import StdError, Unauthorized
from dexroutes.messages import AssetInfo, Response, SwapOperation


class RouteSimulator(Protocol):
    """Asks a router how much a sequence of swaps would return."""

    def simulate_swap(
        self, router_addr: str, offer_amount: int, operations: Sequence[SwapOperation]
    ) -> int:
        """Return the simulated amount, or raise when the route cannot swap."""


class SmartRouteMode(Enum):
    MAX_MINIMUM_RECEIVE = "max_minimum_receive"


@dataclass(frozen=True)
class SmartRouterConfig:
    owner: str
    router: str


@dataclass(frozen=True)
class SmartRoute:
    swap_ops: list[SwapOperation]
    actual_minimum_receive: int


def _validate_addr(addr: str) -> str:
    if not addr or addr != addr.strip() or addr != addr.lower():
        raise StdError(f"Invalid input: address not normalized: {addr!r}")
    return addr


RouteKey = tuple[str, str]


class SmartRouter:
    """Owner-managed routing table with best-route selection by simulation."""

    def __init__(self, owner: str, router_addr: str, simulator: RouteSimulator) -> None:
        self._config = SmartRouterConfig(_validate_addr(owner), router_addr)
        self.simulator = simulator
        self._routing_table: dict[RouteKey, list[list[SwapOperation]]] = {}

    def _check_owner(self, sender: str) -> None:
        if self._config.owner != sender:
            raise Unauthorized()

    def _load(self, key: RouteKey) -> list[list[SwapOperation]]:
        try:
            return self._routing_table[key]
        except KeyError:
            raise StdError("Vec<Vec<SwapOperation>>", kind="Not found") from None

    def _store_route(self, key: RouteKey, route: list[SwapOperation]) -> None:
        self._routing_table.setdefault(key, []).append(list(route))
        reversed_ops = [op.reversed() for op in reversed(route)]
        if reversed_ops:
            self._routing_table.setdefault((key[1], key[0]), []).append(reversed_ops)

    def set_route(
        self,
        sender: str,
        input_info: AssetInfo,
        output_info: AssetInfo,
        pool_route: Sequence[SwapOperation],
    ) -> Response:
        """Add a route in both directions; only the owner may do so."""
        self._check_owner(sender)
        self._store_route((str(input_info), str(output_info)), list(pool_route))
        return Response().add_attribute("action", "set_route")

    def delete_route(
        self,
        sender: str,
        input_info: AssetInfo,
        output_info: AssetInfo,
        route_index: int,
    ) -> Response:
        """Remove one stored route; only the owner may do so."""
        self._check_owner(sender)
        key = (str(input_info), str(output_info))
        routes = self._load(key)
        if not 0 <= route_index < len(routes):
            raise StdError("Could not find route given the route index")
        del routes[route_index]
        return Response().add_attribute("action", "delete_route")

    def update_config(
        self,
        sender: str,
        new_owner: Optional[str] = None,
        new_router: Optional[str] = None,
    ) -> Response:
        """Change owner or router; only the owner may do so."""
        self._check_owner(sender)
        config = self._config
        if new_owner is not None:
            config = replace(config, owner=_validate_addr(new_owner))
        if new_router is not None:
            config = replace(config, router=new_router)
        self._config = config
        return Response().add_attribute("action", "update_config")

    def config(self) -> SmartRouterConfig:
        return self._config

    def route(
        self, input_info: AssetInfo, output_info: AssetInfo, route_index: int
    ) -> list[SwapOperation]:
        routes = self._load((str(input_info), str(output_info)))
        if not 0 <= route_index < len(routes):
            raise StdError("Could not find route given the route index")
        return list(routes[route_index])

    def routes(
        self, input_info: AssetInfo, output_info: AssetInfo
    ) -> list[list[SwapOperation]]:
        return [list(route) for route in self._load((str(input_info), str(output_info)))]

    def smart_route(
        self,
        input_info: AssetInfo,
        output_info: AssetInfo,
        offer_amount: int,
        route_mode: Optional[SmartRouteMode] = None,
    ) -> SmartRoute:
        """Simulate every stored route and return the one that yields most."""
        mode = route_mode or SmartRouteMode.MAX_MINIMUM_RECEIVE
        pool_routes = self._load((str(input_info), str(output_info)))
        errors = ""
        best_index, best_amount = 0, 0
        for index, route in enumerate(pool_routes):
            try:
                amount = self.simulator.simulate_swap(
                    self._config.router, offer_amount, list(route)
                )
            except Exception as exc:
                errors += f"{exc};"
                continue
            previous = best_amount
            if mode is SmartRouteMode.MAX_MINIMUM_RECEIVE:
                best_amount = max(best_amount, amount)
            if previous != best_amount:
                best_index = index
        if best_amount == 0:
            raise StdError(
                "Minimum receive of simulate smart route is 0. "
                f"Err: {json.dumps(errors)}"
            )
        return SmartRoute(list(pool_routes[best_index]), best_amount)