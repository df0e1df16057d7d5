# dexroutes

This package holds in-memory models of the routing and reward side of an
automated market maker exchange.

- `dexroutes.router.Router` turns a chain of `SwapOperation`s into one
  execution message per hop.
  - `execute_swap_operations` checks the chain with `assert_operations`, which
    requires exactly one output asset. It queues the hops and can append a
    minimum-receive check.
  - `execute_swap_operation` swaps the router's whole balance of the offer
    asset on one pair. It respects the pair's trader whitelist.
  - `receive_cw20` decodes an `execute_swap_operations` hook sent with a
    token transfer.
  - `assert_minimum_receive` checks that a receiver gained at least a given
    amount.
  - `simulate_swap_operations` estimates the output of a multi-hop swap, with
    the tax taken off before and after each hop.
  - Pairs and the oracle are looked up through the first factory first, then
    the second one.
- `dexroutes.smartrouter.SmartRouter` keeps an owner-managed routing table of
  candidate routes between two assets.
  - `set_route` stores each route and also stores its reverse.
  - `route`, `routes` and `delete_route` read and edit the table.
  - `smart_route` simulates every stored route and returns a `SmartRoute`
    holding the route with the largest output (`SmartRouteMode.MAX_MINIMUM_RECEIVE`).
- `dexroutes.rewarder.Rewarder` records when each staking pool was last
  rewarded.
  - `distribute` builds a `deposit_reward` message for the staking contract.
    Each pool's amount is its per-second reward times the seconds elapsed.
    Pools still inside the distribution interval are skipped; the default
    interval is 600 seconds.
  - `clock_end_block` runs a distribution over every staking pool when the
    block height is a multiple of 100.

Assets are `NativeToken` (a denomination) or `Token` (a contract address).
These types live in `dexroutes.messages`, together with `Asset`, `Coin`,
`SwapOperation`, `WasmExecute`, `Response`, `MessageInfo` and `Env`.

## Installation

```
pip install dexroutes
```

## Example

```python
from dexroutes.messages import NativeToken, Token, SwapOperation
from dexroutes.smartrouter import SmartRouter, SmartRouteMode

orai = NativeToken("orai")
usdc = Token("usdc")
oraix = Token("oraix")

class Simulator:
    def simulate_swap(self, router_addr, offer_amount, operations):
        return offer_amount * 2 // (len(operations) + 1)

smart = SmartRouter(owner="creator", router_addr="router", simulator=Simulator())
smart.set_route("creator", orai, usdc, [SwapOperation(orai, usdc)])
smart.set_route("creator", orai, usdc, [SwapOperation(orai, oraix), SwapOperation(oraix, usdc)])

best = smart.smart_route(orai, usdc, 100, SmartRouteMode.MAX_MINIMUM_RECEIVE)
print(best.swap_ops, best.actual_minimum_receive)   # the one-hop route, 100
print(smart.routes(usdc, orai))                     # the reversed routes
```

Failed calls raise subclasses of `dexroutes.errors.ContractError`. Examples
are `Unauthorized`, `NoSwapOperation`, `PoolWhitelisted`,
`SwapAssertionFailure` and `StdError`.

## What it does not do

- It does not connect to a chain. Balances, pair lookups, taxes, simulations
  and staking data come from the objects you pass in. These must follow the
  `SwapQuerier`, `RouteSimulator` and `StakingQuerier` protocols.
- Messages the models produce are returned in a `Response`; nothing sends
  them.
- State is kept in memory only; nothing is persisted.
- It contains no pair (liquidity pool) contract logic.
- It has no command-line interface.

## Running the tests

```
pip install -e .[test]
pytest
```