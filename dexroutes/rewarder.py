"""A rewarder that periodically tells a staking contract how much to pay out."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional, Protocol, Sequence

from dexroutes.errors import StdError
from dexroutes.messages import Response, WasmExecute

DEFAULT_DISTRIBUTION_INTERVAL = 600
CLOCK_BLOCK_PERIOD = 100


class StakingQuerier(Protocol):
    """Read access to the staking contract that the rewarder needs."""

    def rewards_per_sec(self, staking_contract: str, staking_token: str) -> Sequence[int]:
        """Return the per-second reward amounts of a pool, one per reward asset."""

    def pools_information(self, staking_contract: str) -> Sequence[str]:
        """Return the asset keys of every pool the staking contract knows."""


@dataclass(frozen=True)
class RewarderConfig:
    owner: str
    staking_contract: str
    distribution_interval: int
    init_time: int


def _validate_addr(addr: str) -> str:
    if not addr or addr != addr.strip() or addr != addr.lower():
        raise StdError(f"Invalid input: address not normalized: {addr!r}")
    return addr


class Rewarder:
    """Keeps track of when each pool was last rewarded and queues deposits."""

    def __init__(
        self,
        owner: str,
        staking_contract: str,
        querier: StakingQuerier,
        now: int,
        distribution_interval: Optional[int] = None,
    ) -> None:
        self._config = RewarderConfig(
            owner=_validate_addr(owner),
            staking_contract=_validate_addr(staking_contract),
            distribution_interval=(
                DEFAULT_DISTRIBUTION_INTERVAL
                if distribution_interval is None
                else distribution_interval
            ),
            init_time=now,
        )
        self.querier = querier
        self._last_distributed: dict[str, int] = {}

    def update_config(
        self,
        sender: str,
        owner: Optional[str] = None,
        staking_contract: Optional[str] = None,
        distribution_interval: Optional[int] = None,
    ) -> Response:
        """Change the configuration; only the owner may do so."""
        if self._config.owner != _validate_addr(sender):
            raise StdError("unauthorized")
        config = self._config
        if owner is not None:
            config = replace(config, owner=_validate_addr(owner))
        if staking_contract is not None:
            config = replace(config, staking_contract=_validate_addr(staking_contract))
        if distribution_interval is not None:
            config = replace(config, distribution_interval=distribution_interval)
        self._config = config
        return Response().add_attribute("action", "update_config")

    def distribute(self, now: int, staking_tokens: Iterable[str]) -> Response:
        """Queue a reward deposit for every pool whose interval has passed."""
        config = self._config
        interval = config.distribution_interval
        rewards = []
        for staking_token in staking_tokens:
            key = _validate_addr(staking_token)
            last = self._last_distributed.get(key, now - interval - 1)
            elapsed = now - last
            if elapsed < interval:
                continue
            self._last_distributed[key] = now
            reward_amount = self._pool_reward_per_sec(staking_token)
            if reward_amount == 0:
                continue
            rewards.append(
                {
                    "staking_token": staking_token,
                    "total_accumulation_amount": str(reward_amount * elapsed),
                }
            )
        return (
            Response()
            .add_message(
                WasmExecute(
                    config.staking_contract,
                    {"deposit_reward": {"rewards": rewards}},
                )
            )
            .add_attribute("action", "distribute")
        )

    def clock_end_block(self, height: int, now: int) -> Response:
        """Distribute to every staking pool once every hundred blocks."""
        if height % CLOCK_BLOCK_PERIOD != 0:
            return Response()
        tokens = [_validate_addr(token) for token in self.staking_tokens()]
        return self.distribute(now, tokens)

    def staking_tokens(self) -> list[str]:
        """Return the asset keys of every pool of the staking contract."""
        return list(self.querier.pools_information(self._config.staking_contract))

    def config(self) -> RewarderConfig:
        return self._config

    def distribution_info(self, staking_token: str) -> int:
        """Return when the pool was last rewarded."""
        key = _validate_addr(staking_token)
        try:
            return self._last_distributed[key]
        except KeyError:
            raise StdError("u64", kind="Not found") from None

    def reward_amount_per_sec(self, staking_token: str) -> int:
        return self._pool_reward_per_sec(staking_token)

    def _pool_reward_per_sec(self, staking_token: str) -> int:
        try:
            amounts = self.querier.rewards_per_sec(
                self._config.staking_contract, staking_token
            )
            return sum(amounts)
        except Exception:
            return 0