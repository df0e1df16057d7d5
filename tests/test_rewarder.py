import pytest

from dexroutes.errors import StdError
from dexroutes.rewarder import Rewarder


class FakeStaking:
    def __init__(self, rewards=None, pools=()):
        self.rewards = rewards or {}
        self.pools = list(pools)

    def rewards_per_sec(self, staking_contract, staking_token):
        return self.rewards[staking_token]

    def pools_information(self, staking_contract):
        return self.pools


def make(rewards=None, pools=(), now=1000, interval=600):
    return Rewarder("owner", "staking", FakeStaking(rewards, pools), now, interval)


def test_proper_initialization():
    rewarder = make(interval=600)
    config = rewarder.config()
    assert config.owner == "owner"
    assert config.staking_contract == "staking"
    assert config.distribution_interval == 600


def test_default_interval():
    rewarder = Rewarder("owner", "staking", FakeStaking(), 1000)
    assert rewarder.config().distribution_interval == 600
    assert rewarder.config().init_time == 1000


def test_update_config_unauthorized():
    rewarder = make()
    with pytest.raises(StdError, match="unauthorized"):
        rewarder.update_config("other", owner="other")


def test_update_config_by_owner():
    rewarder = make()
    response = rewarder.update_config(
        "owner", owner="new_owner", staking_contract="staking2", distribution_interval=10
    )
    assert response.attributes == [("action", "update_config")]
    config = rewarder.config()
    assert (config.owner, config.staking_contract, config.distribution_interval) == (
        "new_owner",
        "staking2",
        10,
    )


def test_first_distribution_uses_interval_plus_one():
    rewarder = make(rewards={"token1": [3, 2]}, interval=600)
    response = rewarder.distribute(5000, ["token1"])
    assert response.attributes == [("action", "distribute")]
    message = response.messages[0]
    assert message.contract_addr == "staking"
    assert message.msg == {
        "deposit_reward": {
            "rewards": [
                {"staking_token": "token1", "total_accumulation_amount": str(5 * 601)}
            ]
        }
    }
    assert rewarder.distribution_info("token1") == 5000


def test_distribution_skipped_before_interval():
    rewarder = make(rewards={"token1": [1]}, interval=600)
    rewarder.distribute(5000, ["token1"])
    response = rewarder.distribute(5100, ["token1"])
    assert response.messages[0].msg == {"deposit_reward": {"rewards": []}}
    assert rewarder.distribution_info("token1") == 5000
    response = rewarder.distribute(5600, ["token1"])
    assert response.messages[0].msg["deposit_reward"]["rewards"] == [
        {"staking_token": "token1", "total_accumulation_amount": "600"}
    ]


def test_zero_reward_is_recorded_but_not_deposited():
    rewarder = make(rewards={}, interval=600)
    response = rewarder.distribute(5000, ["token1"])
    assert response.messages[0].msg["deposit_reward"]["rewards"] == []
    assert rewarder.distribution_info("token1") == 5000
    assert rewarder.reward_amount_per_sec("token1") == 0


def test_reward_amount_per_sec_sums_assets():
    rewarder = make(rewards={"token1": [4, 6]})
    assert rewarder.reward_amount_per_sec("token1") == 10


def test_distribution_info_missing():
    with pytest.raises(StdError, match="not found|Not found"):
        make().distribution_info("token1")


def test_clock_end_block_only_every_hundred_blocks():
    rewarder = make(rewards={"token1": [1]}, pools=["token1"])
    assert rewarder.clock_end_block(101, 5000).messages == []
    response = rewarder.clock_end_block(200, 5000)
    assert response.messages[0].msg["deposit_reward"]["rewards"] == [
        {"staking_token": "token1", "total_accumulation_amount": "601"}
    ]
    assert rewarder.staking_tokens() == ["token1"]


def test_invalid_address_rejected():
    with pytest.raises(StdError):
        make().distribute(5000, ["Token1"])