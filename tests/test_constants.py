import pytest

from nodecheck import constants
from nodecheck.constants import (
    Network,
    StarknetVersion,
    block_for_version,
    version_at_block,
)


def test_network_names():
    assert Network.DEOXYS == "deoxys"
    assert Network.PATHFINDER == "pathfinder"
    assert Network("juno") is Network.JUNO


def test_block_for_version_member_and_string():
    assert block_for_version(StarknetVersion.V0_13_1) == 607878
    assert block_for_version("0.11.0.2") == constants.BLOCK_0_11_0_2
    assert block_for_version(StarknetVersion.GENESIS) == constants.BLOCK_0


def test_block_for_version_unknown():
    with pytest.raises(ValueError):
        block_for_version("9.9.9")


@pytest.mark.parametrize("version", list(StarknetVersion))
def test_version_round_trip(version):
    assert version_at_block(block_for_version(version)) is version


def test_versions_ordered_by_first_block():
    blocks = [block_for_version(version) for version in StarknetVersion]
    assert blocks == sorted(blocks)
    assert len(set(blocks)) == len(blocks)


def test_version_boundaries():
    assert version_at_block(constants.BLOCK_0_9_1 - 1) is StarknetVersion.GENESIS
    assert version_at_block(constants.BLOCK_0_9_1) is StarknetVersion.V0_9_1
    assert version_at_block(constants.BLOCK_0_12_1 + 1) is StarknetVersion.V0_12_1
    assert version_at_block(constants.BLOCK_0_13_1 * 10) is StarknetVersion.V0_13_1


def test_negative_block_rejected():
    with pytest.raises(ValueError):
        version_at_block(-1)


@pytest.mark.parametrize(
    "address",
    [
        constants.STARKGATE_ETH_BRIDGE_ADDR,
        constants.JEDI_SWAP_ADDR,
        constants.STARKGATE_USDC,
        constants.CONTRACT_ERC20,
        constants.CONTRACT_ARGENT_ACCOUNT_CAIRO_1,
        constants.TX_INVOKE_V0,
        constants.TX_L1_HANDLER_V0,
    ],
)
def test_padded_hex_values(address):
    assert address.startswith("0x")
    assert len(address) == 66
    assert int(address, 16) >= 0