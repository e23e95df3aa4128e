"""Fixed mainnet data used when checking Starknet nodes against each other."""

from __future__ import annotations

from bisect import bisect_right
from enum import Enum

# First mainnet block of each Starknet version.
BLOCK_0 = 0
BLOCK_0_9_1 = 3799
BLOCK_0_10_0 = 4883
BLOCK_0_10_1 = 6570
BLOCK_0_10_2 = 12268
BLOCK_0_10_3 = 16575
BLOCK_0_11_0 = 28613
BLOCK_0_11_0_2 = 43851
BLOCK_0_11_1 = 61394
BLOCK_0_11_2 = 68096
BLOCK_0_12_0 = 103129
BLOCK_0_12_1 = 164901
BLOCK_0_12_2 = 194410
BLOCK_0_12_3 = 472644
BLOCK_0_13_0 = 501514
BLOCK_0_13_1 = 607878

# Mainnet contract addresses.
STARKGATE_ETH_BRIDGE_ADDR = "0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7"
JEDI_SWAP_ADDR = "0x041fd22b238fa21cfcf5dd45a8548974d8263b3a531a60388411c5e230f97023"
STARKGATE_USDC = "0x053c91253bc9682c04929ca02ed00b3e423f6710d2ee7e0d5ebb06f3ecf368a8"
STARKGATE_ETHER = "0x049d36570d4e46f48e99674bd3fcc84644ddd6b96f7c741b1562b82f9e004dc7"
CONTRACT_ERC721 = "0x07fa9a8eacb89fb6cd0c7fe557e71c42a4b181ba328a9a04958136e6469c4e00"
CONTRACT_ERC20 = "0x04a5fdce70877b77f03aea8a29259176f88d5bea9d0ad8c0118f5316425e6ba0"
CONTRACT_ACCOUNT = "0x046ef77bd47ba7b1424ba2b2b1442d14168ac3dc6897032bf491ecbafd5f5c32"
CONTRACT_CAIRO_0 = "0x03cdabdf2ea700a667c63024523ccb04a22d18104da826ac10984a18eddadbbe"
CONTRACT_BRAAVOS_ACCOUNT_CAIRO_0 = "0x0179d67854d1b9429d276ed7c59010be187af15d2e6ede31a513bdfbfa3e1af7"
CONTRACT_BRAAVOS_ACCOUNT_CAIRO_1 = "0x017de82f930be1caec165b9501197046ecc7d2d86d9721cd57f0cb16c2a99b2e"
CONTRACT_ARGENT_ACCOUNT_CAIRO_0 = "0x0314a5cbf7f368446d38ed4d0de19f5ca16546c1a519e8994c07590ecff803c0"
CONTRACT_ARGENT_ACCOUNT_CAIRO_1 = "0x017317d13c8278d38720d2d70d7adcf6a3cf9ef3abb5422ad60ea4f98f8d6eba"
CONTRACT_ERC721_CAIRO_0 = "0x0717e6b64e3c48c016ffec829963696480bf40ad8ca1d5303902c1b23347ff57"

# Mainnet transaction hashes, one per transaction kind and version.
TX_INVOKE_V0 = "0x02c02d6f0d75bc71b1c629cde038199ccfb6e18343a76943275405817727f76c"
TX_INVOKE_V1 = "0x027ed707907aef09c39ece1b24540308eee8d74a14c77728604c3a2da546fd6d"
TX_DECLARE_V0 = "0x5f430525084fe54a73e6f6de7d5d3ac20311ac4ba48002c665dade0c585af82"
TX_DECLARE_V1 = "0x30fd34d7ffbe2aea6121f76c7c82a9edb7250a69a86eaf4ea55e9fb39237d71"
TX_DECLARE_V2 = "0x62c6e41b306db3dd03fbbb14bd169e84819e5ac1058ffde93a924b3abe9b3c1"
TX_L1_HANDLER_V0 = "0x006a555ac598673a215ef69815db1ebe89cb11eed9a489215c21c7d32d6e581a"


class Network(str, Enum):
    """Node implementations that are compared against each other."""

    DEOXYS = "deoxys"
    PATHFINDER = "pathfinder"
    JUNO = "juno"


class StarknetVersion(Enum):
    """Starknet protocol versions seen on mainnet, oldest first."""

    GENESIS = "genesis"
    V0_9_1 = "0.9.1"
    V0_10_0 = "0.10.0"
    V0_10_1 = "0.10.1"
    V0_10_2 = "0.10.2"
    V0_10_3 = "0.10.3"
    V0_11_0 = "0.11.0"
    V0_11_0_2 = "0.11.0.2"
    V0_11_1 = "0.11.1"
    V0_11_2 = "0.11.2"
    V0_12_0 = "0.12.0"
    V0_12_1 = "0.12.1"
    V0_12_2 = "0.12.2"
    V0_12_3 = "0.12.3"
    V0_13_0 = "0.13.0"
    V0_13_1 = "0.13.1"

    @property
    def first_block(self) -> int:
        """The first mainnet block produced under this version."""
        return _FIRST_BLOCKS[self]


_FIRST_BLOCKS: dict[StarknetVersion, int] = {
    StarknetVersion.GENESIS: BLOCK_0,
    StarknetVersion.V0_9_1: BLOCK_0_9_1,
    StarknetVersion.V0_10_0: BLOCK_0_10_0,
    StarknetVersion.V0_10_1: BLOCK_0_10_1,
    StarknetVersion.V0_10_2: BLOCK_0_10_2,
    StarknetVersion.V0_10_3: BLOCK_0_10_3,
    StarknetVersion.V0_11_0: BLOCK_0_11_0,
    StarknetVersion.V0_11_0_2: BLOCK_0_11_0_2,
    StarknetVersion.V0_11_1: BLOCK_0_11_1,
    StarknetVersion.V0_11_2: BLOCK_0_11_2,
    StarknetVersion.V0_12_0: BLOCK_0_12_0,
    StarknetVersion.V0_12_1: BLOCK_0_12_1,
    StarknetVersion.V0_12_2: BLOCK_0_12_2,
    StarknetVersion.V0_12_3: BLOCK_0_12_3,
    StarknetVersion.V0_13_0: BLOCK_0_13_0,
    StarknetVersion.V0_13_1: BLOCK_0_13_1,
}

_ORDERED = sorted(_FIRST_BLOCKS.items(), key=lambda item: item[1])
_STARTS = [block for _, block in _ORDERED]


def block_for_version(version: StarknetVersion | str) -> int:
    """Return the first mainnet block of ``version``.

    ``version`` may be a :class:`StarknetVersion` or its string value.
    """
    if not isinstance(version, StarknetVersion):
        try:
            version = StarknetVersion(version)
        except ValueError:
            raise ValueError(f"unknown Starknet version: {version!r}") from None
    return version.first_block


def version_at_block(block_number: int) -> StarknetVersion:
    """Return the Starknet version in force at mainnet block ``block_number``."""
    if block_number < 0:
        raise ValueError(f"block number must not be negative: {block_number}")
    position = bisect_right(_STARTS, block_number) - 1
    return _ORDERED[position][0]