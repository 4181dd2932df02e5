"""Supported blockchain networks and token icons.

Network entries drive wallet creation and chain lookups; icons are display
assets only.
"""

from __future__ import annotations

from orca_shared.models.enums import TokenStandard
from orca_shared.models.networks import Network, TokenIcon

NETWORKS: tuple[Network, ...] = (
    Network(
        name="Ethereum",
        chain_id=1,
        blockchain="ethereum",
        token_standard=TokenStandard.ERC20,
    ),
    Network(name="BNB Smart Chain", chain_id=56, blockchain="bsc"),
    Network(name="Polygon", chain_id=137, blockchain="polygon"),
    Network(name="Arbitrum One", chain_id=42161, blockchain="arbitrum"),
    Network(name="Optimism", chain_id=10, blockchain="optimism"),
    Network(name="Base", chain_id=8453, blockchain="base"),
    Network(name="Avalanche C-Chain", chain_id=43114, blockchain="avalanche"),
)

TOKEN_ICONS: tuple[TokenIcon, ...] = (
    TokenIcon(
        name="Ethereum",
        link="https://token-icons.s3.amazonaws.com/eth.png",
    ),
    TokenIcon(
        name="USDT",
        link="https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/assets/0xdAC17F958D2ee523a2206206994597C13D831ec7/logo.png",
    ),
    TokenIcon(
        name="USDC",
        link="https://coin-images.coingecko.com/coins/images/6319/large/USDC.png?1769615602",
    ),
    TokenIcon(
        name="SHIB",
        link="https://coin-images.coingecko.com/coins/images/11939/large/shiba.png?1696511800",
    ),
    TokenIcon(
        name="UNI",
        link="https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/ethereum/assets/0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984/logo.png",
    ),
    TokenIcon(
        name="AAVE",
        link="https://coin-images.coingecko.com/coins/images/12645/large/aave-token-round.png?1720472354",
    ),
)


def get_network(
    chain_id: int, networks: tuple[Network, ...] = NETWORKS
) -> Network | None:
    """Return the network with ``chain_id``, or None if unsupported."""
    for network in networks:
        if network.chain_id == chain_id:
            return network
    return None


def get_network_by_blockchain(
    blockchain: str, networks: tuple[Network, ...] = NETWORKS
) -> Network | None:
    """Return the network whose blockchain identifier matches (case-insensitive)."""
    wanted = blockchain.lower()
    for network in networks:
        if network.blockchain == wanted:
            return network
    return None


def get_token_icon(name: str) -> TokenIcon | None:
    wanted = name.lower()
    for icon in TOKEN_ICONS:
        if icon.name.lower() == wanted:
            return icon
    return None
