"""Static chain registry — chain id → display metadata.

Consulted for display enrichment only; unknown ids resolve to None.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ChainInfo:
    id: int
    name: str
    network_name: str
    currency: str
    explorer: str
    testnet: bool = False


_CHAINS: dict[int, ChainInfo] = {
    c.id: c
    for c in (
        ChainInfo(1, "Ethereum", "Ethereum Mainnet", "ETH", "https://etherscan.io"),
        ChainInfo(
            11155111, "Sepolia", "Ethereum Sepolia Testnet", "ETH",
            "https://sepolia.etherscan.io", testnet=True,
        ),
        ChainInfo(10, "Optimism", "Optimism Mainnet", "ETH", "https://optimistic.etherscan.io"),
        ChainInfo(42161, "Arbitrum", "Arbitrum One", "ETH", "https://arbiscan.io"),
        ChainInfo(8453, "Base", "Base Mainnet", "ETH", "https://basescan.org"),
        ChainInfo(143, "Monad", "Monad Mainnet", "MON", "https://mainnet-beta.monvision.io"),
        ChainInfo(
            10143, "Monad Testnet", "Monad Testnet", "MON",
            "https://testnet.monadexplorer.com", testnet=True,
        ),
        ChainInfo(33139, "ApeChain", "ApeChain Mainnet", "APE", "https://apescan.io"),
        ChainInfo(999, "HyperEVM", "HyperEVM Mainnet", "HYPE", "https://hyperevmscan.io"),
        ChainInfo(167000, "Taiko", "Taiko Alethia", "ETH", "https://taikoscan.io"),
    )
}


def get_chain_info(chain_id: int | None) -> ChainInfo | None:
    if chain_id is None:
        return None
    return _CHAINS.get(chain_id)
