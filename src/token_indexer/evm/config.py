from dataclasses import dataclass
from typing import Dict, Optional

from ..config import Config


@dataclass(frozen=True)
class EvmNetworkConfig:
    network: str
    rpc_url: str


class EvmConfig:
    RPC_TIMEOUT_SECONDS = Config.RPC_TIMEOUT_SECONDS
    RPC_MAX_WORKERS = Config.RPC_MAX_WORKERS

    # Alchemy network slugs -> subdomain of g.alchemy.com
    NETWORKS: Dict[str, str] = {
        "eth-mainnet": "eth-mainnet",
        "eth-sepolia": "eth-sepolia",
        "eth-holesky": "eth-holesky",
        "polygon-mainnet": "polygon-mainnet",
        "polygon-amoy": "polygon-amoy",
        "arb-mainnet": "arb-mainnet",
        "opt-mainnet": "opt-mainnet",
        "base-mainnet": "base-mainnet",
    }

    @classmethod
    def network_config(
        cls,
        network: Optional[str] = None,
        api_key: Optional[str] = None,
        url_override: Optional[str] = None,
    ) -> EvmNetworkConfig:
        network = (network or Config.EVM_NETWORK).strip().lower()
        url_override = url_override if url_override is not None else Config.EVM_INDEXER_URL
        if url_override:
            return EvmNetworkConfig(network=network, rpc_url=url_override)

        host = cls.NETWORKS.get(network)
        if not host:
            raise ValueError(
                f"Unsupported EVM network '{network}'. Expected one of: {', '.join(sorted(cls.NETWORKS))}"
            )
        key = api_key or Config.ALCHEMY_API_KEY
        return EvmNetworkConfig(network=network, rpc_url=f"https://{host}.g.alchemy.com/v2/{key}")
