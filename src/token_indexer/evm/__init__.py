"""
EVM token balance pipeline backed by the Alchemy token API.
"""

from .config import EvmConfig, EvmNetworkConfig
from .processors import EvmBalanceFetcher
from .rpc import AlchemyClient, AlchemyRpcError

__all__ = [
    'EvmConfig',
    'EvmNetworkConfig',
    'EvmBalanceFetcher',
    'AlchemyClient',
    'AlchemyRpcError',
]
