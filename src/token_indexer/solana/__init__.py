"""
Solana SPL token balance pipeline.
"""

from .address import InvalidAddressError, parse_public_key
from .processors import SolanaBalanceFetcher
from .rpc import SolanaRpcClient, SolanaRpcError

__all__ = [
    'InvalidAddressError',
    'parse_public_key',
    'SolanaBalanceFetcher',
    'SolanaRpcClient',
    'SolanaRpcError',
]
