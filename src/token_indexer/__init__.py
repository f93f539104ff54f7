"""
Multi-chain token indexer: normalized ERC-20 and SPL token holdings for a wallet address.
"""

from .config import Config, setup_logging
from .core.models import FetchResult, QueryState, RawBalanceRecord, RawTokenAccount, TokenHolding
from .evm import EvmBalanceFetcher
from .solana import SolanaBalanceFetcher
from .wallets import WalletConnections
from .core.coordinator import QueryCoordinator

__all__ = [
    'Config',
    'setup_logging',
    'FetchResult',
    'QueryState',
    'RawBalanceRecord',
    'RawTokenAccount',
    'TokenHolding',
    'EvmBalanceFetcher',
    'SolanaBalanceFetcher',
    'WalletConnections',
    'QueryCoordinator',
]
