from .providers import (
    EvmWalletProvider,
    SolanaWalletProvider,
    StaticEvmWallet,
    StaticSolanaWallet,
    WalletConnections,
)

__all__ = [
    'EvmWalletProvider',
    'SolanaWalletProvider',
    'StaticEvmWallet',
    'StaticSolanaWallet',
    'WalletConnections',
]
