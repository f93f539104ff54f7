from .solana_rpc_client import SolanaRpcClient, SolanaRpcError

__all__ = ['SolanaRpcClient', 'SolanaRpcError']
