from .balance_fetcher import SolanaBalanceFetcher, mint_symbol, normalize_account

__all__ = ['SolanaBalanceFetcher', 'mint_symbol', 'normalize_account']
