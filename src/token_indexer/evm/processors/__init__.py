from .balance_fetcher import EvmBalanceFetcher
from .token_filter import format_units, is_spam_symbol, normalize_record

__all__ = [
    "EvmBalanceFetcher",
    "format_units",
    "is_spam_symbol",
    "normalize_record",
]
