from .models import FetchResult, QueryState, RawBalanceRecord, RawTokenAccount, TokenHolding

__all__ = ['FetchResult', 'QueryState', 'RawBalanceRecord', 'RawTokenAccount', 'TokenHolding']
