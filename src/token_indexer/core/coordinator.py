import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Optional

from ..config import Config
from ..evm.processors import EvmBalanceFetcher
from ..solana.processors import SolanaBalanceFetcher
from ..wallets import WalletConnections
from .models import FetchResult, QueryState

logger = logging.getLogger(__name__)


class QueryCoordinator:
    """
    Runs the EVM and Solana fetchers side by side and joins their results.

    A query always completes: each chain ends up with either a list of
    holdings or an error string, and has_queried flips once both settle.
    query() returns a snapshot; self.state is rewritten by the next query.
    """

    def __init__(
        self,
        evm_fetcher: EvmBalanceFetcher,
        solana_fetcher: SolanaBalanceFetcher,
        wallets: Optional[WalletConnections] = None,
        timeout: Optional[float] = None,
    ):
        self.evm_fetcher = evm_fetcher
        self.solana_fetcher = solana_fetcher
        self.wallets = wallets
        self.timeout = timeout or Config.QUERY_TIMEOUT_SECONDS
        self.state = QueryState()

    def resolve_targets(self, search_address: str = '', eth_address: Optional[str] = None, sol_address: Optional[str] = None):
        search = (search_address or '').strip()
        if search:
            return search, search

        eth = (eth_address or '').strip()
        sol = (sol_address or '').strip()
        if not eth and self.wallets is not None and self.wallets.eth_connected:
            eth = self.wallets.eth_address
        if not sol and self.wallets is not None and self.wallets.sol_connected:
            sol = self.wallets.sol_address
        return eth, sol

    def query(self, search_address: str = '', eth_address: Optional[str] = None, sol_address: Optional[str] = None) -> QueryState:
        eth_target, sol_target = self.resolve_targets(search_address, eth_address, sol_address)

        self.state.reset()
        self.state.eth_target = eth_target
        self.state.sol_target = sol_target
        logger.info(f'Querying balances: eth={eth_target or "-"} sol={sol_target or "-"}')

        ex = ThreadPoolExecutor(max_workers=2, thread_name_prefix='balance-fetch')
        try:
            eth_future = ex.submit(self.evm_fetcher.fetch, eth_target)
            sol_future = ex.submit(self.solana_fetcher.fetch, sol_target)
            wait([eth_future, sol_future], timeout=self.timeout)
            eth_result = self._settle('eth', eth_future)
            sol_result = self._settle('sol', sol_future)
        finally:
            # Do not block on a hung fetch past the deadline. concurrent.futures still joins the
            # abandoned worker at interpreter exit, so process exit waits on RPC_TIMEOUT_SECONDS.
            ex.shutdown(wait=False, cancel_futures=True)

        self.state.eth_tokens = eth_result.holdings
        self.state.eth_error = eth_result.error
        self.state.sol_tokens = sol_result.holdings
        self.state.sol_error = sol_result.error
        self.state.has_queried = True

        logger.info(
            f'Query complete: {len(self.state.eth_tokens)} eth tokens, {len(self.state.sol_tokens)} sol tokens'
        )
        return self.state.snapshot()

    def _settle(self, chain: str, future: Future) -> FetchResult:
        if not future.done():
            future.cancel()
            logger.error(f'[{chain}] fetch did not finish within {self.timeout:.0f}s')
            return FetchResult.failure(f'timed out after {self.timeout:.0f}s')
        try:
            result = future.result()
        except Exception as e:
            logger.error(f'[{chain}] fetch raised unexpectedly: {e}', exc_info=True)
            return FetchResult.failure(str(e))
        if not isinstance(result, FetchResult):
            logger.error(f'[{chain}] fetch returned {type(result).__name__}, expected FetchResult')
            return FetchResult.failure('invalid fetch result')
        return result
