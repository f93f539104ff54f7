import logging
from typing import List, Optional

from ...core.models import FetchResult, RawBalanceRecord, TokenHolding
from ..config import EvmConfig, EvmNetworkConfig
from ..rpc import AlchemyClient
from .token_filter import normalize_record

logger = logging.getLogger(__name__)


class EvmBalanceFetcher:
    def __init__(self, network_cfg: Optional[EvmNetworkConfig] = None, client: Optional[AlchemyClient] = None):
        self.network_cfg = network_cfg or EvmConfig.network_config()
        self.client = client or AlchemyClient(network=self.network_cfg.network, rpc_url=self.network_cfg.rpc_url)

    def fetch(self, address: str) -> FetchResult:
        address = (address or "").strip()
        if not address:
            return FetchResult.success([])

        network = self.network_cfg.network
        try:
            raw_balances = self.client.get_token_balances(address)
            records = [RawBalanceRecord.from_api(item) for item in raw_balances]
            # Entries without a contract address are dropped, so no lookup is spent on them
            lookups = [r for r in records if r.contract_address]
            metadata = self.client.get_token_metadata_many([r.contract_address for r in lookups])
        except Exception as e:
            logger.error(f"[{network}] Token fetch failed for {address}: {e}")
            return FetchResult.failure(str(e))

        holdings: List[TokenHolding] = []
        for record, meta in zip(lookups, metadata):
            holding = normalize_record(record.with_metadata(meta))
            if holding is not None:
                holdings.append(holding)

        logger.info(f"[{network}] {address}: kept {len(holdings)}/{len(records)} token balances")
        return FetchResult.success(holdings)
