import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional

import requests

from ..config import EvmConfig

logger = logging.getLogger(__name__)


class AlchemyRpcError(Exception):
    pass


class AlchemyClient:
    """
    Minimal JSON-RPC client for Alchemy's token API.

    Only the two enhanced methods needed for balance lookups are wrapped:
    alchemy_getTokenBalances and alchemy_getTokenMetadata.
    """

    # Safety net against a server that keeps handing out page keys
    MAX_PAGES = 50

    def __init__(self, network: str, rpc_url: str, timeout: Optional[float] = None, max_workers: Optional[int] = None):
        self.network = network
        self.rpc_url = rpc_url
        self.timeout = timeout or EvmConfig.RPC_TIMEOUT_SECONDS
        self.max_workers = max_workers or EvmConfig.RPC_MAX_WORKERS
        self._session = requests.Session()
        self._next_id = 0

    def _post(self, method: str, params: List[Any]) -> Any:
        self._next_id += 1
        payload = {"jsonrpc": "2.0", "id": self._next_id, "method": method, "params": params}
        try:
            resp = self._session.post(
                self.rpc_url,
                json=payload,
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
            )
            resp.raise_for_status()
            body = resp.json()
        except Exception as e:
            raise AlchemyRpcError(f"{self.network} {method} request failed: {e}") from e

        if not isinstance(body, dict):
            raise AlchemyRpcError(f"{self.network} {method} returned unexpected payload: {body!r}")
        if body.get("error"):
            err = body["error"]
            message = err.get("message") if isinstance(err, dict) else err
            raise AlchemyRpcError(f"{self.network} {method} error: {message}")
        return body.get("result")

    def get_token_balances(self, address: str) -> List[Dict[str, Any]]:
        """Return every ERC-20 balance entry for address, following pageKey pagination."""
        balances: List[Dict[str, Any]] = []
        page_key: Optional[str] = None

        for _ in range(self.MAX_PAGES):
            params: List[Any] = [address, "erc20"]
            if page_key:
                params.append({"pageKey": page_key})
            result = self._post("alchemy_getTokenBalances", params) or {}
            balances.extend(result.get("tokenBalances") or [])
            page_key = result.get("pageKey")
            if not page_key:
                break
        else:
            logger.warning(f"[{self.network}] Stopped paging balances for {address} after {self.MAX_PAGES} pages")

        logger.debug(f"[{self.network}] {len(balances)} balance entries for {address}")
        return balances

    def get_token_metadata(self, contract_address: str) -> Dict[str, Any]:
        return self._post("alchemy_getTokenMetadata", [contract_address]) or {}

    def get_token_metadata_many(self, contract_addresses: List[str]) -> List[Dict[str, Any]]:
        """
        Fetch metadata for each contract concurrently.

        The returned list lines up index-for-index with contract_addresses,
        whatever order the requests finish in. The first failed lookup is raised.
        """
        if not contract_addresses:
            return []
        workers = max(1, min(self.max_workers, len(contract_addresses)))
        with ThreadPoolExecutor(max_workers=workers) as ex:
            return list(ex.map(self.get_token_metadata, contract_addresses))

    def close(self):
        self._session.close()
