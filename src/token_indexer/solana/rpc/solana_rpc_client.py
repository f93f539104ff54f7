import logging
from typing import Any, Dict, List, Optional

import requests

from ...config import Config

logger = logging.getLogger(__name__)


class SolanaRpcError(Exception):
    pass


class SolanaRpcClient:
    def __init__(self, rpc_url: Optional[str] = None, timeout: Optional[float] = None):
        self.rpc_url = rpc_url or Config.SOLANA_HTTP_RPC_URL
        if not self.rpc_url:
            raise ValueError('SOLANA_HTTP_RPC_URL is not set in the environment.')
        self.timeout = timeout or Config.RPC_TIMEOUT_SECONDS
        self._session = requests.Session()

    def _post(self, method: str, params: List[Any]) -> Any:
        payload = {
            'jsonrpc': '2.0',
            'id': 1,
            'method': method,
            'params': params,
        }
        try:
            resp = self._session.post(self.rpc_url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.json()
        except Exception as e:
            raise SolanaRpcError(f'{method} request failed: {e}') from e

        if not isinstance(body, dict):
            raise SolanaRpcError(f'{method} returned unexpected payload: {body!r}')
        if body.get('error'):
            err = body['error']
            message = err.get('message') if isinstance(err, dict) else err
            raise SolanaRpcError(f'{method} error: {message}')
        return body.get('result')

    def get_parsed_token_accounts_by_owner(self, owner: str, program_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List the jsonParsed token accounts owned by owner under one token program.

        Each entry has the RPC shape {'pubkey': ..., 'account': {'data': {'parsed': ...}}}.
        """
        program_id = program_id or Config.SPL_TOKEN_PROGRAM_ID
        result = self._post(
            'getTokenAccountsByOwner',
            [owner, {'programId': program_id}, {'encoding': 'jsonParsed'}],
        ) or {}
        accounts = result.get('value') or []
        logger.debug(f'{len(accounts)} token accounts for {owner}')
        return accounts

    def close(self):
        self._session.close()
