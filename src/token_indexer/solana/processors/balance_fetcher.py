import logging
import math
from typing import List, Optional

from ...config import Config
from ...core.models import FetchResult, RawTokenAccount, TokenHolding
from ..address import parse_public_key
from ..rpc import SolanaRpcClient

logger = logging.getLogger(__name__)

SYMBOL_PREFIX_LENGTH = 4


def mint_symbol(mint: str) -> str:
    # No metadata lookup on this chain; the ticker is just a mint prefix
    return mint[:SYMBOL_PREFIX_LENGTH] + '...'


def parse_ui_amount(ui_amount: Optional[str]) -> Optional[float]:
    if isinstance(ui_amount, bool):
        return None
    try:
        amount = float(ui_amount)
    except (TypeError, ValueError):
        return None
    if math.isnan(amount) or math.isinf(amount):
        return None
    return amount


def normalize_account(account: RawTokenAccount) -> Optional[TokenHolding]:
    if not account.mint or not isinstance(account.mint, str):
        logger.debug(f'Dropping token account {account.pubkey}: no usable mint')
        return None
    amount = parse_ui_amount(account.ui_amount_string)
    if amount is None or amount <= 0:
        return None
    return TokenHolding(symbol=mint_symbol(account.mint), balance=amount, logo=None)


class SolanaBalanceFetcher:
    def __init__(self, client: Optional[SolanaRpcClient] = None, program_id: Optional[str] = None):
        self.client = client or SolanaRpcClient()
        self.program_id = program_id or Config.SPL_TOKEN_PROGRAM_ID

    def fetch(self, address: str) -> FetchResult:
        address = (address or '').strip()
        if not address:
            return FetchResult.success([])

        try:
            owner = parse_public_key(address)
            raw_accounts = self.client.get_parsed_token_accounts_by_owner(owner, program_id=self.program_id)
        except Exception as e:
            logger.error(f'Solana fetch error for {address}: {e}')
            return FetchResult.failure(str(e))

        holdings: List[TokenHolding] = []
        for item in raw_accounts:
            holding = normalize_account(RawTokenAccount.from_rpc(item))
            if holding is not None:
                holdings.append(holding)

        logger.info(f'[solana] {address}: kept {len(holdings)}/{len(raw_accounts)} token accounts')
        return FetchResult.success(holdings)
