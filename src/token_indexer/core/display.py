from typing import List, Optional

import polars as pl

from ..wallets import WalletConnections
from .models import QueryState, TokenHolding

EMPTY_ETH_MESSAGE = 'No valid ERC-20 tokens found.'
EMPTY_SOL_MESSAGE = 'No valid SPL tokens found.'


def shorten_address(address: str) -> str:
    if not address:
        return ''
    return f'{address[:6]}...{address[-4:]}'


def format_balance(value: float) -> str:
    """Group thousands and keep at most three fraction digits (1234.5 -> '1,234.5')."""
    text = f'{value:,.3f}'
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


def holdings_frame(holdings: List[TokenHolding]) -> pl.DataFrame:
    return pl.DataFrame(
        {
            'symbol': [h.symbol for h in holdings],
            'balance': [h.balance for h in holdings],
            'logo': [h.logo for h in holdings],
        },
        schema={'symbol': pl.Utf8, 'balance': pl.Float64, 'logo': pl.Utf8},
    )


def _render_section(title: str, holdings: List[TokenHolding], error: Optional[str], empty_message: str) -> List[str]:
    lines = [title]
    if error:
        lines.append(f'Fetch failed: {error}')
        return lines
    if not holdings:
        lines.append(empty_message)
        return lines

    df = holdings_frame(holdings).with_columns(
        pl.Series('balance', [format_balance(h.balance) for h in holdings], dtype=pl.Utf8),
        pl.col('logo').fill_null(''),
    )
    with pl.Config(
        tbl_hide_dataframe_shape=True,
        tbl_hide_column_data_types=True,
        tbl_rows=-1,
        fmt_str_lengths=120,
    ):
        lines.append(str(df))
    return lines


def render_report(state: QueryState, wallets: Optional[WalletConnections] = None) -> str:
    lines: List[str] = []

    if wallets is not None:
        if wallets.eth_connected:
            lines.append(f'ETH connected: {shorten_address(wallets.eth_address)}')
        if wallets.sol_connected:
            lines.append(f'SOL connected: {shorten_address(wallets.sol_address)}')

    if not state.has_queried:
        return '\n'.join(lines)

    if lines:
        lines.append('')
    lines.extend(_render_section('Ethereum Tokens:', state.eth_tokens, state.eth_error, EMPTY_ETH_MESSAGE))
    lines.append('')
    lines.extend(_render_section('Solana Tokens:', state.sol_tokens, state.sol_error, EMPTY_SOL_MESSAGE))
    return '\n'.join(lines)
