import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ...core.models import RawBalanceRecord, TokenHolding

logger = logging.getLogger(__name__)

# Phishing airdrops put URLs or calls to action in the ticker
SPAM_SYMBOL_PATTERN = re.compile(r"(http|www|claim|visit|verify|\$|#)", re.IGNORECASE)
MIN_SYMBOL_LENGTH = 2
MAX_SYMBOL_LENGTH = 6
MAX_DECIMALS = 255


def is_spam_symbol(symbol: str) -> bool:
    return bool(SPAM_SYMBOL_PATTERN.search(symbol))


def has_valid_symbol_length(symbol: str) -> bool:
    return MIN_SYMBOL_LENGTH <= len(symbol) <= MAX_SYMBOL_LENGTH


def parse_raw_amount(raw: Any) -> int:
    """Parse an integer token amount given as 0x-hex text, decimal text or int."""
    if isinstance(raw, bool):
        raise ValueError(f"Invalid raw amount: {raw!r}")
    if isinstance(raw, int):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"Invalid raw amount: {raw!r}")

    s = raw.strip()
    negative = s.startswith("-")
    if negative:
        s = s[1:]
    if s.lower().startswith("0x"):
        digits = s[2:]
        value = int(digits, 16) if digits else 0
    elif s.isdigit():
        value = int(s, 10)
    else:
        raise ValueError(f"Invalid raw amount: {raw!r}")
    return -value if negative else value


def format_units(raw: Any, decimals: Any) -> float:
    """
    Convert a raw integer amount into a human-readable decimal number.

    Raises ValueError when the amount or the decimal precision is malformed.
    """
    if isinstance(decimals, bool):
        raise ValueError(f"Invalid decimals: {decimals!r}")
    try:
        places = int(decimals)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValueError(f"Invalid decimals: {decimals!r}") from e
    if places != decimals and str(places) != str(decimals).strip():
        raise ValueError(f"Invalid decimals: {decimals!r}")
    if places < 0 or places > MAX_DECIMALS:
        raise ValueError(f"Decimals out of range: {places}")

    value = parse_raw_amount(raw)
    try:
        amount = float(Decimal(value).scaleb(-places))
    except (InvalidOperation, OverflowError) as e:
        raise ValueError(f"Cannot scale {raw!r} by {places} decimals") from e
    if not math.isfinite(amount):
        raise ValueError(f"Amount {raw!r} does not fit a float at {places} decimals")
    return amount


def normalize_record(record: RawBalanceRecord) -> Optional[TokenHolding]:
    """
    Apply the EVM filter chain to one record that already carries its metadata.

    Returns None when the record is dropped.
    """
    symbol = record.symbol
    if not symbol or record.decimals is None:
        logger.debug(f"Dropping {record.contract_address}: incomplete metadata")
        return None
    if not isinstance(symbol, str):
        return None

    if is_spam_symbol(symbol) or not has_valid_symbol_length(symbol):
        logger.debug(f"Dropping {record.contract_address}: rejected symbol {symbol!r}")
        return None

    try:
        balance = format_units(record.token_balance, record.decimals)
    except ValueError as e:
        logger.debug(f"Dropping {record.contract_address}: {e}")
        return None

    if balance <= 0:
        return None

    return TokenHolding(symbol=symbol, balance=balance, logo=record.logo)
