import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class TokenHolding:
    symbol: str
    balance: float
    logo: Optional[str] = None

    def __post_init__(self):
        if not (self.balance > 0 and math.isfinite(self.balance)):
            raise ValueError(f"TokenHolding balance must be positive and finite, got {self.balance!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {"symbol": self.symbol, "balance": self.balance, "logo": self.logo}


@dataclass
class RawBalanceRecord:
    """
    One EVM token balance as returned by the indexing service.

    symbol/decimals/logo stay None until the metadata lookup for
    contract_address has been joined onto the record.
    """
    contract_address: str
    token_balance: Optional[str]
    symbol: Optional[str] = None
    decimals: Optional[int] = None
    logo: Optional[str] = None

    @classmethod
    def from_api(cls, item: Any) -> "RawBalanceRecord":
        if not isinstance(item, dict):
            return cls(contract_address="", token_balance=None)
        contract = item.get("contractAddress")
        return cls(
            contract_address=contract if isinstance(contract, str) else "",
            token_balance=item.get("tokenBalance"),
        )

    def with_metadata(self, meta: Any) -> "RawBalanceRecord":
        meta = meta if isinstance(meta, dict) else {}
        logo = meta.get("logo")
        return RawBalanceRecord(
            contract_address=self.contract_address,
            token_balance=self.token_balance,
            symbol=meta.get("symbol"),
            decimals=meta.get("decimals"),
            logo=logo if isinstance(logo, str) and logo else None,
        )


@dataclass
class RawTokenAccount:
    pubkey: str
    mint: Optional[str]
    ui_amount_string: Optional[str]

    @classmethod
    def from_rpc(cls, item: Any) -> "RawTokenAccount":
        # jsonParsed layout: account.data.parsed.info.{mint, tokenAmount}
        info: Any = item
        for key in ("account", "data", "parsed", "info"):
            info = info.get(key) if isinstance(info, dict) else None
        info = info if isinstance(info, dict) else {}
        token_amount = info.get("tokenAmount")
        token_amount = token_amount if isinstance(token_amount, dict) else {}
        pubkey = item.get("pubkey") if isinstance(item, dict) else None
        return cls(
            pubkey=str(pubkey or ""),
            mint=info.get("mint"),
            ui_amount_string=token_amount.get("uiAmountString"),
        )


@dataclass(frozen=True)
class FetchResult:
    holdings: List[TokenHolding] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, holdings: List[TokenHolding]) -> "FetchResult":
        return cls(holdings=list(holdings))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(holdings=[], error=reason or "unknown error")


@dataclass
class QueryState:
    eth_tokens: List[TokenHolding] = field(default_factory=list)
    sol_tokens: List[TokenHolding] = field(default_factory=list)
    has_queried: bool = False
    eth_error: Optional[str] = None
    sol_error: Optional[str] = None
    eth_target: str = ""
    sol_target: str = ""

    def reset(self):
        self.eth_tokens = []
        self.sol_tokens = []
        self.has_queried = False
        self.eth_error = None
        self.sol_error = None
        self.eth_target = ""
        self.sol_target = ""

    def snapshot(self) -> "QueryState":
        return replace(self, eth_tokens=list(self.eth_tokens), sol_tokens=list(self.sol_tokens))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "has_queried": self.has_queried,
            "eth": {
                "address": self.eth_target,
                "error": self.eth_error,
                "tokens": [t.to_dict() for t in self.eth_tokens],
            },
            "sol": {
                "address": self.sol_target,
                "error": self.sol_error,
                "tokens": [t.to_dict() for t in self.sol_tokens],
            },
        }
