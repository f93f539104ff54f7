#!/usr/bin/env python3
"""
Multi-chain token balance lookup.

Fetches ERC-20 balances (via the Alchemy token API) and SPL token balances
(via Solana JSON-RPC) for a wallet address and prints both result sections.

Examples:
  token-indexer --address 0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045
  token-indexer --eth-wallet 0xd8dA... --sol-wallet 9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM
  token-indexer --address 9WzD... --format json
"""

import argparse
import json
import logging
from typing import List, Optional

from ..config import Config, setup_logging
from ..evm.config import EvmConfig
from ..evm.processors import EvmBalanceFetcher
from ..solana.processors import SolanaBalanceFetcher
from ..solana.rpc import SolanaRpcClient
from ..wallets import StaticEvmWallet, StaticSolanaWallet, WalletConnections
from .coordinator import QueryCoordinator
from .display import render_report

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show fungible token balances for an EVM and/or Solana address",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--address", type=str, default="", help="Address to look up on both chains (overrides wallets)")
    parser.add_argument("--eth-wallet", type=str, default="", help="Connected EVM wallet address")
    parser.add_argument("--sol-wallet", type=str, default="", help="Connected Solana wallet public key")
    parser.add_argument("--network", type=str, default=None, help=f"EVM network (default: {Config.EVM_NETWORK})")
    parser.add_argument("--solana-rpc-url", type=str, default=None, help="Solana JSON-RPC endpoint")
    parser.add_argument("--timeout", type=float, default=None, help="Overall query timeout in seconds")
    parser.add_argument("--format", choices=["text", "json"], default="text")
    parser.add_argument("--log-level", type=str, default=None, help=f"Logging level (default: {Config.LOG_LEVEL})")
    return parser


def build_wallets(eth_wallet: str, sol_wallet: str) -> WalletConnections:
    wallets = WalletConnections(
        evm_provider=StaticEvmWallet(eth_wallet) if eth_wallet else None,
        solana_provider=StaticSolanaWallet(sol_wallet) if sol_wallet else None,
    )
    if eth_wallet:
        wallets.connect_evm()
    if sol_wallet:
        wallets.connect_solana()
    return wallets


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        network_cfg = EvmConfig.network_config(network=args.network)
    except ValueError as e:
        logger.error(str(e))
        return 2

    wallets = build_wallets(args.eth_wallet.strip(), args.sol_wallet.strip())
    if not (args.address.strip() or wallets.eth_connected or wallets.sol_connected):
        logger.error("Nothing to query: pass --address or connect a wallet with --eth-wallet/--sol-wallet")
        return 2

    coordinator = QueryCoordinator(
        evm_fetcher=EvmBalanceFetcher(network_cfg=network_cfg),
        solana_fetcher=SolanaBalanceFetcher(client=SolanaRpcClient(rpc_url=args.solana_rpc_url)),
        wallets=wallets,
        timeout=args.timeout,
    )
    state = coordinator.query(search_address=args.address)

    if args.format == "json":
        print(json.dumps(state.to_dict(), indent=2))
    else:
        print(render_report(state, wallets))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
