import logging
from typing import Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)


class EvmWalletProvider(Protocol):
    def request_accounts(self) -> List[str]: ...

    def on_accounts_changed(self, callback: Callable[[List[str]], None]) -> None: ...


class SolanaWalletProvider(Protocol):
    def connect(self) -> str: ...

    def disconnect(self) -> None: ...

    def on_connect(self, callback: Callable[[], None]) -> None: ...

    def on_disconnect(self, callback: Callable[[], None]) -> None: ...


class StaticEvmWallet:
    """EVM provider that always reports one fixed account."""

    def __init__(self, address: str):
        self.address = address
        self._listeners: List[Callable[[List[str]], None]] = []

    def request_accounts(self) -> List[str]:
        return [self.address] if self.address else []

    def on_accounts_changed(self, callback: Callable[[List[str]], None]) -> None:
        self._listeners.append(callback)

    def switch_account(self, address: str) -> None:
        self.address = address
        accounts = self.request_accounts()
        for cb in self._listeners:
            cb(accounts)


class StaticSolanaWallet:
    """Solana provider backed by one fixed public key."""

    def __init__(self, public_key: str):
        self.public_key = public_key
        self.connected = False
        self._on_connect: List[Callable[[], None]] = []
        self._on_disconnect: List[Callable[[], None]] = []

    def connect(self) -> str:
        self.connected = True
        for cb in self._on_connect:
            cb()
        return self.public_key

    def disconnect(self) -> None:
        self.connected = False
        for cb in self._on_disconnect:
            cb()

    def on_connect(self, callback: Callable[[], None]) -> None:
        self._on_connect.append(callback)

    def on_disconnect(self, callback: Callable[[], None]) -> None:
        self._on_disconnect.append(callback)


class WalletConnections:
    """
    Tracks which address is connected on each chain.

    Provider notifications keep the state in sync; failures while connecting
    are logged and leave the chain disconnected.
    """

    def __init__(self, evm_provider: Optional[EvmWalletProvider] = None, solana_provider: Optional[SolanaWalletProvider] = None):
        self.evm_provider = evm_provider
        self.solana_provider = solana_provider
        self.eth_address = ''
        self.sol_address = ''
        self.eth_connected = False
        self.sol_connected = False

        if self.evm_provider is not None:
            self.evm_provider.on_accounts_changed(self._handle_accounts_changed)
        if self.solana_provider is not None:
            self.solana_provider.on_connect(self._handle_solana_connect)
            self.solana_provider.on_disconnect(self._handle_solana_disconnect)

    def _handle_accounts_changed(self, accounts: List[str]) -> None:
        if accounts:
            self.eth_address = accounts[0]
            self.eth_connected = True
        else:
            self.eth_connected = False
            self.eth_address = ''

    def _handle_solana_connect(self) -> None:
        self.sol_connected = True

    def _handle_solana_disconnect(self) -> None:
        self.sol_connected = False
        self.sol_address = ''

    def connect_evm(self) -> bool:
        if self.evm_provider is None:
            logger.warning('EVM wallet provider not detected')
            return False
        try:
            accounts = self.evm_provider.request_accounts()
        except Exception as e:
            logger.error(f'EVM wallet connection error: {e}')
            return False
        if accounts:
            self.eth_address = accounts[0]
            self.eth_connected = True
        return self.eth_connected

    def disconnect_evm(self) -> None:
        self.eth_connected = False
        self.eth_address = ''

    def connect_solana(self) -> bool:
        if self.solana_provider is None:
            logger.warning('Solana wallet provider not detected')
            return False
        try:
            public_key = self.solana_provider.connect()
        except Exception as e:
            logger.error(f'Solana wallet connection error: {e}')
            return False
        if public_key:
            self.sol_address = str(public_key)
            self.sol_connected = True
        return self.sol_connected

    def disconnect_solana(self) -> None:
        if self.solana_provider is not None:
            try:
                self.solana_provider.disconnect()
            except Exception as e:
                logger.error(f'Solana wallet disconnect error: {e}')
        self.sol_connected = False
        self.sol_address = ''
