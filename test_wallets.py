import unittest
from unittest import mock

from token_indexer.wallets import StaticEvmWallet, StaticSolanaWallet, WalletConnections

ETH_ADDR = '0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045'
SOL_ADDR = 'EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v'


class TestEvmWallet(unittest.TestCase):
    def test_connect_uses_first_account(self):
        provider = mock.Mock()
        provider.request_accounts.return_value = [ETH_ADDR, '0x0000000000000000000000000000000000000001']
        wallets = WalletConnections(evm_provider=provider)

        self.assertTrue(wallets.connect_evm())
        self.assertEqual(wallets.eth_address, ETH_ADDR)
        self.assertTrue(wallets.eth_connected)

    def test_accounts_changed_notifications(self):
        provider = StaticEvmWallet(ETH_ADDR)
        wallets = WalletConnections(evm_provider=provider)

        provider.switch_account('0xfeed')
        self.assertEqual(wallets.eth_address, '0xfeed')
        self.assertTrue(wallets.eth_connected)

        provider.switch_account('')
        self.assertEqual(wallets.eth_address, '')
        self.assertFalse(wallets.eth_connected)

    def test_connect_error_is_logged(self):
        provider = mock.Mock()
        provider.request_accounts.side_effect = RuntimeError('User rejected the request.')
        wallets = WalletConnections(evm_provider=provider)

        with self.assertLogs('token_indexer.wallets.providers', level='ERROR'):
            self.assertFalse(wallets.connect_evm())
        self.assertFalse(wallets.eth_connected)

    def test_missing_provider(self):
        wallets = WalletConnections()
        with self.assertLogs('token_indexer.wallets.providers', level='WARNING'):
            self.assertFalse(wallets.connect_evm())

    def test_disconnect_clears_state(self):
        wallets = WalletConnections(evm_provider=StaticEvmWallet(ETH_ADDR))
        wallets.connect_evm()
        wallets.disconnect_evm()
        self.assertEqual((wallets.eth_address, wallets.eth_connected), ('', False))


class TestSolanaWallet(unittest.TestCase):
    def test_connect_and_disconnect(self):
        provider = StaticSolanaWallet(SOL_ADDR)
        wallets = WalletConnections(solana_provider=provider)

        self.assertTrue(wallets.connect_solana())
        self.assertEqual(wallets.sol_address, SOL_ADDR)
        self.assertTrue(provider.connected)

        wallets.disconnect_solana()
        self.assertFalse(provider.connected)
        self.assertEqual((wallets.sol_address, wallets.sol_connected), ('', False))

    def test_provider_disconnect_notification_clears_address(self):
        provider = StaticSolanaWallet(SOL_ADDR)
        wallets = WalletConnections(solana_provider=provider)
        wallets.connect_solana()

        provider.disconnect()

        self.assertFalse(wallets.sol_connected)
        self.assertEqual(wallets.sol_address, '')

    def test_empty_public_key_does_not_connect(self):
        provider = mock.Mock()
        provider.connect.return_value = ''
        wallets = WalletConnections(solana_provider=provider)

        self.assertFalse(wallets.connect_solana())
        self.assertEqual(wallets.sol_address, '')


if __name__ == '__main__':
    unittest.main()
