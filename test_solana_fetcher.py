import unittest
from unittest import mock

from token_indexer.core.models import RawTokenAccount, TokenHolding
from token_indexer.solana.address import InvalidAddressError, parse_public_key
from token_indexer.solana.processors import SolanaBalanceFetcher, mint_symbol, normalize_account
from token_indexer.solana.rpc import SolanaRpcClient, SolanaRpcError

OWNER = 'EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v'
USDT_MINT = 'Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB'
TOKEN_PROGRAM = 'TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA'


def _account(mint, ui_amount_string, decimals=6):
    return {
        'pubkey': 'AccountPubkey1111111111111111111111111111111',
        'account': {
            'data': {
                'program': 'spl-token',
                'parsed': {
                    'type': 'account',
                    'info': {
                        'mint': mint,
                        'owner': OWNER,
                        'tokenAmount': {
                            'amount': '0',
                            'decimals': decimals,
                            'uiAmountString': ui_amount_string,
                        },
                    },
                },
            },
            'owner': TOKEN_PROGRAM,
        },
    }


def _response(body):
    resp = mock.Mock()
    resp.json.return_value = body
    resp.raise_for_status.return_value = None
    return resp


class TestParsePublicKey(unittest.TestCase):
    def test_valid_key(self):
        self.assertEqual(parse_public_key(OWNER), OWNER)
        self.assertEqual(parse_public_key(f'  {OWNER} '), OWNER)

    def test_invalid_characters(self):
        with self.assertRaises(InvalidAddressError):
            parse_public_key('not-a-solana-address')

    def test_wrong_length(self):
        with self.assertRaises(InvalidAddressError):
            parse_public_key('abc')

    def test_evm_address_is_not_a_solana_key(self):
        with self.assertRaises(ValueError):
            parse_public_key('0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045')


class TestNormalizeAccount(unittest.TestCase):
    def test_symbol_is_mint_prefix(self):
        self.assertEqual(mint_symbol(USDT_MINT), 'Es9v...')

    def test_non_positive_amounts_dropped(self):
        for amount in ['0', '0.0', '-1']:
            self.assertIsNone(normalize_account(RawTokenAccount.from_rpc(_account(USDT_MINT, amount))), amount)

    def test_unparseable_amounts_dropped(self):
        for amount in [None, '', 'abc', 'NaN']:
            self.assertIsNone(normalize_account(RawTokenAccount.from_rpc(_account(USDT_MINT, amount))), amount)

    def test_spam_looking_mint_is_not_filtered(self):
        holding = normalize_account(RawTokenAccount.from_rpc(_account('clai' + USDT_MINT[4:], '1')))
        self.assertEqual(holding.symbol, 'clai...')


class TestSolanaBalanceFetcher(unittest.TestCase):
    def test_single_usdt_account(self):
        client = mock.Mock(spec=SolanaRpcClient)
        client.get_parsed_token_accounts_by_owner.return_value = [_account(USDT_MINT, '12.5')]

        result = SolanaBalanceFetcher(client=client).fetch(OWNER)

        self.assertTrue(result.ok)
        self.assertEqual(result.holdings, [TokenHolding(symbol='Es9v...', balance=12.5, logo=None)])
        client.get_parsed_token_accounts_by_owner.assert_called_once_with(OWNER, program_id=TOKEN_PROGRAM)

    def test_malformed_accounts_dropped_individually(self):
        client = mock.Mock(spec=SolanaRpcClient)
        client.get_parsed_token_accounts_by_owner.return_value = [
            None,
            'garbage',
            {'pubkey': 'x', 'account': {'data': ['AAAA', 'base64']}},
            _account(12345, '3'),
            _account(USDT_MINT, True),
            _account(USDT_MINT, '12.5'),
        ]

        result = SolanaBalanceFetcher(client=client).fetch(OWNER)

        self.assertTrue(result.ok)
        self.assertEqual(result.holdings, [TokenHolding(symbol='Es9v...', balance=12.5, logo=None)])

    def test_zero_balance_accounts_dropped(self):
        client = mock.Mock(spec=SolanaRpcClient)
        client.get_parsed_token_accounts_by_owner.return_value = [
            _account(USDT_MINT, '0'),
            _account(OWNER, '3'),
        ]

        result = SolanaBalanceFetcher(client=client).fetch(OWNER)

        self.assertEqual(result.holdings, [TokenHolding(symbol='EPjF...', balance=3.0)])

    def test_empty_address_makes_no_calls(self):
        client = mock.Mock(spec=SolanaRpcClient)

        result = SolanaBalanceFetcher(client=client).fetch('')

        self.assertTrue(result.ok)
        self.assertEqual(result.holdings, [])
        client.get_parsed_token_accounts_by_owner.assert_not_called()

    def test_invalid_address_fails_without_rpc_call(self):
        client = mock.Mock(spec=SolanaRpcClient)

        with self.assertLogs('token_indexer.solana.processors.balance_fetcher', level='ERROR'):
            result = SolanaBalanceFetcher(client=client).fetch('0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045')

        self.assertFalse(result.ok)
        self.assertEqual(result.holdings, [])
        client.get_parsed_token_accounts_by_owner.assert_not_called()

    def test_rpc_failure_is_contained(self):
        client = mock.Mock(spec=SolanaRpcClient)
        client.get_parsed_token_accounts_by_owner.side_effect = SolanaRpcError('getTokenAccountsByOwner request failed: 429')

        with self.assertLogs('token_indexer.solana.processors.balance_fetcher', level='ERROR'):
            result = SolanaBalanceFetcher(client=client).fetch(OWNER)

        self.assertFalse(result.ok)
        self.assertIn('429', result.error)


class TestSolanaRpcClient(unittest.TestCase):
    def test_request_shape(self):
        client = SolanaRpcClient(rpc_url='https://example.invalid', timeout=5)
        client._session = mock.Mock()
        client._session.post.return_value = _response(
            {'jsonrpc': '2.0', 'id': 1, 'result': {'context': {'slot': 1}, 'value': [_account(USDT_MINT, '1')]}}
        )

        accounts = client.get_parsed_token_accounts_by_owner(OWNER, program_id=TOKEN_PROGRAM)

        self.assertEqual(len(accounts), 1)
        payload = client._session.post.call_args.kwargs['json']
        self.assertEqual(payload['method'], 'getTokenAccountsByOwner')
        self.assertEqual(payload['params'], [OWNER, {'programId': TOKEN_PROGRAM}, {'encoding': 'jsonParsed'}])

    def test_error_object_raises(self):
        client = SolanaRpcClient(rpc_url='https://example.invalid', timeout=5)
        client._session = mock.Mock()
        client._session.post.return_value = _response(
            {'jsonrpc': '2.0', 'id': 1, 'error': {'code': -32602, 'message': 'Invalid param: WrongSize'}}
        )

        with self.assertRaises(SolanaRpcError):
            client.get_parsed_token_accounts_by_owner(OWNER)


if __name__ == '__main__':
    unittest.main()
