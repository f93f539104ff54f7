import logging
import os
from typing import Optional

from dotenv import load_dotenv
load_dotenv()


class Config:
    # EVM indexing service (Alchemy)
    # An empty key falls back to Alchemy's public rate-limited 'demo' key
    ALCHEMY_API_KEY = os.getenv('ALCHEMY_API_KEY') or 'demo'
    EVM_NETWORK = os.getenv('EVM_NETWORK', 'eth-mainnet')
    # Full URL override, e.g. for a self-hosted proxy; takes precedence over network + key
    EVM_INDEXER_URL = os.getenv('EVM_INDEXER_URL', None)

    # Solana Configuration
    SOLANA_HTTP_RPC_URL = os.getenv('SOLANA_HTTP_RPC_URL') or 'https://api.mainnet-beta.solana.com'
    SPL_TOKEN_PROGRAM_ID = os.getenv('SPL_TOKEN_PROGRAM_ID', 'TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA')

    # Request Configuration
    RPC_TIMEOUT_SECONDS = float(os.getenv('RPC_TIMEOUT_SECONDS', '10'))
    RPC_MAX_WORKERS = int(os.getenv('RPC_MAX_WORKERS', '16'))
    QUERY_TIMEOUT_SECONDS = float(os.getenv('QUERY_TIMEOUT_SECONDS', '60'))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls):
        required_fields = ['EVM_NETWORK', 'SOLANA_HTTP_RPC_URL', 'SPL_TOKEN_PROGRAM_ID']
        missing = []
        for field in required_fields:
            if not getattr(cls, field):
                missing.append(field)
        if missing:
            raise ValueError(f"Missing required configuration: {', '.join(missing)}")
        if cls.RPC_TIMEOUT_SECONDS <= 0 or cls.QUERY_TIMEOUT_SECONDS <= 0:
            raise ValueError('RPC_TIMEOUT_SECONDS and QUERY_TIMEOUT_SECONDS must be positive')
        if cls.RPC_MAX_WORKERS < 1:
            raise ValueError('RPC_MAX_WORKERS must be at least 1')
        return True


def setup_logging(level: Optional[str] = None):
    """Configure root logging for CLI entrypoints."""
    logging.basicConfig(
        level=getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    # requests' connection pool chatter drowns out the fetch logs at DEBUG
    logging.getLogger('urllib3').setLevel(logging.WARNING)


Config.validate()
