from .alchemy_client import AlchemyClient, AlchemyRpcError

__all__ = ["AlchemyClient", "AlchemyRpcError"]
