from .client import ClientManager, RemoteAPIClient

__all__ = ["ClientManager", "RemoteAPIClient"]
