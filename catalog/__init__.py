"""Static catalog of MCP servers listed in the store."""

from .data import SERVERS
from .models import Server, ServerCode
from .store import CatalogStore, placeholder_server

STORE = CatalogStore(SERVERS)

__all__ = ["STORE", "SERVERS", "CatalogStore", "Server", "ServerCode", "placeholder_server"]
