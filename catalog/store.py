"""Read-only access to the server catalog."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from .models import Server

logger = logging.getLogger(__name__)


def placeholder_server(server_id: str) -> Server:
    """Build a stand-in entry so any id still renders a page."""

    return Server(
        id=server_id,
        name=f"{server_id} Server",
        description="",
        category="Unknown",
        downloads=0,
        rating=0.0,
        reviews=0,
        author="Unknown",
        version="1.0.0",
        last_updated="",
    )


class CatalogStore:
    """Immutable, ordered collection of servers with an id index."""

    def __init__(self, servers: Iterable[Server]) -> None:
        self._servers: Tuple[Server, ...] = tuple(servers)
        self._by_id: Dict[str, Server] = {}
        for server in self._servers:
            if server.id in self._by_id:
                raise ValueError(f"Duplicate server id {server.id!r}")
            self._by_id[server.id] = server

    def __iter__(self):
        return iter(self._servers)

    def __len__(self) -> int:
        return len(self._servers)

    def __contains__(self, server_id: object) -> bool:
        return server_id in self._by_id

    def get(self, server_id: str) -> Optional[Server]:
        return self._by_id.get(server_id)

    def resolve(self, server_id: str) -> Server:
        """Return the server for *server_id*, or a placeholder when unknown."""

        server = self.get(server_id)
        if server is None:
            logger.debug("No server with id '%s'; using placeholder", server_id)
            return placeholder_server(server_id)
        return server

    def featured(self) -> List[Server]:
        return [server for server in self._servers if server.featured]

    def similar(self, server: Server, limit: int = 4) -> List[Server]:
        """Other servers in the same category as *server*, in catalog order."""

        if limit <= 0:
            return []

        category = server.category.lower()
        matches = [
            candidate
            for candidate in self._servers
            if candidate.category.lower() == category and candidate.id != server.id
        ]
        return matches[:limit]
