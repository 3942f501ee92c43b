"""Record types for catalog entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class ServerCode:
    """Static source samples shown on a server's detail page."""

    main: str
    package: str
    client: str
    types: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = {"main": self.main, "package": self.package, "client": self.client}
        if self.types is not None:
            payload["types"] = self.types
        return payload


@dataclass(frozen=True)
class Server:
    """A single MCP server listed in the store."""

    id: str
    name: str
    description: str
    category: str
    downloads: int
    rating: float
    reviews: int
    author: str
    version: str
    last_updated: str
    long_description: str = ""
    requirements: Tuple[str, ...] = field(default_factory=tuple)
    features: Tuple[str, ...] = field(default_factory=tuple)
    image: Optional[str] = None
    featured: bool = False
    server_code: Optional[ServerCode] = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.rating <= 5.0:
            raise ValueError(f"rating for {self.id!r} must be within 0-5, got {self.rating}")
        if self.downloads < 0 or self.reviews < 0:
            raise ValueError(f"counts for {self.id!r} must be non-negative")

        # Lists passed in by callers are frozen so the record stays read-only.
        object.__setattr__(self, "requirements", tuple(self.requirements))
        object.__setattr__(self, "features", tuple(self.features))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys the front end expects."""

        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "longDescription": self.long_description,
            "category": self.category,
            "downloads": self.downloads,
            "rating": self.rating,
            "reviews": self.reviews,
            "author": self.author,
            "version": self.version,
            "lastUpdated": self.last_updated,
            "requirements": list(self.requirements),
            "features": list(self.features),
            "image": self.image,
            "featured": self.featured,
            "serverCode": self.server_code.to_dict() if self.server_code else None,
        }
