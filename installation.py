"""Simulated installation flow for MCP servers.

Nothing is actually installed. The flow is a fixed sequence of states: a
request moves the page from ``pending`` to ``installing``, and the installing
page refreshes itself into ``succeeded`` after ``INSTALL_DELAY_SECONDS``.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote

import settings

logger = logging.getLogger(__name__)


class InstallStatus(enum.Enum):
    PENDING = "pending"
    INSTALLING = "installing"
    SUCCEEDED = "installed"


_STATUS_ALIASES = {
    "installing": InstallStatus.INSTALLING,
    "installed": InstallStatus.SUCCEEDED,
    "succeeded": InstallStatus.SUCCEEDED,
    "complete": InstallStatus.SUCCEEDED,
}

_TRANSITIONS = {
    InstallStatus.PENDING: InstallStatus.INSTALLING,
    InstallStatus.INSTALLING: InstallStatus.SUCCEEDED,
    InstallStatus.SUCCEEDED: InstallStatus.SUCCEEDED,
}


def parse_status(flag: Optional[str]) -> InstallStatus:
    """Map the ``status`` query flag onto an :class:`InstallStatus`."""

    if not flag:
        return InstallStatus.PENDING
    return _STATUS_ALIASES.get(flag.strip().lower(), InstallStatus.PENDING)


def advance(status: InstallStatus) -> InstallStatus:
    return _TRANSITIONS[status]


@dataclass(frozen=True)
class InstallView:
    """What the install page shows for a given status."""

    status: InstallStatus
    title: str
    message: str
    show_progress: bool
    refresh_after: Optional[int] = None

    @property
    def next_status(self) -> InstallStatus:
        return advance(self.status)

    @classmethod
    def for_status(cls, status: InstallStatus, delay: int = settings.INSTALL_DELAY_SECONDS) -> "InstallView":
        if status is InstallStatus.INSTALLING:
            return cls(
                status=status,
                title="Installing...",
                message=(
                    "Please wait while we install the MCP server. "
                    "This may take a few moments."
                ),
                show_progress=True,
                refresh_after=max(delay, 0),
            )
        if status is InstallStatus.SUCCEEDED:
            return cls(
                status=status,
                title="Installation Complete!",
                message=(
                    "The MCP server has been successfully installed. "
                    "You can now use it with your AI assistant."
                ),
                show_progress=False,
            )
        return cls(
            status=status,
            title="Install",
            message="Follow the instructions below to install and set up the MCP server.",
            show_progress=False,
        )


def install_url(server_id: str, status: Optional[InstallStatus] = None) -> str:
    url = f"/servers/{quote(server_id, safe='')}/install"
    if status is not None and status is not InstallStatus.PENDING:
        url += f"?status={status.value}"
    return url


def start_install(server_id: Optional[str]) -> str:
    """Record an install request and return the page to redirect to."""

    if not server_id or not server_id.strip():
        raise ValueError("Server ID is required")

    server_id = server_id.strip()
    logger.info("Installing server: %s", server_id)
    return install_url(server_id, advance(InstallStatus.PENDING))
