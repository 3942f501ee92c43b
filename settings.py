"""Runtime settings for the MCP Store, read from the environment."""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional

from search import SORT_KEYS

logger = logging.getLogger(__name__)


def _env_number(name: str, default: float, cast=float):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default


def _env_str(name: str, default: Optional[str]) -> Optional[str]:
    raw = os.environ.get(name, "").strip()
    return raw or default


def _env_choice(name: str, choices: Iterable[str]) -> Optional[str]:
    """Lower-cased value of *name* if it is one of *choices*, else ``None``."""

    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return None

    if raw not in choices:
        logger.warning("Ignoring invalid %s=%r; expected one of %s", name, raw, ", ".join(choices))
        return None
    return raw


PORT = _env_number("PORT", 5000, int)
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()

# Seconds between automatic carousel advances.
CAROUSEL_INTERVAL_SECONDS = _env_number("CAROUSEL_INTERVAL_SECONDS", 5.0)
# Delay before the installing page refreshes into the completed state.
INSTALL_DELAY_SECONDS = _env_number("INSTALL_DELAY_SECONDS", 3, int)
# How long a copy button shows its "copied" acknowledgment.
COPY_ACK_SECONDS = _env_number("COPY_ACK_SECONDS", 2.0)

TOP_SERVERS_LIMIT = _env_number("TOP_SERVERS_LIMIT", 4, int)
SIMILAR_SERVERS_LIMIT = _env_number("SIMILAR_SERVERS_LIMIT", 4, int)

# Unset keeps the catalog order on the home page.
DEFAULT_SORT = _env_choice("DEFAULT_SORT", SORT_KEYS)
