"""Search, filter and sort helpers for the MCP Store catalog."""

from __future__ import annotations

import locale
import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from catalog.models import Server

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"
DATE_FORMAT = "%Y-%m-%d"

SortKey = Callable[[Server], object]


def _normalize_text(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def filter_by_text(items: Iterable[Server], query: Optional[str]) -> List[Server]:
    """Keep servers whose name or description contains *query*, ignoring case."""

    if not query or not query.strip():
        return list(items)

    needle = query.lower()
    return [
        item
        for item in items
        if needle in item.name.lower() or needle in item.description.lower()
    ]


def filter_by_category(items: Iterable[Server], category: Optional[str]) -> List[Server]:
    normalized = _normalize_text(category)
    if not normalized or normalized == ALL_CATEGORIES:
        return list(items)

    return [item for item in items if item.category.lower() == normalized]


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except (AttributeError, ValueError):
        return date.min


def _trending_score(item: Server) -> float:
    if item.reviews <= 0:
        return 0.0
    return item.downloads / item.reviews


def _name_sort_key(item: Server) -> Tuple[str, str]:
    return locale.strxfrm(item.name.casefold()), item.name


# (key function, descending)
SORT_KEYS: Dict[str, Tuple[SortKey, bool]] = {
    "popular": (lambda item: item.downloads, True),
    "rating": (lambda item: item.rating, True),
    "newest": (lambda item: _parse_date(item.last_updated), True),
    "name": (_name_sort_key, False),
    "trending": (_trending_score, True),
}


def sort_by(items: Iterable[Server], key: str) -> List[Server]:
    """Return *items* ordered by *key*.

    The sort is stable, so servers that tie keep their catalog order. Unknown
    keys raise ``ValueError``.
    """

    try:
        key_func, descending = SORT_KEYS[key]
    except KeyError:
        raise ValueError(f"Unknown sort key '{key}'") from None

    return sorted(items, key=key_func, reverse=descending)


def top_n(items: Iterable[Server], n: int) -> List[Server]:
    if n <= 0:
        return []
    return list(items)[:n]


def distinct_categories(items: Iterable[Server]) -> List[str]:
    """Lower-cased unique categories, led by the ``all`` sentinel."""

    categories = [ALL_CATEGORIES]
    for item in items:
        label = item.category.lower()
        if label not in categories:
            categories.append(label)
    return categories


@dataclass(frozen=True)
class ViewState:
    """Everything the browsing view needs to derive its server list."""

    query: str = ""
    category: str = ALL_CATEGORIES
    sort: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, str], default_sort: Optional[str] = None) -> "ViewState":
        state = reduce_view(cls(), "set_sort", default_sort)
        state = reduce_view(state, "set_query", args.get("q"))
        state = reduce_view(state, "set_category", args.get("category"))

        sort = (args.get("sort") or "").strip().lower()
        if sort:
            state = reduce_view(state, "set_sort", sort)
        return state

    @property
    def is_filtered(self) -> bool:
        return bool(self.query) or self.category != ALL_CATEGORIES


def reduce_view(state: ViewState, action: str, value: Optional[str] = None) -> ViewState:
    """Apply a browsing action to *state* and return the new state."""

    if action == "set_query":
        # Whitespace around a non-blank query is part of the match.
        return replace(state, query=value if value and value.strip() else "")
    if action == "set_category":
        return replace(state, category=_normalize_text(value) or ALL_CATEGORIES)
    if action == "set_sort":
        if value is not None and value not in SORT_KEYS:
            raise ValueError(f"Unknown sort key '{value}'")
        return replace(state, sort=value)
    if action == "clear_filters":
        return replace(state, query="", category=ALL_CATEGORIES)

    raise ValueError(f"Unknown view action '{action}'")


def run_query(items: Iterable[Server], state: ViewState) -> List[Server]:
    """Filter by text and category, then sort when the state asks for it."""

    results = filter_by_category(filter_by_text(items, state.query), state.category)
    if state.sort:
        results = sort_by(results, state.sort)

    logger.debug(
        "Query %r in %s sorted by %s matched %d servers",
        state.query,
        state.category,
        state.sort or "catalog order",
        len(results),
    )
    return results
