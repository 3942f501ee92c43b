"""Featured server rotation for the home page carousel."""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional, Tuple

import settings
from catalog.models import Server

logger = logging.getLogger(__name__)


class FeaturedRotation:
    """Cyclic cursor over the featured subset of the catalog.

    The cursor advances on timer ticks unless paused (the pointer is hovering
    the carousel) and can be moved explicitly with :meth:`next`,
    :meth:`previous` and :meth:`jump`. With no featured servers there is
    nothing to show and :attr:`current` is ``None``.
    """

    def __init__(self, items: Iterable[Server], interval: float = settings.CAROUSEL_INTERVAL_SECONDS):
        self.items: List[Server] = [item for item in items if item.featured]
        self.interval = interval
        self.index = 0
        self.paused = False
        self._elapsed = 0.0

    def __len__(self) -> int:
        return len(self.items)

    @property
    def current(self) -> Optional[Server]:
        if not self.items:
            return None
        return self.items[self.index]

    def next(self) -> Optional[Server]:
        if self.items:
            self.index = (self.index + 1) % len(self.items)
        return self.current

    def previous(self) -> Optional[Server]:
        if self.items:
            self.index = (self.index - 1 + len(self.items)) % len(self.items)
        return self.current

    def jump(self, index: int) -> Optional[Server]:
        if not 0 <= index < len(self.items):
            raise IndexError(f"Carousel index {index} out of range for {len(self.items)} items")
        self.index = index
        self._elapsed = 0.0
        return self.current

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def tick(self) -> Optional[Server]:
        if self.paused:
            return self.current
        return self.next()

    def tick_elapsed(self, seconds: float) -> Optional[Server]:
        """Advance once for every full interval in *seconds* while playing."""

        if self.paused or self.interval <= 0:
            return self.current

        self._elapsed += seconds
        steps = int(self._elapsed // self.interval)
        if steps and self.items:
            self._elapsed -= steps * self.interval
            self.index = (self.index + steps) % len(self.items)
        return self.current


def rotation_state(
    items: Iterable[Server],
    index: int = 0,
    action: Optional[str] = None,
    elapsed: float = 0.0,
    paused: bool = False,
) -> Tuple[int, Optional[Server]]:
    """Apply *action* to a rotation positioned at *index*.

    Supported actions are ``next``, ``previous`` and ``jump:<n>``. The index is
    wrapped into range first so stale indexes from the browser still resolve.
    *elapsed* is the time the client has shown the current slide; every full
    interval of it advances the rotation unless *paused* (hovered).
    """

    rotation = FeaturedRotation(items)
    if not len(rotation):
        return 0, None

    rotation.index = index % len(rotation)
    if paused:
        rotation.pause()
    if not math.isfinite(elapsed) or elapsed < 0:
        raise ValueError(f"Invalid elapsed time '{elapsed}'")
    rotation.tick_elapsed(elapsed)

    if action == "next":
        rotation.next()
    elif action == "previous":
        rotation.previous()
    elif action and action.startswith("jump:"):
        try:
            target = int(action.split(":", 1)[1])
        except ValueError:
            raise ValueError(f"Invalid carousel jump '{action}'") from None
        rotation.jump(target)
    elif action:
        raise ValueError(f"Unknown carousel action '{action}'")

    logger.debug("Carousel %s -> index %d", action or "show", rotation.index)
    return rotation.index, rotation.current
