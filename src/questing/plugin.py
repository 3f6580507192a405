"""Composition root wiring the quest core to a host event bus."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List

from esper import World

from questing import constants
from questing.events.bus import EventBus
from questing.quests.catalog import QuestCatalog
from questing.systems.listeners import DEFAULT_LISTENERS, QuestListenerSystem
from questing.systems.player_quest_tracker import PlayerQuestTracker

logger = logging.getLogger(__name__)


def create_world() -> World:
    return World()


class SimpleQuestingPlugin:
    """Owns the catalog, tracker and listener systems for one host server."""

    def __init__(
        self,
        event_bus: EventBus | None = None,
        *,
        quests_path: Path | str | None = None,
        per_player_progress: bool = constants.PER_PLAYER_PROGRESS,
        skip_inactive: bool = constants.SKIP_INACTIVE_QUESTS,
        amount: int = constants.DEFAULT_PROGRESS_AMOUNT,
        on_complete_factory: Callable[[str], Callable[[], None]] | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self.world = create_world()
        self.catalog = QuestCatalog()
        self.tracker = PlayerQuestTracker(
            self.world,
            self.catalog,
            event_bus=self.event_bus,
            per_player_progress=per_player_progress,
            skip_inactive=skip_inactive,
        )
        self.listeners: List[QuestListenerSystem] = []
        self._quests_path = Path(quests_path) if quests_path is not None else None
        self._amount = amount
        self._on_complete_factory = on_complete_factory
        self._enabled = False
        self._loaded = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self, *, load: bool = True) -> None:
        """Load quest definitions and start listening for host events.

        Definitions are loaded on the first enable only; re-enabling after
        :meth:`disable` reuses the catalog. An explicit ``quests_path`` must
        exist; the default path is skipped quietly when absent.
        """
        if self._enabled:
            return
        if load and not self._loaded:
            self._load_quests()
            self._loaded = True
        self.listeners = [
            listener(self.tracker, self.event_bus, amount=self._amount)
            for listener in DEFAULT_LISTENERS
        ]
        self._enabled = True
        logger.info("Questing enabled with %s quests", len(self.catalog))

    def disable(self) -> None:
        for listener in self.listeners:
            listener.detach()
        self.listeners = []
        self._enabled = False

    def _load_quests(self) -> None:
        path = self._quests_path
        if path is None:
            path = constants.DEFAULT_QUESTS_PATH
            if not path.exists():
                logger.info("No quest file at %s, starting with an empty catalog", path)
                return
        self.catalog.load_all(path, on_complete_factory=self._on_complete_factory)
