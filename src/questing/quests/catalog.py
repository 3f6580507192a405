from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator

from questing.errors import DuplicateNameError, QuestNotFoundError
from questing.quests.definition import Quest, QuestType

logger = logging.getLogger(__name__)


class QuestCatalog:
    """In-memory collection of quest definitions keyed by case-insensitive name."""

    def __init__(self) -> None:
        self._quests: dict[str, Quest] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.lower()

    def register(
        self,
        type: QuestType,
        name: str,
        description: str,
        goal: int,
        targets: Iterable,
        on_complete: Callable[[], None],
        *,
        active: bool = False,
    ) -> Quest:
        quest = Quest(type, name, description, goal, targets, on_complete, active=active)
        key = self._key(quest.name)
        if key in self._quests:
            raise DuplicateNameError(f"Quest '{name}' already registered")
        self._quests[key] = quest
        logger.info("Registered %s quest '%s' (goal=%s)", type.name, name, goal)
        return quest

    def lookup(self, name: str) -> Quest | None:
        if not isinstance(name, str):
            return None
        return self._quests.get(self._key(name))

    def get(self, name: str) -> Quest:
        quest = self.lookup(name)
        if quest is None:
            raise QuestNotFoundError(f"Quest '{name}' is not registered")
        return quest

    def exists(self, name: str) -> bool:
        return self.lookup(name) is not None

    def all(self) -> tuple[Quest, ...]:
        return tuple(self._quests.values())

    def load_all(
        self,
        source: Path | str | None = None,
        *,
        on_complete_factory: Callable[[str], Callable[[], None]] | None = None,
    ) -> list[Quest]:
        """Populate the catalog from a quest definition file.

        ``source`` defaults to ``constants.DEFAULT_QUESTS_PATH``. See
        :func:`questing.quests.loader.load_quests` for the file format.
        """
        from questing.quests.loader import load_quests

        return load_quests(self, source, on_complete_factory=on_complete_factory)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __iter__(self) -> Iterator[Quest]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._quests)
