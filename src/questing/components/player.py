from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Set

from questing.quests.definition import Quest


@dataclass(slots=True)
class PlayerProfile:
    """Identifies the host player an entity stands for."""
    player_id: Hashable


@dataclass(slots=True)
class QuestLog:
    """Quests assigned to a player.

    Entries compare by case-insensitive quest name, so a quest can only be
    assigned once per player.
    """
    quests: Set[Quest] = field(default_factory=set)

    def find(self, name: str) -> Quest | None:
        if not isinstance(name, str):
            return None
        key = name.lower()
        for quest in self.quests:
            if quest.name.lower() == key:
                return quest
        return None
