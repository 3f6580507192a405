from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Hashable, Iterable, List

from esper import World

from questing import constants
from questing.components.player import PlayerProfile, QuestLog
from questing.errors import InvalidArgumentError
from questing.events.bus import (
    EventBus,
    EVENT_QUEST_ASSIGNED,
    EVENT_QUEST_COMPLETED,
    EVENT_QUEST_PROGRESSED,
)
from questing.quests.catalog import QuestCatalog
from questing.quests.definition import Quest, QuestType, require_int

logger = logging.getLogger(__name__)


class PlayerQuestTracker:
    """Assigns catalog quests to players and applies progress to them.

    Each player is an entity carrying a ``PlayerProfile`` and a ``QuestLog``;
    both are created on the player's first assignment and live as long as the
    world does.

    With ``per_player_progress`` off, assignment stores the catalog's own quest
    object, so every player assigned a quest shares its progress counter. With
    it on, each player receives a fresh copy of the template.
    """

    def __init__(
        self,
        world: World,
        catalog: QuestCatalog,
        *,
        event_bus: EventBus | None = None,
        per_player_progress: bool = constants.PER_PLAYER_PROGRESS,
        skip_inactive: bool = constants.SKIP_INACTIVE_QUESTS,
    ) -> None:
        self.world = world
        self.catalog = catalog
        self.event_bus = event_bus
        self.per_player_progress = per_player_progress
        self.skip_inactive = skip_inactive
        self._player_entities: Dict[Hashable, int] = {}

    # Player entities -----------------------------------------------------

    def _find_player_entity(self, player_id: Hashable) -> int | None:
        entity = self._player_entities.get(player_id)
        if entity is not None and self.world.entity_exists(entity):
            return entity
        for candidate, profile in self.world.get_component(PlayerProfile):
            if profile.player_id == player_id:
                self._player_entities[player_id] = candidate
                return candidate
        self._player_entities.pop(player_id, None)
        return None

    def _quest_log(self, player_id: Hashable, *, create: bool = False) -> QuestLog | None:
        entity = self._find_player_entity(player_id)
        if entity is None:
            if not create:
                return None
            entity = self.world.create_entity(PlayerProfile(player_id=player_id), QuestLog())
            self._player_entities[player_id] = entity
            logger.debug("Created quest log entity %s for player %s", entity, player_id)
        log = self.world.try_component(entity, QuestLog)
        if log is None and create:
            log = QuestLog()
            self.world.add_component(entity, log)
        return log

    # Assignment ----------------------------------------------------------

    def assign(self, player_id: Hashable, quest_name: str) -> Quest:
        """Give ``player_id`` the catalog quest called ``quest_name``.

        Re-assigning a quest the player already has is a no-op and returns the
        quest they hold.
        """
        if player_id is None:
            raise InvalidArgumentError("Cannot assign a quest to an absent player id")
        if quest_name is None:
            raise InvalidArgumentError("Cannot assign a quest with an absent name")
        template = self.catalog.get(quest_name)
        log = self._quest_log(player_id, create=True)
        existing = log.find(template.name)
        if existing is not None:
            return existing
        quest = template.fresh_copy() if self.per_player_progress else template
        log.quests.add(quest)
        logger.info("Assigned quest '%s' to player %s", quest.name, player_id)
        if self.event_bus is not None:
            self.event_bus.emit(EVENT_QUEST_ASSIGNED, player_id=player_id, quest_name=quest.name)
        return quest

    def unassign(self, player_id: Hashable, quest_name: str) -> bool:
        if player_id is None or quest_name is None:
            raise InvalidArgumentError("player_id and quest_name are required")
        log = self._quest_log(player_id)
        if log is None:
            return False
        quest = log.find(quest_name)
        if quest is None:
            return False
        log.quests.discard(quest)
        logger.info("Unassigned quest '%s' from player %s", quest.name, player_id)
        return True

    # Queries -------------------------------------------------------------

    def quests_of(self, player_id: Hashable) -> FrozenSet[Quest]:
        if player_id is None:
            raise InvalidArgumentError("player_id is required")
        log = self._quest_log(player_id)
        if log is None:
            return frozenset()
        return frozenset(log.quests)

    def quests_of_type(self, player_id: Hashable, quest_type: QuestType) -> FrozenSet[Quest]:
        if player_id is None or quest_type is None:
            raise InvalidArgumentError("player_id and quest_type are required")
        if not isinstance(quest_type, QuestType):
            raise InvalidArgumentError(f"Unknown quest type {quest_type!r}")
        return frozenset(quest for quest in self.quests_of(player_id) if quest.type is quest_type)

    def quest_for(self, player_id: Hashable, quest_name: str) -> Quest | None:
        if player_id is None or quest_name is None:
            raise InvalidArgumentError("player_id and quest_name are required")
        log = self._quest_log(player_id)
        if log is None:
            return None
        return log.find(quest_name)

    def players(self) -> List[Hashable]:
        return [profile.player_id for _, profile in self.world.get_component(PlayerProfile)]

    # Progress ------------------------------------------------------------

    def apply_progress(self, quests: Iterable[Quest], target: object, amount: int) -> List[Quest]:
        """Add ``amount`` to every quest in ``quests`` that targets ``target``.

        Processing stops at the first inactive quest unless ``skip_inactive``
        is set, in which case only that quest is passed over. Returns the quests
        whose progress changed, in processing order.

        Every selected quest is checked before any is updated, so a rejected
        batch leaves all of them untouched. A quest listed twice progresses once.
        """
        if quests is None:
            raise InvalidArgumentError("quests is required")
        amount = require_int(amount, "Progress amount")
        batch: List[Quest] = []
        seen: set[int] = set()
        for quest in quests:
            if not quest.active:
                if self.skip_inactive:
                    continue
                logger.debug("Quest '%s' inactive, stopping progress batch", quest.name)
                break
            if quest.has_target(target) and id(quest) not in seen:
                seen.add(id(quest))
                quest.check_progress(quest.progress + amount)
                batch.append(quest)

        progressed: List[Quest] = []
        for quest in batch:
            completed = quest.add_progress(amount)
            progressed.append(quest)
            logger.debug(
                "Quest '%s' progress %s/%s", quest.name, quest.progress, quest.goal
            )
            if self.event_bus is not None:
                self.event_bus.emit(
                    EVENT_QUEST_PROGRESSED,
                    quest_name=quest.name,
                    progress=quest.progress,
                    goal=quest.goal,
                )
                if completed:
                    self.event_bus.emit(EVENT_QUEST_COMPLETED, quest_name=quest.name)
        return progressed

    def record_activity(
        self,
        player_id: Hashable,
        quest_type: QuestType,
        target: object,
        amount: int = constants.DEFAULT_PROGRESS_AMOUNT,
    ) -> List[Quest]:
        return self.apply_progress(self.quests_of_type(player_id, quest_type), target, amount)
