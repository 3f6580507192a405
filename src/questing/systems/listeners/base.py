from __future__ import annotations

import logging
from typing import Any, Hashable, List, Tuple

from questing import constants
from questing.errors import InvalidArgumentError
from questing.events.bus import EventBus
from questing.quests.definition import Quest, QuestType
from questing.systems.player_quest_tracker import PlayerQuestTracker

logger = logging.getLogger(__name__)

Activity = Tuple[Hashable, Any]


class QuestListenerSystem:
    """Turns one kind of host event into progress on a player's quests.

    Subclasses name the event they listen to and the quest type it feeds, and
    pull ``(player_id, target)`` out of the payload. Returning ``None`` from
    :meth:`extract` drops the event.
    """

    event_name: str = ""
    quest_type: QuestType

    def __init__(
        self,
        tracker: PlayerQuestTracker,
        event_bus: EventBus,
        *,
        amount: int = constants.DEFAULT_PROGRESS_AMOUNT,
    ) -> None:
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise InvalidArgumentError(f"Progress amount must be a positive integer, got {amount!r}")
        self.tracker = tracker
        self.event_bus = event_bus
        self.amount = amount
        self.event_bus.subscribe(self.event_name, self.on_event)

    def extract(self, payload: dict[str, Any]) -> Activity | None:
        raise NotImplementedError

    def on_event(self, sender, **payload) -> List[Quest]:
        activity = self.extract(payload)
        if activity is None:
            return []
        player_id, target = activity
        if player_id is None or target is None:
            logger.debug("Ignoring %s event without player or target: %s", self.event_name, payload)
            return []
        quests = self.tracker.quests_of_type(player_id, self.quest_type)
        return self.tracker.apply_progress(quests, target, self.amount)

    def detach(self) -> None:
        self.event_bus.unsubscribe(self.event_name, self.on_event)
