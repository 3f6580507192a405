from questing.events.bus import EVENT_BLOCK_PLACED
from questing.quests.definition import QuestType
from questing.systems.listeners.base import QuestListenerSystem


class BlockPlaceSystem(QuestListenerSystem):
    """Placing a block advances the placer's PLACE quests targeting its material."""

    event_name = EVENT_BLOCK_PLACED
    quest_type = QuestType.PLACE

    def extract(self, payload):
        return payload.get("player_id"), payload.get("material")
