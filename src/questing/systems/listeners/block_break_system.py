from questing.events.bus import EVENT_BLOCK_BROKEN
from questing.quests.definition import QuestType
from questing.systems.listeners.base import QuestListenerSystem


class BlockBreakSystem(QuestListenerSystem):
    """Mining a block advances the miner's MINE quests targeting its material."""

    event_name = EVENT_BLOCK_BROKEN
    quest_type = QuestType.MINE

    def extract(self, payload):
        return payload.get("player_id"), payload.get("material")
