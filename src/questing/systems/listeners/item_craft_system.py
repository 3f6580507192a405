from questing.events.bus import EVENT_ITEM_CRAFTED
from questing.quests.definition import QuestType
from questing.systems.listeners.base import QuestListenerSystem


class ItemCraftSystem(QuestListenerSystem):
    """Crafting advances CRAFT quests targeting the recipe's result material."""

    event_name = EVENT_ITEM_CRAFTED
    quest_type = QuestType.CRAFT

    def extract(self, payload):
        return payload.get("player_id"), payload.get("material")
