import logging

from questing.events.bus import EVENT_ENTITY_KILLED
from questing.quests.definition import QuestType
from questing.systems.listeners.base import QuestListenerSystem

logger = logging.getLogger(__name__)


class EntityDeathSystem(QuestListenerSystem):
    """Credits SLAY quests to the player who landed the killing blow.

    Deaths caused by anything other than a player (mobs, fall damage, lava)
    carry no ``killer_id`` or set ``killer_is_player`` to False and are ignored.
    """

    event_name = EVENT_ENTITY_KILLED
    quest_type = QuestType.SLAY

    def extract(self, payload):
        killer_id = payload.get("killer_id")
        if killer_id is None or not payload.get("killer_is_player", True):
            logger.debug("Ignoring %s not killed by a player", payload.get("entity_type"))
            return None
        return killer_id, payload.get("entity_type")
