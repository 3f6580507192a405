from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Use weak=False to retain strong reference to bound methods so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# HOST GAMEPLAY EVENTS
# ============================================================================
EVENT_BLOCK_BROKEN = "block_broken"      # payload: player_id=Hashable, material=Material
EVENT_BLOCK_PLACED = "block_placed"      # payload: player_id=Hashable, material=Material
EVENT_ENTITY_KILLED = "entity_killed"    # payload: entity_type=EntityType, killer_id=Hashable|None, killer_is_player=bool
EVENT_ITEM_CRAFTED = "item_crafted"      # payload: player_id=Hashable, material=Material


# ============================================================================
# QUEST PROGRESS
# ============================================================================
EVENT_QUEST_ASSIGNED = "quest_assigned"        # payload: player_id=Hashable, quest_name=str
EVENT_QUEST_PROGRESSED = "quest_progressed"    # payload: quest_name=str, progress=int, goal=int
EVENT_QUEST_COMPLETED = "quest_completed"      # payload: quest_name=str
