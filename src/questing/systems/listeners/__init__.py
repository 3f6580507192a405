from __future__ import annotations

from questing.systems.listeners.base import QuestListenerSystem
from questing.systems.listeners.block_break_system import BlockBreakSystem
from questing.systems.listeners.block_place_system import BlockPlaceSystem
from questing.systems.listeners.entity_death_system import EntityDeathSystem
from questing.systems.listeners.item_craft_system import ItemCraftSystem

DEFAULT_LISTENERS = (
    BlockBreakSystem,
    BlockPlaceSystem,
    EntityDeathSystem,
    ItemCraftSystem,
)

__all__ = [
    "QuestListenerSystem",
    "BlockBreakSystem",
    "BlockPlaceSystem",
    "EntityDeathSystem",
    "ItemCraftSystem",
    "DEFAULT_LISTENERS",
]
