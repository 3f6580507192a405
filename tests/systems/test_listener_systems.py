from __future__ import annotations

import uuid

import pytest

from questing.components.targets import EntityType, Material
from questing.errors import InvalidArgumentError
from questing.events.bus import (
    EVENT_BLOCK_BROKEN,
    EVENT_BLOCK_PLACED,
    EVENT_ENTITY_KILLED,
    EVENT_ITEM_CRAFTED,
)
from questing.quests.definition import QuestType
from questing.systems.listeners import (
    BlockBreakSystem,
    BlockPlaceSystem,
    EntityDeathSystem,
    ItemCraftSystem,
)

from tests.helpers import CompletionCounter


def _active_quest(catalog, quest_type, name, targets, goal=5):
    return catalog.register(quest_type, name, "", goal, targets, CompletionCounter(), active=True)


def test_block_break_advances_mine_quests(tracker, bus, catalog) -> None:
    BlockBreakSystem(tracker, bus)
    quest = _active_quest(catalog, QuestType.MINE, "Miner", {Material.STONE})
    player = uuid.uuid4()
    tracker.assign(player, "Miner")

    bus.emit(EVENT_BLOCK_BROKEN, player_id=player, material=Material.STONE)
    bus.emit(EVENT_BLOCK_BROKEN, player_id=player, material=Material.DIRT)

    assert quest.progress == 1


def test_block_break_without_assignments_is_harmless(tracker, bus, stone_quest) -> None:
    quest, _ = stone_quest
    quest.activate()
    BlockBreakSystem(tracker, bus)

    bus.emit(EVENT_BLOCK_BROKEN, player_id=uuid.uuid4(), material=Material.STONE)

    assert quest.progress == 0
    assert tracker.players() == []


def test_block_place_advances_place_quests_only(tracker, bus, catalog) -> None:
    BlockPlaceSystem(tracker, bus)
    place = _active_quest(catalog, QuestType.PLACE, "Builder", {Material.OAK_PLANKS})
    mine = _active_quest(catalog, QuestType.MINE, "Digger", {Material.OAK_PLANKS})
    player = uuid.uuid4()
    tracker.assign(player, "Builder")
    tracker.assign(player, "Digger")

    bus.emit(EVENT_BLOCK_PLACED, player_id=player, material=Material.OAK_PLANKS)

    assert place.progress == 1
    assert mine.progress == 0


def test_entity_death_credits_player_killer(tracker, bus, catalog) -> None:
    EntityDeathSystem(tracker, bus)
    quest = _active_quest(catalog, QuestType.SLAY, "Hunter", {EntityType.ZOMBIE})
    player = uuid.uuid4()
    tracker.assign(player, "Hunter")

    bus.emit(EVENT_ENTITY_KILLED, entity_type=EntityType.ZOMBIE, killer_id=player)

    assert quest.progress == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"killer_id": None},
        {},
        {"killer_is_player": False},
    ],
)
def test_entity_death_without_player_killer_ignored(tracker, bus, catalog, payload) -> None:
    EntityDeathSystem(tracker, bus)
    quest = _active_quest(catalog, QuestType.SLAY, "Hunter", {EntityType.ZOMBIE})
    player = uuid.uuid4()
    tracker.assign(player, "Hunter")
    payload = dict(payload)
    if payload.get("killer_is_player") is False:
        payload["killer_id"] = player

    bus.emit(EVENT_ENTITY_KILLED, entity_type=EntityType.ZOMBIE, **payload)

    assert quest.progress == 0


def test_item_craft_advances_craft_quests(tracker, bus, catalog) -> None:
    ItemCraftSystem(tracker, bus)
    quest = _active_quest(catalog, QuestType.CRAFT, "Toolsmith", {Material.STONE_PICKAXE}, goal=1)
    player = uuid.uuid4()
    tracker.assign(player, "Toolsmith")

    bus.emit(EVENT_ITEM_CRAFTED, player_id=player, material=Material.STONE_PICKAXE)

    assert quest.completed is True


def test_events_missing_fields_are_dropped(tracker, bus, catalog) -> None:
    BlockBreakSystem(tracker, bus)
    quest = _active_quest(catalog, QuestType.MINE, "Miner", {Material.STONE})
    player = uuid.uuid4()
    tracker.assign(player, "Miner")

    bus.emit(EVENT_BLOCK_BROKEN, material=Material.STONE)
    bus.emit(EVENT_BLOCK_BROKEN, player_id=player)

    assert quest.progress == 0


def test_custom_amount_and_detach(tracker, bus, catalog) -> None:
    system = BlockBreakSystem(tracker, bus, amount=3)
    quest = _active_quest(catalog, QuestType.MINE, "Miner", {Material.STONE}, goal=10)
    player = uuid.uuid4()
    tracker.assign(player, "Miner")

    bus.emit(EVENT_BLOCK_BROKEN, player_id=player, material=Material.STONE)
    system.detach()
    bus.emit(EVENT_BLOCK_BROKEN, player_id=player, material=Material.STONE)

    assert quest.progress == 3


@pytest.mark.parametrize("amount", [0, -1])
def test_non_positive_amount_rejected(tracker, bus, amount) -> None:
    with pytest.raises(InvalidArgumentError):
        BlockBreakSystem(tracker, bus, amount=amount)
