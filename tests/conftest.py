import sys, os

# Ensure src and the repo root are on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

import pytest
from esper import World

from questing.components.targets import EntityType, Material
from questing.events.bus import EventBus
from questing.quests.catalog import QuestCatalog
from questing.quests.definition import QuestType
from questing.systems.player_quest_tracker import PlayerQuestTracker

from tests.helpers import CompletionCounter


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def catalog():
    return QuestCatalog()


@pytest.fixture
def tracker(catalog, bus):
    return PlayerQuestTracker(World(), catalog, event_bus=bus)


@pytest.fixture
def stone_quest(catalog):
    hook = CompletionCounter()
    quest = catalog.register(
        QuestType.MINE, "Mine10Stone", "Break ten stone blocks.", 10, {Material.STONE}, hook
    )
    return quest, hook


@pytest.fixture
def zombie_quest(catalog):
    hook = CompletionCounter()
    quest = catalog.register(
        QuestType.SLAY, "ZombieSlayer", "Slay three zombies.", 3, [EntityType.ZOMBIE], hook
    )
    return quest, hook
