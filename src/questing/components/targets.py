"""World-object kinds that quests can target.

The host runtime owns the authoritative enumerations; these mirror the subset
of names quest definitions are expected to reference.
"""
from __future__ import annotations

from enum import Enum, auto
from typing import Type, TypeVar

TargetEnum = TypeVar("TargetEnum", bound=Enum)


class Material(Enum):
    """Block and item materials."""
    STONE = auto()
    COBBLESTONE = auto()
    DIRT = auto()
    GRASS_BLOCK = auto()
    SAND = auto()
    GRAVEL = auto()
    OAK_LOG = auto()
    OAK_PLANKS = auto()
    BIRCH_LOG = auto()
    SPRUCE_LOG = auto()
    COAL_ORE = auto()
    IRON_ORE = auto()
    GOLD_ORE = auto()
    DIAMOND_ORE = auto()
    OBSIDIAN = auto()
    GLASS = auto()
    TORCH = auto()
    STICK = auto()
    CRAFTING_TABLE = auto()
    FURNACE = auto()
    CHEST = auto()
    BREAD = auto()
    WOODEN_PICKAXE = auto()
    STONE_PICKAXE = auto()
    IRON_PICKAXE = auto()
    DIAMOND_PICKAXE = auto()
    IRON_SWORD = auto()


class EntityType(Enum):
    """Kinds of living entities."""
    PLAYER = auto()
    ZOMBIE = auto()
    SKELETON = auto()
    CREEPER = auto()
    SPIDER = auto()
    ENDERMAN = auto()
    WITCH = auto()
    SLIME = auto()
    BLAZE = auto()
    COW = auto()
    PIG = auto()
    SHEEP = auto()
    CHICKEN = auto()
    WOLF = auto()


def parse_target(target_type: Type[TargetEnum], raw: object) -> TargetEnum:
    """Resolve ``raw`` (a member or a member name) to a ``target_type`` member.

    Names are matched case-insensitively; spaces and dashes count as underscores.
    Raises ``ValueError`` for unknown names.
    """
    if isinstance(raw, target_type):
        return raw
    if not isinstance(raw, str):
        raise ValueError(f"Cannot interpret {raw!r} as {target_type.__name__}")
    key = raw.strip().upper().replace(" ", "_").replace("-", "_")
    try:
        return target_type[key]
    except KeyError as exc:
        raise ValueError(f"Unknown {target_type.__name__} '{raw}'") from exc
