"""Quest definition files.

Definitions are stored as JSON::

    {
      "quests": [
        {
          "name": "Mine10Stone",
          "type": "MINE",
          "description": "Break ten stone blocks.",
          "goal": 10,
          "targets": ["STONE"],
          "active": true
        }
      ]
    }

``type`` and target names are matched case-insensitively. ``active`` is
optional and defaults to false.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable

from questing import constants
from questing.components.targets import parse_target
from questing.errors import QuestError, QuestLoadError
from questing.quests.definition import Quest, QuestType

if TYPE_CHECKING:
    from questing.quests.catalog import QuestCatalog

logger = logging.getLogger(__name__)

OnCompleteFactory = Callable[[str], Callable[[], None]]


@dataclass(frozen=True, slots=True)
class QuestSpec:
    """Parsed but not yet registered quest definition."""

    type: QuestType
    name: str
    description: str
    goal: int
    targets: tuple
    active: bool = False


def default_on_complete(name: str) -> Callable[[], None]:
    def _announce() -> None:
        logger.info("Quest '%s' reward hook fired", name)

    return _announce


def load_quest_file(path: Path) -> list[dict[str, Any]]:
    """Read the raw quest entries from ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise QuestLoadError(f"Quest file not found: {path}") from exc
    except OSError as exc:
        raise QuestLoadError(f"Unable to read quest file: {path}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuestLoadError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(payload, dict) or not isinstance(payload.get("quests"), list):
        raise QuestLoadError(f"{path} must contain a 'quests' list")
    entries = payload["quests"]
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise QuestLoadError(f"{path} quest #{index} must be an object")
    return entries


def parse_quest_entry(entry: dict[str, Any], label: str = "quest") -> QuestSpec:
    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise QuestLoadError(f"{label} is missing a name")
    label = f"quest '{name}'"
    raw_type = entry.get("type")
    if not isinstance(raw_type, str):
        raise QuestLoadError(f"{label} is missing a type")
    try:
        quest_type = QuestType[raw_type.strip().upper()]
    except KeyError as exc:
        raise QuestLoadError(f"{label} has unknown type '{raw_type}'") from exc
    raw_targets = entry.get("targets")
    if not isinstance(raw_targets, list):
        raise QuestLoadError(f"{label} targets must be a list")
    try:
        targets = tuple(parse_target(quest_type.target_type, raw) for raw in raw_targets)
    except ValueError as exc:
        raise QuestLoadError(f"{label}: {exc}") from exc
    return QuestSpec(
        type=quest_type,
        name=name,
        description=entry.get("description", ""),
        goal=entry.get("goal"),
        targets=targets,
        active=bool(entry.get("active", False)),
    )


def load_quests(
    catalog: "QuestCatalog",
    source: Path | str | None = None,
    *,
    on_complete_factory: OnCompleteFactory | None = None,
) -> list[Quest]:
    """Register every quest defined in ``source`` with ``catalog``.

    The whole file is validated before the first quest is registered, so a bad
    entry leaves the catalog untouched.
    """
    path = Path(source) if source is not None else constants.DEFAULT_QUESTS_PATH
    factory = on_complete_factory or default_on_complete
    entries = load_quest_file(path)

    specs: list[QuestSpec] = []
    seen: set[str] = set()
    for index, entry in enumerate(entries):
        spec = parse_quest_entry(entry, f"{path} quest #{index}")
        key = spec.name.lower()
        if key in seen or catalog.exists(spec.name):
            raise QuestLoadError(f"Duplicate quest name '{spec.name}' in {path}")
        seen.add(key)
        try:
            # Dry run so constructor validation fails before anything is registered.
            Quest(spec.type, spec.name, spec.description, spec.goal, spec.targets, factory(spec.name))
        except QuestError as exc:
            raise QuestLoadError(f"quest '{spec.name}': {exc}") from exc
        specs.append(spec)

    registered = [
        catalog.register(
            spec.type,
            spec.name,
            spec.description,
            spec.goal,
            spec.targets,
            factory(spec.name),
            active=spec.active,
        )
        for spec in specs
    ]
    logger.info("Loaded %s quests from %s", len(registered), path)
    return registered
