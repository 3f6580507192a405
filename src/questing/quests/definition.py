from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Callable, FrozenSet, Generic, Iterable, Type, TypeVar

from questing.components.targets import EntityType, Material
from questing.errors import IllegalStateError, InvalidArgumentError

logger = logging.getLogger(__name__)

TargetT = TypeVar("TargetT", Material, EntityType)


class QuestType(Enum):
    """Category of activity a quest counts, with the kind of target it tracks."""
    SLAY = "slay"
    PLACE = "place"
    MINE = "mine"
    CRAFT = "craft"

    @property
    def target_type(self) -> Type[Enum]:
        if self is QuestType.SLAY:
            return EntityType
        return Material


class QuestState(Enum):
    INACTIVE = auto()
    ACTIVE = auto()
    COMPLETED = auto()


def require_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an integer, got {value!r}")
    return value


class Quest(Generic[TargetT]):
    """A trackable objective: reach ``goal`` occurrences of any of ``targets``.

    Quests are identified by name, compared case-insensitively, so two quests
    with the same name are equal and hash alike regardless of their progress.

    Progress only moves through :meth:`set_progress`, which enforces:
      - progress is never negative;
      - once ``progress`` reaches ``goal`` the quest completes, deactivates,
        fires ``on_complete`` exactly once and freezes its progress.
    """

    __slots__ = (
        "_name",
        "description",
        "_type",
        "_goal",
        "_targets",
        "_on_complete",
        "_progress",
        "_active",
        "_completed",
    )

    def __init__(
        self,
        type: QuestType,
        name: str,
        description: str,
        goal: int,
        targets: Iterable[TargetT],
        on_complete: Callable[[], None],
        *,
        active: bool = False,
    ) -> None:
        if name is None or type is None or description is None:
            raise InvalidArgumentError("Quest name, type and description are required")
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError(f"Quest name must be a non-empty string, got {name!r}")
        if not isinstance(type, QuestType):
            raise InvalidArgumentError(f"Unknown quest type {type!r}")
        if not isinstance(description, str):
            raise InvalidArgumentError("Quest description must be a string")
        goal = require_int(goal, "Quest goal")
        if goal <= 0:
            raise InvalidArgumentError("Quest goal cannot be less than or equal to 0")
        if on_complete is None or not callable(on_complete):
            raise InvalidArgumentError("Quest on_complete must be a callable")
        self._name = name
        self.description = description
        self._type = type
        self._goal = goal
        self._targets: FrozenSet[TargetT] = self._validate_targets(type, targets)
        self._on_complete = on_complete
        self._progress = 0
        self._active = bool(active)
        self._completed = False

    @staticmethod
    def _validate_targets(type: QuestType, targets: Iterable[TargetT]) -> FrozenSet[TargetT]:
        if targets is None or isinstance(targets, (str, bytes)):
            raise InvalidArgumentError("Quest targets must be a collection of target values")
        try:
            frozen = frozenset(targets)
        except TypeError as exc:
            raise InvalidArgumentError("Quest targets must be a collection of target values") from exc
        if not frozen:
            raise InvalidArgumentError("Quest targets cannot be empty")
        expected = type.target_type
        for target in frozen:
            if not isinstance(target, expected):
                raise InvalidArgumentError(
                    f"{type.name} quests target {expected.__name__} values, got {target!r}"
                )
        return frozen

    # Read-only template fields -------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def type(self) -> QuestType:
        return self._type

    @property
    def goal(self) -> int:
        return self._goal

    @property
    def targets(self) -> FrozenSet[TargetT]:
        return self._targets

    @property
    def on_complete(self) -> Callable[[], None]:
        return self._on_complete

    # Progress state ------------------------------------------------------

    @property
    def progress(self) -> int:
        return self._progress

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def active(self) -> bool:
        return self._active

    @active.setter
    def active(self, value: bool) -> None:
        self._active = bool(value)

    def activate(self) -> None:
        self._active = True

    def deactivate(self) -> None:
        self._active = False

    @property
    def state(self) -> QuestState:
        if self._completed:
            return QuestState.COMPLETED
        if self._active:
            return QuestState.ACTIVE
        return QuestState.INACTIVE

    def has_target(self, target: object) -> bool:
        return target in self._targets

    def check_progress(self, value: int) -> int:
        """Raise the error ``set_progress(value)`` would raise, without changing anything."""
        value = require_int(value, "Progress")
        if value < 0:
            raise InvalidArgumentError("Progress cannot be less than 0")
        if self._completed:
            raise IllegalStateError(f"Quest '{self._name}' is already completed")
        return value

    def set_progress(self, value: int) -> bool:
        """Set progress to ``value``; return True if this call completed the quest."""
        value = self.check_progress(value)
        if value >= self._goal:
            self._progress = self._goal
            self._completed = True
            self._active = False
            logger.info("Quest '%s' completed", self._name)
            self._on_complete()
            return True
        self._progress = value
        return False

    def add_progress(self, amount: int) -> bool:
        amount = require_int(amount, "Progress amount")
        return self.set_progress(self._progress + amount)

    def fresh_copy(self) -> "Quest[TargetT]":
        """Same template, untouched progress. The activation flag is carried over."""
        return Quest(
            self._type,
            self._name,
            self.description,
            self._goal,
            self._targets,
            self._on_complete,
            active=self._active and not self._completed,
        )

    # Identity ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quest):
            return NotImplemented
        return other._name.lower() == self._name.lower()

    def __hash__(self) -> int:
        return hash(self._name.lower())

    def __repr__(self) -> str:
        return (
            f"Quest(name={self._name!r}, type={self._type.name}, "
            f"progress={self._progress}/{self._goal}, state={self.state.name})"
        )
