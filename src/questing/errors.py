"""Exceptions raised by the quest core."""


class QuestError(Exception):
    """Base exception for quest bookkeeping."""


class InvalidArgumentError(QuestError, ValueError):
    """Raised when a required argument is absent or out of range."""


class DuplicateNameError(QuestError, ValueError):
    """Raised when a quest name is already registered."""


class QuestNotFoundError(QuestError, KeyError):
    """Raised when a quest name does not resolve to a registered quest."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message otherwise.
        return str(self.args[0]) if self.args else ""


class IllegalStateError(QuestError, RuntimeError):
    """Raised when a completed quest's progress is mutated."""


class QuestLoadError(QuestError):
    """Raised when quest definition files are missing or invalid."""
