"""Exceptions raised by the Store."""

from __future__ import annotations


class StateLibError(Exception):
    """Base exception for all state_lib errors."""


class UnknownActionError(StateLibError, KeyError):
    """An action name was dispatched that the store does not define."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown action '{self.name}'"


class StateMutationError(StateLibError, RuntimeError):
    """A reducer modified the previous state in place instead of replacing it."""

    def __init__(self, action_name: str, paths: list[str]) -> None:
        self.action_name = action_name
        self.paths = paths
        super().__init__(
            f"Action '{action_name}' mutated the previous state at: {', '.join(paths)}"
        )
