"""Copy-on-write updates for mapping state.

`set` and `assign` never modify the state they are given. They return that
same object when nothing would change, so callers can detect no-ops with
`new_state is state`.

Usage:
    from state_lib.state.update import assign, set

    state = {"muted": False, "volume": 5}
    state = set(state, "muted", True)
    state = assign(state, {"volume": 7, "muted": None})  # removes "muted"
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from state_lib.util.equality import equals


def _clone[S: Mapping[str, Any]](state: S) -> S:
    """Shallow copy that keeps dict subclasses; other mappings become flat dicts."""
    if isinstance(state, dict):
        return copy.copy(state)
    return dict(state)  # type: ignore[return-value]


def _set[S: Mapping[str, Any]](
    state: S, name: str, value: Any, copy_on_write: bool
) -> S:
    """Set `name` to `value`, skipping the write when the value is unchanged.

    Args:
        state: The state to update
        name: The property to set
        value: The new value. None removes the property.
        copy_on_write: If True, `state` is left untouched and a clone is
            returned when a write happens. If False, `state` is written in place.

    Returns:
        `state` if the value of `name` already equals `value` or
        `copy_on_write` is False; otherwise a clone of `state` with `name` set.
    """
    if value is None and name in state:
        target = _clone(state) if copy_on_write else state
        del target[name]  # type: ignore[attr-defined]
        return target

    current = state.get(name)
    if current is value or equals(current, value):
        return state

    target = _clone(state) if copy_on_write else state
    target[name] = value  # type: ignore[index]
    return target


def set[S: Mapping[str, Any]](state: S, name: str, value: Any) -> S:
    """Set a single property of a state, preventing unnecessary state changes.

    Args:
        state: The state from which a new state is constructed
        name: The property of `state` to assign `value` to
        value: The value to assign. None removes the property if present.

    Returns:
        `state` itself if its `name` property already equals `value`;
        otherwise a new state with `name` set to `value`

    Raises:
        TypeError: If `state` is not a mapping
    """
    if not isinstance(state, Mapping):
        raise TypeError(f"state must be a Mapping, got {type(state).__name__}")
    return _set(state, name, value, copy_on_write=True)


def assign[S: Mapping[str, Any]](state: S, changes: Mapping[str, Any]) -> S:
    """Set several properties of a state, preventing unnecessary state changes.

    At most one new state is allocated, however many properties change.

    Args:
        state: The state from which a new state is constructed
        changes: Map of property names to the values to set on `state`

    Returns:
        `state` itself if every property already equals its value in
        `changes`; otherwise a new state with all of `changes` applied

    Raises:
        TypeError: If `state` or `changes` is not a mapping
    """
    if not isinstance(state, Mapping):
        raise TypeError(f"state must be a Mapping, got {type(state).__name__}")
    if not isinstance(changes, Mapping):
        raise TypeError(f"changes must be a Mapping, got {type(changes).__name__}")

    result = state
    copied = False
    for name, value in changes.items():
        result = _set(result, name, value, copy_on_write=not copied)
        if result is not state:
            copied = True
    return result
