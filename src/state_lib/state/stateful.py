"""Normalizing the different things that hold state into the state itself.

Code that needs the state may be handed the state directly, a zero-argument
accessor such as `store.get_state`, or a store-like container. `to_state`
accepts any of these.

The three cases are modelled as a closed variant:

- `DirectState(state)`: the value is the state
- `Accessor(fn)`: calling `fn()` returns the state
- `Container(container)`: `container.get_state()` returns the state

`as_stateful` classifies raw inputs into that variant.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol


class StateContainer(Protocol):
    """Protocol for store-like objects that own a state."""

    def get_state(self) -> Any: ...

    def dispatch(self, action: Any, payload: Any = None) -> Any: ...


@dataclass(frozen=True)
class DirectState:
    state: Any


@dataclass(frozen=True)
class Accessor:
    fn: Callable[[], Any]


@dataclass(frozen=True)
class Container:
    container: StateContainer


type Stateful = DirectState | Accessor | Container


def _is_container(obj: Any) -> bool:
    return callable(getattr(obj, "get_state", None)) and callable(
        getattr(obj, "dispatch", None)
    )


def as_stateful(obj: Any) -> Stateful:
    """Classify a raw state-holding value.

    Args:
        obj: A state, a zero-argument accessor, or a container with
            `get_state` and `dispatch` methods. Tagged values are returned as is.

    Returns:
        The matching `Stateful` case
    """
    match obj:
        case DirectState() | Accessor() | Container():
            return obj
        case None:
            return DirectState(None)
        case _ if callable(obj):
            return Accessor(obj)
        case _ if _is_container(obj):
            return Container(obj)
        case _:
            return DirectState(obj)


def to_state(stateful: Any) -> Any:
    """Return the state held by `stateful`.

    Args:
        stateful: A `Stateful` case, or any raw value accepted by `as_stateful`
            (e.g. a Store, its `get_state` method, or the state itself)

    Returns:
        The state
    """
    match as_stateful(stateful):
        case Accessor(fn=fn):
            return fn()
        case Container(container=container):
            return container.get_state()
        case DirectState(state=state):
            return state
