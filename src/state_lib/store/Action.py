from __future__ import annotations

from typing import Any, Callable


class Action[T, S]:
    """An action that can be defined as a class attribute on a Store subclass.

    T: The payload type
    S: The state type

    The handler is a reducer: it receives the current state and the payload and
    returns the next state. Returning the very same state object means the
    action was a no-op. Handlers should build the next state with
    `state_lib.state.update.set`/`assign` rather than mutating the current one.
    """

    name: str

    def __init__(self, handler: Callable[[S, T], S]):
        self.handler = handler
        self.name = getattr(handler, "__name__", type(self).__name__)

    def __set_name__(self, owner: type[Any], name: str) -> None:
        self.name = name

    def __call__(self, payload: T) -> S:
        # This is only called if accessed on the class directly (not via instance)
        raise RuntimeError(
            "Action must be accessed via a Store instance, not the class. "
            "Use store.action_name() instead of StoreClass.action_name()"
        )
