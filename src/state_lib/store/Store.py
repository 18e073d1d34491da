from __future__ import annotations

import logging
from typing import Any, Callable

from state_lib.store.Action import Action
from state_lib.store.exceptions import StateMutationError, UnknownActionError
from state_lib.store.mutations import find_mutations
from state_lib.store.snapshot import snapshot

_logger = logging.getLogger(__name__)


class Store[S]:
    """Minimal state container holding one immutable state value.

    Exposes `get_state` and `dispatch`, so a Store can be passed anywhere a
    stateful value is accepted (see `state_lib.state.stateful.to_state`).

    Example:
        class CounterStore(Store[dict[str, int]]):
            @Store.action
            @staticmethod
            def increment(state: dict[str, int], amount: int) -> dict[str, int]:
                return set(state, "count", state["count"] + amount)

        store = CounterStore({"count": 0})
        store.increment(2)
    """

    _state: S
    _actions: dict[str, Callable[..., S]]
    _action_defs: dict[str, Action[Any, S]]
    _check_mutations: bool

    @staticmethod
    def action[T, St](handler: Callable[[St, T], St]) -> Action[T, St]:
        """Decorator to define an action on a Store subclass."""
        return Action(handler)

    def __init__(self, initial_state: S, *, check_mutations: bool = False):
        """
        Args:
            initial_state: The state the store starts with
            check_mutations: If True, every dispatch verifies that the reducer
                left the previous state untouched and raises StateMutationError
                otherwise. Costs a deep copy per dispatch.
        """
        self._state = initial_state
        self._actions = {}
        self._action_defs = {}
        self._check_mutations = check_mutations
        self._bind_actions()

    def _bind_actions(self) -> None:
        """Find all Action class attributes and bind them to this instance."""
        for name in dir(type(self)):
            if name.startswith("_"):
                continue
            attr = getattr(type(self), name)
            if isinstance(attr, Action):
                # Create bound action - captures self and attr
                def make_bound(action: Action[Any, S]) -> Callable[..., S]:
                    def bound(payload: Any = None) -> S:
                        return self.dispatch(action, payload)

                    return bound

                bound_action = make_bound(attr)
                self._action_defs[name] = attr
                self._actions[name] = bound_action
                setattr(self, name, bound_action)

    def _process_action(
        self, handler: Callable[[S, Any], S], payload: Any, name: str
    ) -> bool:
        """Run a reducer and replace the state with its result.

        Args:
            handler: The reducer (state, payload) -> new state
            payload: The payload to pass to the handler
            name: Action name, for logging and errors

        Returns:
            True if the state was replaced, False if the reducer was a no-op

        Raises:
            StateMutationError: If mutation checks are enabled and the reducer
                modified the previous state in place
        """
        previous = self._state
        previous_snapshot = snapshot(previous) if self._check_mutations else None

        new_state = handler(previous, payload)

        if previous_snapshot is not None:
            paths = find_mutations(previous_snapshot, previous)
            if paths:
                _logger.warning("Action %s mutated state at %s", name, paths)
                raise StateMutationError(name, paths)

        if new_state is previous:
            _logger.debug("Action %s produced no state change", name)
            return False

        self._state = new_state
        return True

    def dispatch(self, action: Action[Any, S] | str, payload: Any = None) -> S:
        """Run an action against the current state.

        Args:
            action: An Action, or the name of an action defined on this store
            payload: The payload passed to the action's handler

        Returns:
            The state after the action

        Raises:
            UnknownActionError: If `action` is a name this store doesn't define
        """
        if isinstance(action, str):
            try:
                action = self._action_defs[action]
            except KeyError:
                raise UnknownActionError(action) from None

        _logger.debug("Dispatching action %s", action.name)
        self._process_action(action.handler, payload, action.name)
        return self._state

    def get_actions(self, *names: str) -> dict[str, Callable[..., S]]:
        """Get bound actions by name. If no names provided, returns all actions."""
        if not names:
            return self._actions.copy()
        return {n: self._actions[n] for n in names if n in self._actions}

    def get_state(self) -> S:
        return self._state
