"""Tests for in-place mutation detection."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from state_lib.state.update import set
from state_lib.store.exceptions import StateMutationError
from state_lib.store.mutations import find_mutations
from state_lib.store.snapshot import snapshot
from state_lib.store.Store import Store

type AppState = dict[str, Any]


class CheckedStore(Store[AppState]):
    @Store.action
    @staticmethod
    def rename(state: AppState, name: str) -> AppState:
        return set(state, "name", name)

    @Store.action
    @staticmethod
    def rename_in_place(state: AppState, name: str) -> AppState:
        state["name"] = name
        return state

    @Store.action
    @staticmethod
    def add_tag_in_place(state: AppState, tag: str) -> AppState:
        state["meta"]["tags"].append(tag)
        return set(state, "touched", True)


def make_store(check_mutations: bool = True) -> CheckedStore:
    return CheckedStore(
        {"name": "Alice", "meta": {"tags": ["a"]}}, check_mutations=check_mutations
    )


class TestSnapshot:
    """Tests for snapshot()"""

    def test_snapshot_is_independent(self) -> None:
        """Changes to the state don't reach the snapshot."""
        state = {"meta": {"tags": ["a"]}}

        snap = snapshot(state)
        state["meta"]["tags"].append("b")

        assert snap == {"meta": {"tags": ["a"]}}


class TestFindMutations:
    """Tests for find_mutations()"""

    def test_unchanged_state(self) -> None:
        """Nothing changed yields no paths."""
        state = {"a": 1, "b": {"c": [1, 2]}}
        assert find_mutations(copy.deepcopy(state), state) == []

    def test_changed_value_path(self) -> None:
        """A changed nested value is reported in dot notation."""
        before = {"a": 1, "b": {"c": 2}}
        after = {"a": 1, "b": {"c": 3}}

        assert find_mutations(before, after) == ["b.c"]

    def test_added_and_removed_keys(self) -> None:
        """Added and removed keys are both reported."""
        before = {"a": 1, "b": 2}
        after = {"a": 1, "c": 3}

        assert find_mutations(before, after) == ["b", "c"]


class TestCheckMutations:
    """Tests for Store(check_mutations=True)"""

    def test_pure_reducer_passes(self) -> None:
        """Reducers that return a new state don't trip the check."""
        store = make_store()

        store.rename("Bob")

        assert store.get_state()["name"] == "Bob"

    def test_in_place_mutation_raises(self) -> None:
        """Mutating the previous state raises StateMutationError."""
        store = make_store()

        with pytest.raises(StateMutationError) as exc_info:
            store.rename_in_place("Bob")

        assert exc_info.value.action_name == "rename_in_place"
        assert exc_info.value.paths == ["name"]

    def test_nested_mutation_raises(self) -> None:
        """Mutation of a shared nested value is detected."""
        store = make_store()

        with pytest.raises(StateMutationError, match="meta.tags"):
            store.add_tag_in_place("b")

    def test_failed_action_keeps_previous_state(self) -> None:
        """When the check fails the new state is not installed."""
        store = make_store()
        before = store.get_state()

        with pytest.raises(StateMutationError):
            store.add_tag_in_place("b")

        assert store.get_state() is before
        assert "touched" not in store.get_state()

    def test_checks_disabled_by_default(self) -> None:
        """Without check_mutations, in-place reducers are not detected."""
        store = make_store(check_mutations=False)

        store.rename_in_place("Bob")

        assert store.get_state()["name"] == "Bob"
