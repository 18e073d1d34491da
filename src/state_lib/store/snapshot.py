"""Pristine copies of state for `Store(check_mutations=True)`."""

from __future__ import annotations

import copy


def snapshot[S](state: S) -> S:
    """Copy `state` all the way down, so later in-place edits can't reach it."""
    return copy.deepcopy(state)
