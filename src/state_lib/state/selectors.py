"""Reading values out of anything that holds state."""

from __future__ import annotations

from typing import Any

from glom import T, glom

from state_lib.state.stateful import to_state


def select(stateful: Any, path: str, default: Any = None) -> Any:
    """Read the value at `path` from the state held by `stateful`.

    Args:
        stateful: Anything accepted by `to_state`
        path: Dot-notation glom path like "conference.room", or "." for the
            whole state
        default: Returned when `path` does not exist in the state

    Returns:
        The selected value, or `default`
    """
    state = to_state(stateful)
    # Use T for root access when path is "."
    spec = T if path == "." else path
    return glom(state, spec, default=default)
