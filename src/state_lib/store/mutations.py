"""Detecting in-place mutation of a state object."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from deepdiff import DeepDiff, parse_path


def _normalize_diff_path(diff_path: str) -> str:
    """Convert DeepDiff path like root['data']['name'] to dot notation 'data.name'."""
    parts = parse_path(diff_path)
    return ".".join(str(p) for p in parts) or "."


def find_mutations(before: Any, after: Any) -> list[str]:
    """List the paths at which `after` differs from the snapshot `before`.

    Args:
        before: A deep copy taken before the state could have been touched
        after: The same state object, possibly mutated since

    Returns:
        Sorted dot-notation paths of every change ("." for the root),
        empty if nothing changed
    """
    diff = DeepDiff(before, after)
    paths: set[str] = set()
    for report in diff.values():
        # Reports are either {path: detail} dicts or sets of paths
        diff_paths = report.keys() if isinstance(report, Mapping) else report
        for diff_path in diff_paths:
            paths.add(_normalize_diff_path(diff_path))
    return sorted(paths)
