"""Deep equality for state values.

Wraps DeepDiff so the rest of the library depends on a single predicate.
To swap the comparison mechanism, modify the `equals()` function body.
"""

from __future__ import annotations

from typing import Any

from deepdiff import DeepDiff
from deepdiff.model import DiffLevel
from deepdiff.operator import BaseOperator


class _CallableIdentityOperator(BaseOperator):
    """Compare callables anywhere in the structure by identity.

    DeepDiff otherwise compares functions by their (usually empty) attributes
    and reports two different functions as equal.
    """

    def match(self, level: DiffLevel) -> bool:
        return callable(level.t1) or callable(level.t2)

    def give_up_diffing(self, level: DiffLevel, diff_instance: DeepDiff) -> bool:
        if level.t1 is not level.t2:
            diff_instance.custom_report_result("callables_differ", level)
        return True


_OPERATORS = [_CallableIdentityOperator()]


def equals(a: Any, b: Any) -> bool:
    """Determine whether two values are equal according to deep comparison.

    Nested dicts and lists are compared structurally: same keys with equal
    values, same items in the same order. Values of different types are never
    equal, so `1` and `"1"` differ. Callables compare by identity at any depth.
    NaN equals NaN.

    Args:
        a: The value to compare to `b`
        b: The value to compare to `a`

    Returns:
        True if `a` equals `b`, False otherwise
    """
    if a is b:
        return True
    if callable(a) or callable(b):
        return False
    return not DeepDiff(
        a, b, ignore_nan_inequality=True, custom_operators=_OPERATORS
    )
