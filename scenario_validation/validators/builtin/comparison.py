"""Loose value comparison shared by the built-in validators.

Form input usually arrives as strings, so non-strict comparisons treat
``"1"``, ``1`` and ``True`` as equal.
"""

from typing import Any


def loose_equals(left: Any, right: Any) -> bool:
    """Compare values directly, then by string form (bools as 0/1)."""
    if isinstance(left, bool):
        left = int(left)
    if isinstance(right, bool):
        right = int(right)
    return left == right or str(left) == str(right)


def strict_equals(left: Any, right: Any) -> bool:
    """Compare values requiring identical types."""
    return type(left) is type(right) and left == right


def values_equal(left: Any, right: Any, strict: bool) -> bool:
    return strict_equals(left, right) if strict else loose_equals(left, right)
