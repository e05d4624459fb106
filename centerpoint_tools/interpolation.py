"""Key validation and zero-order-hold interpolation over sorted keys."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_OVERLAP_THRESHOLD = 1e-3
_QUERY_RANGE_EPSILON = 1e-3


def is_increasing(x: Sequence[float]) -> bool:
    """Return True if every element is strictly greater than the one before."""
    if not x:
        raise ValueError("Points is empty.")
    return all(a < b for a, b in zip(x, x[1:]))


def is_not_decreasing(x: Sequence[float]) -> bool:
    """Return True if no element is smaller than the one before."""
    if not x:
        raise ValueError("Points is empty.")
    return all(a <= b for a, b in zip(x, x[1:]))


def validate_keys(base_keys: Sequence[float], query_keys: Sequence[float]) -> list[float]:
    """Check keys for interpolation and return query keys clamped to the base range."""
    if not base_keys or not query_keys:
        raise ValueError("Points is empty.")
    if len(base_keys) < 2:
        raise ValueError(
            f"The size of points is less than 2. base_keys.size() = {len(base_keys)}"
        )
    if not is_increasing(base_keys) or not is_not_decreasing(query_keys):
        raise ValueError("Either base_keys or query_keys is not sorted.")
    if (
        query_keys[0] < base_keys[0] - _QUERY_RANGE_EPSILON
        or base_keys[-1] + _QUERY_RANGE_EPSILON < query_keys[-1]
    ):
        raise ValueError("query_keys is out of base_keys")

    # Rounding may leave a query key slightly outside the base range; crop it.
    validated = list(query_keys)
    validated[0] = max(validated[0], base_keys[0])
    validated[-1] = min(validated[-1], base_keys[-1])
    return validated


def validate_keys_and_values(base_keys: Sequence[float], base_values: Sequence[object]) -> None:
    """Raise ValueError unless keys and values are non-trivial and of equal length."""
    if not base_keys or not base_values:
        raise ValueError("Points is empty.")
    if len(base_keys) < 2 or len(base_values) < 2:
        raise ValueError(
            "The size of points is less than 2. "
            f"base_keys.size() = {len(base_keys)}, base_values.size() = {len(base_values)}"
        )
    if len(base_keys) != len(base_values):
        raise ValueError("The size of base_keys and base_values are not the same.")


def calc_closest_segment_indices(
    base_keys: Sequence[float],
    query_keys: Sequence[float],
    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
) -> list[int]:
    """Return, for each query key, the index of the base segment it falls in."""
    validated = validate_keys(base_keys, query_keys)

    last = len(base_keys) - 1
    indices: list[int] = []
    closest = 0
    for query in validated:
        if base_keys[-1] - overlap_threshold < query:
            closest = last
        else:
            for j in range(last, closest, -1):
                if base_keys[j - 1] - overlap_threshold < query < base_keys[j]:
                    closest = j - 1
                    break
        indices.append(closest)
    return indices


def zero_order_hold_by_indices(
    base_keys: Sequence[float],
    base_values: Sequence[T],
    closest_segment_indices: Sequence[int],
) -> list[T]:
    """Pick the base value at each of the given segment indices."""
    validate_keys_and_values(base_keys, base_values)
    return [base_values[i] for i in closest_segment_indices]


def zero_order_hold(
    base_keys: Sequence[float],
    base_values: Sequence[T],
    query_keys: Sequence[float],
    overlap_threshold: float = DEFAULT_OVERLAP_THRESHOLD,
) -> list[T]:
    """Hold each base value until the next base key, sampled at the query keys."""
    return zero_order_hold_by_indices(
        base_keys,
        base_values,
        calc_closest_segment_indices(base_keys, query_keys, overlap_threshold),
    )