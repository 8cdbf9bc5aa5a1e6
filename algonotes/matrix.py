"""Integer matrix multiplication."""

from __future__ import annotations

from collections.abc import Sequence


class DimensionError(ValueError):
    """Raised when matrices are ragged or their shapes do not match."""


def _columns(matrix: Sequence[Sequence[int]], name: str) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise DimensionError(f"{name} matrix has rows of different lengths")
    return widths.pop() if widths else 0


def multiply(
    left: Sequence[Sequence[int]], right: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the product of two matrices given as lists of rows."""
    left_cols = _columns(left, "left")
    right_cols = _columns(right, "right")
    if left and left_cols != len(right):
        raise DimensionError(
            "cannot multiply the matrices, dimensions do not match"
        )
    columns = list(zip(*right))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        if columns
        else [0] * right_cols
        for row in left
    ]