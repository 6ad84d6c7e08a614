from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence, TypeVar, Union

import numpy as np

T = TypeVar("T")

FloatSeries = Union[Sequence[float], np.ndarray]


def float_array_to_foreign(xs: FloatSeries) -> list[float]:
    return np.asarray(xs, dtype=np.float64).tolist()


def optional(value: T | None, convert: Callable[[T], Any]) -> Any:
    """Apply ``convert`` to a supplied value; absent values stay ``None``."""
    if value is None:
        return None
    return convert(value)


def build_keyword_args(options: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Keep only the supplied options, in the order given."""
    return {name: value for name, value in options if value is not None}


def split_points(points: Sequence[Sequence[float]], dims: int) -> list[list[float]]:
    axes: list[list[float]] = [[] for _ in range(dims)]
    for point in points:
        for axis, component in zip(axes, point):
            axis.append(float(component))
    return axes
