from __future__ import annotations

import numpy as np

from typedplot.marshal import build_keyword_args, float_array_to_foreign, optional, split_points


def test_build_keyword_args_drops_absent_options_and_keeps_order() -> None:
    keywords = build_keyword_args(
        [
            ("color", "red"),
            ("linewidth", None),
            ("frameon", False),
            ("bins", 0),
            ("label", ""),
        ]
    )
    assert keywords == {"color": "red", "frameon": False, "bins": 0, "label": ""}
    assert list(keywords) == ["color", "frameon", "bins", "label"]


def test_build_keyword_args_empty_when_nothing_supplied() -> None:
    assert build_keyword_args([]) == {}
    assert build_keyword_args([("alpha", None), ("loc", None)]) == {}


def test_optional_converts_only_supplied_values() -> None:
    assert optional(None, float) is None
    assert optional(3, float) == 3.0
    assert isinstance(optional(3, float), float)


def test_float_array_to_foreign_accepts_lists_and_numpy() -> None:
    converted = float_array_to_foreign(np.asarray([1, 2, 3], dtype=np.int32))
    assert converted == [1.0, 2.0, 3.0]
    assert all(type(value) is float for value in converted)
    assert float_array_to_foreign([0.5, -1.25]) == [0.5, -1.25]
    assert float_array_to_foreign([]) == []


def test_split_points_by_axis() -> None:
    assert split_points([(1, 2), (3, 4)], 2) == [[1.0, 3.0], [2.0, 4.0]]
    assert split_points([(1, 2, 3)], 3) == [[1.0], [2.0], [3.0]]
