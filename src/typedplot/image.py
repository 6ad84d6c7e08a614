from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

import numpy as np


class ElementKind(str, Enum):
    INT = "int"
    FLOAT = "float"


class PixelShape(str, Enum):
    SCALAR = "scalar"
    RGB = "rgb"
    RGBA = "rgba"


_CHANNELS_TO_SHAPE = {3: PixelShape.RGB, 4: PixelShape.RGBA}


@dataclass(frozen=True)
class ImageGrid:
    """Row-major pixel grid handed to ``imshow``.

    ``kind`` picks the primitive conversion applied to every component and
    ``shape`` says whether a pixel is a scalar intensity or an RGB/RGBA tuple.
    """

    rows: Sequence[Sequence[Any]]
    kind: ElementKind
    shape: PixelShape

    @classmethod
    def scalar(cls, kind: ElementKind, rows: Sequence[Sequence[Any]]) -> "ImageGrid":
        return cls(rows=rows, kind=kind, shape=PixelShape.SCALAR)

    @classmethod
    def rgb(cls, kind: ElementKind, rows: Sequence[Sequence[Any]]) -> "ImageGrid":
        return cls(rows=rows, kind=kind, shape=PixelShape.RGB)

    @classmethod
    def rgba(cls, kind: ElementKind, rows: Sequence[Sequence[Any]]) -> "ImageGrid":
        return cls(rows=rows, kind=kind, shape=PixelShape.RGBA)

    @classmethod
    def from_array(cls, array: np.ndarray) -> "ImageGrid":
        data = np.asarray(array)
        if np.issubdtype(data.dtype, np.integer) or data.dtype == np.bool_:
            kind = ElementKind.INT
        elif np.issubdtype(data.dtype, np.floating):
            kind = ElementKind.FLOAT
        else:
            raise ValueError(f"Unsupported image dtype: {data.dtype}")

        if data.ndim == 2:
            return cls(rows=data.tolist(), kind=kind, shape=PixelShape.SCALAR)
        if data.ndim == 3 and data.shape[2] in _CHANNELS_TO_SHAPE:
            rows = [[tuple(pixel) for pixel in row] for row in data.tolist()]
            return cls(rows=rows, kind=kind, shape=_CHANNELS_TO_SHAPE[data.shape[2]])
        raise ValueError(
            f"Image array must be (H, W), (H, W, 3) or (H, W, 4); got shape {data.shape}"
        )

    def to_foreign(self) -> list[list[Any]]:
        convert: Callable[[Any], Any] = int if self.kind is ElementKind.INT else float
        if self.shape is PixelShape.SCALAR:
            return [[convert(value) for value in row] for row in self.rows]
        return [[tuple(convert(c) for c in pixel) for pixel in row] for row in self.rows]
