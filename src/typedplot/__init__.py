"""Typed wrappers for matplotlib.pyplot with enumerated plot options."""

from typedplot.image import ElementKind, ImageGrid, PixelShape
from typedplot.options import (
    Align,
    Backend,
    Color,
    HistType,
    ImageFormat,
    LegendLoc,
    Linestyle,
    Marker,
    Orientation,
    Other,
    to_foreign_value,
)
from typedplot.runtime import ForeignRuntime, PythonRuntime
from typedplot.session import ModuleHandle, PlotSession, default_session, set_backend

__all__ = [
    "Align",
    "Backend",
    "Color",
    "ElementKind",
    "ForeignRuntime",
    "HistType",
    "ImageFormat",
    "ImageGrid",
    "LegendLoc",
    "Linestyle",
    "Marker",
    "ModuleHandle",
    "Orientation",
    "Other",
    "PixelShape",
    "PlotSession",
    "PythonRuntime",
    "default_session",
    "set_backend",
    "to_foreign_value",
]
