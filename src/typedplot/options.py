from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class Other:
    """Escape hatch forwarding a raw token the enums below do not list."""

    value: Any


class Backend(str, Enum):
    DEFAULT = "default"
    AGG = "Agg"


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    WHITE = "white"
    BLACK = "black"
    YELLOW = "yellow"
    ORANGE = "orange"


class Linestyle(str, Enum):
    SOLID = "-"
    DOTTED = ":"
    DASHED = "--"
    DASHDOT = "-."


class LegendLoc(str, Enum):
    BEST = "best"
    UPPER_RIGHT = "upper right"
    UPPER_LEFT = "upper left"
    LOWER_LEFT = "lower left"
    LOWER_RIGHT = "lower right"
    RIGHT = "right"
    CENTER_LEFT = "center left"
    CENTER_RIGHT = "center right"
    LOWER_CENTER = "lower center"
    UPPER_CENTER = "upper center"
    CENTER = "center"


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class HistType(str, Enum):
    BAR = "bar"
    BARSTACKED = "barstacked"
    STEP = "step"
    STEPFILLED = "stepfilled"


class Align(str, Enum):
    CENTER = "center"
    EDGE = "edge"


class Marker(str, Enum):
    POINT = "."
    CIRCLE = "o"
    SQUARE = "s"
    TRIANGLE_UP = "^"
    TRIANGLE_DOWN = "v"
    X = "x"
    PLUS = "+"
    STAR = "*"
    DIAMOND = "D"


class ImageFormat(str, Enum):
    PNG = "png"
    JPG = "jpg"


BackendOption = Union[Backend, Other]
ColorOption = Union[Color, Other]
LinestyleOption = Union[Linestyle, Other]
LegendLocOption = Union[LegendLoc, Other]
OrientationOption = Union[Orientation, Other]
HistTypeOption = Union[HistType, Other]
AlignOption = Union[Align, Other]
MarkerOption = Union[Marker, Other]

_VOCABULARIES = (
    Backend,
    Color,
    Linestyle,
    LegendLoc,
    Orientation,
    HistType,
    Align,
    Marker,
    ImageFormat,
)


def to_foreign_value(option: Any) -> Any:
    """Return the literal token the plotting library expects for ``option``."""
    if isinstance(option, Other):
        return option.value
    if option is Backend.DEFAULT:
        return None
    if isinstance(option, _VOCABULARIES):
        return option.value
    raise TypeError(f"Unsupported plot option: {option!r}")


def parse_backend(value: str | None) -> BackendOption:
    """Map a user-facing backend name onto the backend vocabulary."""
    if value is None or value.strip() == "":
        return Backend.DEFAULT
    return parse_option(Backend, value)


def parse_option(vocabulary: type[Enum], value: str) -> Any:
    """Match ``value`` against a vocabulary's names or tokens, else wrap it in :class:`Other`."""
    text = value.strip()
    for member in vocabulary:
        if text.lower() in {member.name.lower(), str(member.value).lower()}:
            return member
    return Other(text)
