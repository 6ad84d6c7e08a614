from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from typedplot.options import BackendOption, ImageFormat, parse_backend


class ChartKind(str, Enum):
    line = "line"
    hist = "hist"
    bar = "bar"


class RenderConfig(BaseModel):
    output_path: Path = Field(description="Output image file path")
    kind: ChartKind = ChartKind.line
    image_format: ImageFormat = Field(default=ImageFormat.PNG, description="Encoded image format")
    backend: str = Field(default="Agg", description="Plotting backend name or 'default'")
    style: str | None = Field(default=None, description="Optional style sheet name")
    width: float = Field(default=6.4, description="Figure width in inches")
    height: float = Field(default=4.8, description="Figure height in inches")
    dpi: float = Field(default=100.0, description="Figure resolution")
    title: str | None = None

    @field_validator("output_path")
    @classmethod
    def validate_output_path(cls, value: Path) -> Path:
        if value.exists() and value.is_dir():
            raise ValueError(f"Output path is a directory: {value}")
        if value.parent.exists() and not value.parent.is_dir():
            raise ValueError(f"Output parent is not a directory: {value.parent}")
        return value

    @field_validator("width", "height", "dpi")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError(f"Value must be > 0, got {value}")
        return value

    def ensure_output_parent(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def backend_option(self) -> BackendOption:
        return parse_backend(self.backend)

    def as_summary(self) -> dict[str, str]:
        return {
            "output_path": str(self.output_path),
            "kind": self.kind.value,
            "format": self.image_format.value,
            "backend": self.backend,
            "style": self.style or "",
        }


def normalize_format_value(fmt: Any) -> ImageFormat:
    if isinstance(fmt, ImageFormat):
        return fmt
    value = str(fmt.value) if hasattr(fmt, "value") else str(fmt)
    value = value.strip().lower().lstrip(".")
    if value == "jpeg":
        value = ImageFormat.JPG.value
    valid_values = {member.value for member in ImageFormat}
    if value not in valid_values:
        valid = ", ".join(member.value for member in ImageFormat)
        raise ValueError(f"Unsupported image format '{value}'. Expected one of: {valid}")
    return ImageFormat(value)


def format_for_path(path: str | Path) -> ImageFormat:
    return normalize_format_value(Path(path).suffix or ImageFormat.PNG.value)
