from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from typedplot.config import ChartKind, RenderConfig, format_for_path, normalize_format_value
from typedplot.options import Backend, ImageFormat, Other


def test_render_config_defaults(tmp_path: Path) -> None:
    config = RenderConfig(output_path=tmp_path / "chart.png")

    assert config.kind is ChartKind.line
    assert config.image_format is ImageFormat.PNG
    assert config.backend_option() is Backend.AGG
    assert config.as_summary()["format"] == "png"


def test_render_config_rejects_directory_output(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Output path is a directory"):
        RenderConfig(output_path=tmp_path)


def test_render_config_rejects_non_positive_sizes(tmp_path: Path) -> None:
    with pytest.raises(ValidationError, match="Value must be > 0"):
        RenderConfig(output_path=tmp_path / "chart.png", dpi=0)


def test_render_config_backend_option_accepts_default_and_raw_names(tmp_path: Path) -> None:
    target = tmp_path / "chart.png"
    assert RenderConfig(output_path=target, backend="default").backend_option() is Backend.DEFAULT
    assert RenderConfig(output_path=target, backend="svg").backend_option() == Other("svg")


def test_ensure_output_parent_creates_directories(tmp_path: Path) -> None:
    config = RenderConfig(output_path=tmp_path / "nested" / "out" / "chart.png")
    config.ensure_output_parent()
    assert (tmp_path / "nested" / "out").is_dir()


def test_normalize_format_value() -> None:
    assert normalize_format_value("PNG") is ImageFormat.PNG
    assert normalize_format_value(".jpg") is ImageFormat.JPG
    assert normalize_format_value("jpeg") is ImageFormat.JPG
    assert normalize_format_value(ImageFormat.JPG) is ImageFormat.JPG
    with pytest.raises(ValueError, match="Expected one of: png, jpg"):
        normalize_format_value("gif")


def test_format_for_path_uses_suffix() -> None:
    assert format_for_path("out/chart.jpg") is ImageFormat.JPG
    assert format_for_path("out/chart") is ImageFormat.PNG
