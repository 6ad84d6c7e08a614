"""Draw a small chart from plain numbers and write it to disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

from typedplot import pyplot
from typedplot.config import ChartKind, RenderConfig
from typedplot.options import ColorOption, LegendLoc
from typedplot.session import PlotSession, default_session

LOGGER = logging.getLogger(__name__)


def parse_values(text: str, *, option_name: str = "values") -> list[float]:
    items = [item.strip() for item in text.split(",") if item.strip()]
    if not items:
        raise ValueError(f"{option_name} must contain at least one number")
    try:
        return [float(item) for item in items]
    except ValueError as exc:
        raise ValueError(f"expected comma-separated numbers for {option_name}, got {text!r}") from exc


def render_chart(
    config: RenderConfig,
    values: Sequence[float],
    *,
    xs: Sequence[float] | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    session: PlotSession | None = None,
) -> dict[str, Any]:
    if xs is not None and len(xs) != len(values):
        raise ValueError(f"x values ({len(xs)}) and values ({len(values)}) differ in length")

    session = session or default_session()
    session.set_backend(config.backend_option())
    if config.style:
        pyplot.style_use(config.style, session=session)

    pyplot.figure(figsize=(config.width, config.height), dpi=config.dpi, session=session)
    try:
        if config.kind is ChartKind.line:
            pyplot.plot(values, xs=xs, label=label, color=color, session=session)
        elif config.kind is ChartKind.hist:
            pyplot.hist(values, label=label, color=color, session=session)
        else:
            positions = xs if xs is not None else [float(idx) for idx in range(len(values))]
            pyplot.bar(positions, values, session=session)

        if config.title:
            pyplot.title(config.title, session=session)
        if label and config.kind is not ChartKind.bar:
            pyplot.legend(loc=LegendLoc.BEST, session=session)
        pyplot.tight_layout(session=session)
        payload = pyplot.plot_data(config.image_format, session=session)
    finally:
        pyplot.close(session=session)

    config.ensure_output_parent()
    config.output_path.write_bytes(payload)
    LOGGER.debug("Wrote %d bytes to %s", len(payload), config.output_path)
    return {
        "output_path": Path(config.output_path),
        "format": config.image_format.value,
        "size_bytes": len(payload),
    }
