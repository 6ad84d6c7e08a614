"""Typed wrappers around the ``matplotlib.pyplot`` calls typedplot supports.

Every function resolves the module handle from ``session`` (or the process
default session), converts its typed arguments and forwards them to the pyplot
function of the same name. Options left as ``None`` are not sent at all, so the
library's own defaults apply. Errors raised by the plotting library propagate
unchanged.
"""

from __future__ import annotations

from typing import Sequence

from typedplot.image import ImageGrid
from typedplot.marshal import (
    FloatSeries,
    build_keyword_args,
    float_array_to_foreign,
    optional,
    split_points,
)
from typedplot.options import (
    AlignOption,
    ColorOption,
    HistTypeOption,
    ImageFormat,
    LegendLocOption,
    LinestyleOption,
    MarkerOption,
    OrientationOption,
    to_foreign_value,
)
from typedplot.session import ModuleHandle, PlotSession, default_session


def _handle(session: PlotSession | None) -> ModuleHandle:
    return (session or default_session()).get_or_create_default()


def savefig(filename: str, *, session: PlotSession | None = None) -> None:
    _handle(session).call("savefig", (str(filename),))


def plot_data(fmt: ImageFormat = ImageFormat.PNG, *, session: PlotSession | None = None) -> bytes:
    """Render the current figure and return the encoded image bytes."""
    handle = _handle(session)
    runtime = handle.runtime
    io_module = runtime.import_module("io")
    buffer = runtime.call(io_module, "BytesIO")
    handle.call("savefig", (buffer,), {"format": to_foreign_value(ImageFormat(fmt))})
    return bytes(runtime.call(buffer, "getvalue"))


def show(*, session: PlotSession | None = None) -> None:
    _handle(session).call("show")


def figure(
    *,
    num: int | str | None = None,
    figsize: tuple[float, float] | None = None,
    dpi: float | None = None,
    facecolor: ColorOption | None = None,
    edgecolor: ColorOption | None = None,
    frameon: bool | None = None,
    clear: bool | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args(
        [
            ("num", num),
            ("figsize", optional(figsize, lambda size: (float(size[0]), float(size[1])))),
            ("dpi", optional(dpi, float)),
            ("facecolor", optional(facecolor, to_foreign_value)),
            ("edgecolor", optional(edgecolor, to_foreign_value)),
            ("frameon", optional(frameon, bool)),
            ("clear", optional(clear, bool)),
        ]
    )
    _handle(session).call("figure", (), keywords)


def style_available(*, session: PlotSession | None = None) -> list[str]:
    return [str(name) for name in _handle(session).get("style.available")]


def style_use(name: str, *, session: PlotSession | None = None) -> None:
    _handle(session).call("style.use", (name,))


def _line_keywords(
    *,
    label: str | None,
    color: ColorOption | None,
    linewidth: float | None,
    linestyle: LinestyleOption | None,
) -> dict:
    return build_keyword_args(
        [
            ("color", optional(color, to_foreign_value)),
            ("linewidth", optional(linewidth, float)),
            ("linestyle", optional(linestyle, to_foreign_value)),
            ("label", optional(label, str)),
        ]
    )


def _call_line_function(
    func_name: str,
    ys: FloatSeries,
    *,
    xs: FloatSeries | None,
    label: str | None,
    color: ColorOption | None,
    linewidth: float | None,
    linestyle: LinestyleOption | None,
    session: PlotSession | None,
) -> None:
    if xs is not None:
        args = (float_array_to_foreign(xs), float_array_to_foreign(ys))
    else:
        args = (float_array_to_foreign(ys),)
    keywords = _line_keywords(label=label, color=color, linewidth=linewidth, linestyle=linestyle)
    _handle(session).call(func_name, args, keywords)


def plot(
    ys: FloatSeries,
    *,
    xs: FloatSeries | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    linewidth: float | None = None,
    linestyle: LinestyleOption | None = None,
    session: PlotSession | None = None,
) -> None:
    _call_line_function(
        "plot",
        ys,
        xs=xs,
        label=label,
        color=color,
        linewidth=linewidth,
        linestyle=linestyle,
        session=session,
    )


def semilogy(
    ys: FloatSeries,
    *,
    xs: FloatSeries | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    linewidth: float | None = None,
    linestyle: LinestyleOption | None = None,
    session: PlotSession | None = None,
) -> None:
    _call_line_function(
        "semilogy",
        ys,
        xs=xs,
        label=label,
        color=color,
        linewidth=linewidth,
        linestyle=linestyle,
        session=session,
    )


def semilogx(
    ys: FloatSeries,
    *,
    xs: FloatSeries | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    linewidth: float | None = None,
    linestyle: LinestyleOption | None = None,
    session: PlotSession | None = None,
) -> None:
    _call_line_function(
        "semilogx",
        ys,
        xs=xs,
        label=label,
        color=color,
        linewidth=linewidth,
        linestyle=linestyle,
        session=session,
    )


def loglog(
    ys: FloatSeries,
    *,
    xs: FloatSeries | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    linewidth: float | None = None,
    linestyle: LinestyleOption | None = None,
    session: PlotSession | None = None,
) -> None:
    _call_line_function(
        "loglog",
        ys,
        xs=xs,
        label=label,
        color=color,
        linewidth=linewidth,
        linestyle=linestyle,
        session=session,
    )


def fill_between(
    xs: FloatSeries,
    ys1: FloatSeries,
    ys2: FloatSeries,
    *,
    color: ColorOption | None = None,
    alpha: float | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args(
        [
            ("color", optional(color, to_foreign_value)),
            ("alpha", optional(alpha, float)),
        ]
    )
    args = tuple(float_array_to_foreign(series) for series in (xs, ys1, ys2))
    _handle(session).call("fill_between", args, keywords)


def hist(
    values: FloatSeries,
    *,
    extra_series: Sequence[FloatSeries] | None = None,
    label: str | None = None,
    color: ColorOption | None = None,
    bins: int | None = None,
    weights: FloatSeries | None = None,
    orientation: OrientationOption | None = None,
    histtype: HistTypeOption | None = None,
    session: PlotSession | None = None,
) -> None:
    """Histogram of ``values``; ``extra_series`` adds datasets drawn side by side."""
    keywords = build_keyword_args(
        [
            ("color", optional(color, to_foreign_value)),
            ("label", optional(label, str)),
            ("bins", optional(bins, int)),
            ("weights", optional(weights, float_array_to_foreign)),
            ("orientation", optional(orientation, to_foreign_value)),
            ("histtype", optional(histtype, to_foreign_value)),
        ]
    )
    if extra_series is not None:
        datasets = [values, *extra_series]
        args = ([float_array_to_foreign(series) for series in datasets],)
    else:
        args = (float_array_to_foreign(values),)
    _handle(session).call("hist", args, keywords)


def _scatter_keywords(
    *,
    s: float | None,
    c: ColorOption | None,
    marker: MarkerOption | None,
    alpha: float | None,
    linewidths: float | None,
) -> dict:
    return build_keyword_args(
        [
            ("c", optional(c, to_foreign_value)),
            ("s", optional(s, float)),
            ("marker", optional(marker, to_foreign_value)),
            ("alpha", optional(alpha, float)),
            ("linewidths", optional(linewidths, float)),
        ]
    )


def scatter(
    points: Sequence[tuple[float, float]],
    *,
    s: float | None = None,
    c: ColorOption | None = None,
    marker: MarkerOption | None = None,
    alpha: float | None = None,
    linewidths: float | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = _scatter_keywords(s=s, c=c, marker=marker, alpha=alpha, linewidths=linewidths)
    xs, ys = split_points(points, 2)
    _handle(session).call("scatter", (xs, ys), keywords)


def scatter_3d(
    points: Sequence[tuple[float, float, float]],
    *,
    s: float | None = None,
    c: ColorOption | None = None,
    marker: MarkerOption | None = None,
    alpha: float | None = None,
    linewidths: float | None = None,
    session: PlotSession | None = None,
) -> None:
    """Scatter 3-D points on a 3-D axes of the current figure."""
    handle = _handle(session)
    keywords = _scatter_keywords(s=s, c=c, marker=marker, alpha=alpha, linewidths=linewidths)
    xs, ys, zs = split_points(points, 3)
    # pyplot.scatter reads a third positional argument as marker sizes.
    axes = handle.call("subplot", (), {"projection": "3d"})
    handle.runtime.call(axes, "scatter", (xs, ys, zs), keywords)


def bar(
    xs: FloatSeries,
    heights: FloatSeries,
    *,
    width: float | None = None,
    bottom: float | None = None,
    align: AlignOption | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args(
        [
            ("width", optional(width, float)),
            ("bottom", optional(bottom, float)),
            ("align", optional(align, to_foreign_value)),
        ]
    )
    args = (float_array_to_foreign(xs), float_array_to_foreign(heights))
    _handle(session).call("bar", args, keywords)


def stairs(
    values: FloatSeries,
    *,
    edges: FloatSeries | None = None,
    orientation: OrientationOption | None = None,
    baseline: float | None = None,
    fill: bool | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args(
        [
            ("edges", optional(edges, float_array_to_foreign)),
            ("orientation", optional(orientation, to_foreign_value)),
            ("baseline", optional(baseline, float)),
            ("fill", optional(fill, bool)),
        ]
    )
    _handle(session).call("stairs", (float_array_to_foreign(values),), keywords)


def imshow(
    data: ImageGrid,
    *,
    cmap: str | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args([("cmap", optional(cmap, str))])
    _handle(session).call("imshow", (data.to_foreign(),), keywords)


def legend(
    *,
    labels: Sequence[str] | None = None,
    loc: LegendLocOption | None = None,
    session: PlotSession | None = None,
) -> None:
    keywords = build_keyword_args(
        [
            ("labels", optional(labels, lambda items: [str(item) for item in items])),
            ("loc", optional(loc, to_foreign_value)),
        ]
    )
    _handle(session).call("legend", (), keywords)


def title(label: str, *, session: PlotSession | None = None) -> None:
    _handle(session).call("title", (str(label),))


def xlabel(label: str, *, session: PlotSession | None = None) -> None:
    _handle(session).call("xlabel", (str(label),))


def ylabel(label: str, *, session: PlotSession | None = None) -> None:
    _handle(session).call("ylabel", (str(label),))


def grid(
    visible: bool | None = None,
    *,
    alpha: float | None = None,
    linestyle: LinestyleOption | None = None,
    session: PlotSession | None = None,
) -> None:
    args = () if visible is None else (bool(visible),)
    keywords = build_keyword_args(
        [
            ("alpha", optional(alpha, float)),
            ("linestyle", optional(linestyle, to_foreign_value)),
        ]
    )
    _handle(session).call("grid", args, keywords)


def tight_layout(*, session: PlotSession | None = None) -> None:
    _handle(session).call("tight_layout")


def close(which: int | str | None = None, *, session: PlotSession | None = None) -> None:
    args = () if which is None else (which,)
    _handle(session).call("close", args)
