from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from typedplot import pyplot
from typedplot.config import ChartKind, RenderConfig, format_for_path, normalize_format_value
from typedplot.options import Color, parse_backend, parse_option
from typedplot.render import parse_values, render_chart
from typedplot.session import default_session

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="typedplot CLI: typed matplotlib charts from the command line.",
)
console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("typedplot")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=console, show_path=False))


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log runtime initialization and backend switches.",
    ),
) -> None:
    _configure_logging(verbose)


@app.command("styles")
def styles(
    backend: str = typer.Option(
        "Agg",
        "--backend",
        "-b",
        help="Backend used to load the plotting library ('default' keeps its own).",
    ),
) -> None:
    session = default_session()
    session.set_backend(parse_backend(backend))
    names = pyplot.style_available(session=session)

    table = Table(title="Available styles")
    table.add_column("#")
    table.add_column("style")
    for idx, name in enumerate(names, start=1):
        table.add_row(str(idx), name)
    console.print(table)


@app.command("render")
def render(
    values: str = typer.Option(
        ...,
        "--values",
        help="Comma-separated data values, e.g. 1,4,9,16.",
    ),
    out: Path = typer.Option(
        ...,
        "--out",
        "-o",
        help="Output image path (.png or .jpg).",
    ),
    xs: Optional[str] = typer.Option(
        None,
        "--xs",
        help="Optional comma-separated x values for line and bar charts.",
    ),
    kind: ChartKind = typer.Option(
        ChartKind.line,
        "--kind",
        "-k",
        help="Chart type: line, hist, bar.",
    ),
    image_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Image format (png or jpg). Defaults to the --out suffix.",
    ),
    backend: str = typer.Option(
        "Agg",
        "--backend",
        "-b",
        help="Plotting backend name, or 'default'.",
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        help="Style sheet name (see `typedplot styles`).",
    ),
    width: float = typer.Option(6.4, "--width", help="Figure width in inches."),
    height: float = typer.Option(4.8, "--height", help="Figure height in inches."),
    dpi: float = typer.Option(100.0, "--dpi", help="Figure resolution."),
    title: Optional[str] = typer.Option(None, "--title", help="Chart title."),
    label: Optional[str] = typer.Option(None, "--label", help="Legend label for the series."),
    color: Optional[str] = typer.Option(
        None,
        "--color",
        help="Series color name (red, green, ...) or any matplotlib color.",
    ),
) -> None:
    try:
        data = parse_values(values, option_name="--values")
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--values") from exc
    try:
        x_data = parse_values(xs, option_name="--xs") if xs is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--xs") from exc
    try:
        fmt = normalize_format_value(image_format) if image_format else format_for_path(out)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--format") from exc

    try:
        config = RenderConfig(
            output_path=out,
            kind=kind,
            image_format=fmt,
            backend=backend,
            style=style,
            width=width,
            height=height,
            dpi=dpi,
            title=title,
        )
    except ValidationError as exc:
        error = exc.errors()[0]
        location = str(error.get("loc", ("out",))[0])
        hint = "--out" if location == "output_path" else f"--{location}"
        raise typer.BadParameter(error.get("msg", "Invalid input"), param_hint=hint) from exc

    try:
        result = render_chart(
            config,
            data,
            xs=x_data,
            label=label,
            color=parse_option(Color, color) if color else None,
        )
    except ValueError as exc:
        message = str(exc)
        if "x values" in message:
            raise typer.BadParameter(message, param_hint="--xs") from exc
        console.print(f"[bold red]Render failed[/bold red]: {exc}")
        raise typer.Exit(code=2) from exc
    except (ImportError, OSError, RuntimeError) as exc:
        console.print(f"[bold red]Render failed[/bold red]: {exc}")
        raise typer.Exit(code=2) from exc

    console.print(f"Saved {result['format']} chart to {result['output_path']}")
    console.print_json(data=config.as_summary())


def run() -> None:
    app()


if __name__ == "__main__":
    run()
