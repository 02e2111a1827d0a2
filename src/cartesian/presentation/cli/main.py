"""Main CLI application for Cartesian."""

import logging
import sys
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cartesian import __version__
from cartesian.application.operations import (
    POINT_OPERATIONS,
    RECTANGLE_OPERATIONS,
    OperationRegistry,
)
from cartesian.domain.exceptions import NotFoundError
from cartesian.domain.value_objects.point import Point
from cartesian.domain.value_objects.rectangle import Rectangle
from cartesian.shared.config.settings import get_settings
from cartesian.shared.logging import configure_logging

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

logger = logging.getLogger("cartesian.cli")

app = typer.Typer(
    name="cartesian",
    help="2D Cartesian geometry queries on rectangles and points",
    add_completion=False,
)

# Negative coordinates must reach the command as values, not options
VALUE_COMMAND = {"ignore_unknown_options": True}


def _console() -> Console:
    return Console(no_color=not get_settings().display.colored, highlight=False)


def format_value(value: Any, precision: int) -> str:
    """Render an operation result for the terminal."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        return f"{value:.{precision}g}"
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item, precision) for item in value) + ")"
    if isinstance(value, Rectangle):
        corners = (value.min_x, value.min_y, value.max_x, value.max_y)
        return "Rectangle" + format_value(corners, precision)
    if isinstance(value, Point):
        return "Point" + format_value((value.x, value.y), precision)
    return str(value)


def _evaluate(
    registry: OperationRegistry,
    operation: str,
    subject_size: int,
    values: list[float],
) -> None:
    console = _console()
    if len(values) < subject_size:
        console.print(
            f"[red]Error:[/red] {registry.subject} needs {subject_size} values, got {len(values)}"
        )
        raise typer.Exit(code=1)

    if subject_size == 4:
        subject: Rectangle | Point = Rectangle(*values[:4])
    else:
        subject = Point(*values[:2])

    try:
        result = registry.invoke(operation, subject, values[subject_size:])
    except (NotFoundError, ValueError) as e:
        logger.debug("Failed to evaluate %s on %s: %s", operation, subject, e)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)

    logger.info("%s.%s -> %s", subject, operation, result)
    console.print(format_value(result, get_settings().display.precision))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Evaluate geometric queries from the command line."""
    configure_logging(get_settings(), "DEBUG" if verbose else None)


@app.command()
def version():
    """Show version information."""
    _console().print(Panel(
        Text(f"Cartesian v{__version__}\n2D Geometry Value Types", justify="center"),
        title="Version Info",
        border_style="blue"
    ))


@app.command(context_settings=VALUE_COMMAND)
def rect(
    operation: str = typer.Argument(..., help="Rectangle operation name"),
    values: list[float] = typer.Argument(
        ..., help="MIN_X MIN_Y MAX_X MAX_Y followed by the operation's arguments"
    ),
):
    """Evaluate an operation on a rectangle."""
    _evaluate(RECTANGLE_OPERATIONS, operation, 4, values)


@app.command(context_settings=VALUE_COMMAND)
def point(
    operation: str = typer.Argument(..., help="Point operation name"),
    values: list[float] = typer.Argument(
        ..., help="X Y followed by the operation's arguments"
    ),
):
    """Evaluate an operation on a point."""
    _evaluate(POINT_OPERATIONS, operation, 2, values)


@app.command()
def operations(
    subject: str = typer.Argument(None, help="Limit the listing to 'rect' or 'point'"),
):
    """List the available operations."""
    registries = {"rect": RECTANGLE_OPERATIONS, "point": POINT_OPERATIONS}
    console = _console()
    if subject is not None and subject not in registries:
        console.print(f"[red]Error:[/red] Unknown subject {escape(subject)}, use 'rect' or 'point'")
        raise typer.Exit(code=1)

    for key, registry in registries.items():
        if subject is not None and key != subject:
            continue
        table = Table(title=f"{registry.subject} operations")
        table.add_column("Name", style="bold")
        table.add_column("Arguments")
        table.add_column("Description")
        for operation in registry:
            arguments = ", ".join(kind.value for kind in operation.parameters) or "-"
            table.add_row(operation.name, arguments, operation.description)
        console.print(table)


@app.command()
def config():
    """Show the effective configuration."""
    table = Table(title="Configuration")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in get_settings().as_dict().items():
        table.add_row(key, escape(str(value)))
    _console().print(table)


if __name__ == "__main__":
    app()
