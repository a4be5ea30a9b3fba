"""PosterLevels CLI application.

Commands:
    posterize   - Posterize an image onto power-curve luminance levels
    table       - Print the quantization table for a parameter set
    preview     - Write the level preview strip as an image
    catalog     - List the permitted level counts
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from posterlevels import __version__
from posterlevels.config import (
    DEFAULT_LEVEL_INDEX,
    DEFAULT_PREVIEW_HEIGHT,
    DEFAULT_PREVIEW_WIDTH,
    LEVEL_CATALOG,
)
from posterlevels.core.levels import LevelSet
from posterlevels.core.types import ChannelMode
from posterlevels.errors import PosterLevelsError
from posterlevels.pipeline.session import PosterizeSession

app = typer.Typer(
    name="posterlevels",
    help="Power-curve luminance posterization.",
    no_args_is_help=True,
)
console = Console()

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%H:%M:%S",
)

LEVELS_HELP = f"Level count, one of {', '.join(str(c) for c in LEVEL_CATALOG)}."
DISTRIBUTION_HELP = "Distribution (-3 to 3). Positive darkens, negative brightens."
CHANNEL_HELP = "Output channel: gray, red, green, blue."


def version_callback(value: bool):
    if value:
        console.print(f"PosterLevels v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit.",
        callback=version_callback, is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    if verbose:
        logging.getLogger("posterlevels").setLevel(logging.DEBUG)


def _make_session(levels: int, distribution: str, channel: str, parallel: bool = False) -> PosterizeSession:
    """Build a session from raw CLI values, exiting on an unknown level count."""
    level_set = LevelSet()
    try:
        level_set.select_count(levels)
    except PosterLevelsError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)
    return PosterizeSession(
        level_set=level_set,
        distribution=distribution,
        channel=channel,
        parallel=parallel,
    )


def _print_settings(session: PosterizeSession):
    console.print(f"  Levels:       {session.level_count}")
    console.print(f"  Distribution: {session.distribution:.1f}")
    console.print(f"  Channel:      {session.channel.value}")


@app.command()
def posterize(
    source: Path = typer.Argument(..., help="Source image path."),
    output: Path = typer.Option("posterized.png", "-o", "--output", help="Output image path."),
    levels: int = typer.Option(LEVEL_CATALOG[DEFAULT_LEVEL_INDEX], "-l", "--levels", help=LEVELS_HELP),
    distribution: str = typer.Option("0", "-d", "--distribution", help=DISTRIBUTION_HELP),
    channel: str = typer.Option(ChannelMode.LUMINANCE.value, "-c", "--channel", help=CHANNEL_HELP),
    passthrough: bool = typer.Option(False, "--passthrough", help="Disable quantization."),
    parallel: bool = typer.Option(False, "--parallel", help="Use the multi-threaded kernel."),
):
    """Posterize an image."""
    from posterlevels.io.image import save_image

    session = _make_session(levels, distribution, channel, parallel=parallel)
    session.set_enabled(not passthrough)

    console.print(f"\n[bold]PosterLevels[/bold]")
    console.print(f"  Source:       {source}")
    _print_settings(session)
    if passthrough:
        console.print("  [yellow]Quantization disabled[/yellow]")
    console.print()

    try:
        session.load_file(source)
        result = session.render()
        save_image(result, output)
    except (PosterLevelsError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Saved:[/green] {output} ({result.width}x{result.height})\n")


@app.command()
def table(
    levels: int = typer.Option(LEVEL_CATALOG[DEFAULT_LEVEL_INDEX], "-l", "--levels", help=LEVELS_HELP),
    distribution: str = typer.Option("0", "-d", "--distribution", help=DISTRIBUTION_HELP),
    channel: str = typer.Option(ChannelMode.LUMINANCE.value, "-c", "--channel", help=CHANNEL_HELP),
):
    """Print the quantization table."""
    session = _make_session(levels, distribution, channel)
    qt = session.table

    out = Table(
        title=f"{qt.level_count} levels, distribution {session.distribution:.1f}",
        show_header=True, header_style="bold",
    )
    out.add_column("Level", justify="right", style="cyan")
    out.add_column("Intensity", justify="right")
    out.add_column("RGB", justify="right")
    out.add_column("Swatch", justify="center")

    for i, (r, g, b) in enumerate(qt):
        out.add_row(
            str(i),
            str(int(qt.intensities[i])),
            f"{r}, {g}, {b}",
            f"[on rgb({r},{g},{b})]    [/]",
        )

    console.print(out)


@app.command()
def preview(
    output: Path = typer.Option("levels.png", "-o", "--output", help="Output image path."),
    levels: int = typer.Option(LEVEL_CATALOG[DEFAULT_LEVEL_INDEX], "-l", "--levels", help=LEVELS_HELP),
    distribution: str = typer.Option("0", "-d", "--distribution", help=DISTRIBUTION_HELP),
    channel: str = typer.Option(ChannelMode.LUMINANCE.value, "-c", "--channel", help=CHANNEL_HELP),
    width: int = typer.Option(DEFAULT_PREVIEW_WIDTH, "--width", help="Strip width in pixels."),
    height: int = typer.Option(DEFAULT_PREVIEW_HEIGHT, "--height", help="Strip height in pixels."),
):
    """Write the level preview strip as an image."""
    from posterlevels.io.image import save_image

    session = _make_session(levels, distribution, channel)
    try:
        strip = session.preview_strip(width, height)
        save_image(strip, output)
    except (PosterLevelsError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"[green]Saved:[/green] {output} ({width}x{height})")


@app.command()
def catalog():
    """List the permitted level counts."""
    marks = [
        f"[bold]{c}[/bold]" if i == DEFAULT_LEVEL_INDEX else str(c)
        for i, c in enumerate(LEVEL_CATALOG)
    ]
    console.print("Levels: " + ", ".join(marks))


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
