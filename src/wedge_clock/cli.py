"""Command-line interface for Wedge Clock."""

import json
from datetime import datetime, time
from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from wedge_clock.config import get_settings
from wedge_clock.logging import configure_logging

app = typer.Typer(
    name="wedge-clock",
    help="Wedge Clock - analog clock drawn as a wedge on a rectangular face",
    add_completion=False,
)

console = Console()

TIME_FORMATS = ("%H:%M:%S", "%H:%M")


def parse_time(value: Optional[str]) -> time:
    """Parse HH:MM[:SS], defaulting to the current time."""
    if value is None:
        return datetime.now().time().replace(microsecond=0)
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise typer.BadParameter(f"Invalid time {value!r}, expected HH:MM or HH:MM:SS")


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug mode"),
) -> None:
    """Wedge Clock CLI."""
    settings = get_settings()
    if debug or settings.debug:
        configure_logging(log_level="DEBUG", log_file=settings.log_file)
    else:
        configure_logging(log_level=settings.log_level, log_file=settings.log_file)


@app.command("render")
def render(
    at: Optional[str] = typer.Option(None, "--time", "-t", help="Time to show (HH:MM[:SS])"),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="SVG width"),
    height: Optional[int] = typer.Option(None, "--height", "-h", min=1, help="SVG height"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write SVG to file"),
) -> None:
    """Render one clock face as SVG."""
    from wedge_clock.clock.renderer import ClockRenderer

    moment = parse_time(at)
    renderer = ClockRenderer(width=width, height=height)
    svg = renderer.render(moment)

    if output is None:
        typer.echo(svg)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(svg, encoding="utf-8")
    rprint(f"[green]Clock for {moment:%H:%M:%S} written to[/green] {output}")


@app.command("angles")
def angles(
    at: Optional[str] = typer.Option(None, "--time", "-t", help="Time to show (HH:MM[:SS])"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show hand angles, sector, crossed corners and covered ticks."""
    from wedge_clock.clock.face import Viewport, build_face

    settings = get_settings()
    moment = parse_time(at)
    face = build_face(
        Viewport.from_size(settings.width, settings.height),
        moment,
        settings.tick_length,
    )

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "time": moment.strftime("%H:%M:%S"),
                    "hour_angle": face.hands.hour,
                    "minute_angle": face.hands.minute,
                    "sector": [face.start, face.end],
                    "corners": list(face.corners),
                    "covered_ticks": list(face.covered_ticks),
                    "wedge": [[p.x, p.y] for p in face.wedge],
                },
                indent=2,
            )
        )
        return

    table = Table(title=f"Clock at {moment:%H:%M:%S}", show_header=True)
    table.add_column("Quantity", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Hour angle", f"{face.hands.hour:.2f}")
    table.add_row("Minute angle", f"{face.hands.minute:.2f}")
    table.add_row("Sector", f"{face.start:.2f} -> {face.end:.2f}")
    table.add_row("Corners", ", ".join(f"{c:g}" for c in face.corners) or "-")
    table.add_row(
        "Covered ticks",
        ", ".join(str(i) for i in face.covered_ticks) or "-",
    )
    console.print(table)


@app.command("border")
def border(
    angle: float = typer.Argument(..., help="Angle in degrees, clockwise from 12 o'clock"),
    width: Optional[int] = typer.Option(None, "--width", "-w", min=1, help="Surface width"),
    height: Optional[int] = typer.Option(None, "--height", "-h", min=1, help="Surface height"),
) -> None:
    """Show where a ray at ANGLE leaves the clock face."""
    from wedge_clock.clock.face import Viewport

    settings = get_settings()
    viewport = Viewport.from_size(width or settings.width, height or settings.height)
    point = viewport.border_point(angle)
    rprint(f"[cyan]{angle:g}°[/cyan] -> ({point.x:.3f}, {point.y:.3f})")


# Clock service
@app.command("run")
def run(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="SVG output path"),
) -> None:
    """Run the clock redraw service."""
    from wedge_clock.clock.service import ClockService

    service = ClockService(output_path=output)
    rprint(f"[cyan]Writing clock to[/cyan] {service.output_path} [dim](Ctrl+C to stop)[/dim]")
    service.run_daemon()


# Config commands
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show current configuration."""
    settings = get_settings()
    config_dict = settings.model_dump(mode="json")

    if json_output:
        typer.echo(json.dumps(config_dict, indent=2))
        return

    table = Table(title="Wedge Clock Configuration", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    for field_name, value in config_dict.items():
        table.add_row(field_name, str(value))
    console.print(table)


if __name__ == "__main__":
    app()
