"""CLI interface for anima."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import BarColumn, Progress, TextColumn, TimeRemainingColumn
from rich.table import Table

from .errors import AnimaError
from .render import (
    RESOLUTION_PRESETS,
    RenderConfig,
    Renderer,
    RenderProgress,
    RenderQuality,
    resolve_ffmpeg_binary,
    resolve_render_format,
    supported_render_formats,
)
from .scene import Scene
from .scene_loader import SceneLoadError, find_scene_classes, load_module, load_scene

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_FORMATS_TEXT = ", ".join(supported_render_formats())
RESOLUTIONS_TEXT = ", ".join(RESOLUTION_PRESETS)

app = typer.Typer(help="Render programmatic animations.", no_args_is_help=True)


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _fail(message: str, label: str = "Error") -> None:
    err_console.print(f"[bold red]{label}:[/bold red] {message}")
    sys.exit(1)


@app.command("list")
def list_scenes(
    script: Path = typer.Argument(..., help="Python script defining Scene subclasses"),
) -> None:
    """List the scenes defined in a script."""
    try:
        classes = find_scene_classes(load_module(script))
    except SceneLoadError as e:
        _fail(str(e))

    if not classes:
        console.print(f"[yellow]No scenes found in {script}[/yellow]")
        return

    table = Table(title=f"Scenes in {script.name}")
    table.add_column("Scene", style="bold cyan")
    table.add_column("Description")
    for cls in classes:
        doc = (cls.__doc__ or "").strip().splitlines()
        table.add_row(cls.__name__, doc[0] if doc else "")
    console.print(table)


@app.command()
def render(
    script: Path = typer.Argument(..., help="Python script defining Scene subclasses"),
    scene_name: str = typer.Option(None, "--scene", "-s", help="Scene class to render"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file, or directory for sprites"),
    fmt: str = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format ({SUPPORTED_FORMATS_TEXT}); defaults to the output extension",
    ),
    resolution: str = typer.Option(
        None, "--resolution", "-r", help=f"Resolution preset ({RESOLUTIONS_TEXT})"
    ),
    fps: int = typer.Option(None, "--fps", help="Frames per second (defaults to the scene's)"),
    quality: RenderQuality = typer.Option(
        RenderQuality.PRODUCTION, "--quality", "-q", help="preview renders at half resolution"
    ),
    no_cache: bool = typer.Option(False, "--no-cache", help="Render every segment from scratch"),
    cache_dir: Path = typer.Option(None, "--cache-dir", help="Segment cache directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """
    Render a scene to video, animated image, PNG or sprite frames.

    Examples:
      # Render to MP4, reusing unchanged segments from the last render
      anima render scenes.py --scene Intro --output intro.mp4

      # Quick low-resolution GIF
      anima render scenes.py -o intro.gif --quality preview
    """
    _configure_logging(verbose)
    try:
        scene = _load(script, scene_name)
        output_path = output or Path(f"{type(scene).__name__}.mp4")
        render_format = resolve_render_format(output_path, fmt)
        width, height = _resolve_resolution(resolution)

        if render_format.value == "gif" and (fps or scene.get_frame_rate()) > 50:
            console.print(
                "[yellow]Warning:[/yellow] FPS > 50 may not display correctly in browsers "
                "(browsers clamp GIF delays < 20ms to ~100ms)"
            )

        console.print(
            f"[bold blue]Rendering {type(scene).__name__} "
            f"({scene.get_total_duration():.2f}s) to {output_path}...[/bold blue]"
        )
        renderer = Renderer(ffmpeg_binary=resolve_ffmpeg_binary())
        with Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total} frames"),
            TimeRemainingColumn(),
            console=console,
        ) as progress:
            task = progress.add_task("Rendering", total=None)

            def on_progress(update: RenderProgress) -> None:
                progress.update(task, completed=update.current_frame, total=update.total_frames)

            config = RenderConfig(
                width=width,
                height=height,
                frame_rate=fps,
                format=render_format,
                quality=quality,
                cache=False if no_cache else None,
                cache_dir=cache_dir,
                on_progress=on_progress,
            )
            renderer.render(scene, output_path, config)

        console.print(f"[green]✓[/green] {render_format.value.upper()} saved to {output_path}")

    except (CLIError, AnimaError, ValueError) as e:
        _fail(str(e))

    except Exception as e:
        _fail(str(e), label="Unexpected error")


@app.command()
def frame(
    script: Path = typer.Argument(..., help="Python script defining Scene subclasses"),
    scene_name: str = typer.Option(None, "--scene", "-s", help="Scene class to export"),
    frame_spec: str = typer.Option(
        "last", "--frame", help="Frame number, or 'last' for the final state"
    ),
    output: Path = typer.Option(None, "--output", "-o", help="Output PNG path"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Export a single frame of a scene as PNG."""
    _configure_logging(verbose)
    try:
        scene = _load(script, scene_name)
        output_path = output or Path(f"{type(scene).__name__}_{frame_spec}.png")
        renderer = Renderer(ffmpeg_binary=resolve_ffmpeg_binary())

        if frame_spec == "last":
            renderer.render_last_frame(scene, output_path)
        else:
            index = _parse_frame_index(frame_spec)
            time = min(index / scene.get_frame_rate(), scene.get_total_duration())
            renderer.render_frame_at(scene, time, output_path)

        console.print(f"[green]✓[/green] Frame saved to {output_path}")

    except (CLIError, AnimaError, ValueError) as e:
        _fail(str(e))

    except Exception as e:
        _fail(str(e), label="Unexpected error")


def _load(script: Path, scene_name: str | None) -> Scene:
    try:
        return load_scene(script, scene_name)
    except SceneLoadError as e:
        raise CLIError(str(e))


def _resolve_resolution(resolution: str | None) -> tuple[int | None, int | None]:
    if resolution is None:
        return None, None
    preset = RESOLUTION_PRESETS.get(resolution.lower())
    if preset is None:
        raise CLIError(f"Invalid resolution '{resolution}'. Choose from: {RESOLUTIONS_TEXT}")
    return preset


def _parse_frame_index(frame_spec: str) -> int:
    try:
        index = int(frame_spec)
    except ValueError:
        raise CLIError(f"Invalid frame '{frame_spec}': use a frame number or 'last'")
    if index < 0:
        raise CLIError(f"Frame number cannot be negative, got {index}")
    return index


if __name__ == "__main__":
    app()
