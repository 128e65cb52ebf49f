"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from climg.cli.theme import ERROR_MARK, POINTER, WARNING_MARK, make_console
from climg.config import (
    ENV_HEIGHT,
    ENV_LOG_LEVEL,
    ENV_NO_TRUE_COLOR,
    ENV_SHOW_INFO,
    ENV_WIDTH,
    RenderOptions,
)
from climg.io.reader import is_supported
from climg.logging_conf import resolve_level

USAGE = """\
[head]Usage:[/] climg <image.png|jpg> \\[options]

[head]Options:[/]
  -w, --width <size>     Set width in pixels or percentage (e.g., 80 or 50%)
  -h, --height <size>    Set height in rows or percentage (e.g., 40 or 80%)
  -t, --no-truecolor     Disable true color, use 256 colors instead
  -i, --info             Show terminal and image dimensions
  -v, --verbose          Log debug details to stderr
      --help             Show full help and exit

[head]Examples:[/]
  [pointer]{pointer}[/] climg image.jpg
  [pointer]{pointer}[/] climg image.jpg -w 100 -h 30
  [pointer]{pointer}[/] climg image.jpg -w 50%
  [pointer]{pointer}[/] climg image.jpg -w 80% -h 50%
""".format(pointer=POINTER)


def _split_extras(
    path: Optional[Path], extras: list[str]
) -> tuple[Optional[Path], list[str], list[str]]:
    """
    Separate the image path from leftovers collected by click.

    Returns (image, unknown options, extra arguments). The first positional
    with a supported extension wins, so the value of an unknown option
    (`--bogus x img.png`) is not mistaken for the image.
    """
    candidates = ([str(path)] if path is not None else []) + extras
    options = [arg for arg in candidates if arg.startswith("-")]
    positionals = [arg for arg in candidates if not arg.startswith("-")]

    image_arg = next((arg for arg in positionals if is_supported(arg)), None)
    if image_arg is None and positionals:
        image_arg = positionals[0]
    if image_arg is not None:
        positionals.remove(image_arg)

    image = Path(image_arg) if image_arg is not None else None
    return image, options, positionals


def _log_level_callback(value: str) -> str:
    try:
        resolve_level(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return value


def _version_callback(value: bool) -> None:
    if value:
        from climg import __version__
        print(f"climg {__version__}")
        raise typer.Exit()


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="climg",
        help="Display PNG and JPEG images in the terminal.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    console = make_console()
    err_console = make_console(stderr=True)

    @app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
    def show(
        ctx: typer.Context,
        path: Annotated[Optional[Path], typer.Argument(help="PNG or JPEG image to display", show_default=False)] = None,
        width: Annotated[Optional[str], typer.Option("--width", "-w", envvar=ENV_WIDTH, help="Width in pixels or percentage (e.g. 80 or 50%)")] = None,
        height: Annotated[Optional[str], typer.Option("--height", "-h", envvar=ENV_HEIGHT, help="Height in rows or percentage (e.g. 40 or 80%)")] = None,
        no_true_color: Annotated[bool, typer.Option("--no-truecolor", "-t", envvar=ENV_NO_TRUE_COLOR, help="Use 256 colors instead of true color")] = False,
        info: Annotated[bool, typer.Option("--info", "-i", envvar=ENV_SHOW_INFO, help="Show terminal and image dimensions")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug details to stderr")] = False,
        log_level: Annotated[str, typer.Option("--log-level", envvar=ENV_LOG_LEVEL, callback=_log_level_callback, help="Logging level")] = "WARNING",
        version: Annotated[Optional[bool], typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version and exit")] = None,
    ) -> None:
        """Display an image in the terminal using half-block characters."""
        from climg.core.errors import ClimgError
        from climg.io.reader import load_image
        from climg.logging_conf import setup_logging
        from climg.render.terminal import render_image

        setup_logging("DEBUG" if verbose else log_level)

        path, unknown, extra = _split_extras(path, list(ctx.args))
        for arg in unknown:
            err_console.print(f"[warning]{WARNING_MARK} Warning:[/] ignoring unknown option {escape(arg)}")
        for arg in extra:
            err_console.print(f"[warning]{WARNING_MARK} Warning:[/] ignoring extra argument {escape(arg)}")

        if path is None:
            console.print(USAGE)
            raise typer.Exit(1)

        if not is_supported(path):
            err_console.print(f"[error]{ERROR_MARK} Error:[/] unsupported format {escape(path.name)}. Use PNG or JPEG.")
            console.print(USAGE)
            raise typer.Exit(1)

        options = RenderOptions(
            width=width,
            height=height,
            true_color=not no_true_color,
            show_info=info,
        )

        try:
            image = load_image(path)
            output = render_image(image.pixels, options)
        except ClimgError as exc:
            err_console.print(f"[error]{ERROR_MARK} Error:[/] {escape(str(exc))}")
            raise typer.Exit(1)

        # Plain print: rich would reinterpret the escape sequences
        print(output)

    return app
