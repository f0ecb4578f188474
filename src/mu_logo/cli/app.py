"""Typer CLI application.

The CLI is a host for the editor session: it reads the logo from its
argument once, runs one operation, and prints the resulting fragment.
"""

import json
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from rich.console import Console
from rich.table import Table

from mu_logo.codec import decode, grid_of, token_of
from mu_logo.codec.fragment import grid_from_fragment
from mu_logo.config import Settings
from mu_logo.core.color import PALETTE, Color
from mu_logo.core.errors import MuLogoError
from mu_logo.core.grid import Grid
from mu_logo.edit.session import EditorSession
from mu_logo.log import configure_logging
from mu_logo.share import fragment_from_url, share_url


def create_app(settings: Optional[Settings] = None) -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="mu-logo",
        help="Draw 8x8 sixteen-color logos and share them as URL fragments.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def setup() -> None:
        nonlocal settings
        if settings is None:
            try:
                settings = Settings.from_env()
            except ValueError as e:
                err_console.print(f"[red]{e}[/]")
                raise typer.Exit(2)
        configure_logging(settings.log_level)

    def fail(error: MuLogoError) -> typer.Exit:
        err_console.print(f"[red]{error}[/]")
        return typer.Exit(1)

    def load_grid(source: str, token: bool = False) -> Grid:
        if token:
            return grid_of(source.strip())
        return grid_from_fragment(fragment_from_url(source))

    def emit(fragment: str) -> None:
        if settings.base_url:
            print(share_url(settings.base_url, fragment))
        else:
            print(fragment)

    def run(source: str, action: Callable[[EditorSession], None]) -> None:
        try:
            session = EditorSession(fragment_from_url(source))
            action(session)
        except MuLogoError as e:
            raise fail(e)
        emit(session.current_fragment())

    def pick_color(name: str) -> Color:
        color = PALETTE.by_name(name)
        if color.name != name:
            err_console.print(
                f"[red]Unknown color: {name}[/] (choose from {', '.join(PALETTE.names())})"
            )
            raise typer.Exit(1)
        return color

    @app.command()
    def palette() -> None:
        """List the palette."""
        table = Table(title="Palette")
        table.add_column("Code", justify="right")
        table.add_column("Name")
        table.add_column("Display")
        for color in PALETTE:
            r, g, b = color.rgb
            swatch = "" if color.is_none() else f"[on rgb({r},{g},{b})]  [/] "
            table.add_row(color.digit, color.name, f"{swatch}{color.hex}")
        console.print(table)

    @app.command()
    def new() -> None:
        """Print the fragment of a blank logo."""
        run("", lambda session: None)

    @app.command()
    def show(
        source: Annotated[str, typer.Argument(help="URL, #fragment or fragment")],
        token: Annotated[bool, typer.Option("--token", "-t", help="Treat SOURCE as a hex token")] = False,
    ) -> None:
        """Draw a logo in the terminal."""
        from mu_logo.render.terminal import TerminalRenderer

        try:
            grid = load_grid(source, token)
        except MuLogoError as e:
            raise fail(e)
        print(TerminalRenderer().render(grid))

    @app.command()
    def info(
        source: Annotated[str, typer.Argument(help="URL, #fragment or fragment")],
        token: Annotated[bool, typer.Option("--token", "-t", help="Treat SOURCE as a hex token")] = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the token, dominant color and color counts of a logo."""
        try:
            grid = load_grid(source, token)
        except MuLogoError as e:
            raise fail(e)

        data = {
            "token": token_of(grid),
            "most_frequent": grid.most_frequent_color().name,
            "counts": dict(grid.counts()),
        }
        if json_output:
            print(json.dumps(data, indent=2))
            return

        console.print(f"[bold]Token:[/]         {data['token']}")
        console.print(f"[bold]Most frequent:[/] {data['most_frequent']}")
        console.print("[bold]Counts:[/]")
        for name, count in data["counts"].items():
            console.print(f"  {name:<13} {count}")

    @app.command()
    def paint(
        x: Annotated[int, typer.Argument(help="Column (0-7)")],
        y: Annotated[int, typer.Argument(help="Row (0-7)")],
        color: Annotated[str, typer.Argument(help="Color name")],
        source: Annotated[str, typer.Option("--source", "-s", help="Logo to start from")] = "",
    ) -> None:
        """Paint one cell and print the new fragment."""
        pen = pick_color(color)

        def action(session: EditorSession) -> None:
            session.select_pen(pen)
            session.paint(x, y)

        run(source, action)

    @app.command()
    def fill(
        color: Annotated[str, typer.Argument(help="Color name")],
        source: Annotated[str, typer.Option("--source", "-s", help="Logo to start from")] = "",
    ) -> None:
        """Bucket-fill the most frequent color and print the new fragment."""
        to_color = pick_color(color)
        run(source, lambda session: session.bucket_fill(to_color))

    @app.command()
    def decode_token(
        source: Annotated[str, typer.Argument(help="URL, #fragment or fragment")],
    ) -> None:
        """Print the raw hex token behind a fragment."""
        try:
            print(decode(fragment_from_url(source)))
        except MuLogoError as e:
            raise fail(e)

    @app.command()
    def export(
        source: Annotated[str, typer.Argument(help="URL, #fragment or fragment")],
        dest: Annotated[Path, typer.Argument(help="Destination .svg or .png")],
        scale: Annotated[Optional[int], typer.Option("--scale", min=1, help="Pixels per cell (PNG)")] = None,
        token: Annotated[bool, typer.Option("--token", "-t", help="Treat SOURCE as a hex token")] = False,
    ) -> None:
        """Export a logo to SVG or PNG."""
        try:
            grid = load_grid(source, token)
        except MuLogoError as e:
            raise fail(e)

        fmt = dest.suffix.lstrip(".").lower()
        if fmt == "svg":
            from mu_logo.render.svg import SvgSurface

            surface = SvgSurface(grid.palette)
            for cx, cy, cell in grid.cells():
                surface.draw_cell(cx, cy, cell)
            dest.write_text(surface.to_svg() + "\n")
        elif fmt == "png":
            from mu_logo.render.image import save_png

            save_png(grid, dest, scale if scale is not None else settings.pixel_scale)
        else:
            err_console.print(f"[red]Unknown format: {fmt}[/]")
            raise typer.Exit(1)

        console.print(f"[green]Exported {dest}[/]")

    return app

