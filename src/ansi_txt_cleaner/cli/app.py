"""Typer CLI application."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-txt-cleaner",
        help="Strip terminal escape codes and box-drawing glyphs from text files.",
        add_completion=False,
        rich_markup_mode="rich",
    )
    # Paths stay on one line, as plain print would show them
    console = Console(soft_wrap=True)

    @app.command()
    def clean(
        path: Annotated[Optional[Path], typer.Argument(help="Text file to clean (opens a picker if omitted)")] = None,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output path (default: <name>_output.txt)")] = None,
    ) -> None:
        """Clean a text file into a sibling <name>_output.txt file.

        Removes ANSI escape sequences (colors, cursor moves) and replaces
        Unicode box-drawing characters with +, -, | and friends.
        """
        from ansi_txt_cleaner.clean import clean_file
        from ansi_txt_cleaner.errors import UserCancelled
        from ansi_txt_cleaner.io.naming import output_path_for

        if path is None:
            from ansi_txt_cleaner.cli import picker
            try:
                path = picker.pick_file()
            except UserCancelled:
                console.print("[yellow]No input file selected[/]")
                raise typer.Exit(1)

        out_path = output or output_path_for(path)
        console.print(f"Processing file: {escape(str(path))}")
        console.print(f"Output will be saved to: {escape(str(out_path))}")

        try:
            _, result = clean_file(path, out_path)
        except OSError as e:
            console.print(f"[red]Error: {escape(str(e))}[/]")
            raise typer.Exit(1)

        console.print(f"[green]Cleaning completed.[/] Output saved to {escape(str(out_path))}")
        if result.was_modified:
            console.print(
                f"[dim]{result.lines} lines, removed {result.sequences_removed} "
                f"escape sequences, replaced {result.glyphs_replaced} glyphs[/]"
            )
        else:
            console.print(f"[dim]{result.lines} lines, nothing to clean[/]")

    return app
