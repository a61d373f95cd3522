"""
CLI Main for HighlightKit
==========================
Typer-based CLI to highlight, detect and inspect source files.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from ..config import HighlightConfig, load_config
from ..core.detector import detect_language, language_for_filename
from ..core.theme import DisplayMode
from ..core.tokens import normalize_language
from ..highlighter import highlight
from ..render import format_code, render_lines
from ..utils import LogConfig, setup_logging

# Console for Rich output
console = Console()

# Create Typer app
app = typer.Typer(
    name="highlightkit",
    help="HighlightKit - Lightweight regex-based syntax highlighting",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich"
)


# Global state
class AppState:
    """Global application state"""
    workspace: Path = Path.cwd()
    config: Optional[HighlightConfig] = None
    verbose: bool = False


state = AppState()


def version_callback(value: bool):
    """Print version and exit"""
    if value:
        from .. import __version__
        console.print(f"HighlightKit v{__version__}")
        raise typer.Exit()


def read_source(source: str) -> str:
    """Read source text from a path, or stdin for '-'"""
    if source == "-":
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        if state.verbose:
            console.print_exception()
        else:
            console.print(f"[red]Error: cannot read {source}: {e.strerror or e}[/red]")
        raise typer.Exit(1)


def get_config() -> HighlightConfig:
    """Effective configuration, loaded on first use"""
    if state.config is None:
        state.config = load_config(state.workspace)
    return state.config


@app.callback()
def main(
    workspace: Optional[Path] = typer.Option(
        None,
        "--workspace", "-w",
        help="Directory holding .highlightkit/config.yaml"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output"
    ),
    version: bool = typer.Option(
        None,
        "--version", "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
):
    """
    HighlightKit - highlight source code in the terminal.

    [dim]Examples:[/dim]
        highlightkit show app.py              # Highlight a file
        highlightkit show - -l sql < q.sql    # Highlight stdin as SQL
        highlightkit detect snippet.txt       # Guess the language
    """
    state.workspace = workspace or Path.cwd()
    state.verbose = verbose
    state.config = None

    config = get_config()
    setup_logging(config=LogConfig(enable_file=config.log_file), verbose=verbose)


@app.command()
def show(
    source: str = typer.Argument(..., help="File to highlight, or '-' for stdin"),
    language: Optional[str] = typer.Option(
        None,
        "--language", "-l",
        help="Language name or alias (detected if omitted)"
    ),
    mode: Optional[DisplayMode] = typer.Option(
        None,
        "--mode", "-m",
        case_sensitive=False,
        help="Use the built-in light or dark theme"
    ),
    line_numbers: bool = typer.Option(
        False,
        "--line-numbers", "-n",
        help="Show line numbers"
    ),
    panel: bool = typer.Option(
        True,
        "--panel/--no-panel",
        help="Draw a border around the code"
    )
):
    """Highlight a file and print it"""
    config = get_config()
    code = read_source(source)

    if language is not None and normalize_language(language) is None:
        console.print(f"[yellow]Unknown language '{language}', detecting instead[/yellow]")
        language = None

    if language is None and source != "-":
        by_name = language_for_filename(source)
        if by_name is not None:
            language = by_name.value

    styled = highlight(
        code,
        config.resolve_theme(mode),
        language=language,
        default_language=config.default_language,
        registry=config.build_registry()
    )

    if panel:
        title = Path(source).name if source != "-" else None
        console.print(format_code(styled, title=title, line_numbers=line_numbers))
    else:
        console.print(render_lines(styled, line_numbers=line_numbers))


@app.command()
def detect(
    source: str = typer.Argument(..., help="File to inspect, or '-' for stdin")
):
    """Print the detected language of a file"""
    code = read_source(source)

    language = detect_language(code)
    if language is None and source != "-":
        language = language_for_filename(source)

    console.print(language.value if language else "unknown")


@app.command()
def languages():
    """List languages with rule tables"""
    registry = get_config().build_registry()

    table = Table(title="Supported Languages", border_style="blue")
    table.add_column("Language", style="cyan")
    table.add_column("Rules", justify="right")

    for language in registry.languages():
        table.add_row(language.value, str(len(registry.specs_for(language))))

    console.print(table)


@app.command()
def config():
    """Show the effective configuration"""
    cfg = get_config()

    if not cfg.sources:
        console.print("[dim]No configuration file found, using defaults.[/dim]")

    console.print_json(data=cfg.to_dict())


def main_entry():
    """Entry point for the CLI"""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(130)


if __name__ == "__main__":
    main_entry()
