"""CLI interface for todoedit using Typer"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from todoedit import __version__
from todoedit.core.config import (
    load_config,
    create_config,
    config_exists,
    get_config_path,
    ConfigNotFoundError,
    ConfigInvalidError,
)
from todoedit.core.dispatcher import key_table
from todoedit.models.config import TodoEditConfig

app = typer.Typer(
    name="todoedit",
    help="Keyboard-driven todo list editor",
    invoke_without_command=True,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"todoedit version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", callback=version_callback, help="Show version"
    ),
):
    """todoedit - edit a todo list from the keyboard

    Run without arguments to open the editor.
    """
    # If a subcommand was invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    _run_editor()


def _load_config_or_exit() -> TodoEditConfig:
    try:
        return load_config()
    except ConfigNotFoundError:
        return TodoEditConfig()
    except ConfigInvalidError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


def _run_editor():
    """Load config and launch the editor TUI"""
    from todoedit.core.logs import configure_logging
    from todoedit.tui.app import TodoEditApp

    config = _load_config_or_exit()
    configure_logging(config)

    TodoEditApp(config=config).run()


@app.command()
def init(
    title: str = typer.Option("icedtodo", help="Window title"),
    default_title: str = typer.Option("New Todo", help="Title given to new items"),
    log_file: Optional[str] = typer.Option(None, help="Write logs to this file"),
):
    """Create .todoedit/config.yaml configuration file"""
    if config_exists():
        if not typer.confirm("Config file already exists. Overwrite?"):
            raise typer.Exit(0)

    try:
        create_config(title=title, default_title=default_title, log_file=log_file)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error creating config:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Created:[/green] {get_config_path()}")
    console.print("\nRun [bold]todoedit[/bold] to start editing.")


@app.command("keys")
def keys_list():
    """List key bindings"""
    table = Table(title="Key Bindings")
    table.add_column("Key", style="cyan")
    table.add_column("Action")

    for keys, description in key_table():
        table.add_row(keys, description)

    console.print(table)


@app.command("config")
def config_show():
    """Show the configuration in effect"""
    config = _load_config_or_exit()
    source = get_config_path() if config_exists() else "built-in defaults"

    table = Table(title=f"Configuration ({source})")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    for name, value in config.model_dump().items():
        table.add_row(name, str(value))

    console.print(table)


def main():
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    main()
