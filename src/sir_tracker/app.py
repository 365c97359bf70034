"""Command-line interface: one-shot commands and an interactive shell."""
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.prompt import Prompt

from sir_tracker.config import get_settings
from sir_tracker.display import NO_TOPICS_TODAY, build_all_table, build_today_table
from sir_tracker.errors import (
    DuplicateTopicError, StorageCorruptError, StorageError, TopicNotFoundError,
)
from sir_tracker.logging import configure_logging, get_logger
from sir_tracker.models import ReviewTopic
from sir_tracker.storage import load_collection, save_collection
from sir_tracker.topics import TopicCollection

console = Console()
logger = get_logger(__name__)

app = typer.Typer(
    help="SIR Tracker: spaced interval review of the topics you study.",
    invoke_without_command=True,
    no_args_is_help=False,
)


class ViewMode(str, Enum):
    TODAY = "today"
    ALL = "all"


def load_or_exit(storage_path: Path) -> TopicCollection:
    try:
        return load_collection(storage_path)
    except StorageCorruptError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def save_or_warn(collection: TopicCollection, storage_path: Path) -> bool:
    """Persist topics. A failed write is reported but not raised."""
    try:
        save_collection(collection, storage_path)
    except StorageError as e:
        console.print(f"[yellow]Warning: {escape(str(e))}[/yellow]")
        return False
    return True


def show_today(collection: TopicCollection) -> None:
    table = build_today_table(collection)
    if table is None:
        console.print(f"[dim]{NO_TOPICS_TODAY}[/dim]")
    else:
        console.print(table)


def show_all(collection: TopicCollection) -> None:
    if not len(collection):
        console.print("[dim]No review topics yet. Add one with 'add'.[/dim]")
        return
    console.print(build_all_table(collection))


def cmd_view(collection: TopicCollection, mode: ViewMode) -> bool:
    if mode is ViewMode.TODAY:
        show_today(collection)
    else:
        show_all(collection)
    return False


def cmd_add(collection: TopicCollection, name: str) -> bool:
    try:
        topic = ReviewTopic(name)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return False
    if not collection.add(topic):
        logger.debug("duplicate_topic_ignored", name=name)
        return False
    console.print(f"[green]Added '{escape(name)}'.[/green]")
    return True


def cmd_remove(collection: TopicCollection, name: str) -> bool:
    if not collection.remove(name):
        console.print("Review topic was not found.")
        return False
    console.print(f"[green]Removed '{escape(name)}'.[/green]")
    return True


def cmd_rename(collection: TopicCollection, old_name: str, new_name: str) -> bool:
    try:
        collection.rename(old_name, new_name)
    except TopicNotFoundError:
        console.print("Review topic was not found.")
        return False
    except (DuplicateTopicError, ValueError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return False
    console.print(f"[green]Renamed '{escape(old_name)}' to '{escape(new_name)}'.[/green]")
    return True


def cmd_review(collection: TopicCollection, name: str) -> bool:
    try:
        topic = collection.review_by_name(name)
    except TopicNotFoundError:
        console.print("Review topic was not found. Did you misspell?")
        return False
    console.print(f"[green]Reviewed '{escape(name)}'. Next review gap: {topic.gap}.[/green]")
    return True


def run_command(ctx: typer.Context, action) -> None:
    """Load, apply one action, and save if the action changed anything."""
    storage_path = ctx.obj
    collection = load_or_exit(storage_path)
    if action(collection) and not save_or_warn(collection, storage_path):
        raise typer.Exit(code=1)


@app.callback()
def main_callback(
    ctx: typer.Context,
    storage: Optional[Path] = typer.Option(
        None, "--storage", "-s", help="Path to the topics file (overrides SIR_TRACKER_STORAGE_PATH)",
    ),
):
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_json)
    ctx.obj = storage or settings.storage_path
    if ctx.invoked_subcommand is None:
        collection = load_or_exit(ctx.obj)
        console.print(Panel("[bold]SIR Tracker[/bold]", border_style="blue"))
        show_today(collection)
        show_all(collection)


@app.command("view")
def view_command(
    ctx: typer.Context,
    mode: ViewMode = typer.Argument(ViewMode.TODAY, help="Which topics to show"),
):
    """Show topics due today, or every topic."""
    run_command(ctx, lambda c: cmd_view(c, mode))


@app.command("add")
def add_command(ctx: typer.Context, name: str = typer.Argument(..., help="Topic name")):
    """Start tracking a topic. Existing names are left alone."""
    run_command(ctx, lambda c: cmd_add(c, name))


@app.command("remove")
def remove_command(ctx: typer.Context, name: str = typer.Argument(..., help="Topic name")):
    """Stop tracking a topic."""
    run_command(ctx, lambda c: cmd_remove(c, name))


@app.command("rename")
def rename_command(
    ctx: typer.Context,
    old_name: str = typer.Argument(..., help="Current topic name"),
    new_name: str = typer.Argument(..., help="New topic name"),
):
    """Rename a topic, keeping its review history."""
    run_command(ctx, lambda c: cmd_rename(c, old_name, new_name))


@app.command("review")
def review_command(ctx: typer.Context, name: str = typer.Argument(..., help="Topic name")):
    """Mark a topic as reviewed and widen its review gap."""
    run_command(ctx, lambda c: cmd_review(c, name))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("today", "Topics due today"),
        ("all", "All topics"),
        ("add", "Track a new topic"),
        ("review", "Mark a topic reviewed"),
        ("rename", "Rename a topic"),
        ("remove", "Stop tracking a topic"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<10}[/cyan] {desc}")


def run_shell(storage_path: Path) -> None:
    collection = load_or_exit(storage_path)
    console.print(Panel("[bold]SIR Tracker[/bold]\n[dim]Spaced interval review[/dim]",
                        title="Welcome", border_style="blue"))
    show_today(collection)

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="today").strip().lower()
        try:
            if choice == "today":
                mutated = cmd_view(collection, ViewMode.TODAY)
            elif choice == "all":
                mutated = cmd_view(collection, ViewMode.ALL)
            elif choice == "add":
                mutated = cmd_add(collection, Prompt.ask("Topic name"))
            elif choice == "review":
                mutated = cmd_review(collection, Prompt.ask("Topic name"))
            elif choice == "rename":
                old_name = Prompt.ask("Current name")
                mutated = cmd_rename(collection, old_name, Prompt.ask("New name"))
            elif choice == "remove":
                mutated = cmd_remove(collection, Prompt.ask("Topic name"))
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Happy reviewing![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
                continue
            if mutated:
                save_or_warn(collection, storage_path)
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")


@app.command("shell")
def shell_command(ctx: typer.Context):
    """Interactive menu for managing topics."""
    run_shell(ctx.obj)


def main():
    app()


if __name__ == "__main__":
    main()
