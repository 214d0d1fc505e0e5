"""
CLI module - Command line interface for logger-tasks

Entry point for the `lgt` command using Typer. Each build task is a
command; running `lgt` without a command runs the `default` task.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import AppConfig, load_config
from .constants import (
    COVERAGE_TASK,
    DEFAULT_TASK,
    DOXYGEN_TASK,
    PUBLISH_TASK,
    RELEASE_TASK,
    TEST_ALL_TASK,
)
from .errors import OrchestrationError
from .log import configure_logging
from .runners import RunnerCallbacks, RunnerResult, SequentialRunner
from .tools import check_tools_status
from .workflow import create_build_registry

console = Console()
err_console = Console(stderr=True)
app = typer.Typer(
    name="lgt",
    help="logger-tasks - Build, test, coverage and publish orchestration for liblogger.",
    invoke_without_command=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    if value:
        console.print(f"lgt version {__version__}")
        raise typer.Exit()


def _fail(error: OrchestrationError):
    """Report an orchestration error on stderr and exit 1."""
    err_console.print(f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(1) from error


def _config(ctx: typer.Context) -> AppConfig:
    """Config loaded by the app callback (defaults when invoked without one)."""
    if isinstance(ctx.obj, AppConfig):
        return ctx.obj
    return load_config()


@app.callback()
def main(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to config file", exists=True, dir_okay=False),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", "-v", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
):
    """logger-tasks - Build, test, coverage and publish orchestration for liblogger."""
    try:
        cfg = load_config(config)
    except OrchestrationError as e:
        _fail(e)
    configure_logging(cfg.logging)
    ctx.obj = cfg

    if ctx.invoked_subcommand is None:
        run_task(cfg, DEFAULT_TASK)


def _progress_callbacks(dry_run: bool) -> RunnerCallbacks:
    """Callbacks that print task progress to the console."""

    def on_run_start(name: str, plan: list[str]):
        console.print(f"[bold]{escape(name)}:[/bold] {escape(' -> '.join(plan))}")

    def on_task_start(name: str, description: str):
        if dry_run:
            console.print(f"  [dim]WOULD RUN:[/dim] {escape(name)}")
        else:
            console.print(f"  [cyan]RUN:[/cyan] {escape(name)}")

    def on_task_complete(name: str, success: bool):
        if dry_run:
            return
        if success:
            console.print(f"  [green]✓[/green] {escape(name)}")
        else:
            console.print(f"  [red]✗[/red] {escape(name)}")

    def on_run_complete(result: RunnerResult):
        if dry_run:
            console.print("\n[dim]Dry run - no tasks executed. Remove --dry-run to execute.[/dim]")
        elif result.success:
            console.print(f"\n[bold green]Complete:[/bold green] {result.tasks_completed} tasks")
        elif result.skipped:
            console.print(f"  [yellow]Skipped:[/yellow] {escape(', '.join(result.skipped))}")

    return RunnerCallbacks(
        on_run_start=on_run_start,
        on_task_start=on_task_start,
        on_task_complete=on_task_complete,
        on_run_complete=on_run_complete,
    )


def run_task(config: AppConfig, name: str, dry_run: bool = False) -> RunnerResult:
    """
    Run a task and its prerequisites, exiting non-zero on failure.

    The failing task, path or setting is reported on stderr.
    """
    try:
        registry = create_build_registry(config)
        runner = SequentialRunner(registry, dry_run=dry_run)
        if not dry_run and PUBLISH_TASK in runner.plan(name):
            # Refuse before building anything rather than after the release
            config.install.require_root()
        return runner.run(name, _progress_callbacks(dry_run))
    except OrchestrationError as e:
        _fail(e)


@app.command("test:all")
def test_all(ctx: typer.Context):
    """Run all unit tests."""
    run_task(_config(ctx), TEST_ALL_TASK)


@app.command()
def release(ctx: typer.Context):
    """Build the release shared library."""
    run_task(_config(ctx), RELEASE_TASK)


@app.command()
def default(ctx: typer.Context):
    """Run all tests, then build the release (same as running lgt with no command)."""
    run_task(_config(ctx), DEFAULT_TASK)


@app.command()
def coverage(ctx: typer.Context):
    """Instrument and run all tests for coverage, then summarize the report."""
    run_task(_config(ctx), COVERAGE_TASK)


@app.command()
def doxygen(ctx: typer.Context):
    """Generate API documentation with Doxygen."""
    run_task(_config(ctx), DOXYGEN_TASK)


@app.command()
def publish(ctx: typer.Context):
    """
    Build the release, then install the library and header.

    Files go to <root>/lib and <root>/include, where root is $HOME/usr
    unless LGT_INSTALL_ROOT or install.root in the config says otherwise.
    """
    run_task(_config(ctx), PUBLISH_TASK)


@app.command("run")
def run_cmd(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Task name (see lgt list)")],
    dry_run: Annotated[bool, typer.Option("--dry-run", "-n", help="Show the tasks that would run")] = False,
):
    """
    Run any registered task by name.

    [bold]Examples:[/bold]

        lgt run gcov:all

        lgt run publish --dry-run
    """
    run_task(_config(ctx), name, dry_run=dry_run)


@app.command("list")
def list_tasks(ctx: typer.Context):
    """List all tasks with their prerequisites."""
    registry = create_build_registry(_config(ctx))

    table = Table(title="Tasks")
    table.add_column("Task", style="cyan")
    table.add_column("Prerequisites", style="dim")
    table.add_column("Description")

    for task in registry:
        table.add_row(task.name, ", ".join(task.prerequisites) or "-", task.description)

    console.print(table)


@app.command()
def check(ctx: typer.Context):
    """Check the external toolchain and show where each tool is."""
    tools = check_tools_status(_config(ctx))

    table = Table(title="External Tools")
    table.add_column("Tool", style="cyan")
    table.add_column("Status")
    table.add_column("Path", style="dim")

    for tool, path in tools.items():
        if path:
            status_str = "[green]Available[/green]"
            path_str = str(path)
        else:
            status_str = "[red]Missing[/red]"
            path_str = "-"
        table.add_row(tool, status_str, path_str)

    console.print(table)

    missing = [t for t, p in tools.items() if p is None]
    if missing:
        console.print("\n[yellow]Warning:[/yellow] Some tools are missing.")
        console.print("Install the toolchain: gem install ceedling; sudo apt install doxygen gcc")


def main_cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main_cli()
