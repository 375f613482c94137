"""CLI commands for git-ranger."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from gitranger.errors import RangerError
from gitranger.git import GitResult
from gitranger.models.config import CONFIG_FILENAME
from gitranger.models.repo import RepoTarget
from gitranger.models.report import PreviewReport, SyncReport
from gitranger.ranger import GitRanger
from gitranger.templates import init_config

console = Console()
err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False, show_time=False)],
        force=True,
    )


def fail(ctx: click.Context, error: Exception) -> NoReturn:
    err_console.print(f"[red]Error: {escape(str(error))}[/red]")
    ctx.exit(1)


@click.group()
@click.option(
    "--config", "-c", "config_path",
    default=f"./{CONFIG_FILENAME}",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Manifest file",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.version_option(package_name="git-ranger")
@click.pass_context
def main(ctx: click.Context, config_path: Path, verbose: bool) -> None:
    """git-ranger - keep local Git repositories in sync with a manifest."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["ranger"] = GitRanger(config_path)


@main.command()
@click.option(
    "--dir", "-d", "directory",
    default=".",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write ranger.yaml into",
)
@click.pass_context
def init(ctx: click.Context, directory: Path) -> None:
    """Write a starter ranger.yaml."""
    try:
        config_path = init_config(directory)
    except RangerError as e:
        fail(ctx, e)

    console.print(f"[green]✓ Initialized git-ranger configuration at {config_path}[/green]")
    console.print("\nNext steps:")
    console.print(f"  1. Edit {CONFIG_FILENAME} with your providers and repositories")
    console.print("  2. Run 'git-ranger sync' to clone and fetch everything")


def _print_progress(target: RepoTarget, action: str, result: GitResult) -> None:
    verb = "Cloned" if action == "clone" else "Fetched updates"
    if result.success:
        console.print(f"[green]✓[/green] {verb}: {target.name}")
    else:
        err_console.print(f"[red]✗ Failed to {action} {target.name}: {escape(result.detail)}[/red]")


def _print_preview(report: PreviewReport) -> None:
    console.print("\n[bold]=== Dry Run Mode ===[/bold]")
    console.print(f"Total repositories: {report.total_repos}")
    console.print(f"Repos to clone: {report.repos_to_clone}")
    console.print(f"Repos to fetch: {report.repos_to_fetch}")

    if report.total_repos:
        table = Table(title="Planned Actions")
        table.add_column("Action", style="yellow")
        table.add_column("Name", style="cyan")
        table.add_column("Path", style="dim")

        for target in report.to_clone:
            table.add_row("clone", target.name, str(target.local_path))
        for target in report.to_fetch:
            table.add_row("fetch", target.name, str(target.local_path))

        console.print(table)

    console.print("[dim]No changes made. Run without --dry-run to execute.[/dim]")


def _print_summary(report: SyncReport, warnings: list[str]) -> None:
    table = Table(title="Sync Summary")
    table.add_column("Total", justify="right")
    table.add_column("Cloned", justify="right", style="green")
    table.add_column("Fetched", justify="right", style="green")
    table.add_column("Errors", justify="right", style="red")
    table.add_row(
        str(report.total_repos),
        str(report.repos_cloned),
        str(report.repos_fetched),
        str(len(report.errors)),
    )
    console.print(table)

    for error in report.errors:
        err_console.print(f"  - {escape(error)}")
    if warnings:
        console.print(f"[yellow]{len(warnings)} warning(s) during discovery[/yellow]")


@main.command()
@click.argument("target", required=False)
@click.option("--dry-run", "-n", is_flag=True, help="Preview without making changes")
@click.pass_context
def sync(ctx: click.Context, target: str | None, dry_run: bool) -> None:
    """Clone missing repositories and fetch updates.

    TARGET limits the run to repos whose URL, or groups whose name, contain it.
    """
    ranger: GitRanger = ctx.obj["ranger"]

    try:
        target_set, report = ranger.sync(target, dry_run=dry_run, progress_callback=_print_progress)
    except RangerError as e:
        fail(ctx, e)

    if isinstance(report, PreviewReport):
        _print_preview(report)
        return

    _print_summary(report, target_set.warnings)

    if not report.success:
        ctx.exit(1)


@main.command()
@click.argument("target", required=False)
@click.pass_context
def status(ctx: click.Context, target: str | None) -> None:
    """Show which configured repositories are cloned."""
    ranger: GitRanger = ctx.obj["ranger"]

    try:
        with console.status("Discovering repositories..."):
            _, report = ranger.status(target)
    except RangerError as e:
        fail(ctx, e)

    if not report.repos:
        console.print("[yellow]No repositories configured.[/yellow]")
        return

    table = Table(title="Repository Status")
    table.add_column("Name", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Path", style="dim")

    for repo in report.repos:
        state = "[green]cloned[/green]" if repo.exists else "[yellow]not cloned[/yellow]"
        table.add_row(repo.name, state, str(repo.local_path))

    console.print(table)
    console.print(
        f"Total: {report.total_repos}  Cloned: {report.repos_cloned}  "
        f"Not cloned: {report.repos_not_cloned}"
    )


@main.command()
@click.argument("target", required=False)
@click.pass_context
def ls(ctx: click.Context, target: str | None) -> None:
    """List configured repositories and their local paths."""
    ranger: GitRanger = ctx.obj["ranger"]

    try:
        with console.status("Discovering repositories..."):
            _, repos = ranger.ls(target)
    except RangerError as e:
        fail(ctx, e)

    if not repos:
        console.print("[yellow]No repositories configured.[/yellow]")
        return

    table = Table(title="Configured Repositories")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="blue")
    table.add_column("Local Path", style="dim")
    table.add_column("Source", style="yellow")

    for repo in repos:
        table.add_row(repo.name, repo.url, str(repo.local_path), repo.source)

    console.print(table)
    console.print(f"[dim]Total: {len(repos)} repositories[/dim]")


if __name__ == "__main__":
    main()
