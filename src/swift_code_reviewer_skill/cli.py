"""Command-line interface for the Swift Code Reviewer skill installer."""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console

from .config import DOCS_URL, Settings, load_settings
from .installer import PackageRootNotFoundError, SkillInstaller
from .utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="swift-code-reviewer-skill",
    help="Install the Swift Code Reviewer skill into ~/.claude/skills/",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)

EXAMPLE_PROMPTS = [
    "Review this PR",
    "Review LoginView.swift",
    "Review my uncommitted changes",
    "Check if this follows our coding standards",
]


def get_settings(env_file: Path | None = None) -> Settings:
    """Load settings, exiting with a readable message when a value is invalid."""
    try:
        return load_settings(env_file)
    except ValidationError as e:
        for error in e.errors():
            field_name = ".".join(str(part) for part in error["loc"])
            err_console.print(f"  [red]Error:[/red] invalid setting {field_name}: {error['msg']}")
        raise typer.Exit(1) from e


def _banner(title: str, style: str) -> None:
    console.print(f"\n  [{style} bold]{title}[/{style} bold]")
    console.print(f"  [{style}]{'=' * (len(title) + 2)}[/{style}]\n")


def run_install(settings: Settings) -> None:
    """Install the skill and print a progress summary."""
    _banner("Swift Code Reviewer Skill Installer", "cyan")

    try:
        result = SkillInstaller(settings).install()
    except PackageRootNotFoundError as e:
        err_console.print(f"  [red]Error: Could not find {e.manifest_file} in package[/red]")
        logger.debug(str(e))
        raise typer.Exit(1) from e

    if result.created_skills_dir:
        console.print(f"  [yellow]Created skills directory: {settings.skills_dir}[/yellow]")
    if result.updated:
        console.print("  [yellow]Updated existing installation at:[/yellow]")
        console.print(f"  [yellow]{result.target_dir}[/yellow]\n")
    else:
        console.print("  [blue]Installed to:[/blue]")
        console.print(f"  [blue]{result.target_dir}[/blue]\n")

    for name in result.copied:
        console.print(f"  [green]Copied: {name}[/green]")

    console.print("\n  [bold green]Installation complete![/bold green]")
    if result.metadata:
        console.print(f"\n  Skill: [bold]{result.metadata.name}[/bold] - {result.metadata.summary}")
    console.print("\n  The skill is now available in Claude Code.")
    console.print("  Use it by asking Claude to:\n")
    for prompt in EXAMPLE_PROMPTS:
        console.print(f'    [cyan]- "{prompt}"[/cyan]')

    console.print(f"\n  [blue]Skill location: {result.target_dir}[/blue]")
    console.print(f"  [blue]Documentation: {DOCS_URL}[/blue]\n")


def run_uninstall(settings: Settings) -> None:
    """Remove the skill and report what happened."""
    _banner("Uninstalling Swift Code Reviewer Skill", "yellow")

    result = SkillInstaller(settings).uninstall()
    if result.removed:
        console.print(f"  [green]Removed: {result.target_dir}[/green]")
        console.print("\n  [bold green]Uninstallation complete![/bold green]\n")
    else:
        console.print("  [yellow]Skill not found. Nothing to uninstall.[/yellow]\n")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    env_file: Annotated[
        Path | None,
        typer.Option("--env", help="Path to .env file"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
) -> None:
    """
    Install the Swift Code Reviewer skill.

    Run without a command to install or update the skill.
    """
    if ctx.invoked_subcommand == "help":
        return

    settings = get_settings(env_file)
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        run_install(settings)


@app.command()
def install(ctx: typer.Context) -> None:
    """Install or update the skill."""
    run_install(ctx.obj)


@app.command()
def uninstall(ctx: typer.Context) -> None:
    """Remove the skill from ~/.claude/skills/."""
    run_uninstall(ctx.obj)


@app.command("remove", hidden=True)
def remove(ctx: typer.Context) -> None:
    """Alias for uninstall."""
    run_uninstall(ctx.obj)


@app.command("help")
def show_help() -> None:
    """Show usage and examples."""
    _banner("Swift Code Reviewer Skill", "cyan")
    console.print("  Usage: swift-code-reviewer-skill \\[command]\n")
    console.print("  [bold]Commands:[/bold]")
    console.print("    (none)     Install the skill to ~/.claude/skills/")
    console.print("    install    Install or update the skill")
    console.print("    uninstall  Remove the skill from ~/.claude/skills/ (alias: remove)")
    console.print("    help       Show this help message\n")
    console.print("  [bold]Examples:[/bold]")
    console.print("    [cyan]swift-code-reviewer-skill[/cyan]")
    console.print("    [cyan]swift-code-reviewer-skill uninstall[/cyan]\n")


if __name__ == "__main__":
    app()
