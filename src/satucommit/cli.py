"""
Command line interface for the satucommit tool.

This module defines the ``main`` click group used as the entry point of
the ``satucommit`` command. Its sub-commands check the repository,
analyse the staged changes, synthesise a gitmoji-prefixed conventional
commit message and optionally commit it. Exit codes: 0 on success or
when nothing is staged, 1 on any failure.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import click

from satucommit import __version__
from satucommit.config.loader import ConfigError, load_config, scope_vocabulary
from satucommit.grouping.change_classifier import classify_changes
from satucommit.grouping.group_model import ChangeSet
from satucommit.grouping.grouper import generate_grouped_commits, group_changes
from satucommit.message.catalog import COMMIT_TYPES, DEFAULT_TYPE, GITMOJIS
from satucommit.message.generator import (
    format_commit_message,
    generate_commit_message,
    suggest_type,
)
from satucommit.vcs.git_client import GitClient, StagedChange, collect_staged_changes

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_NO_CHANGES = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_REPO = 1
EXIT_CONFIG_ERROR = 1
EXIT_COMMIT_FAILURE = 1

SEPARATOR_WIDTH = 50


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_separator() -> None:
    click.echo(click.style("─" * SEPARATOR_WIDTH, fg="bright_black"))


def print_info(message: str, indent: int = 0) -> None:
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0) -> None:
    """Print a success message."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✓ {message}", fg="green"))


def print_warning(message: str, indent: int = 0) -> None:
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}⚠ {message}", fg="yellow"))


def print_error(message: str, indent: int = 0) -> None:
    """Print an error message."""
    prefix = "  " * indent
    click.echo(click.style(f"{prefix}✗ {message}", fg="red"), err=True)


def print_analysis(changes: ChangeSet) -> None:
    """Print how many paths landed in each status bucket."""
    print_separator()
    click.echo(click.style(f"✓ Added: {len(changes.added)}", fg="green"))
    click.echo(click.style(f"✓ Modified: {len(changes.modified)}", fg="yellow"))
    click.echo(click.style(f"✓ Deleted: {len(changes.deleted)}", fg="red"))
    click.echo(click.style(f"✓ Renamed: {len(changes.renamed)}", fg="cyan"))
    if changes.unclassified:
        click.echo(click.style(f"✓ Other: {len(changes.unclassified)}", fg="magenta"))
    print_separator()


def print_message(message: str) -> None:
    """Print a generated commit message."""
    print_success("Generated commit message:")
    click.echo("")
    click.echo(click.style(message, bold=True))
    click.echo("")
    print_separator()


# ---------------------------------------------------------------------------
# Shared steps
# ---------------------------------------------------------------------------

def require_config() -> Dict[str, Any]:
    """Load the user configuration or exit with :data:`EXIT_CONFIG_ERROR`."""
    try:
        return load_config()
    except ConfigError as exc:
        print_error(f"Configuration error: {exc}")
        raise click.exceptions.Exit(EXIT_CONFIG_ERROR)


def open_repository() -> GitClient:
    """Return a client for the current directory or exit if it is no repository."""
    client = GitClient(Path.cwd())
    if not client.is_repository():
        print_error("Not a git repository")
        raise click.exceptions.Exit(EXIT_NO_REPO)
    logger.debug("Using repository at %s", client.repo_root)
    return client


def require_staged_changes(client: GitClient) -> List[StagedChange]:
    """Return the staged changes or exit successfully when there are none."""
    changes = collect_staged_changes(client)
    if not changes:
        print_warning("No staged changes found. Please stage your changes first using:")
        click.echo(click.style("  git add <files>", fg="cyan"))
        click.echo(click.style("  git add .", fg="cyan"))
        raise click.exceptions.Exit(EXIT_NO_CHANGES)
    logger.debug("Found %d staged change(s)", len(changes))
    return changes


def execute_commit(client: GitClient, message: str) -> None:
    """Commit with ``message`` or exit with :data:`EXIT_COMMIT_FAILURE`."""
    if not client.commit(message):
        print_error("Commit failed")
        raise click.exceptions.Exit(EXIT_COMMIT_FAILURE)
    click.echo("")
    print_success("Commit successful!")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn unexpected exceptions of a command into exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.Exit, click.exceptions.Abort, click.ClickException):
            # Click's own control flow; let Click handle it
            raise
        except Exception as exc:
            logging.exception("Unhandled error: %s", exc)
            print_error(f"Error: {exc}")
            raise click.exceptions.Exit(EXIT_GENERIC_ERROR)

    return wrapper


class AliasedGroup(click.Group):
    """Click group that also accepts the short command aliases."""

    aliases = {"i": "interactive", "q": "quick"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@click.group(cls=AliasedGroup)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="satucommit")
def main(verbose: bool) -> None:
    """✨ Generate semantic git commit messages with gitmoji.

    Analyses the staged changes of the current repository and proposes a
    conventional commit message, optionally split into topic groups.
    """
    # force=True reconfigures handlers on repeated invocations (tests).
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )


@main.command()
@click.option("-t", "--type", "commit_type", help="Commit type (feat, fix, docs, etc.).")
@click.option("-s", "--scope", help="Commit scope.")
@click.option("-d", "--description", help="Commit description.")
@click.option("-b", "--body", help="Commit body.")
@click.option("-f", "--footer", help="Commit footer.")
@click.option("--breaking", is_flag=True, help="Mark as breaking change.")
@click.option("-g", "--group", is_flag=True, help="Group changes and generate multiple commits.")
@click.option("--dry-run", is_flag=True, help="Show commit message without committing.")
@handle_errors
def generate(
    commit_type: Optional[str],
    scope: Optional[str],
    description: Optional[str],
    body: Optional[str],
    footer: Optional[str],
    breaking: bool,
    group: bool,
    dry_run: bool,
) -> None:
    """Generate a semantic commit message based on staged changes."""
    config = require_config()
    client = open_repository()
    staged = require_staged_changes(client)

    click.echo(click.style("📊 Analyzing staged changes...", fg="blue"))
    changes = classify_changes(staged, scope_vocabulary(config))
    print_analysis(changes)

    if group:
        click.echo(click.style("\n🔄 Grouping changes by similarity...", fg="blue"))
        plans = generate_grouped_commits(group_changes(staged))
        if not plans:
            print_warning("No changes to commit")
            return

        click.echo("")
        print_success(f"Generated {len(plans)} commit message{'s' if len(plans) > 1 else ''}:")
        for index, plan in enumerate(plans, 1):
            message = format_commit_message(plan.type, scope or "", plan.description)
            click.echo(click.style(f"\nCommit {index}:", fg="cyan"))
            click.echo(f"  {message}")
            click.echo(click.style(f"  Files: {len(plan.files)}", fg="bright_black"))
            for line in plan.files:
                click.echo(f"    • {line}")

        if not dry_run:
            click.echo("")
            print_separator()
            print_warning("Grouped commits require manual execution.")
            click.echo(click.style("Please review and commit each group separately.", fg="cyan"))
        return

    if commit_type and description:
        if commit_type not in GITMOJIS:
            print_warning(f"Unknown commit type '{commit_type}', using the {DEFAULT_TYPE} marker")
        message = format_commit_message(
            commit_type,
            scope or "",
            description,
            body or "",
            footer or "",
            breaking,
        )
    else:
        message = generate_commit_message(
            changes,
            description or config["default_description"],
            breaking,
        )

    click.echo("")
    print_message(message)

    if dry_run:
        print_warning("Dry run mode - no commit was made")
        return
    execute_commit(client, message)


@main.command()
@handle_errors
def types() -> None:
    """Show available commit types."""
    click.echo(click.style("📋 Available Commit Types:\n", fg="blue"))
    for commit_type, description in COMMIT_TYPES.items():
        marker = GITMOJIS.get(commit_type, "")
        click.echo(
            click.style(f"{marker} {commit_type.ljust(15)}", fg="cyan")
            + click.style(f" - {description}", fg="bright_black")
        )


@main.command()
@handle_errors
def scopes() -> None:
    """Show common commit scopes."""
    config = require_config()
    click.echo(click.style("📋 Common Commit Scopes:\n", fg="blue"))
    for scope in scope_vocabulary(config):
        click.echo(click.style(f"  • {scope}", fg="cyan"))


@main.command()
@handle_errors
def interactive() -> None:
    """Interactive mode to build a commit message (alias: i)."""
    config = require_config()
    click.echo(click.style("🎯 Interactive Commit Builder\n", fg="blue"))

    client = open_repository()
    staged = require_staged_changes(client)
    changes = classify_changes(staged, scope_vocabulary(config))
    print_analysis(changes)

    suggested = suggest_type(changes.types) or DEFAULT_TYPE
    click.echo(click.style(f"\n📝 Suggested type: {suggested} ({COMMIT_TYPES[suggested]})", fg="blue"))

    commit_type = click.prompt("Commit type (feat, fix, docs, etc.)", default=suggested).strip()
    scope = click.prompt("Scope (optional)", default="", show_default=False).strip()
    description = click.prompt("Description").strip()
    breaking = click.confirm("Breaking change?", default=False)
    body = click.prompt("Body (optional, press Enter to skip)", default="", show_default=False).strip()
    footer = click.prompt("Footer (optional, press Enter to skip)", default="", show_default=False).strip()

    message = format_commit_message(commit_type, scope, description, body, footer, breaking)

    click.echo("")
    print_separator()
    print_message(message)

    if not click.confirm("Commit with this message?", default=True):
        print_warning("Commit cancelled")
        return
    execute_commit(client, message)


@main.command()
@click.option("-d", "--description", help="Commit description.")
@click.option("--dry-run", is_flag=True, help="Show commit message without committing.")
@handle_errors
def quick(description: Optional[str], dry_run: bool) -> None:
    """Quick commit with an auto-generated message (alias: q)."""
    config = require_config()
    client = open_repository()
    staged = require_staged_changes(client)
    changes = classify_changes(staged, scope_vocabulary(config))

    message = generate_commit_message(changes, description or config["default_description"])
    print_message(message)

    if dry_run:
        print_warning("Dry run mode - no commit was made")
        return
    execute_commit(client, message)
