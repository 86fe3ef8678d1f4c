from __future__ import annotations

from pathlib import Path

import typer

from ghrel import __version__
from ghrel.cli.context import build_context
from ghrel.core.errors import ErrorCode
from ghrel.core.result import Err
from ghrel.output.console import Style
from ghrel.output.errors import print_error, release_error_exit_code
from ghrel.services.release.publisher import publish_release
from ghrel.services.release.resolver import resolve_release

app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
    help="Publish a GitHub release from package.json and the changelog.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.command()
def release(
    filename: str | None = typer.Option(
        None,
        "--filename",
        help="Changelog file (default: first of CHANGELOG.md, CHANGES.md, HISTORY.md, ...)",
    ),
    cwd: Path = typer.Option(
        Path("."),
        "--cwd",
        help="Project directory containing package.json",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Resolve the release and print it without calling GitHub.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show resolution details."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Create the GitHub release for the current package version, if missing."""
    del version
    ctx = build_context(project_root=cwd.expanduser().resolve(), changelog_filename=filename)
    console = ctx.console

    resolved = resolve_release(
        project_root=ctx.settings.project_root,
        changelog_filename=ctx.settings.changelog_filename,
        console=console if verbose else None,
    )
    if isinstance(resolved, Err):
        print_error(resolved.error, console)
        raise typer.Exit(code=release_error_exit_code(resolved.error))

    descriptor = resolved.value
    if not descriptor.body:
        console.warning(f"no changelog notes found for {descriptor.tag}")

    if dry_run:
        console.print(f"{descriptor.release_path} (dry run)", Style.INFO)
        if descriptor.body:
            console.print(descriptor.body, Style.DIM)
        return

    outcome = publish_release(
        http=ctx.http,
        api_url=ctx.settings.api_url,
        descriptor=descriptor,
    )
    if isinstance(outcome, Err):
        print_error(outcome.error, console)
        raise typer.Exit(code=release_error_exit_code(outcome.error))

    if outcome.value.status == "released":
        console.success(outcome.value.message)
    else:
        console.print(outcome.value.message)


def main() -> None:
    app()
