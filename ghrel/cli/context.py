from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from ghrel.core.config import Settings, load_settings
from ghrel.core.errors import ErrorCode
from ghrel.core.result import Err
from ghrel.output.console import ConsoleProtocol, RichConsole
from ghrel.output.errors import print_error
from ghrel.services.github.http import HttpClient, RealHttpClient


@dataclass(frozen=True, slots=True)
class CLIContext:
    settings: Settings
    console: ConsoleProtocol
    http: HttpClient


def build_context(*, project_root: Path, changelog_filename: str | None) -> CLIContext:
    console = RichConsole()
    settings = load_settings(
        os.environ,
        project_root=project_root,
        changelog_filename=changelog_filename,
    )
    if isinstance(settings, Err):
        print_error(settings.error, console)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    http = RealHttpClient(token=settings.value.token, timeout=settings.value.http_timeout)
    return CLIContext(settings=settings.value, console=console, http=http)
