"""Runtime settings for a release run.

Settings come from two places: the environment (token, API endpoint, HTTP
timeout) and the command line (project root, changelog override). They are
resolved once at startup into a frozen ``Settings`` value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result

__all__ = [
    "ConfigError",
    "Settings",
    "load_settings",
    "DEFAULT_API_URL",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "TOKEN_ENV",
    "API_URL_ENV",
    "HTTP_TIMEOUT_ENV",
]

TOKEN_ENV = "GITHUB_TOKEN"
API_URL_ENV = "GITHUB_API_URL"
HTTP_TIMEOUT_ENV = "GHREL_HTTP_TIMEOUT"

DEFAULT_API_URL = "https://api.github.com"
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when a required runtime input is missing or invalid."""

    message: str
    hint: str | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Resolved settings for one invocation.

    Attributes:
        token: GitHub token used for both API calls.
        project_root: Directory holding package.json and the changelog.
        changelog_filename: Explicit changelog path, or None to probe.
        api_url: GitHub REST API base URL, without trailing slash.
        http_timeout: Per-request timeout in seconds.
    """

    token: str
    project_root: Path
    changelog_filename: str | None = None
    api_url: str = DEFAULT_API_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS


def _parse_timeout(raw: str | None) -> Result[float, ConfigError]:
    if raw is None or not raw.strip():
        return Ok(DEFAULT_HTTP_TIMEOUT_SECONDS)
    try:
        value = float(raw)
    except ValueError:
        return Err(ConfigError(f"{HTTP_TIMEOUT_ENV} must be a number", hint=raw))
    if value <= 0:
        return Err(ConfigError(f"{HTTP_TIMEOUT_ENV} must be positive", hint=raw))
    return Ok(value)


def load_settings(
    env: Mapping[str, str],
    *,
    project_root: Path,
    changelog_filename: str | None = None,
) -> Result[Settings, ConfigError]:
    """Build Settings from environment variables and CLI options.

    Args:
        env: Environment mapping (usually ``os.environ``).
        project_root: Project directory.
        changelog_filename: Value of ``--filename``, if given.

    Returns:
        Ok(Settings), or Err(ConfigError) when the token is absent or a
        value cannot be parsed.
    """
    token = env.get(TOKEN_ENV, "").strip()
    if not token:
        return Err(
            ConfigError(
                f"{TOKEN_ENV} required",
                hint=f"export {TOKEN_ENV}=<personal access token>",
            )
        )

    timeout = _parse_timeout(env.get(HTTP_TIMEOUT_ENV))
    if isinstance(timeout, Err):
        return timeout

    api_url = env.get(API_URL_ENV, "").strip().rstrip("/") or DEFAULT_API_URL

    filename = changelog_filename.strip() if changelog_filename else None

    return Ok(
        Settings(
            token=token,
            project_root=project_root,
            changelog_filename=filename or None,
            api_url=api_url,
            http_timeout=timeout.value,
        )
    )
