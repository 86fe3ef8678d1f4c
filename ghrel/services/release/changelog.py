"""Changelog discovery and per-version section extraction.

Changelogs are expected to loosely follow "Keep a Changelog": one H1 title,
one H2 heading per version, and optional reference links in a footer.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ghrel.core.result import Err, Ok, Result
from ghrel.services.release.errors import ReleaseError

# Probed in order; the first existing file wins.
CHANGELOG_CANDIDATES: tuple[str, ...] = (
    "CHANGELOG.md",
    "Changelog.md",
    "changelog.md",
    "CHANGES.md",
    "Changes.md",
    "changes.md",
    "HISTORY.md",
    "History.md",
    "history.md",
    "NEWS.md",
    "News.md",
    "news.md",
    "RELEASES.md",
    "Releases.md",
    "releases.md",
)

# Lines that close a version section: a title, the next version heading,
# or a footer reference link.
_SECTION_TERMINATORS = ("# ", "## ", "[")


def _exists_exact(project_root: Path, name: str) -> bool:
    # Path.exists() is case-insensitive on macOS/Windows; compare the listed
    # name so the probe order behaves the same on every filesystem.
    try:
        return any(p.name == name for p in project_root.iterdir())
    except OSError:
        return False


def find_changelog(
    project_root: Path,
    explicit: str | None = None,
) -> Result[Path, ReleaseError]:
    if explicit is not None:
        return Ok(project_root / explicit)

    for name in CHANGELOG_CANDIDATES:
        if _exists_exact(project_root, name):
            return Ok(project_root / name)

    return Err(
        ReleaseError(
            kind="config",
            message=f"no changelog found in {project_root}",
            hint="pass --filename or add CHANGELOG.md",
        )
    )


def read_changelog(path: Path) -> Result[str, ReleaseError]:
    try:
        return Ok(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        return Err(
            ReleaseError(
                kind="changelog",
                message=f"unable to read {path.name}",
                hint=str(e),
            )
        )


def iter_section_lines(lines: Iterable[str], version: str) -> Iterable[str]:
    marker = f"## {version}"
    inside = False
    for line in lines:
        if not inside:
            inside = line.startswith(marker)
            continue
        if line.startswith(_SECTION_TERMINATORS):
            return
        yield line


def extract_section(changelog: str, version: str) -> str:
    """Return the release notes for ``version``.

    Collects the lines after the first ``## <version>`` heading up to the next
    H1/H2 heading or footer link (or end of file), then trims surrounding
    whitespace. Returns an empty string when no heading matches.
    """
    lines = changelog.replace("\r\n", "\n").split("\n")
    return "\n".join(iter_section_lines(lines, version)).strip()
