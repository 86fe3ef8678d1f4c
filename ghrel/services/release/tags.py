from __future__ import annotations

import re

from ghrel.core.result import Err, Ok, Result
from ghrel.services.release.errors import ReleaseError


def tag_pattern(name: str, version: str) -> re.Pattern[str]:
    """Match ``<version>`` or ``<name>_v<version>`` as a whole line."""
    return re.compile(
        rf"^(?:{re.escape(name)}_v)?{re.escape(version)}$",
        re.MULTILINE,
    )


def find_tag(tags_text: str, *, name: str, version: str) -> Result[str, ReleaseError]:
    """Pick the first tag in ``git tag`` output matching the manifest."""
    match = tag_pattern(name, version).search(tags_text.replace("\r\n", "\n"))
    if match is None:
        return Err(
            ReleaseError(
                kind="tag",
                message=f"tag {version} or {name}_v{version} not found",
                hint=f"git tag {version}",
            )
        )
    return Ok(match.group(0))
