"""Result type for explicit error handling.

Every step of a release run (reading package.json, listing tags, calling
GitHub) returns ``Ok(value)`` or ``Err(error)`` instead of raising. The first
``Err`` stops the run and travels back to the CLI, which decides how to print
it and which exit code to use.

Usage:
    match resolve_release(project_root=root):
        case Ok(descriptor):
            print(descriptor.tag)
        case Err(error):
            print(f"error: {error.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed result.

    Attributes:
        error: The error value.
    """

    error: E


Result: TypeAlias = Ok[T] | Err[E]
