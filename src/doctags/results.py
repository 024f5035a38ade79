"""Result types for the non-raising factory API.

This module defines:
- Result - Base result for a tag creation attempt
- TagResult - Result carrying the created tag
- ErrorResult - Result for a failed attempt, with diagnostics
- BatchResult - Aggregate result for many tag lines
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from doctags.tags.base import Tag


@dataclass
class Result:
    """Base result for a tag creation attempt.

    Attributes:
        success: Whether the tag was created
        message: Human-readable description of what happened
        data: Optional payload
    """

    success: bool
    message: str
    data: Any = None

    def __bool__(self) -> bool:
        return self.success

    def is_error(self) -> bool:
        """Check if this result represents an error."""
        return not self.success


@dataclass
class TagResult(Result):
    """Successful creation of a tag.

    Attributes:
        tag: The created tag
    """

    success: bool = field(default=True, init=False)
    message: str = ""
    tag: Tag | None = None


@dataclass
class ErrorResult(Result):
    """Failed creation of a tag - never raises automatically.

    Attributes:
        exception: The original exception, if any
        tag_name: Name of the tag that failed, without the ``@``
        body: Raw body that was being parsed
    """

    success: bool = field(default=False, init=False)
    exception: Exception | None = None
    tag_name: str = ""
    body: str = ""

    def raise_if_error(self) -> None:
        """Explicitly re-raise the exception if the programmer wants to."""
        if self.exception:
            raise self.exception
        raise RuntimeError(self.message)


@dataclass
class BatchResult:
    """Aggregate result for creating tags from several lines."""

    results: list[Result] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True if all tags were created."""
        return all(r.success for r in self.results)

    @property
    def partial_success(self) -> bool:
        """True if at least one tag was created."""
        return any(r.success for r in self.results)

    @property
    def all_failed(self) -> bool:
        """True if every attempt failed."""
        return all(not r.success for r in self.results)

    @property
    def succeeded(self) -> list[Result]:
        """Results that succeeded."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[Result]:
        """Results that failed."""
        return [r for r in self.results if not r.success]

    @property
    def tags(self) -> list[Tag]:
        """Created tags, in input order."""
        return [r.tag for r in self.results if isinstance(r, TagResult) and r.tag is not None]

    def __bool__(self) -> bool:
        return self.success

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[Result]:
        return iter(self.results)
