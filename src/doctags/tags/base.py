"""Base contract shared by every tag kind.

Each tag kind is a frozen dataclass with a fixed ``name`` (the keyword
after ``@``), a ``create`` factory that parses a raw body and a
``__str__`` that rebuilds the body in canonical form.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from doctags.errors import ConfigurationError, EmptyBodyError

if TYPE_CHECKING:
    from doctags.description import Description
    from doctags.types import Type

VARIABLE_SIGIL = "$"


class Tag(ABC):
    """A single parsed documentation tag.

    Subclasses declare:
    - ``name``: the tag keyword, e.g. ``"property-read"``
    - ``requires``: keyword arguments of ``create`` naming the
      collaborators the kind cannot work without
    """

    name: ClassVar[str] = ""
    requires: ClassVar[tuple[str, ...]] = ()

    description: Description | None

    @classmethod
    @abstractmethod
    def create(cls, body: str, **kwargs: Any) -> Tag:
        """Parse ``body`` into a new tag instance."""

    @abstractmethod
    def __str__(self) -> str:
        """Canonical body text, without the ``@name`` prefix."""

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> Description | None:
        return self.description

    def render(self) -> str:
        """Render the full tag, e.g. ``@return string Description``."""
        body = str(self)
        return f"@{self.get_name()} {body}" if body else f"@{self.get_name()}"


class TagWithType(Tag):
    """A tag that may carry a resolved type."""

    requires = ("type_resolver", "description_factory")

    type: Type | None

    def get_type(self) -> Type | None:
        return self.type


def require_body(tag_name: str, body: Any) -> str:
    """Return ``body`` if it is a non-empty string.

    Raises
    ------
    EmptyBodyError
        If body is not a string or contains only whitespace.
    """
    if not isinstance(body, str):
        raise EmptyBodyError(f"@{tag_name} body must be a string, got {type(body).__name__}")
    if not body.strip():
        raise EmptyBodyError(f"@{tag_name} body must not be empty")
    return body


def require(tag_name: str, collaborator: Any, label: str) -> Any:
    """Return ``collaborator``, or fail if the caller did not supply it.

    Raises
    ------
    ConfigurationError
        If collaborator is None.
    """
    if collaborator is None:
        raise ConfigurationError(f"@{tag_name} requires a {label}")
    return collaborator


def join_parts(*parts: object) -> str:
    """Join the non-empty string forms of ``parts`` with single spaces."""
    return " ".join(text for text in (str(p) for p in parts if p is not None) if text)
