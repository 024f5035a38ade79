"""Fallback tag for keywords without a dedicated handler."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctags.errors import MalformedInputError
from doctags.tags.base import Tag, join_parts, require

if TYPE_CHECKING:
    from doctags.context import Context
    from doctags.description import Description, DescriptionFactory

GENERIC_NAME = re.compile(r"^[\w\\-]+$")


@dataclass(frozen=True)
class Generic(Tag):
    """Any tag kept as a name plus description, e.g. ``@since 1.2``.

    Unlike the other kinds the name is set per instance.
    """

    requires = ("description_factory",)

    name: str
    description: Description | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not GENERIC_NAME.match(self.name):
            raise MalformedInputError(f"Invalid tag name {self.name!r}")

    @classmethod
    def create(
        cls,
        body: str,
        description_factory: DescriptionFactory | None = None,
        context: Context | None = None,
        name: str = "",
    ) -> Generic:
        """Create a generic tag. The body may be empty."""
        if not isinstance(body, str):
            raise MalformedInputError(f"@{name} body must be a string, got {type(body).__name__}")
        require(name, description_factory, "description factory")

        return cls(name, description_factory.create(body, context))

    def __str__(self) -> str:
        return join_parts(self.description)
