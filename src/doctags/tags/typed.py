"""Typed tags without a variable name.

Grammar: ``[<type>] <description>``

- ``@return string The user's name``
- ``@throws \\InvalidArgumentException When the id is negative``
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctags.tags.base import TagWithType, join_parts, require, require_body
from doctags.tokenizer import split_type
from doctags.types import looks_like_type

if TYPE_CHECKING:
    from doctags.context import Context
    from doctags.description import Description, DescriptionFactory
    from doctags.types import Type, TypeResolver


@dataclass(frozen=True)
class TypedTag(TagWithType):
    """Base for tags of the form ``[<type>] <description>``.

    Attributes:
        type: Resolved type, or None when the body starts with plain text
        description: Text following the type
    """

    type: Type | None = None
    description: Description | None = None

    @classmethod
    def create(
        cls,
        body: str,
        type_resolver: TypeResolver | None = None,
        description_factory: DescriptionFactory | None = None,
        context: Context | None = None,
    ) -> TypedTag:
        """Parse a body such as ``"string My Description"``.

        A lead token that is not shaped like a type (``"(optional)"``,
        ``"42"``) leaves the type unset and the whole body becomes the
        description. A type-shaped token that fails to resolve is an error.

        Raises
        ------
        EmptyBodyError
            If body is empty.
        ConfigurationError
            If the type resolver or description factory is missing.
        TypeResolutionError
            If the lead type expression cannot be resolved.
        """
        require_body(cls.name, body)
        require(cls.name, type_resolver, "type resolver")
        require(cls.name, description_factory, "description factory")

        type_text, description_text = split_type(body)
        resolved: Type | None = None
        if looks_like_type(type_text):
            resolved = type_resolver.resolve(type_text, context)
        else:
            description_text = body

        return cls(resolved, description_factory.create(description_text, context))

    def __str__(self) -> str:
        return join_parts(self.type, self.description)


class Return_(TypedTag):
    """``@return``: type and meaning of the return value."""

    name = "return"


class Throws(TypedTag):
    """``@throws``: an exception the element may raise."""

    name = "throws"
