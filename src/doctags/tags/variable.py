"""Typed tags that may name a variable.

Grammar: ``[<type>] [$<variable>] <description>``

- ``@property-read string $name The user's name``
- ``@var int[] $ids``
- ``@property $owner``

Parsing consumes the body left to right:

1. A lead token that does not start with ``$`` is resolved as the type.
2. A following token that starts with ``$`` is the variable name.
3. Everything else, whitespace included, is the description.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctags.errors import MalformedInputError
from doctags.tags.base import VARIABLE_SIGIL, TagWithType, join_parts, require, require_body
from doctags.tokenizer import join_tokens, split_type, tokenize

if TYPE_CHECKING:
    from doctags.context import Context
    from doctags.description import Description, DescriptionFactory
    from doctags.types import Type, TypeResolver


@dataclass(frozen=True)
class VariableTag(TagWithType):
    """Base for tags of the form ``[<type>] [$<variable>] <description>``.

    Attributes:
        variable_name: Variable name without the ``$``; empty if absent
        type: Resolved type, or None when the body starts with a variable
        description: Text following the type and variable
    """

    variable_name: str = ""
    type: Type | None = None
    description: Description | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.variable_name, str):
            raise MalformedInputError(
                f"@{self.name} variable name must be a string, "
                f"got {type(self.variable_name).__name__}"
            )

    @classmethod
    def create(
        cls,
        body: str,
        type_resolver: TypeResolver | None = None,
        description_factory: DescriptionFactory | None = None,
        context: Context | None = None,
    ) -> VariableTag:
        """Parse a body such as ``"string $foo My Description"``.

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

        resolved: Type | None = None
        type_text, remainder = split_type(body)
        if type_text.startswith(VARIABLE_SIGIL):
            remainder = body
        else:
            resolved = type_resolver.resolve(type_text, context)

        tokens = tokenize(remainder)
        variable_name = ""
        if tokens and tokens[0].text.startswith(VARIABLE_SIGIL):
            variable_name = tokens[0].text[len(VARIABLE_SIGIL):]
            tokens = tokens[1:]

        return cls(
            variable_name,
            resolved,
            description_factory.create(join_tokens(tokens), context),
        )

    def get_variable_name(self) -> str:
        return self.variable_name

    def __str__(self) -> str:
        variable = f"{VARIABLE_SIGIL}{self.variable_name}" if self.variable_name else ""
        return join_parts(self.type, variable, self.description)


class Property(VariableTag):
    """``@property``: a magic property with read and write access."""

    name = "property"


class PropertyRead(VariableTag):
    """``@property-read``: a magic read-only property."""

    name = "property-read"


class PropertyWrite(VariableTag):
    """``@property-write``: a magic write-only property."""

    name = "property-write"


class Var(VariableTag):
    """``@var``: the type of a variable or property."""

    name = "var"
