"""Tags that point at another structural element.

Grammar: ``<reference> [<description>]``

- ``@covers \\App\\User::save()``
- ``@see \\DateTime Used for parsing``
- ``@uses Helper::format()``
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doctags.errors import MalformedInputError
from doctags.fqsen import Fqsen
from doctags.tags.base import Tag, join_parts, require, require_body
from doctags.tokenizer import split_first

if TYPE_CHECKING:
    from doctags.context import Context
    from doctags.description import Description, DescriptionFactory
    from doctags.fqsen import ReferenceResolver

URL_PATTERN = re.compile(r"^\w+://\w", re.IGNORECASE)


@dataclass(frozen=True)
class Url:
    """A URI used as a reference, e.g. by ``@see``."""

    uri: str

    def __str__(self) -> str:
        return self.uri


@dataclass(frozen=True)
class ReferenceTag(Tag):
    """Base for tags of the form ``<reference> [<description>]``.

    Attributes:
        reference: The resolved element the tag points at
        description: Text following the reference
    """

    requires = ("reference_resolver", "description_factory")

    reference: Fqsen | Url
    description: Description | None = None

    def __post_init__(self) -> None:
        if self.reference is None:
            raise MalformedInputError(f"@{self.name} requires a reference")

    @classmethod
    def create(
        cls,
        body: str,
        reference_resolver: ReferenceResolver | None = None,
        description_factory: DescriptionFactory | None = None,
        context: Context | None = None,
    ) -> ReferenceTag:
        """Parse a body such as ``"DateTime My Description"``.

        Raises
        ------
        EmptyBodyError
            If body is empty.
        ConfigurationError
            If a resolver or the description factory is missing.
        ReferenceResolutionError
            If the reference cannot be resolved.
        """
        require_body(cls.name, body)
        require(cls.name, reference_resolver, "reference resolver")
        require(cls.name, description_factory, "description factory")

        reference_text, description_text = split_first(body)
        return cls(
            cls._resolve_reference(reference_text, reference_resolver, context),
            description_factory.create(description_text, context),
        )

    @classmethod
    def _resolve_reference(
        cls,
        text: str,
        reference_resolver: ReferenceResolver,
        context: Context | None,
    ) -> Fqsen | Url:
        return reference_resolver.resolve(text, context)

    def get_reference(self) -> Fqsen | Url:
        return self.reference

    def __str__(self) -> str:
        return join_parts(self.reference, self.description)


class Covers(ReferenceTag):
    """``@covers``: the element a test exercises."""

    name = "covers"


class See(ReferenceTag):
    """``@see``: a related element or a URL.

    URLs are kept verbatim and never passed to the reference resolver.
    """

    name = "see"

    @classmethod
    def _resolve_reference(
        cls,
        text: str,
        reference_resolver: ReferenceResolver,
        context: Context | None,
    ) -> Fqsen | Url:
        if URL_PATTERN.match(text):
            return Url(text)
        return reference_resolver.resolve(text, context)


class Uses(ReferenceTag):
    """``@uses``: an element this one depends on."""

    name = "uses"
