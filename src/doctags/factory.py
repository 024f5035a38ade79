"""Tag registry: dispatch ``@name body`` lines to the right tag kind."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable

from doctags.description import StandardDescriptionFactory
from doctags.errors import ConfigurationError, DocTagError, MalformedInputError
from doctags.fqsen import FqsenResolver
from doctags.results import BatchResult, ErrorResult, Result, TagResult
from doctags.tags import STANDARD_TAGS
from doctags.tags.base import Tag
from doctags.tags.generic import Generic
from doctags.types import StandardTypeResolver

if TYPE_CHECKING:
    from doctags.context import Context
    from doctags.description import DescriptionFactory
    from doctags.fqsen import ReferenceResolver
    from doctags.types import TypeResolver

logger = logging.getLogger(__name__)

TAG_NAME = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")

TAG_LINE = re.compile(
    r"^@?(?P<name>[\w\\-]+)(?:(?:\s+|:\s*|(?=\())(?P<body>.*))?$", re.DOTALL
)


@dataclass(frozen=True)
class TagDependencies:
    """Collaborators handed to tag factories.

    A field left as None only fails when a tag kind that needs it is
    created.

    Attributes:
        type_resolver: Resolves type expressions
        reference_resolver: Resolves references to structural elements
        description_factory: Builds descriptions
    """

    type_resolver: TypeResolver | None = None
    reference_resolver: ReferenceResolver | None = None
    description_factory: DescriptionFactory | None = None

    @classmethod
    def default(cls, tag_factory: TagFactory | None = None) -> TagDependencies:
        """Wire the default resolvers and description factory.

        Parameters
        ----------
        tag_factory : TagFactory | None
            Used by the description factory for inline tags.
        """
        fqsen_resolver = FqsenResolver()
        return cls(
            type_resolver=StandardTypeResolver(fqsen_resolver),
            reference_resolver=fqsen_resolver,
            description_factory=StandardDescriptionFactory(tag_factory),
        )

    def for_handler(self, handler: type[Tag]) -> dict[str, Any]:
        """Keyword arguments for ``handler.create``."""
        return {name: getattr(self, name) for name in handler.requires}


class TagFactory:
    """Create tags from tag lines using registered handlers.

    Unknown tag names produce Generic tags.

    Parameters
    ----------
    dependencies : TagDependencies | None
        Collaborators for the handlers. Defaults to the standard ones.

    Examples
    --------
    >>> factory = StandardTagFactory()
    >>> tag = factory.create("@return string The name")
    >>> tag.get_name()
    'return'
    >>> str(tag)
    'string The name'
    """

    def __init__(self, dependencies: TagDependencies | None = None) -> None:
        self.dependencies = dependencies or TagDependencies.default(self)
        self._handlers: dict[str, type[Tag]] = {}

    def register(self, name: str, handler: type[Tag]) -> None:
        """Register ``handler`` for the ``@name`` keyword.

        Raises
        ------
        ConfigurationError
            If name is not a lower-kebab keyword or handler is not a Tag class.
        """
        if not TAG_NAME.match(name):
            raise ConfigurationError(f"Invalid tag name {name!r}; use lower-kebab-case")
        if not (isinstance(handler, type) and issubclass(handler, Tag)):
            raise ConfigurationError(f"Handler for @{name} must be a Tag subclass, got {handler!r}")

        previous = self._handlers.get(name)
        if previous is not None and previous is not handler:
            logger.warning(
                "Replacing handler for @%s: %s -> %s", name, previous.__name__, handler.__name__
            )
        self._handlers[name] = handler

    def handler_for(self, name: str) -> type[Tag] | None:
        return self._handlers.get(name)

    def registered_names(self) -> list[str]:
        return sorted(self._handlers)

    def create(self, tag_line: str, context: Context | None = None) -> Tag:
        """Create a tag from a line such as ``@see \\DateTime Description``.

        Raises
        ------
        MalformedInputError
            If the line is not a tag or its body cannot be parsed.
        ConfigurationError
            If a collaborator the tag kind needs is missing.
        """
        name, body = self.split_tag_line(tag_line)
        handler = self._handlers.get(name)

        if handler is None:
            logger.debug("No handler for @%s, creating generic tag", name)
            return Generic.create(
                body,
                description_factory=self.dependencies.description_factory,
                context=context,
                name=name,
            )

        logger.debug("Creating @%s with %s", name, handler.__name__)
        return handler.create(body, **self.dependencies.for_handler(handler), context=context)

    def try_create(self, tag_line: str, context: Context | None = None) -> Result:
        """Create a tag, returning a Result instead of raising.

        Returns
        -------
        Result
            TagResult on success, ErrorResult naming the tag and its raw
            body on failure.
        """
        try:
            name, body = self.split_tag_line(tag_line)
        except MalformedInputError as e:
            return ErrorResult(message=str(e), exception=e, body=str(tag_line))

        try:
            tag = self.create(tag_line, context)
        except DocTagError as e:
            return ErrorResult(
                message=f"Failed to create @{name} from {body!r}: {e}",
                exception=e,
                tag_name=name,
                body=body,
            )
        return TagResult(message=f"Created @{name}", tag=tag)

    def create_all(self, tag_lines: Iterable[str], context: Context | None = None) -> BatchResult:
        """Create tags from several lines, collecting failures."""
        return BatchResult([self.try_create(line, context) for line in tag_lines])

    @staticmethod
    def split_tag_line(tag_line: str) -> tuple[str, str]:
        """Split ``@name body`` into name and body.

        The name ends at whitespace, ``:`` or ``(``. A ``:`` separator is
        dropped; a ``(`` stays in the body, as in ``@Route("/users")``.

        Raises
        ------
        MalformedInputError
            If the line does not start with a tag name.
        """
        if not isinstance(tag_line, str):
            raise MalformedInputError(f"Tag line must be a string, got {type(tag_line).__name__}")

        match = TAG_LINE.match(tag_line.strip())
        if not match:
            raise MalformedInputError(f"Not a tag line: {tag_line!r}")
        return match.group("name"), match.group("body") or ""


class StandardTagFactory(TagFactory):
    """TagFactory with every built-in tag kind registered."""

    def __init__(self, dependencies: TagDependencies | None = None) -> None:
        super().__init__(dependencies)
        for handler in STANDARD_TAGS:
            self.register(handler.name, handler)
