"""
doctags - Parsers for individual documentation-comment tags.

Turns the body of a docblock tag such as ``@return``, ``@see`` or
``@property-read`` into an immutable object, and back into text.

Example
-------
>>> from doctags import Context, StandardTagFactory
>>>
>>> factory = StandardTagFactory()
>>> tag = factory.create("@property-read string $name The user's name")
>>> tag.get_variable_name()
'name'
>>> str(tag)
"string $name The user's name"
>>>
>>> # Create tag kinds directly with explicit collaborators
>>> from doctags import PropertyRead, StandardTypeResolver, StandardDescriptionFactory
>>> tag = PropertyRead.create(
...     "int $id",
...     type_resolver=StandardTypeResolver(),
...     description_factory=StandardDescriptionFactory(),
...     context=Context("App"),
... )

Classes
-------
Tag
    Base contract for every tag kind.

TagFactory, StandardTagFactory
    Registry dispatching ``@name body`` lines to tag kinds.

TagDependencies
    Resolvers and description factory handed to tag kinds.

Context
    Namespace and import aliases used for resolution.

Result, TagResult, ErrorResult, BatchResult
    Results of the non-raising factory API.
"""
from doctags.config import DocTagsConfig, load_config
from doctags.context import Context
from doctags.description import Description, DescriptionFactory, StandardDescriptionFactory
from doctags.errors import (
    ConfigurationError,
    DocTagError,
    EmptyBodyError,
    MalformedInputError,
    ReferenceResolutionError,
    TypeResolutionError,
)
from doctags.factory import StandardTagFactory, TagDependencies, TagFactory
from doctags.fqsen import Fqsen, FqsenResolver, ReferenceResolver
from doctags.results import BatchResult, ErrorResult, Result, TagResult
from doctags.tags import (
    STANDARD_TAGS,
    Covers,
    Generic,
    Property,
    PropertyRead,
    PropertyWrite,
    ReferenceTag,
    Return_,
    See,
    Tag,
    TagWithType,
    Throws,
    TypedTag,
    Url,
    Uses,
    Var,
    VariableTag,
)
from doctags.types import StandardTypeResolver, Type, TypeResolver

__version__ = "0.1.0"

__all__ = [
    # Tags
    "Tag",
    "TagWithType",
    "ReferenceTag",
    "TypedTag",
    "VariableTag",
    "Covers",
    "See",
    "Uses",
    "Url",
    "Return_",
    "Throws",
    "Property",
    "PropertyRead",
    "PropertyWrite",
    "Var",
    "Generic",
    "STANDARD_TAGS",
    # Factory
    "TagFactory",
    "StandardTagFactory",
    "TagDependencies",
    # Resolution
    "Context",
    "Fqsen",
    "FqsenResolver",
    "ReferenceResolver",
    "Type",
    "TypeResolver",
    "StandardTypeResolver",
    "Description",
    "DescriptionFactory",
    "StandardDescriptionFactory",
    # Results
    "Result",
    "TagResult",
    "ErrorResult",
    "BatchResult",
    # Configuration
    "DocTagsConfig",
    "load_config",
    # Errors
    "DocTagError",
    "ConfigurationError",
    "MalformedInputError",
    "EmptyBodyError",
    "TypeResolutionError",
    "ReferenceResolutionError",
]
