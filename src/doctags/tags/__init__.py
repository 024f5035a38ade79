"""Tag kinds.

Reference tags: Covers, See, Uses
Typed tags: Return_, Throws
Variable tags: Property, PropertyRead, PropertyWrite, Var
Fallback: Generic
"""
from doctags.tags.base import Tag, TagWithType
from doctags.tags.generic import Generic
from doctags.tags.reference import Covers, ReferenceTag, See, Url, Uses
from doctags.tags.typed import Return_, Throws, TypedTag
from doctags.tags.variable import Property, PropertyRead, PropertyWrite, Var, VariableTag

STANDARD_TAGS: tuple[type[Tag], ...] = (
    Covers,
    See,
    Uses,
    Return_,
    Throws,
    Property,
    PropertyRead,
    PropertyWrite,
    Var,
)

__all__ = [
    "Tag",
    "TagWithType",
    "Generic",
    "ReferenceTag",
    "Covers",
    "See",
    "Uses",
    "Url",
    "TypedTag",
    "Return_",
    "Throws",
    "VariableTag",
    "Property",
    "PropertyRead",
    "PropertyWrite",
    "Var",
    "STANDARD_TAGS",
]
