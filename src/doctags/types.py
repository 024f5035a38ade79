"""Type values and the default type expression resolver.

A type expression is the textual type written in a tag, for example
``string``, ``int|null``, ``?\\DateTime``, ``string[]`` or
``array<int, User>``. Resolving it produces a tree of Type values whose
``str()`` is the canonical spelling.

Examples
--------
>>> resolver = StandardTypeResolver()
>>> str(resolver.resolve("Integer|NULL"))
'int|null'
>>> resolver.resolve("string") == String_()
True
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Protocol

from doctags.context import Context
from doctags.errors import ReferenceResolutionError, TypeResolutionError
from doctags.fqsen import NAME, Fqsen, FqsenResolver


@dataclass(frozen=True)
class Type:
    """Base class for all resolved types."""

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Keyword(Type):
    """A type spelled by a single reserved word."""

    keyword: ClassVar[str] = ""

    def __str__(self) -> str:
        return self.keyword


class String_(Keyword):
    keyword = "string"


class Integer(Keyword):
    keyword = "int"


class Float_(Keyword):
    keyword = "float"


class Boolean(Keyword):
    keyword = "bool"


class Mixed_(Keyword):
    keyword = "mixed"


class Void_(Keyword):
    keyword = "void"


class Null_(Keyword):
    keyword = "null"


class Callable_(Keyword):
    keyword = "callable"


class Iterable_(Keyword):
    keyword = "iterable"


class Resource_(Keyword):
    keyword = "resource"


class Scalar(Keyword):
    keyword = "scalar"


class Self_(Keyword):
    keyword = "self"


class Static_(Keyword):
    keyword = "static"


class This(Keyword):
    keyword = "$this"


class Never_(Keyword):
    keyword = "never"


class False_(Keyword):
    keyword = "false"


class True_(Keyword):
    keyword = "true"


@dataclass(frozen=True)
class Array_(Type):
    """An array, optionally typed by value and key."""

    value_type: Type | None = None
    key_type: Type | None = None

    def __str__(self) -> str:
        if self.value_type is None:
            return "array"
        if self.key_type is not None:
            return f"array<{self.key_type}, {self.value_type}>"
        if isinstance(self.value_type, (Compound, Nullable)):
            return f"array<{self.value_type}>"
        return f"{self.value_type}[]"


@dataclass(frozen=True)
class Object_(Type):
    """An object, optionally of a specific class."""

    fqsen: Fqsen | None = None

    def __str__(self) -> str:
        return str(self.fqsen) if self.fqsen is not None else "object"


@dataclass(frozen=True)
class Nullable(Type):
    """``?T``: the given type or null."""

    actual_type: Type

    def __str__(self) -> str:
        return f"?{self.actual_type}"


@dataclass(frozen=True)
class Compound(Type):
    """``A|B``: any of the member types."""

    types: tuple[Type, ...]

    def __str__(self) -> str:
        return "|".join(str(t) for t in self.types)

    def __iter__(self):
        return iter(self.types)


KEYWORDS: dict[str, type[Type]] = {
    "string": String_,
    "int": Integer,
    "integer": Integer,
    "float": Float_,
    "double": Float_,
    "bool": Boolean,
    "boolean": Boolean,
    "array": Array_,
    "object": Object_,
    "mixed": Mixed_,
    "void": Void_,
    "null": Null_,
    "callable": Callable_,
    "callback": Callable_,
    "iterable": Iterable_,
    "resource": Resource_,
    "scalar": Scalar,
    "self": Self_,
    "static": Static_,
    "$this": This,
    "never": Never_,
    "false": False_,
    "true": True_,
}

CLASS_NAME = re.compile(rf"^\\?{NAME}(?:\\{NAME})*$")
ARRAY_GENERIC = re.compile(r"^array<(?P<args>.*)>$", re.IGNORECASE | re.DOTALL)

# Lead tokens that can start a type: a name, a backslash, ``?`` or ``$this``.
TYPE_SHAPED = re.compile(r"^(?:\$this(?!\w)|[?\\A-Za-z_\x7f-\uffff])[\w\\|?\[\]<>,\x7f-\uffff$]*$")


def looks_like_type(token: str) -> bool:
    """Check whether a lead token is shaped like a type expression.

    Tokens that are not type-shaped (``"(optional)"``, ``"42"``,
    ``"Returns."``) belong to the description. A type-shaped token is
    not guaranteed to resolve.
    """
    return bool(token) and TYPE_SHAPED.match(re.sub(r"\s+", "", token)) is not None


class TypeResolver(Protocol):
    """Anything that turns a type expression into a Type."""

    def resolve(self, text: str, context: Context | None = None) -> Type:
        ...


class StandardTypeResolver:
    """Resolve type expressions into Type values.

    Supports keyword types, class names (resolved against the context),
    ``A|B`` compounds, ``?T`` nullables, ``T[]`` arrays and
    ``array<V>`` / ``array<K, V>`` generics.

    Parameters
    ----------
    fqsen_resolver : FqsenResolver | None
        Resolver used for class names. Defaults to FqsenResolver().
    """

    def __init__(self, fqsen_resolver: FqsenResolver | None = None) -> None:
        self._fqsen_resolver = fqsen_resolver or FqsenResolver()

    def resolve(self, text: str, context: Context | None = None) -> Type:
        """Resolve ``text`` into a Type.

        Raises
        ------
        TypeResolutionError
            If the expression is empty or malformed.
        """
        if not isinstance(text, str) or not text.strip():
            raise TypeResolutionError(str(text), "empty type expression")

        return self._parse(text.strip(), context or Context(), text)

    def _parse(self, text: str, context: Context, original: str) -> Type:
        members = self._split_top_level(text, "|", original)
        if len(members) > 1:
            return Compound(tuple(self._parse(m, context, original) for m in members))

        if text.startswith("?"):
            return Nullable(self._parse(text[1:], context, original))

        if text.endswith("[]"):
            return Array_(self._parse(text[:-2], context, original))

        generic = ARRAY_GENERIC.match(text)
        if generic:
            args = self._split_top_level(generic.group("args"), ",", original)
            if len(args) == 1:
                return Array_(self._parse(args[0], context, original))
            if len(args) == 2:
                return Array_(
                    self._parse(args[1], context, original),
                    self._parse(args[0], context, original),
                )
            raise TypeResolutionError(original, "array takes at most two type arguments")

        keyword = KEYWORDS.get(text.lower())
        if keyword is not None:
            return keyword()

        if CLASS_NAME.match(text):
            try:
                return Object_(self._fqsen_resolver.resolve(text, context))
            except ReferenceResolutionError as e:
                raise TypeResolutionError(original, str(e)) from e

        raise TypeResolutionError(original)

    @staticmethod
    def _split_top_level(text: str, separator: str, original: str) -> list[str]:
        """Split on ``separator`` outside of ``<...>`` nesting."""
        parts: list[str] = []
        depth = 0
        current = ""
        for char in text:
            if char == "<":
                depth += 1
            elif char == ">":
                depth -= 1
                if depth < 0:
                    raise TypeResolutionError(original, "unbalanced '>'")
            if char == separator and depth == 0:
                parts.append(current.strip())
                current = ""
                continue
            current += char
        if depth != 0:
            raise TypeResolutionError(original, "unbalanced '<'")
        parts.append(current.strip())

        if any(not part for part in parts):
            raise TypeResolutionError(original, f"empty member around {separator!r}")
        return parts
