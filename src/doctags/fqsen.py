r"""Structural element references and their resolution.

An FQSEN (fully qualified structural element name) names a class,
function, method, property or constant, e.g. ``\App\User::getName()``.
Tags such as ``@see`` and ``@covers`` hold one as their reference.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol

from doctags.context import Context
from doctags.errors import ReferenceResolutionError

NAME = r"[A-Za-z_\x7f-\uffff][\w\x7f-\uffff]*"

FQSEN_PATTERN = re.compile(
    rf"^\\(?:{NAME}\\)*{NAME}(?:\(\))?"
    rf"(?:::(?:\${NAME}|{NAME}(?:\(\))?))?$"
)


@dataclass(frozen=True)
class Fqsen:
    r"""A fully qualified structural element name.

    Attributes:
        fqsen: Canonical text, always starting with a backslash
        name: Last segment of the name, e.g. ``getName`` for
            ``\App\User::getName()``

    Raises:
        ReferenceResolutionError: If the text is not a valid FQSEN
    """

    fqsen: str
    name: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.fqsen != "\\" and not FQSEN_PATTERN.match(self.fqsen):
            raise ReferenceResolutionError(self.fqsen, "not a fully qualified name")

        element = self.fqsen.rpartition("::")[2] if "::" in self.fqsen else self.fqsen
        element = element.rpartition("\\")[2]
        object.__setattr__(self, "name", element.lstrip("$").rstrip("()"))

    def __str__(self) -> str:
        return self.fqsen


class ReferenceResolver(Protocol):
    """Anything that turns reference text into an Fqsen."""

    def resolve(self, text: str, context: Context | None = None) -> Fqsen:
        ...


class FqsenResolver:
    r"""Resolve partial reference expressions into an Fqsen.

    Resolution rules:
    - ``\Foo\Bar`` is already fully qualified and kept as is.
    - If the first namespace segment is an alias in the context, the
      alias target replaces it.
    - Otherwise the name is relative to the context namespace.
    - Member suffixes (``::method()``, ``::$property``, ``::CONSTANT``)
      are carried over unchanged.

    Examples
    --------
    >>> resolver = FqsenResolver()
    >>> str(resolver.resolve("User::getName()", Context("App")))
    '\\App\\User::getName()'
    """

    def resolve(self, text: str, context: Context | None = None) -> Fqsen:
        """Resolve ``text`` against ``context``.

        Parameters
        ----------
        text : str
            The reference as written in the tag.
        context : Context | None
            Namespace and alias table. None means the global namespace.

        Returns
        -------
        Fqsen
            The fully qualified reference.

        Raises
        ------
        ReferenceResolutionError
            If the text is empty or not a valid reference.
        """
        if not isinstance(text, str) or not text.strip():
            raise ReferenceResolutionError(str(text), "empty reference")

        text = text.strip()
        if text.startswith("\\"):
            return Fqsen(text)

        head, separator, member = text.partition("::")
        if not head:
            raise ReferenceResolutionError(text, "missing element name")

        context = context or Context()
        first, _, rest = head.partition("\\")
        alias = context.resolve_alias(first)
        if alias is not None:
            qualified = f"{alias}\\{rest}" if rest else alias
        elif context.namespace:
            qualified = f"{context.namespace}\\{head}"
        else:
            qualified = head

        return Fqsen(f"\\{qualified}{separator}{member}")
