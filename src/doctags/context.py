"""Resolution context passed to type and reference resolvers."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class Context:
    r"""Immutable snapshot of the naming environment of a docblock.

    Leading and trailing backslashes are stripped from the namespace and
    from alias targets, so ``\App\Models`` and ``App\Models`` are the same
    context.

    Attributes:
        namespace: Namespace the docblock belongs to, e.g. ``App\Models``
        aliases: Import table mapping an alias to a fully qualified name

    Examples
    --------
    >>> ctx = Context(r"App\Models", {"Carbon": r"\Carbon\Carbon"})
    >>> ctx.resolve_alias("carbon")
    'Carbon\\Carbon'
    """

    namespace: str = ""
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespace", self.namespace.strip("\\"))
        normalized = {alias: target.strip("\\") for alias, target in self.aliases.items()}
        object.__setattr__(self, "aliases", MappingProxyType(normalized))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Context):
            return NotImplemented
        return self.namespace == other.namespace and dict(self.aliases) == dict(other.aliases)

    def __hash__(self) -> int:
        return hash((self.namespace, tuple(sorted(self.aliases.items()))))

    def resolve_alias(self, name: str) -> str | None:
        """Look up an alias, case-insensitively. Returns None if unknown."""
        if name in self.aliases:
            return self.aliases[name]
        lowered = name.lower()
        for alias, target in self.aliases.items():
            if alias.lower() == lowered:
                return target
        return None
