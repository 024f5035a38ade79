"""Exception types raised while creating tags.

Two categories matter to callers:

- ConfigurationError - a collaborator a tag kind needs was not supplied.
  This signals a misconfigured caller, not bad input.
- MalformedInputError - the tag body (or a type/reference inside it)
  could not be parsed.

Both subclass ValueError so code that treats them as invalid arguments
can catch ValueError.
"""
from __future__ import annotations


class DocTagError(Exception):
    """Base class for all doctags errors."""


class ConfigurationError(DocTagError, ValueError):
    """A required collaborator or setting is missing or invalid."""


class MalformedInputError(DocTagError, ValueError):
    """Tag input could not be parsed."""


class EmptyBodyError(MalformedInputError):
    """The raw tag body is empty or not a string."""


class TypeResolutionError(MalformedInputError):
    """A type expression could not be resolved.

    Attributes:
        expression: The text that failed to resolve
    """

    def __init__(self, expression: str, reason: str = "") -> None:
        self.expression = expression
        message = f"Cannot resolve type expression {expression!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ReferenceResolutionError(MalformedInputError):
    """A reference expression could not be resolved.

    Attributes:
        expression: The text that failed to resolve
    """

    def __init__(self, expression: str, reason: str = "") -> None:
        self.expression = expression
        message = f"Cannot resolve reference {expression!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
