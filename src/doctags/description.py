"""Tag descriptions and the factory that builds them.

A description is the free text at the end of a tag. It may contain
inline tags such as ``{@see \\App\\User}``; those are parsed into Tag
objects and put back in place when the description is rendered.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from doctags.context import Context
from doctags.errors import DocTagError
from doctags.tags.generic import Generic
from doctags.tokenizer import split_first

if TYPE_CHECKING:
    from doctags.factory import TagFactory
    from doctags.tags.base import Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Description:
    """Free text of a tag, with inline tags kept as objects.

    Attributes:
        body_template: Text with ``{0}``, ``{1}``... where inline tags sit.
            Literal braces are doubled when inline tags are present.
        tags: Inline tags, in placeholder order
    """

    body_template: str = ""
    tags: tuple[Tag, ...] = ()

    def render(self) -> str:
        """Render the description back to text."""
        if not self.tags:
            return self.body_template
        return self.body_template.format(*("{" + tag.render() + "}" for tag in self.tags))

    def get_tags(self) -> tuple[Tag, ...]:
        return self.tags

    def __str__(self) -> str:
        return self.render()

    def __bool__(self) -> bool:
        return self.render() != ""


class DescriptionFactory(Protocol):
    """Anything that builds a Description from text."""

    def create(self, text: str, context: Context | None = None) -> Description:
        ...


class StandardDescriptionFactory:
    """Create Description objects from raw description text.

    The factory:
    - strips surrounding whitespace
    - removes indentation shared by all continuation lines
    - turns ``{@name body}`` inline tags into Tag objects

    Parameters
    ----------
    tag_factory : TagFactory | None
        Factory used to build inline tags. Without one, inline tags become
        Generic tags.
    """

    def __init__(self, tag_factory: TagFactory | None = None) -> None:
        self._tag_factory = tag_factory

    def create(self, text: str, context: Context | None = None) -> Description:
        """Create a Description. Never fails; empty text gives an empty one."""
        text = self._remove_superfluous_indent(text or "").strip()
        if "{@" not in text:
            return Description(text)

        template_parts: list[str] = []
        tags: list[Tag] = []
        for literal, inline in self._lex(text):
            if inline is None:
                template_parts.append(self._escape(literal))
                continue

            tag = self._create_inline_tag(inline, context)
            if tag is None:
                template_parts.append(self._escape(literal))
                continue

            template_parts.append("{" + str(len(tags)) + "}")
            tags.append(tag)

        if not tags:
            return Description(text)
        return Description("".join(template_parts), tuple(tags))

    def _create_inline_tag(self, inline: str, context: Context | None) -> Tag | None:
        try:
            if self._tag_factory is not None:
                return self._tag_factory.create(inline, context)

            name, body = split_first(inline)
            name = name.lstrip("@")
            return Generic.create(body, description_factory=self, context=context, name=name)
        except DocTagError as e:
            logger.debug("Keeping inline tag %r as text: %s", inline, e)
            return None

    @staticmethod
    def _lex(text: str) -> list[tuple[str, str | None]]:
        """Split text into (literal, inline) pairs.

        ``inline`` is the tag text without its braces, or None for plain
        text. Unterminated inline tags are plain text.
        """
        pieces: list[tuple[str, str | None]] = []
        position = 0
        while True:
            start = text.find("{@", position)
            if start < 0:
                break

            depth = 0
            end = -1
            for i in range(start, len(text)):
                if text[i] == "{":
                    depth += 1
                elif text[i] == "}":
                    depth -= 1
                    if depth == 0:
                        end = i
                        break
            if end < 0:
                break

            if start > position:
                pieces.append((text[position:start], None))
            pieces.append((text[start:end + 1], text[start + 1:end]))
            position = end + 1

        if position < len(text):
            pieces.append((text[position:], None))
        return pieces

    @staticmethod
    def _escape(literal: str) -> str:
        return literal.replace("{", "{{").replace("}", "}}")

    @staticmethod
    def _remove_superfluous_indent(text: str) -> str:
        lines = text.split("\n")
        if len(lines) < 2:
            return text

        indents = [len(line) - len(line.lstrip()) for line in lines[1:] if line.strip()]
        if not indents:
            return text

        shared = min(indents)
        return "\n".join([lines[0]] + [line[shared:] for line in lines[1:]])
