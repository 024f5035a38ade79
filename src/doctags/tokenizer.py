"""Whitespace-preserving tokenization of tag bodies.

Tag bodies are split into tokens that remember the whitespace following
them, so a description assembled from the remaining tokens keeps the
author's spacing and line breaks exactly.
"""
from __future__ import annotations

import re
from typing import NamedTuple

TOKEN_PATTERN = re.compile(r"(\S+)(\s*)")

OPENING = "<([{"
CLOSING = ">)]}"


class Token(NamedTuple):
    """A run of non-whitespace text and the whitespace after it."""

    text: str
    trailing: str = ""


def tokenize(body: str) -> list[Token]:
    """Split ``body`` into tokens, dropping leading whitespace only.

    Examples
    --------
    >>> tokenize("string  $foo\\nDesc")
    [Token(text='string', trailing='  '), Token(text='$foo', trailing='\\n'), Token(text='Desc', trailing='')]
    """
    return [Token(m.group(1), m.group(2)) for m in TOKEN_PATTERN.finditer(body)]


def join_tokens(tokens: list[Token]) -> str:
    """Reassemble tokens, without the whitespace after the last one."""
    if not tokens:
        return ""
    parts = [token.text + token.trailing for token in tokens[:-1]]
    parts.append(tokens[-1].text)
    return "".join(parts)


def split_first(body: str) -> tuple[str, str]:
    """Split on the first whitespace run into at most two parts.

    The second part is empty when ``body`` is a single token.
    """
    parts = re.split(r"\s+", body.lstrip(), maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]


def split_type(body: str) -> tuple[str, str]:
    """Split off a leading type expression.

    Whitespace nested inside ``<>``, ``()``, ``[]`` or ``{}`` does not end
    the type, so ``array<int, string> $map`` yields
    ``("array<int, string>", "$map")``.
    """
    body = body.lstrip()
    depth = 0
    end = len(body)
    for i, char in enumerate(body):
        if depth == 0 and char.isspace():
            end = i
            break
        if char in OPENING:
            depth += 1
        elif char in CLOSING and depth > 0:
            depth -= 1

    return body[:end], body[end:].lstrip()
