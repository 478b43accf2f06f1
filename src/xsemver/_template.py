"""Tag format templates.

A template is a string with the placeholders ``%M`` (major), ``%m`` (minor),
``%p`` (patch) and ``%s`` (special). Everything else is literal text. Templates
are tokenized once and the result is cached, so rendering and matching never
rescan substituted text.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property, lru_cache
from typing import Self

TAG_FORMAT = "v%M.%m.%p%s"
SPECIAL_PATTERN = r"[A-Za-z][0-9A-Za-z.]+"


class Placeholder(StrEnum):
    """The closed set of template placeholders."""

    MAJOR = "%M"
    MINOR = "%m"
    PATCH = "%p"
    SPECIAL = "%s"

    @property
    def group(self: Self) -> str:
        """Regex group name (and SemVer attribute) for this placeholder."""
        return self.name.lower()


Token = str | Placeholder

_PLACEHOLDERS = frozenset(p.value for p in Placeholder)

_NUMBER_PATTERN = r"\d+"


@dataclass(frozen=True)
class TagTemplate:
    """A tokenized template that can render and match version strings.

    Attributes:
        source: The template string this was compiled from.
        tokens: Literal runs and placeholders, in order.
    """

    source: str
    tokens: tuple[Token, ...]

    @property
    def placeholders(self: Self) -> frozenset[Placeholder]:
        """Placeholders used at least once in the template."""
        return frozenset(t for t in self.tokens if isinstance(t, Placeholder))

    @cached_property
    def pattern(self: Self) -> re.Pattern[str]:
        """Regular expression matching strings rendered with this template."""
        parts: list[str] = []
        seen: set[Placeholder] = set()

        for token in self.tokens:
            if not isinstance(token, Placeholder):
                parts.append(re.escape(token))
                continue

            name = token.group
            if token in seen:
                group = f"(?P={name})"
            elif token is Placeholder.SPECIAL:
                group = f"(?P<{name}>{SPECIAL_PATTERN})"
            else:
                group = f"(?P<{name}>{_NUMBER_PATTERN})"
            seen.add(token)

            if token is Placeholder.SPECIAL:
                group = f"(?:-{group})?"
            parts.append(group)

        return re.compile("".join(parts))

    def render(self: Self, values: Mapping[Placeholder, str]) -> str:
        """Substitute placeholder values into the template.

        Args:
            values: Rendered text for each placeholder in the template.

        Returns:
            The rendered string.
        """
        return "".join(
            values[t] if isinstance(t, Placeholder) else t for t in self.tokens
        )

    def match(self: Self, text: str) -> dict[str, str | None] | None:
        """Search ``text`` for a version written with this template.

        Args:
            text: String to search.

        Returns:
            A mapping from group name to captured text for each placeholder in
            the template (``None`` for an optional special that did not
            participate), or ``None`` if nothing matched.
        """
        found = self.pattern.search(text)
        if found is None:
            return None
        return {name: found.group(name) for name in self.pattern.groupindex}


def tokenize(template: str) -> tuple[Token, ...]:
    """Split a template into literal runs and placeholders.

    Scans left to right, so ``%%M`` is a literal ``%`` followed by ``%M``.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    i = 0

    while i < len(template):
        pair = template[i : i + 2]
        if pair in _PLACEHOLDERS:
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(Placeholder(pair))
            i += 2
        else:
            literal.append(template[i])
            i += 1

    if literal:
        tokens.append("".join(literal))
    return tuple(tokens)


@lru_cache(maxsize=128)
def compile_template(template: str) -> TagTemplate:
    """Compile a template string, reusing earlier results for the same string.

    Args:
        template: Template using ``%M``, ``%m``, ``%p`` and ``%s``.

    Returns:
        The compiled template.
    """
    return TagTemplate(template, tokenize(template))
