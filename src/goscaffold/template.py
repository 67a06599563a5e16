"""Placeholder templates rendered against a target's coordinates.

Templates are plain text containing ``{{ key }}`` or ``{{ key|filter }}``
placeholders. Keys name entries of a flat rendering context, so
``{{ project.upper }}`` is rejected, and filters are looked up in an explicit
helper table; the default table only exposes ``upper``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, MutableMapping

from .errors import TemplateRenderingError, TemplateSyntaxError

__all__ = [
    "Placeholder",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateSyntaxError",
    "default_filters",
]


_OPEN = "{{"
_CLOSE = "}}"
_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_FILTER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def default_filters() -> dict[str, Callable[[Any], Any]]:
    """Return the helper table available to bundled templates."""

    return {"upper": lambda value: str(value).upper()}


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed ``{{ key|filter }}`` expression."""

    key: str
    filters: tuple[str, ...]
    line: int
    source: str


@dataclass(slots=True)
class TemplateRenderer:
    """Parse and render templates with ``{{ placeholder|filters }}`` expressions."""

    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.filters:
            self.filters.update(default_filters())

    def parse(self, template: str, *, name: str | None = None) -> list[str | Placeholder]:
        """Split ``template`` into literal text and :class:`Placeholder` nodes.

        Raises :class:`TemplateSyntaxError` for an unterminated placeholder, an
        empty or malformed expression, or a filter missing from the helper
        table.
        """

        nodes: list[str | Placeholder] = []
        position = 0
        while True:
            start = template.find(_OPEN, position)
            if start == -1:
                if position < len(template):
                    nodes.append(template[position:])
                return nodes

            line = template.count("\n", 0, start) + 1
            end = template.find(_CLOSE, start + len(_OPEN))
            if end == -1:
                raise TemplateSyntaxError("unclosed placeholder", name=name, line=line)

            if start > position:
                nodes.append(template[position:start])

            source = template[start : end + len(_CLOSE)]
            nodes.append(self._parse_expression(template[start + len(_OPEN) : end], source, name, line))
            position = end + len(_CLOSE)

    def _parse_expression(self, expression: str, source: str, name: str | None, line: int) -> Placeholder:
        if "{" in expression or "}" in expression:
            raise TemplateSyntaxError(f"unexpected brace in {source!r}", name=name, line=line)

        key, *filters = [part.strip() for part in expression.split("|")]
        if not key:
            raise TemplateSyntaxError(f"empty placeholder {source!r}", name=name, line=line)
        if not _KEY_PATTERN.fullmatch(key):
            raise TemplateSyntaxError(f"invalid key '{key}' in {source!r}", name=name, line=line)

        for filter_name in filters:
            if not _FILTER_PATTERN.fullmatch(filter_name):
                raise TemplateSyntaxError(f"invalid filter '{filter_name}' in {source!r}", name=name, line=line)
            if filter_name not in self.filters:
                raise TemplateSyntaxError(f"unknown filter '{filter_name}'", name=name, line=line)

        return Placeholder(key=key, filters=tuple(filters), line=line, source=source)

    def render_string(self, template: str, context: Mapping[str, Any], *, name: str | None = None) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Flat mapping providing values for placeholders. A placeholder
            whose key is absent raises :class:`TemplateRenderingError`.
        name:
            Optional template name used in error messages.
        """

        parts: list[str] = []
        for node in self.parse(template, name=name):
            if isinstance(node, str):
                parts.append(node)
                continue

            if node.key not in context:
                raise TemplateRenderingError(
                    f"{name or '<template>'}:{node.line}: missing value for '{node.key}'"
                )

            value = context[node.key]
            for filter_name in node.filters:
                value = self.filters[filter_name](value)
            parts.append(str(value))

        return "".join(parts)
