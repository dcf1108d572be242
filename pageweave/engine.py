"""Template engines that compile and execute composed pages.

The container only needs two operations: ``parse`` turns composed text into a
compiled template, raising :class:`~pageweave.errors.TemplateParseError` with
a line number on failure, and ``execute`` renders that template with data
into a writer. :class:`JinjaTemplateEngine` provides both on top of Jinja2.

Example
-------
>>> import io
>>> engine = JinjaTemplateEngine()
>>> compiled = engine.parse("<p>{{ name }}</p>", "greeting")
>>> out = io.StringIO()
>>> engine.execute(compiled, {"name": "<b>"}, out)
>>> out.getvalue()
'<p>&lt;b&gt;</p>'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from jinja2 import Environment, Template, TemplateSyntaxError, select_autoescape

from .errors import TemplateParseError

EnvironmentHandler = cabc.Callable[[Environment], None]


class TemplateEngine(typ.Protocol):
    """Compile composed text and execute compiled templates."""

    handler: EnvironmentHandler | None

    def parse(self, text: str, name: str) -> typ.Any:
        """Compile ``text``; raise ``TemplateParseError`` when it is invalid."""
        ...

    def execute(self, compiled: typ.Any, data: object, writer: typ.TextIO) -> None:
        """Render ``compiled`` with ``data`` into ``writer``."""
        ...


class JinjaTemplateEngine:
    """Compile templates with a shared Jinja2 environment."""

    def __init__(self, env: Environment | None = None) -> None:
        """Initialize the engine.

        Parameters
        ----------
        env : Environment, optional
            Environment to compile with. Defaults to one with HTML
            autoescaping (including for string templates), ``trim_blocks``,
            and ``lstrip_blocks``.
        """
        self.env = env or Environment(
            autoescape=select_autoescape(["html", "xml"], default_for_string=True),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.handler: EnvironmentHandler | None = None

    def parse(self, text: str, name: str) -> Template:
        """Compile ``text`` after running the configured environment handler."""
        if self.handler is not None:
            self.handler(self.env)
        try:
            template = self.env.from_string(text)
        except TemplateSyntaxError as exc:
            raise TemplateParseError(exc.lineno, exc.message or str(exc)) from exc
        template.name = name
        return template

    def execute(self, compiled: Template, data: object, writer: typ.TextIO) -> None:
        """Stream the rendered template into ``writer``.

        A mapping becomes the template context; any other value is exposed as
        ``data``.
        """
        if isinstance(data, cabc.Mapping):
            context = dict(data)
        else:
            context = {"data": data}
        compiled.stream(context).dump(writer)


__all__ = ["EnvironmentHandler", "JinjaTemplateEngine", "TemplateEngine"]
