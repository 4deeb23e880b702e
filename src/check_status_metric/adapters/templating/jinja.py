"""Jinja2 adapter for rendering Go-style metric name templates.

Templates are written with Go's leading-dot field syntax, e.g.
``{{.Check.Name}}.status``. Leading dots inside ``{{ ... }}`` are stripped
before Jinja2 parses the template, so ``.Check.Name`` resolves as the Jinja2
expression ``Check.Name``. Jinja2 filters can be chained with ``|``. Go trim
markers (``{{- ... -}}``) are kept. Jinja2 block and comment delimiters in
literal text are escaped, so they render verbatim as in Go.
"""

import re
from typing import Any

from jinja2 import StrictUndefined, TemplateError as JinjaTemplateError
from jinja2.sandbox import SandboxedEnvironment

from check_status_metric.core.exceptions import TemplateError

# Trim markers must be separated from the body by whitespace: {{-3}} is -3
_ACTION = re.compile(r"\{\{(-(?=\s))?(.*?)((?<=\s)-)?\}\}", re.DOTALL)
# A dot that starts a field path: not preceded by a name, index or call
_LEADING_DOT = re.compile(r"(?<![\w\)\]\.])\.(?=[A-Za-z_])")
_LITERAL_DELIMITER = re.compile(r"\{[%#]")


def _escape_literal(text: str) -> str:
    return _LITERAL_DELIMITER.sub(lambda m: "{{ " + repr(m.group(0)) + " }}", text)


def translate_go_template(template: str) -> str:
    """Rewrite Go-style field references into Jinja2 expressions.

    >>> translate_go_template("{{.Check.Name}}.status")
    '{{ Check.Name }}.status'
    """
    parts: list[str] = []
    pos = 0
    for match in _ACTION.finditer(template):
        parts.append(_escape_literal(template[pos : match.start()]))
        left, body, right = match.group(1) or "", match.group(2), match.group(3) or ""
        body = _LEADING_DOT.sub("", body)
        parts.append("{{" + left + " " + body.strip() + " " + right + "}}")
        pos = match.end()
    parts.append(_escape_literal(template[pos:]))
    return "".join(parts)


class GoStyleTemplateRenderer:
    """TemplateRendererPort implementation backed by a sandboxed Jinja2.

    Undefined fields fail rendering instead of producing empty strings.
    """

    def __init__(self) -> None:
        self._env = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, template: str, context: Any) -> str:
        """Render a Go-style template against a context.

        Args:
            template: Template source using ``{{.Field.Path}}`` references.
            context: Mapping of top-level names (e.g. Check, Entity).

        Returns:
            The rendered string.

        Raises:
            TemplateError: If the template is malformed or references a
                field missing from the context.
        """
        try:
            compiled = self._env.from_string(translate_go_template(template))
            return compiled.render(context)
        except JinjaTemplateError as e:
            raise TemplateError(f"template {template!r}: {e.message or e}") from e
