"""Port interfaces for template rendering adapters.

The core mutator depends only on this protocol, never on a concrete
template engine.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class TemplateRendererPort(Protocol):
    """Port for rendering a template string against a data context.

    Examples: GoStyleTemplateRenderer, or a stub in tests.
    """

    def render(self, template: str, context: Any) -> str:
        """Render a template against a context.

        Args:
            template: Template source.
            context: Data the template's field references resolve against.

        Returns:
            The rendered string.

        Raises:
            TemplateError: On malformed templates or unresolvable fields.
        """
        ...
