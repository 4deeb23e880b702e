"""Template renderers implementing TemplateRendererPort."""

from check_status_metric.adapters.templating.jinja import GoStyleTemplateRenderer

__all__ = ["GoStyleTemplateRenderer"]
