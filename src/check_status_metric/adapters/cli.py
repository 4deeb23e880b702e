"""Command-line entrypoint for running the mutator as a pipeline command.

Reads one event as JSON from stdin and writes the mutated event to stdout,
the contract Sensu uses for pipe mutators.
"""

import logging
import sys

import click

from check_status_metric.adapters.templating.jinja import GoStyleTemplateRenderer
from check_status_metric.core.config import (
    DEFAULT_METRIC_NAME_TEMPLATE,
    METRIC_NAME_TEMPLATE_ENV,
    PLUGIN_NAME,
    MutatorConfig,
    validate_config,
)
from check_status_metric.core.encoding.event_json import decode_event, encode_event
from check_status_metric.core.exceptions import MutatorError
from check_status_metric.core.pipeline import run_mutator

logger = logging.getLogger(__name__)


@click.command(name=PLUGIN_NAME)
@click.option(
    "--metric-name-template",
    "-t",
    envvar=METRIC_NAME_TEMPLATE_ENV,
    default=DEFAULT_METRIC_NAME_TEMPLATE,
    show_default=True,
    help="Template for naming the metric point for the check status",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(metric_name_template: str, verbose: bool) -> None:
    """Sensu Check Status Metric Mutator."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s %(message)s", stream=sys.stderr
    )

    config = MutatorConfig(metric_name_template=metric_name_template)
    try:
        validate_config(config)
        event = decode_event(click.get_text_stream("stdin").read())
        event = run_mutator(event, config, GoStyleTemplateRenderer())
    except MutatorError as e:
        logger.debug("mutator failed", exc_info=True)
        click.echo(f"error executing mutator: {e}", err=True)
        sys.exit(1)

    click.echo(encode_event(event))


if __name__ == "__main__":
    main()
