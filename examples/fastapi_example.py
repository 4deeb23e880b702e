"""Example FastAPI application exposing the check status mutator.

Run with:
    uvicorn examples.fastapi_example:app --reload

Endpoints:
    POST /mutate   - Sensu event JSON in, event with a status point out

Configuration:
    METRIC_NAME_TEMPLATE sets the metric name template, e.g.
    METRIC_NAME_TEMPLATE='{{.Entity.Name}}.{{.Check.Name}}.status'
"""

import logging

from fastapi import FastAPI

from check_status_metric.adapters.frameworks.fastapi import create_mutator_router
from check_status_metric.adapters.templating.jinja import GoStyleTemplateRenderer
from check_status_metric.core.config import MutatorConfig

logging.basicConfig(level=logging.INFO)

config = MutatorConfig.from_env()

app = FastAPI(title="Check Status Metric Mutator")
app.include_router(create_mutator_router(config, GoStyleTemplateRenderer()))


@app.get("/")
async def root() -> dict[str, str]:
    """Report the active metric name template."""
    return {"metric_name_template": config.metric_name_template}
