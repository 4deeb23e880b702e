"""FastAPI adapter exposing the mutator over HTTP."""

from typing import Any

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from check_status_metric.core.config import MutatorConfig, validate_config
from check_status_metric.core.encoding.event_json import decode_event, event_to_dict
from check_status_metric.core.exceptions import EventDecodeError, MutatorError
from check_status_metric.core.pipeline import run_mutator
from check_status_metric.core.ports import TemplateRendererPort


def create_mutator_router(
    config: MutatorConfig,
    renderer: TemplateRendererPort,
) -> APIRouter:
    """Create a FastAPI router with a /mutate endpoint.

    Args:
        config: Mutator configuration. Validated before the router is built.
        renderer: Renderer implementing TemplateRendererPort.

    Returns:
        APIRouter with the /mutate endpoint configured.

    Raises:
        ConfigError: If the config is invalid.
    """
    validate_config(config)
    router = APIRouter()

    @router.post("/mutate")
    def post_mutate(payload: Any = Body(...)) -> JSONResponse:
        """Append a check status metric point to the posted event.

        Returns 400 for payloads that are not events and 422 for events the
        mutator rejects.
        """
        try:
            event = decode_event(payload)
        except EventDecodeError as e:
            return JSONResponse(status_code=400, content={"error": str(e)})
        try:
            event = run_mutator(event, config, renderer)
        except MutatorError as e:
            return JSONResponse(status_code=422, content={"error": str(e)})
        return JSONResponse(content=event_to_dict(event))

    return router
