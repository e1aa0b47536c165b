"""Observability configuration using Logfire.

Services open spans through ``Service._span`` and report outcomes with
``logfire.info``/``logfire.warn``; this module wires the exporters and the
framework instrumentation around them.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from chatter.config import Settings

SERVICE_NAME = "chatter-backend"
SERVICE_VERSION = "1.0.0"

# Query parameters never recorded on request spans
_REDACTED_PARAMS = frozenset({"token"})


def _should_send(settings: Settings) -> bool:
    """Explicit setting wins; otherwise send only when a token is configured."""
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Console-only unless OBSERVABILITY__LOGFIRE_TOKEN is set, or
    OBSERVABILITY__SEND_TO_LOGFIRE forces it either way. Test runs keep the
    console quiet.
    """
    send_to_logfire = _should_send(settings)
    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Span attributes for HTTP requests and WebSocket sessions.

    WebSocket handshakes carry the bearer token in the query string, so
    redacted parameters are dropped before anything is recorded.
    """
    result = {**attributes}
    result.pop("values", None)

    if hasattr(request, "method"):
        result["method"] = request.method
    else:
        result["websocket"] = True

    result["path"] = request.url.path
    params = {
        key: value
        for key, value in request.query_params.items()
        if key not in _REDACTED_PARAMS
    }
    if params:
        result["query"] = params

    page_id = request.path_params.get("page_id")
    if page_id:
        result["page_id"] = page_id

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace HTTP requests and WebSocket sessions of ``app``."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
