"""Logfire setup and instrumentation.

Services and use cases open spans and emit events directly::

    with logfire.span("like_service.toggle_like", answer_id=str(answer_id)):
        ...
    logfire.info("Like toggled", answer_id=str(answer_id), liked=True)

Without :func:`configure_logfire` those calls are no-ops apart from a
one-time warning, which is what the test suite relies on.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qna.config import Settings

SERVICE_VERSION = "0.1.0"


def configure_logfire(settings: Settings) -> None:
    """Configure logfire for this process.

    Sends to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE`` says so,
    or when ``OBSERVABILITY__LOGFIRE_TOKEN`` is set and the flag is unset.
    """
    observability = settings.observability
    send_to_logfire = observability.should_send

    logfire.configure(
        service_name=observability.service_name,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    # WebSocket scopes have no method
    result = {**attributes, "path": request.url.path}
    method = getattr(request, "method", None)
    if method:
        result["method"] = method
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by ``app``.

    Headers are not captured because the session cookie carries the token.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, including the savepoints around like toggles."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
