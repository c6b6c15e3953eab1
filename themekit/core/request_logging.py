from __future__ import annotations

import logging
import re
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"
_REQUEST_ID_RE = re.compile(r"^[A-Za-z0-9._-]{1,128}$")
_LOG = logging.getLogger("themekit.http")

# Fragments differ per ajax flag, so nothing is cacheable downstream.
RESPONSE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Cache-Control": "no-store",
}


def request_id_for(request: Request) -> str:
    incoming = str(request.headers.get(REQUEST_ID_HEADER) or "").strip()
    return incoming if _REQUEST_ID_RE.fullmatch(incoming) else uuid4().hex


def _finish_response(response: Response, request_id: str) -> Response:
    for name, value in RESPONSE_HEADERS.items():
        response.headers.setdefault(name, value)
    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def _theme_request_log(request: Request, call_next):
        request_id = request_id_for(request)
        request.state.request_id = request_id
        started_at = perf_counter()
        response = _finish_response(await call_next(request), request_id)
        _LOG.info(
            "%s %s status=%s ajax=%s duration_ms=%.2f request_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            request.query_params.get("ajax") == "true",
            (perf_counter() - started_at) * 1000.0,
            request_id,
        )
        return response
