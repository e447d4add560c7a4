"""FastAPI app simulating a text-completion API.

Endpoints:
- GET /                  static info page
- POST /v1/completions   OpenAI-style completion request
"""
from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from completion_simulator.common.config import Settings
from completion_simulator.common.corpus import TextCorpus
from completion_simulator.common.schema import CompletionResponse, build_completion_response
from completion_simulator.common.validation import (
    ValidationError,
    validate_authorization,
    validate_completion_request,
)

LOGGER = logging.getLogger("completion_simulator.serve.app")

INDEX_PAGE = Path(__file__).parent / "static" / "index.html"

AUTH_ERROR_STATUS = 401
BODY_ERROR_STATUS = 400
NOT_FOUND_BODY = {"error": "Not found."}

def _reject(status_code: int, error: ValidationError) -> JSONResponse:
    LOGGER.error(error.message)
    return JSONResponse(status_code=status_code, content={"message": error.message})

async def read_json_body(request: Request) -> Any:
    """
    Decode a JSON request body.

    A missing body, or one not sent as application/json, is read as an
    empty object so it fails field validation rather than parsing.

    Raises:
        json.JSONDecodeError: if a JSON body cannot be parsed.
    """
    content_type = request.headers.get("content-type", "")
    if content_type.split(";", 1)[0].strip().lower() != "application/json":
        return {}
    raw = await request.body()
    if not raw:
        return {}
    return json.loads(raw)

def create_app(corpus: TextCorpus, settings: Settings | None = None) -> FastAPI:
    """
    Build the simulator app around an already loaded corpus.

    Args:
        corpus: Paragraph pool shared read-only by all requests.
        settings: Server settings; only CORS origins are read here.
    """
    settings = settings or Settings()
    index_html = INDEX_PAGE.read_text(encoding="utf-8")

    app = FastAPI(title="Completion Simulator")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.api_route("/", methods=["GET", "HEAD"], response_class=HTMLResponse)
    def index() -> str:
        return index_html

    @app.post("/v1/completions", response_model=CompletionResponse)
    async def completions(request: Request) -> CompletionResponse | JSONResponse:
        LOGGER.info("Received a request at %s", datetime.now(timezone.utc).isoformat())

        auth = validate_authorization(request.headers.get("authorization"))
        if isinstance(auth, ValidationError):
            return _reject(AUTH_ERROR_STATUS, auth)

        body = await read_json_body(request)
        LOGGER.debug("Request body:\n%s", json.dumps(body, indent=4))
        checked = validate_completion_request(body)
        if isinstance(checked, ValidationError):
            return _reject(BODY_ERROR_STATUS, checked)

        LOGGER.info("Prompt: %s", json.dumps(body["prompt"]))
        return build_completion_response(body["model"], corpus.sample())

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods on known paths both count as not found
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content=NOT_FOUND_BODY)
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    return app
