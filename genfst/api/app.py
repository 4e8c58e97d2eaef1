"""
FastAPI Application - REST API over the transducer engine.

Endpoints:
    GET    /api/v1/health                          Health check
    POST   /api/v1/transducers                     Build a transducer from rules
    GET    /api/v1/transducers                     List transducers
    GET    /api/v1/transducers/{id}                Get transducer info
    DELETE /api/v1/transducers/{id}                Drop a transducer
    POST   /api/v1/transducers/{id}/parse          Parse one input
    POST   /api/v1/transducers/{id}/parse_batch    Parse several inputs
    GET    /api/v1/transducers/{id}/stats          Graph statistics

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union
import logging
import os

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from .service import APIService
from .schemas import (
    # Request models
    CreateTransducerRequest,
    ParseRequest,
    BatchParseRequest,
    # Response models
    TransducerResponse,
    TransducerListResponse,
    ParseResponse,
    BatchParseResponse,
    DeleteTransducerResponse,
    ErrorResponse,
    HealthResponse,
    StatsInfo,
    # Enums
    ErrorCode,
)

# Environment configuration
GENFST_ENV = os.getenv("GENFST_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="GenFST API",
        description="""
Generic finite-state transducer driven by declarative rules.

## Rules

A rule is a list of items. A string item is copied verbatim; a
`[source, destination]` item rewrites `source` into `destination`.

```json
{"rules": [["play", ["s", "^s"]], ["act", ["ing", ""]]]}
```

## Parse results

| Status | Meaning |
|--------|---------|
| `success` | Exactly one output (`output`) |
| `ambiguous` | Several outputs (`outputs`, discovery order) |
| `failure` | No accepting path (`error` = "not possible") |

## Error Codes

| Code | Description |
|------|-------------|
| `TRANSDUCER_NOT_FOUND` | Transducer does not exist |
| `INVALID_RULE` | A submitted rule is malformed |
| `VALIDATION_ERROR` | Request body failed validation (HTTP 422) |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()
    app.state.api_service = api_service

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse, status_code: int = 400) -> JSONResponse:
        """Wrap an ErrorResponse in a JSONResponse."""
        return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))

    def error_status(error: ErrorResponse) -> int:
        if error.error_code == ErrorCode.TRANSDUCER_NOT_FOUND:
            return 404
        return 400

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as a structured ErrorResponse."""
        error = ErrorResponse(
            error="Request validation failed",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": jsonable_encoder(exc.errors())},
        )
        return make_error_response(error, 422)

    # =========================================================================
    # Transducer Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/transducers",
        response_model=TransducerResponse,
        status_code=201,
        responses={400: {"model": ErrorResponse, "description": "Invalid rules"}},
        tags=["Transducers"],
        summary="Build a transducer from rules",
    )
    def create_transducer(
        request: CreateTransducerRequest,
    ) -> Union[TransducerResponse, JSONResponse]:
        """
        Compile the rules, in order, into a new transducer.

        Returns a `transducer_id` used by the parse endpoints.
        """
        response = api_service.create_transducer(request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, error_status(response))
        logger.info("created transducer %s", response.transducer_id)
        return response

    @app.get(
        "/api/v1/transducers",
        response_model=TransducerListResponse,
        tags=["Transducers"],
        summary="List transducers",
    )
    def list_transducers() -> TransducerListResponse:
        transducers = api_service.list_transducers()
        return TransducerListResponse(transducers=transducers, count=len(transducers))

    @app.get(
        "/api/v1/transducers/{transducer_id}",
        response_model=TransducerResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Transducers"],
        summary="Get transducer info",
    )
    def get_transducer(transducer_id: str) -> Union[TransducerResponse, JSONResponse]:
        response = api_service.get_transducer(transducer_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, error_status(response))
        return response

    @app.delete(
        "/api/v1/transducers/{transducer_id}",
        response_model=DeleteTransducerResponse,
        tags=["Transducers"],
        summary="Drop a transducer",
    )
    def delete_transducer(transducer_id: str) -> DeleteTransducerResponse:
        success = api_service.delete_transducer(transducer_id)
        return DeleteTransducerResponse(success=success, transducer_id=transducer_id)

    @app.get(
        "/api/v1/transducers/{transducer_id}/stats",
        response_model=StatsInfo,
        responses={404: {"model": ErrorResponse}},
        tags=["Transducers"],
        summary="Graph statistics",
    )
    def get_stats(transducer_id: str) -> Union[StatsInfo, JSONResponse]:
        response = api_service.get_stats(transducer_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, error_status(response))
        return response

    # =========================================================================
    # Parse Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/transducers/{transducer_id}/parse",
        response_model=ParseResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Parsing"],
        summary="Parse one input",
    )
    def parse(
        transducer_id: str, request: ParseRequest
    ) -> Union[ParseResponse, JSONResponse]:
        """
        Transduce one input.

        A failed parse is a normal response with `status=failure`,
        not an HTTP error.
        """
        response = api_service.parse(transducer_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, error_status(response))
        return response

    @app.post(
        "/api/v1/transducers/{transducer_id}/parse_batch",
        response_model=BatchParseResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Parsing"],
        summary="Parse several inputs",
    )
    def parse_batch(
        transducer_id: str, request: BatchParseRequest
    ) -> Union[BatchParseResponse, JSONResponse]:
        response = api_service.parse_batch(transducer_id, request)
        if isinstance(response, ErrorResponse):
            return make_error_response(response, error_status(response))
        return response

    # =========================================================================
    # System
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            service="genfst",
            version=__version__,
            environment=GENFST_ENV,
        )

    @app.get("/", tags=["System"])
    def root():
        return {
            "service": "genfst",
            "docs": "/api/docs",
            "health": "/api/v1/health",
        }

    return app
