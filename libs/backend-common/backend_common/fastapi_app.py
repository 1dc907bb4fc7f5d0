import os
import time
import uuid
from collections.abc import Sequence
from typing import Any

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator


def instrument_with_metrics(
    app: FastAPI,
    *,
    endpoint: str = "/metrics",
    include_in_schema: bool = False,
) -> None:
    Instrumentator().instrument(app).expose(
        app,
        endpoint=endpoint,
        include_in_schema=include_in_schema,
    )


def add_correlation_id_middleware(
    app: FastAPI,
    *,
    header_name: str = "X-Request-ID",
) -> None:
    app.add_middleware(
        CorrelationIdMiddleware,
        header_name=header_name,
        generator=lambda: str(uuid.uuid4()),
        update_request_header=True,
    )


def add_process_time_middleware(app: FastAPI, *, header_name: str = "X-Process-Time") -> None:
    @app.middleware("http")
    async def add_process_time_header(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        response.headers[header_name] = str(time.time() - start_time)
        return response


def validation_errors_as_bad_request(app: FastAPI) -> None:
    """Report malformed request bodies as 400 instead of FastAPI's default 422."""

    @app.exception_handler(RequestValidationError)
    async def _bad_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )


def cors_origins_from_env(origins_env: str = "CORS_ORIGINS") -> list[str]:
    cors_origins = os.getenv(origins_env, "*")
    if cors_origins == "*":
        return ["*"]
    return [o.strip() for o in cors_origins.split(",") if o.strip()]


def create_service_app(
    *,
    title: str,
    version: str = "0.1.0",
    description: str | None = None,
    enable_metrics: bool = True,
    metrics_endpoint: str = "/metrics",
    include_metrics_in_schema: bool = False,
    enable_cors: bool = True,
    cors_allow_origins: Sequence[str] | None = None,
    cors_allow_methods: Sequence[str] = ("*",),
    cors_allow_headers: Sequence[str] = ("*",),
    cors_expose_headers: Sequence[str] | None = ("X-Request-ID", "X-Process-Time"),
    enable_correlation_id: bool = True,
    correlation_header_name: str = "X-Request-ID",
    **fastapi_kwargs: Any,
) -> FastAPI:
    app = FastAPI(title=title, version=version, description=description, **fastapi_kwargs)

    if enable_metrics:
        instrument_with_metrics(
            app,
            endpoint=metrics_endpoint,
            include_in_schema=include_metrics_in_schema,
        )

    if enable_cors:
        allow_origins = list(cors_allow_origins) if cors_allow_origins is not None else cors_origins_from_env()
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allow_origins,
            # browsers reject credentialed requests against a wildcard origin
            allow_credentials=allow_origins != ["*"],
            allow_methods=list(cors_allow_methods),
            allow_headers=list(cors_allow_headers),
            expose_headers=list(cors_expose_headers) if cors_expose_headers is not None else [],
        )

    if enable_correlation_id:
        add_correlation_id_middleware(app, header_name=correlation_header_name)

    add_process_time_middleware(app)
    validation_errors_as_bad_request(app)
    return app
