#!/usr/bin/env python3
"""
keyqueue - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the queue repository for the configured backend
3. Maps HTTP requests onto QueueModule.put()/get()

All queue logic lives in keyqueue.modules.queue.
"""

import logging
import logging.config as log_config
from contextlib import asynccontextmanager
from typing import Optional

import redis.asyncio as redis
import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from keyqueue import __version__
from keyqueue.logging_config import get_logging_config
from keyqueue.modules.api.models import BackendKind, ErrorResponse
from keyqueue.modules.config import ConfigModule, get_config
from keyqueue.modules.queue import (
    InvalidWaitBudgetError,
    MemoryQueueRepository,
    NotFoundError,
    QueueError,
    QueueModule,
    QueueRepository,
    RedisQueueRepository,
    parse_wait_budget,
)

logger = logging.getLogger(__name__)


def get_redis_client(config: ConfigModule) -> redis.Redis:
    """Create Redis client from configuration."""
    redis_url = f"redis://{config.get('redis_host')}:{config.get('redis_port')}/{config.get('redis_db')}"

    return redis.from_url(
        redis_url,
        password=config.get("redis_password"),  # Passed separately to avoid URL encoding issues
        encoding="utf-8",
        decode_responses=True,
    )


def create_app(
    config: Optional[ConfigModule] = None,
    repository: Optional[QueueRepository] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Configuration module (defaults to the environment singleton)
        repository: Pre-built backend; when omitted one is created at startup
            from the configured backend

    The QueueModule lives on app.state for the lifetime of the app and is
    handed to request handlers through the get_queue_module dependency.
    """
    config = config or get_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Manage application lifecycle - initialize and cleanup resources.
        """
        logger.info("Starting keyqueue API...")

        redis_client = None
        repo = repository
        if repo is None:
            backend = BackendKind(config.get("backend"))
            if backend is BackendKind.REDIS:
                redis_client = get_redis_client(config)
                repo = RedisQueueRepository(
                    redis_client, key_prefix=config.get("redis_key_prefix", "queue:values:")
                )
            else:
                repo = MemoryQueueRepository()
            logger.info(f"Using {backend.value} queue backend")

        app.state.redis_client = redis_client
        app.state.queue_module = QueueModule(
            repo, retry_interval=config.get("retry_interval", 1.0)
        )

        logger.info("keyqueue API started successfully")

        yield

        logger.info("Shutting down keyqueue API...")
        if redis_client:
            await redis_client.aclose()
        app.state.queue_module = None
        logger.info("keyqueue API shutdown complete")

    app = FastAPI(
        title="keyqueue API",
        description="FIFO queue per key over HTTP",
        version=__version__,
        lifespan=lifespan,
        # Every path is a queue key, so no docs routes
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )
    app.state.queue_module = None

    def get_queue_module(request: Request) -> QueueModule:
        """Resolve the QueueModule built by the lifespan."""
        queue_module = getattr(request.app.state, "queue_module", None)
        if not queue_module:
            raise HTTPException(503, "Service not initialized")
        return queue_module

    @app.put("/{key:path}", responses={400: {"model": ErrorResponse}})
    async def put_value(
        key: str,
        v: Optional[str] = Query(None, description="Value to enqueue"),
        queue_module: QueueModule = Depends(get_queue_module),
    ):
        """
        Append a value to the queue named by the request path.

        Returns:
            200: Value queued
            400: Missing or empty 'v' parameter
        """
        if not v:
            return JSONResponse(
                status_code=400,
                content=ErrorResponse(error="missing query parameter 'v'").model_dump(),
            )

        await queue_module.put(key, v)
        return Response(status_code=200)

    @app.get(
        "/{key:path}",
        responses={
            400: {"model": ErrorResponse},
            404: {"model": ErrorResponse},
        },
    )
    async def get_value(
        key: str,
        request: Request,
        timeout: Optional[str] = Query(None, description="Seconds to wait for a value"),
        queue_module: QueueModule = Depends(get_queue_module),
    ):
        """
        Pop the oldest value queued under the request path.

        With ?timeout=N the request waits up to N seconds for a value to be
        put. The wait ends early if the client disconnects.

        Returns:
            200: JSON-encoded value
            400: Invalid timeout
            404: No value available
        """
        wait = parse_wait_budget(timeout)
        value = await queue_module.get(key, wait=wait, is_cancelled=request.is_disconnected)
        return JSONResponse(content=value)

    # Error handlers

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request, exc):
        """Handle empty or unknown queues, including exhausted waits."""
        return JSONResponse(status_code=404, content=ErrorResponse(error="not found").model_dump())

    @app.exception_handler(InvalidWaitBudgetError)
    async def invalid_wait_handler(request, exc):
        """Handle malformed timeout parameters."""
        logger.warning(f"Rejected request: {exc}")
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(exc)).model_dump())

    @app.exception_handler(QueueError)
    async def queue_error_handler(request, exc):
        """Handle unexpected queue failures."""
        logger.error(f"Queue error: {exc}")
        return JSONResponse(status_code=500, content=ErrorResponse(error="internal error").model_dump())

    @app.exception_handler(redis.ConnectionError)
    async def redis_error_handler(request, exc):
        """Handle Redis connection errors."""
        logger.error(f"Redis connection error: {exc}")
        return JSONResponse(status_code=503, content=ErrorResponse(error="storage connection failed").model_dump())

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request, exc):
        """Handle anything not mapped above (e.g. Redis WRONGTYPE, timeouts)."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content=ErrorResponse(error="internal error").model_dump())

    return app


config = get_config()
log_config.dictConfig(get_logging_config(config.get("log_level")))

app = create_app(config)


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=config.get("host"),
        port=config.get("port"),
        log_level=config.get("log_level").lower(),
        log_config=get_logging_config(config.get("log_level")),
    )
