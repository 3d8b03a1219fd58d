# Author: Bradley R. Kinnard - because code doesn't critique itself.

"""
Send code, get feedback. One endpoint, a mocked analysis backend, graceful shutdown.
Run with: python -m src.code_feedback.main
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging
import uuid

from fastapi import FastAPI, Request
from src.code_feedback.api.routes_code import router as code_router
from src.code_feedback.config import settings
from src.code_feedback.lifecycle import run
from src.code_feedback.logging_config import set_request_id

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # logging is wired by the lifecycle controller before uvicorn starts
    logger.info("Service started; waiting for requests")
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title="Code Feedback",
    version="0.1.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.middleware("http")
async def inject_request_id(request: Request, call_next):
    # proxy might send one, otherwise make it up
    rid = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_request_id(rid)  # push to structlog context
    try:
        response = await call_next(request)
    finally:
        set_request_id(None)
    response.headers["X-Request-ID"] = rid
    return response


app.include_router(code_router)


def cli() -> None:
    run(app, settings)


if __name__ == "__main__":
    cli()
