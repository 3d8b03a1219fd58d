# Author: Bradley R. Kinnard - where code goes to be judged

"""
/code endpoint. Method check, decode, analyze, encode. Each step short-circuits
to a plain-text error; nothing escapes to the server.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError
from starlette.concurrency import run_in_threadpool

from src.code_feedback.analyzer.base import Analyzer
from src.code_feedback.api.dependencies import get_analyzer
from src.code_feedback.core.models import CodeRequest, CodeResponse

router = APIRouter(tags=["code"])
log = logging.getLogger(__name__)

# registered for every method so the 405 body is ours, not the framework's JSON
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def _error(message: str, status_code: int, headers: dict[str, str] | None = None) -> PlainTextResponse:
    return PlainTextResponse(message, status_code=status_code, headers=headers)


def encode_response(feedback: str) -> bytes:
    """build + serialize CodeResponse. raises ValueError if either step chokes"""
    try:
        return CodeResponse(feedback=feedback).model_dump_json().encode("utf-8")
    except (ValidationError, PydanticSerializationError) as e:
        raise ValueError(str(e)) from e


@router.api_route("/code", methods=ALL_METHODS)
async def code_feedback(
    request: Request,
    analyzer: Annotated[Analyzer, Depends(get_analyzer)]
) -> Response:
    """POST {"code": "..."} -> {"feedback": "..."}. anything else is a 405."""
    if request.method != "POST":
        # don't touch the body
        return _error("Method not allowed", status.HTTP_405_METHOD_NOT_ALLOWED, {"Allow": "POST"})

    try:
        body = CodeRequest.model_validate_json(await request.body())
    except ValidationError as e:
        log.error(f"failed to decode request body: {e.errors(include_url=False, include_input=False)}")
        return _error("Invalid request body", status.HTTP_400_BAD_REQUEST)

    try:
        # analyzers are sync and may block on the network, keep them off the loop
        feedback = await run_in_threadpool(analyzer.analyze, body.code)
    except Exception as e:
        log.error(f"error calling analyzer {analyzer.name}: {e}")
        return _error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        payload = encode_response(feedback)
    except ValueError as e:
        log.error(f"failed to encode response: {e}")
        return _error("Internal server error", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(content=payload, media_type="application/json")
