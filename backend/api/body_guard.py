"""Malformed request body guard.

Decodes JSON bodies before routing. Requests whose body cannot be decoded
into a JSON object are answered with 400 and never reach a handler.
"""

import json
import logging
from typing import Any, Dict

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from api.envelope import error_response
from domain.user.core.exceptions.user_errors import MalformedBodyError

logger = logging.getLogger(__name__)


def _is_json_content(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def decode_json_object(request: Request) -> Dict[str, Any]:
    """Decode the request body as a JSON object.

    Bodies without a JSON content type, and empty bodies, decode to ``{}``.

    Raises:
        MalformedBodyError: If the body is not valid JSON or not an object
    """
    if not _is_json_content(request.headers.get("content-type")):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}

    try:
        payload = json.loads(raw)
    except ValueError as e:
        raise MalformedBodyError("invalid JSON") from e

    if not isinstance(payload, dict):
        raise MalformedBodyError("JSON body must be an object")

    return payload


class MalformedBodyGuard(BaseHTTPMiddleware):
    """Middleware rejecting undecodable JSON bodies.

    The decoded object is stored in ``request.state.json_body`` for
    downstream handlers (see ``json_body``).

    Examples:
        >>> app.add_middleware(MalformedBodyGuard)
    """

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        # Every method: GET and DELETE bodies are decoded too.
        try:
            request.state.json_body = await decode_json_object(request)
        except MalformedBodyError as e:
            logger.info(
                "request.malformed_body",
                extra={"method": request.method, "path": request.url.path, "reason": e.reason},
            )
            return error_response(e)

        return await call_next(request)


def json_body(request: Request) -> Dict[str, Any]:
    """FastAPI dependency returning the body decoded by the guard."""
    body: Dict[str, Any] = getattr(request.state, "json_body", {})
    return body
