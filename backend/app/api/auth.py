"""Caller Identity — builds CallerContext from the authenticated identity header.

Invariants:
    - Missing, blank or malformed identity header → AuthenticationError (401)
    - Only user.id is extracted; nothing else about the caller is trusted or read

Design Decisions:
    - Identity is asserted by the upstream session layer as a header; this service
      does not validate credentials itself
    - Header name comes from settings so deployments can match their proxy
"""

from fastapi import Request
from pydantic import ValidationError

from app.config import get_settings
from app.core.errors import AuthenticationError
from app.schemas.invoice import CallerContext


async def get_caller_context(request: Request) -> CallerContext:
    """FastAPI dependency for the authenticated caller."""
    header = get_settings().user_id_header
    user_id = (request.headers.get(header) or "").strip()
    if not user_id:
        raise AuthenticationError(f"Missing {header} header")
    try:
        return CallerContext.for_user(user_id)
    except ValidationError as e:
        raise AuthenticationError(f"Invalid {header} header") from e
