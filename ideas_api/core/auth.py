import logging
from typing import Optional

from fastapi import Request

from ideas_api.core.errors import AuthenticationError
from ideas_api.core.security import InvalidToken, TokenCodec, extract_token_from_header
from ideas_api.domains.identity.schemas import UserClaim

logger = logging.getLogger(__name__)


def _token_from_request(request: Request) -> Optional[str]:
    settings = request.app.state.settings
    cookie_token = request.cookies.get(settings.auth_cookie_name) or None
    header_token = extract_token_from_header(request.headers.get("Authorization"))

    if settings.auth_token_source == "header":
        return header_token or cookie_token
    return cookie_token or header_token


async def get_current_user(request: Request) -> UserClaim:
    """Dependency resolving the authenticated user from the request token"""
    token = _token_from_request(request)

    if not token:
        raise AuthenticationError("Not authorized, no token")

    codec: TokenCodec = request.app.state.token_codec
    try:
        claim = codec.verify(token)
    except InvalidToken as e:
        logger.warning(f"Token verification failed on {request.url.path}: {e}")
        raise AuthenticationError("Not authorized, token failed")

    request.state.user = claim
    return claim
