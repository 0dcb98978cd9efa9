from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Union

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from ideas_api.core.config import SYMMETRIC_ALGORITHMS, Settings
from ideas_api.domains.identity.schemas import UserClaim


class InvalidToken(Exception):
    """Token is malformed, tampered with or expired"""


class TokenCodec:
    """Signs and verifies access tokens carrying a user identity claim"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        default_ttl: timedelta = timedelta(minutes=15)
    ):
        if not secret or not secret.strip():
            raise ValueError("Token secret is missing")
        if algorithm not in SYMMETRIC_ALGORITHMS:
            raise ValueError(f"Unsupported token algorithm: {algorithm}")

        self._secret = secret
        self.algorithm = algorithm
        self.default_ttl = default_ttl

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenCodec":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            default_ttl=timedelta(minutes=settings.access_token_expire_minutes)
        )

    def sign(
        self,
        claim: Union[UserClaim, Dict[str, Any]],
        ttl: Optional[timedelta] = None
    ) -> str:
        """Create a signed token for the claim, expiring after ttl"""
        if isinstance(claim, dict):
            claim = UserClaim(**claim)

        now = datetime.now(timezone.utc)
        to_encode = {
            "id": claim.id,
            "iat": now,
            "exp": now + (ttl if ttl is not None else self.default_ttl),
        }
        return jwt.encode(
            to_encode,
            self._secret,
            algorithm=self.algorithm,
            headers={"typ": "JWT"}
        )

    def verify(self, token: str) -> UserClaim:
        """Check signature and expiry and return the embedded claim"""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_exp": True}
            )
        except JWTError as e:
            raise InvalidToken(str(e)) from e

        user_id = payload.get("id")
        if not isinstance(user_id, str):
            raise InvalidToken("Token has no user id")

        try:
            return UserClaim(id=user_id)
        except PydanticValidationError as e:
            raise InvalidToken("Token has no user id") from e


def extract_token_from_header(authorization: Optional[str]) -> Optional[str]:
    """Extract the token from an Authorization header"""
    if not authorization:
        return None

    parts = authorization.split()

    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None

    return parts[1]
