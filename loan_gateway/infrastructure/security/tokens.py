"""PyJWT implementation of TokenService."""

from datetime import datetime, timedelta, timezone

import jwt

from loan_gateway.core.config import Settings
from loan_gateway.domain.entities import Identity
from loan_gateway.domain.exceptions import InvalidTokenException
from loan_gateway.domain.interfaces import TokenService


class JwtTokenService(TokenService):
    """
    HMAC-signed JWTs carrying the user's id and email.

    Tokens are stateless: there is no revocation, a token stays valid
    until its exp claim passes.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60):
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(minutes=expires_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtTokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_minutes=settings.jwt_expires_minutes,
        )

    def issue(self, user_id: str, email: str, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise InvalidTokenException(reason="expired") from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenException(reason="invalid") from exc

        user_id = payload.get("userId")
        email = payload.get("email")
        if not user_id or not email:
            raise InvalidTokenException(reason="missing_claims")

        return Identity(user_id=str(user_id), email=str(email))
