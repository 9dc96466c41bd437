import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import jwt

from app.exceptions.custom import InvalidTokenError, UnauthenticatedError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class TokenService:
    """Issues and verifies the signed session token.

    The token is stateless: nothing is persisted server-side, and expiry is
    carried inside the token itself. How the token travels (cookie or header)
    is left to the caller.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = timedelta(hours=5),
        clock: Callable[[], datetime] | None = None,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def issue(self, claim: dict[str, Any]) -> str:
        now = self._clock()
        payload = {**claim, "iat": now, "exp": now + self._ttl}
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> dict[str, Any]:
        if not token:
            raise UnauthenticatedError()
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.PyJWTError as exc:
            logger.debug("Token rejected: %s", exc)
            raise InvalidTokenError() from exc
