# shop_api/services/security.py
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
import jwt

from shop_api.domain.errors import UnauthorizedError
from shop_api.utils.settings import JWT_ALGORITHM, JWT_EXPIRATION_SECONDS, JWT_SECRET


def hash_password(password: str) -> str:
    # bcrypt generuje sol i trzyma ja w hashu
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # uszkodzony hash w bazie
        return False


class TokenService:
    """Podpisywanie i weryfikacja tokenow JWT (HS256)."""

    def __init__(
        self,
        secret: str | None = None,
        algorithm: str | None = None,
        expires_in: int | None = None,
    ):
        self.secret = secret or JWT_SECRET
        self.algorithm = algorithm or JWT_ALGORITHM
        self.expires_in = expires_in if expires_in is not None else JWT_EXPIRATION_SECONDS

    def issue(self, user_id: int, username: str, role: str | None = None) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            # PyJWT wymaga sub jako string
            "sub": str(user_id),
            "username": username,
            "iat": now,
            "exp": now + timedelta(seconds=self.expires_in),
        }
        if role is not None:
            payload["role"] = role
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise UnauthorizedError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise UnauthorizedError("Invalid token") from exc

        try:
            claims["sub"] = int(claims["sub"])
        except (TypeError, ValueError) as exc:
            raise UnauthorizedError("Invalid token subject") from exc
        return claims
