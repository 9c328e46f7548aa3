# shop_api/api/security.py
from typing import Any, Dict

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from shop_api.data.models.user import ROLE_ADMIN
from shop_api.domain.errors import ForbiddenError, UnauthorizedError
from shop_api.services.security import TokenService
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# nazwa route -> role ktore moga ja wywolac; brak wpisu = kazdy zalogowany
ROUTE_ROLES: Dict[str, tuple[str, ...]] = {
    "products.create": (ROLE_ADMIN,),
    "products.update": (ROLE_ADMIN,),
    "products.delete": (ROLE_ADMIN,),
}


def get_token_service() -> TokenService:
    return TokenService()


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> Dict[str, Any]:
    """Claimy z tokena Bearer, 401 gdy brak albo niepoprawny."""
    if credentials is None:
        raise UnauthorizedError("Missing bearer token")
    return tokens.decode(credentials.credentials)


def require_roles(route_name: str):
    required = ROUTE_ROLES.get(route_name, ())

    def check_roles(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if not required:
            return user

        role = user.get("role")
        if role not in required:
            logger.info(
                f"User {user['sub']} with role {role} denied on {route_name}, "
                f"required: {', '.join(required)}"
            )
            raise ForbiddenError("Forbidden resource")
        return user

    return check_roles
