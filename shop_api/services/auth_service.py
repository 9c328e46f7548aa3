# shop_api/services/auth_service.py
from sqlalchemy.orm import Session

from shop_api.data.models.user import UserModel, ROLE_CLIENT
from shop_api.domain.errors import ConflictError, NotFoundError, UnauthorizedError
from shop_api.domain.schemas import LoginIn, RegisterIn, TokenOut
from shop_api.repos.store_errors import StoreError, StoreErrorKind
from shop_api.repos.user_repo import UserRepo
from shop_api.services.security import TokenService, hash_password, verify_password
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class AuthService:
    def __init__(self, db: Session, tokens: TokenService | None = None):
        self.repo = UserRepo(db)
        self.tokens = tokens or TokenService()

    def register(self, payload: RegisterIn) -> TokenOut:
        if self.repo.get_by_username(payload.username):
            raise ConflictError(f"Username '{payload.username}' is already taken.")

        user = UserModel(
            username=payload.username,
            password=hash_password(payload.password),
            role=ROLE_CLIENT,
        )
        try:
            created = self.repo.create_user(user)
        except StoreError as err:
            # wyscig dwoch rejestracji na ten sam username
            if err.kind is StoreErrorKind.UNIQUE_VIOLATION:
                raise ConflictError(f"Username '{payload.username}' is already taken.") from err
            raise

        logger.info(f"Registered user {created.id} ({created.username})")
        # token z rejestracji nie niesie roli
        return TokenOut(access_token=self.tokens.issue(created.id, created.username))

    def login(self, payload: LoginIn) -> TokenOut:
        user = self.repo.get_by_username(payload.username)
        if not user or not verify_password(payload.password, user.password):
            logger.warning(f"Failed login for username '{payload.username}'")
            raise UnauthorizedError()

        return TokenOut(access_token=self.tokens.issue(user.id, user.username, user.role))

    def change_role(self, user_id: int, role: str) -> UserModel:
        try:
            user = self.repo.update_role(user_id, role)
        except StoreError as err:
            if err.kind is StoreErrorKind.NOT_FOUND:
                raise NotFoundError(f"User with ID #{user_id} not found") from err
            raise

        logger.info(f"User {user_id} role changed to {role}")
        return user
