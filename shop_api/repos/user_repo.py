from sqlalchemy import select
from sqlalchemy.orm import Session

from shop_api.data.models.user import UserModel
from shop_api.repos.store_errors import StoreError, StoreErrorKind, flush_or_raise


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_user(self, user_id: int) -> UserModel | None:
        return self.db.get(UserModel, user_id)

    def get_by_username(self, username: str) -> UserModel | None:
        return self.db.execute(
            select(UserModel).where(UserModel.username == username)
        ).scalar_one_or_none()

    def create_user(self, user: UserModel) -> UserModel:
        self.db.add(user)
        flush_or_raise(self.db)
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_role(self, user_id: int, role: str) -> UserModel:
        user = self.get_user(user_id)
        if not user:
            raise StoreError(StoreErrorKind.NOT_FOUND, ["id"])
        user.role = role
        self.db.commit()
        self.db.refresh(user)
        return user
