# shop_api/api/routers/auth.py
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shop_api.api.security import get_current_user, get_token_service
from shop_api.data.database import get_db
from shop_api.domain.schemas import LoginIn, ProfileOut, RegisterIn, RoleIn, TokenOut, UserRead
from shop_api.services.auth_service import AuthService
from shop_api.services.security import TokenService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_service(db: Session, tokens: TokenService):
    return AuthService(db, tokens=tokens)


@router.post("/register", response_model=TokenOut, status_code=201)
def register(
    payload: RegisterIn,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    return get_service(db, tokens).register(payload)


@router.post("/login", response_model=TokenOut)
def login(
    payload: LoginIn,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    return get_service(db, tokens).login(payload)


@router.post("/change-role", response_model=UserRead)
def change_role(
    payload: RoleIn,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    """
    Zmienia role zalogowanego usera. Nowa rola trafia do tokena
    dopiero przy kolejnym logowaniu.
    """
    return get_service(db, tokens).change_role(user["sub"], payload.role)


@router.get("/profile", response_model=ProfileOut)
def profile(user: Dict[str, Any] = Depends(get_current_user)):
    return user
