# shop_api/api/routers/orders.py
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shop_api.api.security import get_current_user
from shop_api.data.database import get_db
from shop_api.domain.schemas import OrderOut
from shop_api.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.post("", response_model=OrderOut, status_code=201)
def create_order(
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamowienie z koszyka zalogowanego usera i czysci koszyk.
    """
    return get_service(db).create_from_cart(user["sub"])


@router.get("", response_model=List[OrderOut])
def list_orders(
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).list_for_user(user["sub"])
