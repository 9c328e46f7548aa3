# shop_api/api/routers/cart.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from shop_api.api.security import get_current_user
from shop_api.data.database import get_db
from shop_api.domain.schemas import CartItemIn, CartItemOut, CartOut
from shop_api.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=Optional[CartOut])
def get_cart(
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(user["sub"])


@router.put(
    "",
    response_model=CartItemOut,
    responses={204: {"description": "Item removed from cart (quantity dropped to 0 or below)"}},
)
def upsert_item(
    payload: CartItemIn,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    item = get_service(db).upsert_line_item(
        user_id=user["sub"],
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    if item is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return item


@router.delete("/{item_id}", response_model=CartItemOut)
def remove_item(
    item_id: int,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).remove_line_item(item_id, user["sub"])
