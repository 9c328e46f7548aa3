# shop_api/api/routers/payment.py
from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from shop_api.api.security import get_current_user
from shop_api.data.database import get_db
from shop_api.domain.schemas import CardPaymentIn, OrderOut, PixPaymentIn
from shop_api.services.payment_service import PaymentService

router = APIRouter(prefix="/payment", tags=["payment"])


def get_service(db: Session):
    return PaymentService(db)


@router.post("/credit-card", response_model=OrderOut, status_code=201)
def pay_by_card(
    payload: CardPaymentIn,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).confirm_by_card(payload, user["sub"])


@router.post("/pix", response_model=OrderOut, status_code=201)
def pay_by_pix(
    payload: PixPaymentIn,
    user: Dict[str, Any] = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).confirm_by_pix(payload, user["sub"])
