# shop_api/services/payment_service.py
from sqlalchemy.orm import Session

from shop_api.data.models.order import OrderModel
from shop_api.domain.schemas import CardPaymentIn, PixPaymentIn
from shop_api.services.order_service import OrderService
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class PaymentService:
    """
    Potwierdzenie platnosci = potwierdzenie zamowienia.
    Nie ma integracji z bramka, dane karty sa walidowane tylko schematem.
    """

    def __init__(self, db: Session, order_service: OrderService | None = None):
        self.order_service = order_service or OrderService(db)

    def confirm_by_card(self, payload: CardPaymentIn, user_id: int) -> OrderModel:
        logger.info(f"Card payment for order {payload.order_id} by user {user_id}")
        return self.order_service.confirm(payload.order_id, user_id)

    def confirm_by_pix(self, payload: PixPaymentIn, user_id: int) -> OrderModel:
        logger.info(f"PIX payment for order {payload.order_id} by user {user_id}")
        return self.order_service.confirm(payload.order_id, user_id)
