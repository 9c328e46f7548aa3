# shop_api/services/order_service.py
from decimal import Decimal

from sqlalchemy.orm import Session

from shop_api.data.models.order import OrderModel
from shop_api.domain.errors import ConflictError, NotFoundError
from shop_api.repos.order_repo import OrderRepo
from shop_api.repos.store_errors import StoreError, StoreErrorKind
from shop_api.services.cart_service import CartService
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Koszyk czyta i czysci przez CartService.
    """

    def __init__(self, db: Session, cart_service: CartService | None = None):
        self.repo = OrderRepo(db)
        self.cart_service = cart_service or CartService(db)

    def create_from_cart(self, user_id: int) -> OrderModel:
        """
        Use Case: Tworzenie zamowienia z koszyka.

        1. Pobiera koszyk z liniami i produktami
        2. Oblicza total z aktualnych cen produktow
        3. Zapisuje zamowienie ze snapshotem pozycji
        4. Czysci koszyk (ta sama transakcja)
        """
        cart = self.cart_service.get_cart(user_id)

        if not cart:
            raise NotFoundError(f"Cart not found for user ID: {user_id}.")

        if not cart.items:
            raise NotFoundError("Cannot create order from an empty cart.")

        # linie bez produktu (usuniety z katalogu) licza sie jako 0
        total = sum(
            (
                Decimal(item.product.price) * item.quantity
                for item in cart.items
                if item.product is not None and item.quantity > 0
            ),
            Decimal("0.00"),
        )

        if total <= 0:
            raise NotFoundError(
                "Cannot create order with zero or negative total amount. "
                "Check product prices and quantities."
            )

        try:
            order = self.repo.create_order(
                user_id=user_id,
                total_amount=total,
                items=[(item.product_id, item.quantity) for item in cart.items],
            )
        except StoreError as err:
            if err.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION:
                raise NotFoundError("Cart references a product that no longer exists.") from err
            raise

        # ta sama sesja, wiec commit w clear_cart zapisuje tez zamowienie
        self.cart_service.clear_cart(cart.id)

        logger.info(f"Order {order.id} created from cart {cart.id}, total {total}")
        return order

    def confirm(self, order_id: int, user_id: int) -> OrderModel:
        """Jednorazowe przejscie is_confirmed false -> true."""
        order = self.repo.get_order(order_id, user_id)

        if not order:
            raise NotFoundError(f"Order with ID #{order_id} not found for user ID: {user_id}.")

        if order.is_confirmed:
            raise ConflictError(f"Order with ID #{order_id} is already confirmed.")

        try:
            confirmed = self.repo.mark_confirmed(order_id, user_id)
        except StoreError as err:
            if err.kind is StoreErrorKind.NOT_FOUND:
                raise NotFoundError(
                    f"Order with ID #{order_id} not found for user ID: {user_id}."
                ) from err
            raise

        logger.info(f"Order {order_id} confirmed for user {user_id}")
        return confirmed

    def list_for_user(self, user_id: int) -> list[OrderModel]:
        return self.repo.list_orders(user_id)
