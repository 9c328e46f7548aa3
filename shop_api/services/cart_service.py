# shop_api/services/cart_service.py
from sqlalchemy.orm import Session

from shop_api.data.models.cart import CartModel
from shop_api.data.models.cart_item import CartItemModel
from shop_api.domain.errors import ConflictError, NotFoundError, ValidationError
from shop_api.repos.cart_repo import CartRepo
from shop_api.repos.store_errors import StoreError, StoreErrorKind
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use case'y dla domeny cart
    commands (upsert, remove, clear) modyfikuja stan
    query (get) tylko odczyt

    Read-modify-write na linii koszyka nie ma locka ani wersji,
    dwa rownolegle upserty tej samej linii moga zgubic jedna zmiane.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> CartModel | None:
        """Koszyk z liniami i produktami, None gdy user jeszcze go nie ma."""
        return self.repo.get_cart_with_items_by_user(user_id)

    #commands
    def upsert_line_item(
        self,
        user_id: int,
        product_id: int,
        quantity: int,
    ) -> CartItemModel | None:
        """
        Dodaje ``quantity`` do linii produktu (ujemna wartosc zmniejsza).
        Zwraca zapisana linie albo None gdy linia zostala usunieta.
        """
        try:
            cart = self._get_or_create_cart(user_id)
            existing_item = self.repo.get_cart_item(cart.id, product_id)

            if existing_item:
                new_quantity = existing_item.quantity + quantity

                if new_quantity <= 0:
                    logger.info(
                        f"Quantity of product {product_id} in cart {cart.id} dropped to "
                        f"{new_quantity}, removing line {existing_item.id}"
                    )
                    self.repo.delete_cart_item(existing_item)
                    self.repo.commit()
                    return None

                existing_item.quantity = new_quantity
                item = self.repo.add_cart_item(existing_item)
            else:
                # nie ma czego zmniejszac
                if quantity <= 0:
                    self.repo.rollback()
                    raise ValidationError("Quantity must be greater than 0 for a new cart item")

                item = self.repo.add_cart_item(
                    CartItemModel(
                        cart_id=cart.id,
                        product_id=product_id,
                        quantity=quantity,
                    )
                )

            self.repo.commit()
            self.repo.refresh(item)
            return item

        except StoreError as err:
            if err.kind in (StoreErrorKind.FOREIGN_KEY_VIOLATION, StoreErrorKind.NOT_FOUND):
                raise NotFoundError(f"Product with ID #{product_id} not found") from err
            if err.kind is StoreErrorKind.UNIQUE_VIOLATION:
                # rownolegly request zalozyl koszyk albo linie przed nami
                logger.warning(
                    f"Concurrent cart update for user {user_id}, product {product_id}: {err.fields}"
                )
                raise ConflictError(
                    "Cart was modified by another request, please retry."
                ) from err
            raise

    def remove_line_item(self, item_id: int, user_id: int) -> CartItemModel:
        item = self.repo.get_user_cart_item(item_id, user_id)

        if not item:
            raise NotFoundError(f"Cart item with ID #{item_id} not found in your cart")

        self.repo.delete_cart_item(item)
        self.repo.commit()

        logger.info(f"Removed cart item {item_id} of user {user_id}")
        return item

    def clear_cart(self, cart_id: int) -> None:
        """Usuwa wszystkie linie koszyka, pusty lub nieistniejacy koszyk to no-op."""
        removed = self.repo.delete_cart_items(cart_id)
        self.repo.commit()
        logger.info(f"Cleared cart {cart_id} ({removed} items)")

    def _get_or_create_cart(self, user_id: int) -> CartModel:
        cart = self.repo.get_cart_by_user(user_id)
        if cart:
            return cart

        cart = self.repo.create_cart(user_id)
        logger.info(f"Created cart {cart.id} for user {user_id}")
        return cart
