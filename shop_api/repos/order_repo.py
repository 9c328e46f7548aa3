# shop_api/repos/order_repo.py
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from shop_api.data.models.order import OrderModel
from shop_api.data.models.order_item import OrderItemModel
from shop_api.repos.store_errors import StoreError, StoreErrorKind, flush_or_raise


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def create_order(
        self,
        user_id: int,
        total_amount: Decimal,
        items: list[tuple[int | None, int]],
    ) -> OrderModel:
        """Dodaje zamowienie z pozycjami, bez commita."""
        order = OrderModel(
            user_id=user_id,
            total_amount=total_amount,
            is_confirmed=False,
            items=[
                OrderItemModel(product_id=product_id, quantity=quantity)
                for product_id, quantity in items
            ],
        )
        self.db.add(order)
        flush_or_raise(self.db)
        return order

    def get_order(self, order_id: int, user_id: int) -> OrderModel | None:
        return self.db.execute(
            select(OrderModel).where(
                OrderModel.id == order_id,
                OrderModel.user_id == user_id,
            )
        ).scalar_one_or_none()

    def mark_confirmed(self, order_id: int, user_id: int) -> OrderModel:
        order = self.get_order(order_id, user_id)
        if not order:
            raise StoreError(StoreErrorKind.NOT_FOUND, ["id", "user_id"])
        order.is_confirmed = True
        self.db.commit()
        self.db.refresh(order)
        return order

    def list_orders(self, user_id: int) -> list[OrderModel]:
        return list(
            self.db.execute(
                select(OrderModel)
                .where(OrderModel.user_id == user_id)
                .order_by(OrderModel.id)
            ).scalars().all()
        )
