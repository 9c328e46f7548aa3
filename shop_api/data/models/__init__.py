#import wszystkich modeli zeby SQLAlchemy je zarejestrowal w base metadata

from shop_api.data.models.user import UserModel
from shop_api.data.models.product import ProductModel
from shop_api.data.models.specification import SpecificationModel
from shop_api.data.models.cart import CartModel
from shop_api.data.models.cart_item import CartItemModel
from shop_api.data.models.order import OrderModel
from shop_api.data.models.order_item import OrderItemModel

__all__ = [
    "UserModel",
    "ProductModel",
    "SpecificationModel",
    "CartModel",
    "CartItemModel",
    "OrderModel",
    "OrderItemModel",
]
