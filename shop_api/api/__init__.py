# shop_api/api/__init__.py
from fastapi import APIRouter

from shop_api.api.routers import auth, cart, health, orders, payment, products

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(products.router)
api_router.include_router(cart.router)
api_router.include_router(orders.router)
api_router.include_router(payment.router)
