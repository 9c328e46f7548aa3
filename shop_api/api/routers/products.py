# shop_api/api/routers/products.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shop_api.api.security import require_roles
from shop_api.data.database import get_db
from shop_api.domain.schemas import ProductCreate, ProductOut, ProductSearch, ProductUpdate
from shop_api.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


def get_service(db: Session):
    return ProductService(db)


@router.get("", response_model=List[ProductOut])
def list_products(
    name: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    description: Optional[str] = Query(None),
    min_price: Optional[Decimal] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[Decimal] = Query(None, alias="maxPrice", ge=0),
    db: Session = Depends(get_db),
):
    filters = ProductSearch(
        name=name,
        category=category,
        description=description,
        min_price=min_price,
        max_price=max_price,
    )
    return get_service(db).search(filters)


@router.get("/{product_id}", response_model=ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return get_service(db).get(product_id)


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    payload: ProductCreate,
    user: Dict[str, Any] = Depends(require_roles("products.create")),
    db: Session = Depends(get_db),
):
    return get_service(db).create(payload)


@router.patch("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    user: Dict[str, Any] = Depends(require_roles("products.update")),
    db: Session = Depends(get_db),
):
    return get_service(db).update(product_id, payload)


@router.delete("/{product_id}", response_model=ProductOut)
def delete_product(
    product_id: int,
    user: Dict[str, Any] = Depends(require_roles("products.delete")),
    db: Session = Depends(get_db),
):
    return get_service(db).delete(product_id)
