# shop_api/services/product_service.py
from collections import Counter

from sqlalchemy.orm import Session

from shop_api.data.models.product import ProductModel
from shop_api.domain.errors import ConflictError, NotFoundError
from shop_api.domain.schemas import ProductCreate, ProductSearch, ProductUpdate, SpecificationIn
from shop_api.repos.product_repo import ProductRepo
from shop_api.repos.store_errors import StoreError, StoreErrorKind
from shop_api.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def search(self, filters: ProductSearch) -> list[ProductModel]:
        if filters.is_empty():
            return self.repo.find_all()
        return self.repo.search(filters)

    def get(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError(f"Product with id {product_id} not found")
        return product

    def create(self, payload: ProductCreate) -> ProductModel:
        data = payload.model_dump(exclude={"specifications"})
        specifications = [spec.model_dump() for spec in payload.specifications or []]
        try:
            product = self.repo.create_product(data, specifications)
        except StoreError as err:
            if err.kind is StoreErrorKind.UNIQUE_VIOLATION:
                raise self._conflict(err, payload.name, payload.specifications) from err
            raise

        logger.info(f"Product {product.id} '{product.name}' created")
        return product

    def update(self, product_id: int, payload: ProductUpdate) -> ProductModel:
        data = payload.model_dump(exclude_unset=True, exclude={"specifications"})
        specifications = None
        if "specifications" in payload.model_fields_set:
            specifications = [spec.model_dump() for spec in payload.specifications or []]
        try:
            product = self.repo.update_product(product_id, data, specifications)
        except StoreError as err:
            if err.kind is StoreErrorKind.NOT_FOUND:
                raise NotFoundError(f"Product with ID #{product_id} not found") from err
            if err.kind is StoreErrorKind.UNIQUE_VIOLATION:
                raise self._conflict(err, payload.name or f"#{product_id}", payload.specifications) from err
            raise

        logger.info(f"Product {product_id} updated")
        return product

    def delete(self, product_id: int) -> ProductModel:
        try:
            product = self.repo.delete_product(product_id)
        except StoreError as err:
            if err.kind is StoreErrorKind.NOT_FOUND:
                raise NotFoundError(f"Product with ID #{product_id} not found") from err
            raise

        logger.info(f"Product {product_id} deleted")
        return product

    @staticmethod
    def _conflict(
        err: StoreError,
        name: str | None,
        specifications: list[SpecificationIn] | None,
    ) -> ConflictError:
        if err.touches("name"):
            return ConflictError(f"Product with name '{name}' already exists.")

        if err.touches("product_id", "name"):
            counts = Counter(spec.name for spec in specifications or [])
            duplicate = next((spec for spec, count in counts.items() if count > 1), None)
            if duplicate:
                return ConflictError(
                    f"Duplicate specification name '{duplicate}' for product '{name}'."
                )
            return ConflictError(
                f"A unique specification name conflict occurred for product '{name}'. "
                "Please ensure all specification names are unique for this product."
            )

        target = ", ".join(err.fields) or "unknown"
        return ConflictError(
            f"A unique constraint violation occurred. Target: {target}. Please check your input."
        )
