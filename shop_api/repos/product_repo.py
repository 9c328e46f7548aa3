# shop_api/repos/product_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from shop_api.data.models.product import ProductModel
from shop_api.data.models.specification import SpecificationModel
from shop_api.domain.schemas import ProductSearch
from shop_api.repos.store_errors import StoreError, StoreErrorKind, flush_or_raise


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def _query(self):
        return select(ProductModel).options(selectinload(ProductModel.specifications))

    def search(self, filters: ProductSearch) -> list[ProductModel]:
        stmt = self._query()
        if filters.name:
            stmt = stmt.where(ProductModel.name.contains(filters.name))
        if filters.category:
            stmt = stmt.where(ProductModel.category.contains(filters.category))
        if filters.description:
            stmt = stmt.where(ProductModel.description.contains(filters.description))
        if filters.min_price is not None:
            stmt = stmt.where(ProductModel.price >= filters.min_price)
        if filters.max_price is not None:
            stmt = stmt.where(ProductModel.price <= filters.max_price)
        stmt = stmt.order_by(ProductModel.created_at.desc(), ProductModel.id.desc())
        return list(self.db.execute(stmt).scalars().all())

    def find_all(self) -> list[ProductModel]:
        return list(self.db.execute(self._query().order_by(ProductModel.id)).scalars().all())

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.execute(
            self._query().where(ProductModel.id == product_id)
        ).scalar_one_or_none()

    def create_product(self, data: dict, specifications: list[dict]) -> ProductModel:
        product = ProductModel(
            **data,
            specifications=[SpecificationModel(**spec) for spec in specifications],
        )
        self.db.add(product)
        flush_or_raise(self.db)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(
        self,
        product_id: int,
        data: dict,
        specifications: list[dict] | None,
    ) -> ProductModel:
        product = self.get_product(product_id)
        if not product:
            raise StoreError(StoreErrorKind.NOT_FOUND, ["id"])

        for field, value in data.items():
            setattr(product, field, value)

        # lista specyfikacji zastepuje obecna: brakujace usuwamy, reszte upsert po nazwie
        if specifications is not None:
            by_name = {spec.name: spec for spec in product.specifications}
            wanted = {spec["name"] for spec in specifications}
            for name, spec in by_name.items():
                if name not in wanted:
                    product.specifications.remove(spec)
            for spec in specifications:
                existing = by_name.get(spec["name"])
                if existing is not None:
                    existing.value = spec["value"]
                else:
                    product.specifications.append(SpecificationModel(**spec))

        flush_or_raise(self.db)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> ProductModel:
        product = self.get_product(product_id)
        if not product:
            raise StoreError(StoreErrorKind.NOT_FOUND, ["id"])
        self.db.delete(product)
        flush_or_raise(self.db)
        self.db.commit()
        return product
