# tests/test_store_errors.py
from types import SimpleNamespace

import pytest
from sqlalchemy.exc import IntegrityError

from shop_api.data.models.product import ProductModel
from shop_api.data.models.specification import SpecificationModel
from shop_api.repos.store_errors import (
    StoreError,
    StoreErrorKind,
    classify_integrity_error,
    flush_or_raise,
)


class FakePgError(Exception):
    def __init__(self, pgcode, detail):
        super().__init__(detail)
        self.pgcode = pgcode
        self.diag = SimpleNamespace(message_detail=detail)


def _integrity(orig) -> IntegrityError:
    return IntegrityError("INSERT ...", {}, orig)


class TestClassifyPostgres:
    def test_unique_violation_reports_key_columns(self):
        err = classify_integrity_error(
            _integrity(FakePgError("23505", "Key (product_id, name)=(1, Color) already exists."))
        )

        assert err.kind is StoreErrorKind.UNIQUE_VIOLATION
        assert err.fields == ["product_id", "name"]
        assert err.touches("name", "product_id")

    def test_foreign_key_violation(self):
        err = classify_integrity_error(
            _integrity(FakePgError("23503", 'Key (product_id)=(99) is not present in table "products".'))
        )

        assert err.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION
        assert err.fields == ["product_id"]

    def test_unknown_code_is_other(self):
        err = classify_integrity_error(_integrity(FakePgError("23502", "null value in column")))

        assert err.kind is StoreErrorKind.OTHER


class TestClassifySqlite:
    def test_unique_violation_strips_table_prefix(self):
        err = classify_integrity_error(
            _integrity(Exception("UNIQUE constraint failed: specifications.product_id, specifications.name"))
        )

        assert err.kind is StoreErrorKind.UNIQUE_VIOLATION
        assert err.fields == ["product_id", "name"]

    def test_foreign_key_violation(self):
        err = classify_integrity_error(_integrity(Exception("FOREIGN KEY constraint failed")))

        assert err.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION
        assert err.fields == []

    def test_not_null_is_other(self):
        err = classify_integrity_error(_integrity(Exception("NOT NULL constraint failed: products.name")))

        assert err.kind is StoreErrorKind.OTHER


class TestFlushOrRaise:
    def test_real_unique_violation_is_translated_and_session_rolled_back(self, db_session):
        db_session.add(ProductModel(name="Widget", price=1, category="x"))
        db_session.commit()

        db_session.add(ProductModel(name="Widget", price=2, category="y"))
        with pytest.raises(StoreError) as info:
            flush_or_raise(db_session)

        assert info.value.kind is StoreErrorKind.UNIQUE_VIOLATION
        assert info.value.touches("name")
        # sesja nadal uzywalna
        assert db_session.query(ProductModel).count() == 1

    def test_real_foreign_key_violation_is_translated(self, db_session):
        db_session.add(SpecificationModel(product_id=12345, name="Color", value="Red"))

        with pytest.raises(StoreError) as info:
            flush_or_raise(db_session)

        assert info.value.kind is StoreErrorKind.FOREIGN_KEY_VIOLATION

    def test_unclassified_error_propagates_unchanged(self, db_session):
        db_session.add(ProductModel(name=None, price=1, category="x"))

        with pytest.raises(IntegrityError):
            flush_or_raise(db_session)
