# shop_api/repos/store_errors.py
"""
Klasyfikacja bledow bazy niezalezna od silnika.

Repozytoria zamieniaja ``IntegrityError`` z SQLAlchemy na ``StoreError`` z
rodzajem (unique / foreign key / not found / other) i lista kolumn, a serwisy
mapuja rodzaj na bledy domenowe. Dziala dla SQLite i PostgreSQL.
"""
import re
from enum import Enum

from sqlalchemy.exc import IntegrityError

# kody SQLSTATE postgresa
_PG_UNIQUE_VIOLATION = "23505"
_PG_FOREIGN_KEY_VIOLATION = "23503"

# Key (product_id, name)=(1, Color) already exists.
_PG_DETAIL_KEYS = re.compile(r"Key \((?P<fields>[^)]*)\)=")
# UNIQUE constraint failed: specifications.product_id, specifications.name
_SQLITE_UNIQUE = re.compile(r"UNIQUE constraint failed: (?P<fields>.+)$", re.MULTILINE)


class StoreErrorKind(str, Enum):
    UNIQUE_VIOLATION = "UNIQUE_VIOLATION"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"
    NOT_FOUND = "NOT_FOUND"
    OTHER = "OTHER"


class StoreError(Exception):
    def __init__(self, kind: StoreErrorKind, fields: list[str] | None = None, message: str = ""):
        self.kind = kind
        self.fields = fields or []
        super().__init__(message or kind.value)

    def touches(self, *fields: str) -> bool:
        """True gdy naruszenie dotyczy dokladnie podanych kolumn."""
        return sorted(self.fields) == sorted(fields)


def _split_fields(raw: str) -> list[str]:
    # sqlite podaje "tabela.kolumna"
    return [part.strip().split(".")[-1] for part in raw.split(",") if part.strip()]


def classify_integrity_error(exc: IntegrityError) -> StoreError:
    orig = exc.orig
    message = str(orig)

    pgcode = getattr(orig, "pgcode", None)
    if pgcode in (_PG_UNIQUE_VIOLATION, _PG_FOREIGN_KEY_VIOLATION):
        diag = getattr(orig, "diag", None)
        detail = getattr(diag, "message_detail", None) or message
        match = _PG_DETAIL_KEYS.search(detail)
        fields = _split_fields(match.group("fields")) if match else []
        kind = (
            StoreErrorKind.UNIQUE_VIOLATION
            if pgcode == _PG_UNIQUE_VIOLATION
            else StoreErrorKind.FOREIGN_KEY_VIOLATION
        )
        return StoreError(kind, fields, message)

    match = _SQLITE_UNIQUE.search(message)
    if match:
        return StoreError(StoreErrorKind.UNIQUE_VIOLATION, _split_fields(match.group("fields")), message)

    if "FOREIGN KEY constraint failed" in message:
        return StoreError(StoreErrorKind.FOREIGN_KEY_VIOLATION, [], message)

    return StoreError(StoreErrorKind.OTHER, [], message)


def flush_or_raise(db) -> None:
    """
    Flush sesji z tlumaczeniem naruszen constraintow na ``StoreError``.
    Nierozpoznane bledy leca dalej bez zmian.
    """
    try:
        db.flush()
    except IntegrityError as exc:
        db.rollback()
        err = classify_integrity_error(exc)
        if err.kind is StoreErrorKind.OTHER:
            raise
        raise err from exc
