"""JSON implementation of ProductRepository on top of a KeyValueStore.

The whole registry is one JSON array stored under a single key. The
version token handed out by ``load`` is a digest of the raw stored text;
``replace`` re-reads the text just before writing and refuses to write if
the digest moved, which turns a lost update between two writers into a
ConflictError.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import datetime, timezone
from decimal import Decimal

from scanreg.domain.exceptions import (
    ConflictError,
    DomainException,
    PersistenceCorruptError,
    ValidationError,
)
from scanreg.domain.model.product import Product
from scanreg.domain.model.value_objects import Money, ProductCode
from scanreg.domain.port.key_value_store import KeyValueStore
from scanreg.domain.repository.product_repository import (
    ProductRepository,
    RegistrySnapshot,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "products"


class JsonProductRepository(ProductRepository):

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    # --- ProductRepository interface ------------------------------------------

    def load(self) -> RegistrySnapshot:
        raw = self._store.get(self._key)
        if raw is None:
            return RegistrySnapshot(products=(), version=None)

        version = _version_of(raw)
        try:
            products = self._decode(raw)
        except PersistenceCorruptError as exc:
            logger.warning("Stored registry is unreadable, treating it as empty: %s", exc)
            return RegistrySnapshot(products=(), version=version)
        return RegistrySnapshot(products=tuple(products), version=version)

    def replace(self, products: list[Product], expected_version: str | None) -> None:
        current = self._store.get(self._key)
        current_version = None if current is None else _version_of(current)
        if current_version != expected_version:
            raise ConflictError(
                "The registry was changed by someone else; reload and try again"
            )
        self._store.set(self._key, self._encode(products))

    def clear(self) -> None:
        self._store.remove(self._key)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "code": product.code.value,
            "name": product.name,
            "price": str(product.price.amount),
            "createdAt": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        name = raw["name"]
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"Stored product {raw['id']!r} has no name")
        return Product(
            id=str(raw["id"]),
            code=ProductCode(raw["code"]),
            name=name.strip(),
            # Older payloads stored the price as a bare JSON number.
            price=Money(Decimal(str(raw["price"]))),
            created_at=_parse_timestamp(raw["createdAt"]),
        )

    def _encode(self, products: list[Product]) -> str:
        return json.dumps([self._to_raw(p) for p in products], indent=2) + "\n"

    def _decode(self, raw: str) -> list[Product]:
        try:
            records = json.loads(raw)
            if not isinstance(records, list):
                raise TypeError(f"expected a JSON array, got {type(records).__name__}")
            return [self._to_domain(record) for record in records]
        except (ValueError, KeyError, TypeError, ArithmeticError, DomainException) as exc:
            raise PersistenceCorruptError(str(exc)) from exc


def _parse_timestamp(value: str) -> datetime:
    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


def _version_of(raw: str) -> str:
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
