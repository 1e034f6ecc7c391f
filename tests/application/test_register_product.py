"""Tests for the RegisterProduct handler against a shared store.

Two repositories over one store stand in for two open sessions of the
app writing to the same registry.
"""

import pytest

from scanreg.application.register_product import RegisterProductHandler
from scanreg.application.remove_product import RemoveProductHandler
from scanreg.domain.exceptions import ConflictError, DuplicateError
from scanreg.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from tests.fakes import FakeClock, FakeKeyValueStore


class _InterleavingRepository(JsonProductRepository):
    """Lets another writer sneak in between our load and our replace."""

    def __init__(self, store, interloper) -> None:
        super().__init__(store)
        self._interloper = interloper

    def load(self):
        snapshot = super().load()
        if self._interloper is not None:
            self._interloper()
            self._interloper = None
        return snapshot


class TestRegisterProductHandler:

    def test_rechecks_storage_at_call_time(self):
        store = FakeKeyValueStore()
        first = RegisterProductHandler(JsonProductRepository(store), clock=FakeClock())
        second = RegisterProductHandler(JsonProductRepository(store), clock=FakeClock())

        first.handle("A1", "Widget", 1)

        with pytest.raises(DuplicateError):
            second.handle("A1", "Widget again", 1)

    def test_concurrent_write_is_detected(self):
        store = FakeKeyValueStore()
        other = RegisterProductHandler(JsonProductRepository(store), clock=FakeClock())
        repo = _InterleavingRepository(store, lambda: other.handle("B2", "Gadget", 2))
        handler = RegisterProductHandler(repo, clock=FakeClock())

        with pytest.raises(ConflictError):
            handler.handle("A1", "Widget", 1)

        # The other writer's product survived; ours was not written.
        codes = [p.code.value for p in JsonProductRepository(store).load().products]
        assert codes == ["B2"]

    def test_concurrent_remove_is_detected(self):
        store = FakeKeyValueStore()
        register = RegisterProductHandler(JsonProductRepository(store), clock=FakeClock())
        product = register.handle("A1", "Widget", 1)
        repo = _InterleavingRepository(store, lambda: register.handle("B2", "Gadget", 2))

        with pytest.raises(ConflictError):
            RemoveProductHandler(repo).handle(product.id)

        assert len(JsonProductRepository(store).load().products) == 2
