"""Registry Controller: the query/command surface exposed to the UI/CLI.

Use-case handlers raise domain exceptions; this controller is the
boundary where they stop. Commands return a CommandResult carrying either
the value or the DomainException, so the caller decides how to render
the failure and nothing is thrown past this point.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from scanreg.application.clear_products import ClearProductsHandler
from scanreg.application.dto import CommandResult, RegistrySummary
from scanreg.application.find_product import FindProductHandler
from scanreg.application.list_products import ListProductsHandler
from scanreg.application.register_product import RegisterProductHandler, utc_now
from scanreg.application.remove_product import RemoveProductHandler
from scanreg.application.summarize_registry import SummarizeRegistryHandler
from scanreg.domain.exceptions import DomainException
from scanreg.domain.model.product import Product
from scanreg.domain.repository.product_repository import ProductRepository


class RegistryController:

    def __init__(
        self,
        product_repo: ProductRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._list = ListProductsHandler(product_repo)
        self._find = FindProductHandler(product_repo)
        self._register = RegisterProductHandler(product_repo, clock=clock)
        self._remove = RemoveProductHandler(product_repo)
        self._clear = ClearProductsHandler(product_repo)
        self._summarize = SummarizeRegistryHandler(product_repo)

    # --- Queries --------------------------------------------------------------

    def list_products(self) -> list[Product]:
        return self._list.handle()

    def find_by_code(self, code: str) -> Product | None:
        return self._find.handle(code)

    def aggregate(self) -> RegistrySummary:
        return self._summarize.handle()

    # --- Commands -------------------------------------------------------------

    def register(self, code: str, name: str, price: str | float | int) -> CommandResult:
        """Register a product; ``result.value`` is the new Product."""
        return self._run(lambda: self._register.handle(code, name, price))

    def remove(self, product_id: str) -> CommandResult:
        """Remove a product; ``result.value`` is True if something was removed."""
        return self._run(lambda: self._remove.handle(product_id))

    def clear_all(self) -> CommandResult:
        return self._run(self._clear.handle)

    def request_clear(self) -> str:
        return self._clear.request()

    def confirm_clear(self, token: str) -> CommandResult:
        return self._run(lambda: self._clear.confirm(token))

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _run(command: Callable[[], object]) -> CommandResult:
        try:
            return CommandResult(value=command())
        except DomainException as exc:
            return CommandResult(error=exc)
