"""Application service: Summarize Registry use case (query)."""

from __future__ import annotations

from scanreg.application.dto import RegistrySummary
from scanreg.application.list_products import ListProductsHandler
from scanreg.domain.model.value_objects import Money
from scanreg.domain.repository.product_repository import ProductRepository


class SummarizeRegistryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._list_products = ListProductsHandler(product_repo)

    def handle(self) -> RegistrySummary:
        products = self._list_products.handle()
        total = Money.zero()
        for product in products:
            total = total + product.price
        return RegistrySummary(count=len(products), total_value=total.amount)
