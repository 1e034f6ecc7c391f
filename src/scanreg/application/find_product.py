"""Application service: Find Product by code (query)."""

from __future__ import annotations

from scanreg.domain.model.product import Product, find_by_code
from scanreg.domain.repository.product_repository import ProductRepository


class FindProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, code: str) -> Product | None:
        return find_by_code(self._product_repo.load().products, code)
