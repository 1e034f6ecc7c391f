"""Application service: List Products use case (query)."""

from __future__ import annotations

from scanreg.domain.model.product import Product
from scanreg.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[Product]:
        """Return every product, most recently registered first.

        Products are stored in registration order, so ties on
        ``created_at`` are broken by position.
        """
        products = self._product_repo.load().products
        ordered = sorted(
            enumerate(products),
            key=lambda pair: (pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [product for _, product in ordered]
