"""Application service: Remove Product use case."""

from __future__ import annotations

import logging

from scanreg.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class RemoveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> bool:
        """Remove the product with *product_id*.

        Removing an unknown id is not an error: it returns False and
        leaves storage untouched.
        """
        snapshot = self._product_repo.load()
        remaining = [p for p in snapshot.products if p.id != product_id]
        if len(remaining) == len(snapshot.products):
            return False

        self._product_repo.replace(remaining, snapshot.version)
        logger.info("Removed product %s", product_id)
        return True
