"""Application service: Clear All Products use case.

Clearing cannot be undone, so besides the unconditional ``handle`` the
handler offers a two-step form: ``request()`` issues a single-use token
and ``confirm(token)`` performs the clear only if that token is the most
recent one issued.
"""

from __future__ import annotations

import logging
import secrets

from scanreg.domain.exceptions import ConfirmationError
from scanreg.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ClearProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo
        self._pending_token: str | None = None

    def handle(self) -> None:
        self._product_repo.clear()
        logger.info("Cleared all products")

    def request(self) -> str:
        self._pending_token = secrets.token_hex(8)
        return self._pending_token

    def confirm(self, token: str) -> None:
        if self._pending_token is None or token != self._pending_token:
            raise ConfirmationError("Clear was not confirmed with the current token")
        self._pending_token = None
        self.handle()
