"""Pure text rendering of registry state for the terminal.

Nothing here touches storage or prints; commands decide what to echo.
"""

from __future__ import annotations

from collections.abc import Iterable

from scanreg.application.dto import RegistrySummary
from scanreg.application.notifications import Notification
from scanreg.domain.model.capture import ScanEvent
from scanreg.domain.model.product import Product

_SEVERITY_TAGS = {
    "info": "[info]",
    "success": "[ok]",
    "warning": "[warn]",
    "error": "[error]",
}


def render_product_table(products: list[Product]) -> list[str]:
    if not products:
        return ["No products registered."]

    lines = [
        f"{'ID':<32} {'Code':<16} {'Name':<20} {'Price':>10}  {'Registered':<16}",
        "-" * 98,
    ]
    for p in products:
        lines.append(
            f"{p.id:<32} {p.code.value:<16} {p.name:<20} {str(p.price):>10}  "
            f"{p.created_at.strftime('%Y-%m-%d %H:%M'):<16}"
        )
    return lines


def render_product(product: Product) -> list[str]:
    return [
        f"ID:         {product.id}",
        f"Code:       {product.code}",
        f"Name:       {product.name}",
        f"Price:      {product.price}",
        f"Registered: {product.created_at.strftime('%Y-%m-%d %H:%M UTC')}",
    ]


def render_summary(summary: RegistrySummary) -> str:
    return f"Products: {summary.count}   Total value: {summary.formatted_total}"


def render_notification(notification: Notification) -> str:
    return f"{_SEVERITY_TAGS[notification.severity.value]} {notification.message}"


def render_scan_history(events: Iterable[ScanEvent]) -> list[str]:
    return [
        f"#{e.sequence:<4} {e.scanned_at.strftime('%H:%M:%S')}  {e.text}  ({e.format})"
        for e in events
    ]
