"""The demo catalog."""

from __future__ import annotations

from .domain.product import Color, Form, Product, Size


def build_catalog() -> list[Product]:
    """Return a fresh, ordered list of the demo products."""
    return [
        Product(name="Apple", color=Color.RED, size=Size.LARGE, form=Form.SQUARE),
        Product(name="Tree", color=Color.GREEN, size=Size.YUGE, form=Form.CIRCLE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE, form=Form.CIRCLE),
    ]
