"""The product catalog model."""

from __future__ import annotations

from .product import Color, Form, Product, Size

__all__: list[str] = [
    "Color",
    "Form",
    "Product",
    "Size",
]
