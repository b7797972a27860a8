"""Shared fixtures for product filter tests."""

from __future__ import annotations

import pytest

from product_filters import Color, Form, Product, Size, build_catalog


@pytest.fixture
def apple() -> Product:
    return Product(name="Apple", color=Color.RED, size=Size.LARGE, form=Form.SQUARE)


@pytest.fixture
def tree() -> Product:
    return Product(name="Tree", color=Color.GREEN, size=Size.YUGE, form=Form.CIRCLE)


@pytest.fixture
def house() -> Product:
    return Product(name="House", color=Color.BLUE, size=Size.LARGE, form=Form.CIRCLE)


@pytest.fixture
def catalog() -> list[Product]:
    return build_catalog()
