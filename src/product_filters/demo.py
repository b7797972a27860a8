"""Console walkthrough of the closed and open filters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .catalog import build_catalog
from .domain.product import Color, Form, Size
from .filters import BetterFilter, ProductFilter
from .specifications import (
    AndSpecification,
    ColorSpecification,
    FormSpecification,
    MultiSpecification,
    SizeSpecification,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from .domain.product import Product

logger = logging.getLogger(__name__)


def run_scenarios(
    products: Sequence[Product], out: Callable[[str], object] = print
) -> None:
    """Print each filtering scenario and its matches through *out*."""
    out("Open Close Principle!")

    pf = ProductFilter()
    out("Green products (old):")
    for p in pf.filter_by_color(products, Color.GREEN):
        out(f" - {p.name} is green")

    bf: BetterFilter[Product] = BetterFilter()
    out("Green products (new):")
    for p in bf.filter(products, ColorSpecification(Color.GREEN)):
        out(f" - {p.name} is green")

    out("Large blue items")
    large_blue = AndSpecification(
        ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)
    )
    for p in bf.filter(products, large_blue):
        out(f" - {p.name} is big and blue")

    out("Large blue items Multi filter")
    large_blue_circle = MultiSpecification(
        [
            ColorSpecification(Color.BLUE),
            SizeSpecification(Size.LARGE),
            FormSpecification(Form.CIRCLE),
        ]
    )
    for p in bf.filter(products, large_blue_circle):
        out(f" - {p.name} is blue, large and circle")


def main() -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    products = build_catalog()
    logger.info("Running scenarios over %d product(s)", len(products))
    run_scenarios(products)
    return 0
