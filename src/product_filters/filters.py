"""
Product filters.

:class:`ProductFilter` hardcodes one method per attribute and must be edited
to filter on anything new. :class:`BetterFilter` takes any
:class:`ISpecification` and never changes when new rules are added.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .domain.product import Color, Product, Size
    from .specifications.protocol import ISpecification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductFilter:
    """One filtering method per attribute."""

    def filter_by_size(
        self, products: Iterable[Product], size: Size
    ) -> Iterator[Product]:
        logger.debug("Filtering by size %s", size)
        matched = 0
        for product in products:
            if product.size == size:
                matched += 1
                yield product
        logger.debug("Filter by size %s matched %d item(s)", size, matched)

    def filter_by_color(
        self, products: Iterable[Product], color: Color
    ) -> Iterator[Product]:
        logger.debug("Filtering by color %s", color)
        matched = 0
        for product in products:
            if product.color == color:
                matched += 1
                yield product
        logger.debug("Filter by color %s matched %d item(s)", color, matched)


class IFilter(Protocol, Generic[T]):
    """Filters items with an injected specification."""

    def filter(
        self, items: Iterable[T], spec: ISpecification[T]
    ) -> Iterator[T]: ...


class BetterFilter(IFilter[T]):
    """
    Specification-driven filter.

    Lazy: the specification is evaluated once per item, in order, only as
    the returned iterator is advanced.
    """

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        if spec is None:
            raise ValueError("'spec' is required")
        return self._filter(items, spec)

    @staticmethod
    def _filter(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        logger.debug("Filtering with %r", spec)
        matched = 0
        for item in items:
            if spec.is_satisfied_by(item):
                matched += 1
                yield item
        logger.debug("Filter with %r matched %d item(s)", spec, matched)
