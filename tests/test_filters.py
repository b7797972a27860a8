from __future__ import annotations

import logging
from typing import Any

import pytest

from product_filters import (
    AndSpecification,
    BaseSpecification,
    BetterFilter,
    Color,
    ColorSpecification,
    Form,
    FormSpecification,
    MultiSpecification,
    Product,
    ProductFilter,
    Size,
    SizeSpecification,
)


class CountingSpecification(BaseSpecification[Product]):
    def __init__(self, inner: BaseSpecification[Product]) -> None:
        self.inner = inner
        self.seen: list[str] = []

    def is_satisfied_by(self, candidate: Product) -> bool:
        self.seen.append(candidate.name)
        return self.inner.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return self.inner.to_dict()


def names(products) -> list[str]:
    return [p.name for p in products]


# -- ProductFilter -----------------------------------------------------------


def test_filter_by_color(catalog: list[Product]):
    assert names(ProductFilter().filter_by_color(catalog, Color.GREEN)) == ["Tree"]


def test_filter_by_size_preserves_order(catalog: list[Product]):
    assert names(ProductFilter().filter_by_size(catalog, Size.LARGE)) == [
        "Apple",
        "House",
    ]


def test_filter_by_size_no_match(catalog: list[Product]):
    assert list(ProductFilter().filter_by_size(catalog, Size.SMALL)) == []


def test_legacy_filter_is_restartable(catalog: list[Product]):
    pf = ProductFilter()
    first = list(pf.filter_by_color(catalog, Color.BLUE))
    second = list(pf.filter_by_color(catalog, Color.BLUE))
    assert first == second == [catalog[2]]


def test_legacy_filter_logs_match_count(catalog: list[Product], caplog):
    pf = ProductFilter()
    with caplog.at_level(logging.DEBUG, logger="product_filters.filters"):
        list(pf.filter_by_size(catalog, Size.LARGE))
        list(pf.filter_by_color(catalog, Color.GREEN))

    messages = [rec.getMessage() for rec in caplog.records]
    assert any(m.startswith("Filtering by size") for m in messages)
    assert any("by size" in m and "matched 2 item(s)" in m for m in messages)
    assert any(m.startswith("Filtering by color") for m in messages)
    assert any("by color" in m and "matched 1 item(s)" in m for m in messages)


def test_legacy_filter_propagates_source_errors():
    def broken():
        yield Product(name="Apple", color="Red", size="Large", form="Square")
        raise RuntimeError("source failed")

    results = ProductFilter().filter_by_color(broken(), Color.RED)
    assert next(results).name == "Apple"
    with pytest.raises(RuntimeError, match="source failed"):
        next(results)


# -- BetterFilter ------------------------------------------------------------


def test_better_filter_green(catalog: list[Product]):
    bf: BetterFilter[Product] = BetterFilter()
    assert names(bf.filter(catalog, ColorSpecification(Color.GREEN))) == ["Tree"]


def test_better_filter_large_blue(catalog: list[Product]):
    spec = AndSpecification(
        ColorSpecification(Color.BLUE), SizeSpecification(Size.LARGE)
    )
    assert names(BetterFilter().filter(catalog, spec)) == ["House"]


def test_better_filter_multi(catalog: list[Product]):
    spec = MultiSpecification(
        [
            ColorSpecification(Color.BLUE),
            SizeSpecification(Size.LARGE),
            FormSpecification(Form.CIRCLE),
        ]
    )
    assert names(BetterFilter().filter(catalog, spec)) == ["House"]


def test_better_filter_empty_multi_keeps_everything(catalog: list[Product]):
    assert list(BetterFilter().filter(catalog, MultiSpecification([]))) == catalog


@pytest.mark.parametrize(
    "spec",
    [
        ColorSpecification(Color.RED),
        ColorSpecification(Color.GREEN),
        SizeSpecification(Size.LARGE),
        FormSpecification(Form.CIRCLE),
        MultiSpecification([]),
    ],
)
def test_single_item_filter_matches_predicate(apple: Product, spec):
    expected = [apple] if spec.is_satisfied_by(apple) else []
    assert list(BetterFilter().filter([apple], spec)) == expected


def test_better_filter_preserves_order(apple, tree, house):
    products = [house, apple, tree]
    spec = FormSpecification(Form.CIRCLE)
    assert names(BetterFilter().filter(products, spec)) == ["House", "Tree"]


def test_better_filter_is_lazy(catalog: list[Product]):
    spec = CountingSpecification(SizeSpecification(Size.LARGE))
    results = BetterFilter().filter(catalog, spec)
    assert spec.seen == []

    assert next(results).name == "Apple"
    assert spec.seen == ["Apple"]

    assert next(results).name == "House"
    assert spec.seen == ["Apple", "Tree", "House"]


def test_better_filter_evaluates_once_per_item(catalog: list[Product]):
    spec = CountingSpecification(ColorSpecification(Color.GREEN))
    list(BetterFilter().filter(catalog, spec))
    assert spec.seen == ["Apple", "Tree", "House"]


def test_better_filter_rejects_missing_spec(catalog: list[Product]):
    with pytest.raises(ValueError, match="spec"):
        BetterFilter().filter(catalog, None)


def test_better_filter_logs_match_count(catalog: list[Product], caplog):
    with caplog.at_level(logging.DEBUG, logger="product_filters.filters"):
        list(BetterFilter().filter(catalog, SizeSpecification(Size.LARGE)))

    messages = [rec.getMessage() for rec in caplog.records]
    assert any("matched 2 item(s)" in m for m in messages)
