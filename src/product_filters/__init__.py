"""Filtering a product catalog with composable specifications."""

from .catalog import build_catalog
from .domain import Color, Form, Product, Size
from .filters import BetterFilter, IFilter, ProductFilter
from .specifications import (
    AndSpecification,
    AttributeSpecification,
    BaseSpecification,
    ColorSpecification,
    FormSpecification,
    ISpecification,
    MultiSpecification,
    NotSpecification,
    OrSpecification,
    SizeSpecification,
    SpecificationOperator,
)

__all__ = [
    # Domain
    "Color",
    "Form",
    "Product",
    "Size",
    "build_catalog",
    # Filters
    "IFilter",
    "ProductFilter",
    "BetterFilter",
    # Specifications
    "ISpecification",
    "BaseSpecification",
    "AttributeSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "FormSpecification",
    "AndSpecification",
    "MultiSpecification",
    "OrSpecification",
    "NotSpecification",
    "SpecificationOperator",
]
