from .attributes import (
    AttributeSpecification,
    ColorSpecification,
    FormSpecification,
    SizeSpecification,
)
from .base import (
    AndSpecification,
    BaseSpecification,
    MultiSpecification,
    NotSpecification,
    OrSpecification,
)
from .operators import SpecificationOperator
from .protocol import ISpecification

__all__ = [
    # Core types
    "ISpecification",
    "SpecificationOperator",
    "BaseSpecification",
    # Leaves
    "AttributeSpecification",
    "ColorSpecification",
    "SizeSpecification",
    "FormSpecification",
    # Composites
    "AndSpecification",
    "MultiSpecification",
    "OrSpecification",
    "NotSpecification",
]
