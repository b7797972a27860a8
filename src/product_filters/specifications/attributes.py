"""Leaf specifications comparing one product attribute to a fixed value."""

from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

from ..domain.product import Color, Form, Product, Size
from .base import BaseSpecification
from .operators import SpecificationOperator

T = TypeVar("T", contravariant=True)

_MISSING = object()


class AttributeSpecification(BaseSpecification[T]):
    """
    Satisfied iff ``getattr(candidate, attr) == val``.

    A candidate without the attribute never matches.
    """

    def __init__(self, attr: str, val: Any) -> None:
        self.attr = attr
        self.val = val

    def is_satisfied_by(self, candidate: T) -> bool:
        value = getattr(candidate, self.attr, _MISSING)
        return value is not _MISSING and bool(value == self.val)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.EQ.value,
            "attr": self.attr,
            "val": self.val.value if isinstance(self.val, Enum) else self.val,
        }


class ColorSpecification(AttributeSpecification[Product]):
    def __init__(self, color: Color | str) -> None:
        super().__init__("color", Color(color))


class SizeSpecification(AttributeSpecification[Product]):
    def __init__(self, size: Size | str) -> None:
        super().__init__("size", Size(size))


class FormSpecification(AttributeSpecification[Product]):
    def __init__(self, form: Form | str) -> None:
        super().__init__("form", Form(form))
