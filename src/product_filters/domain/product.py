"""Catalog entity and its enumerated attributes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Color(str, Enum):
    RED = "Red"
    BLACK = "Black"
    BLUE = "Blue"
    GREEN = "Green"


class Size(str, Enum):
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    YUGE = "Yuge"


class Form(str, Enum):
    SQUARE = "Square"
    CIRCLE = "Circle"


class Product(BaseModel):
    """A catalog item.

    ``name`` is required and may not be empty; a missing or ``None`` name
    raises :class:`pydantic.ValidationError` (a ``ValueError``).
    Enum fields accept members or their string values::

        Product(name="Tree", color="Green", size=Size.YUGE, form=Form.CIRCLE)
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    color: Color
    size: Size
    form: Form
