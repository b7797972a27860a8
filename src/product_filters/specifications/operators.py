from enum import Enum


class SpecificationOperator(str, Enum):
    """Operator names used in ``to_dict()`` descriptions."""

    # Leaf comparison
    EQ = "="

    # Logical operators
    AND = "and"
    ALL = "all"
    OR = "or"
    NOT = "not"
