from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

from .operators import SpecificationOperator
from .protocol import ISpecification

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T", contravariant=True)


def _require(spec: ISpecification[T] | None, name: str) -> ISpecification[T]:
    if spec is None:
        raise ValueError(f"'{name}' specification is required")
    return spec


def _describe(spec: ISpecification[Any]) -> dict[str, Any]:
    if isinstance(spec, BaseSpecification):
        return spec.to_dict()
    return {"op": type(spec).__name__}


class BaseSpecification(ISpecification[T]):
    """Specification with &, | and ~ composition and a ``to_dict()`` description."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    @abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_dict()!r})"


class AndSpecification(BaseSpecification[T]):
    """
    Logical AND of exactly two specifications.

    Both children are always evaluated, ``first`` then ``second``.
    """

    def __init__(
        self,
        first: ISpecification[T] | None,
        second: ISpecification[T] | None,
    ) -> None:
        self.first = _require(first, "first")
        self.second = _require(second, "second")

    def is_satisfied_by(self, candidate: T) -> bool:
        first = self.first.is_satisfied_by(candidate)
        second = self.second.is_satisfied_by(candidate)
        return first and second

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.AND.value,
            "conditions": [_describe(self.first), _describe(self.second)],
        }


class MultiSpecification(BaseSpecification[T]):
    """
    Logical AND over an ordered sequence of specifications.

    An empty sequence is satisfied by every candidate.
    """

    def __init__(self, specifications: Iterable[ISpecification[T] | None]) -> None:
        if specifications is None:
            raise ValueError("'specifications' sequence is required")
        self.specifications: tuple[ISpecification[T], ...] = tuple(
            _require(spec, f"specifications[{idx}]")
            for idx, spec in enumerate(specifications)
        )

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.ALL.value,
            "conditions": [_describe(spec) for spec in self.specifications],
        }


class OrSpecification(BaseSpecification[T]):
    """Logical OR of exactly two specifications; both are always evaluated."""

    def __init__(
        self,
        first: ISpecification[T] | None,
        second: ISpecification[T] | None,
    ) -> None:
        self.first = _require(first, "first")
        self.second = _require(second, "second")

    def is_satisfied_by(self, candidate: T) -> bool:
        first = self.first.is_satisfied_by(candidate)
        second = self.second.is_satisfied_by(candidate)
        return first or second

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.OR.value,
            "conditions": [_describe(self.first), _describe(self.second)],
        }


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T] | None) -> None:
        self.specification = _require(specification, "specification")

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": SpecificationOperator.NOT.value,
            "conditions": [_describe(self.specification)],
        }
