"""The predicate interface every filter rule implements."""

from typing import Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """A single filtering rule. Evaluation must not mutate *candidate*."""

    def is_satisfied_by(self, candidate: T) -> bool: ...
