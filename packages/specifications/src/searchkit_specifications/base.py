from typing import Any, Generic, TypeVar

from searchkit_core.domain.specification import ISpecification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T], ISpecification[T]):
    """Base class for specifications with logic operator support."""

    def __and__(self, other: ISpecification[T]) -> "AndSpecification[T]":
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> "OrSpecification[T]":
        return OrSpecification(self, other)

    def __invert__(self) -> "NotSpecification[T]":
        return NotSpecification(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseSpecification):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class MatchAllSpecification(BaseSpecification[T]):
    """The vacuous predicate: satisfied by every candidate.

    Serialises to an empty dict so query executors add no WHERE clause.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        return True

    def to_dict(self) -> dict[str, Any]:
        return {}

    def __and__(self, other: ISpecification[T]) -> Any:
        return other


class AndSpecification(BaseSpecification[T]):
    """Logical AND composite specification."""

    def __init__(self, *specifications: ISpecification[T]) -> None:
        self.specifications = specifications

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "and",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }


class OrSpecification(BaseSpecification[T]):
    """Logical OR composite specification."""

    def __init__(self, *specifications: ISpecification[T]) -> None:
        self.specifications = specifications

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(spec.is_satisfied_by(candidate) for spec in self.specifications)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "or",
            "conditions": [spec.to_dict() for spec in self.specifications],
        }


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, specification: ISpecification[T]) -> None:
        self.specification = specification

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.specification.is_satisfied_by(candidate)

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": "not",
            "conditions": [self.specification.to_dict()],
        }
