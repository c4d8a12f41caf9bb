"""Specification pattern primitives."""

from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol, Generic[T]):
    """
    Protocol for the Specification pattern.
    Used to encapsulate search criteria for querying and filtering entities.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether a candidate record satisfies the specification.
        Used for in-memory filtering.
        """
        ...

    def to_dict(self) -> dict[str, Any]:
        """
        Return a dictionary representation of the specification.
        Query executors compile this form into backend-native queries.
        An empty dict means "no constraint".
        """
        ...
