from .ast import AttributeSpecification
from .base import (
    AndSpecification,
    BaseSpecification,
    MatchAllSpecification,
    NotSpecification,
    OrSpecification,
)
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    InvalidFieldError,
    OperatorNotFoundError,
    SpecificationError,
    TypeMismatchError,
    ValidationError,
)
from .operators import SpecificationOperator
from .operators_memory import build_default_registry
from .query_options import QueryOptions
from .schema import EntitySchema, FieldDescriptor, FieldType, field_type_for
from .translator import FilterTranslator, translate_filter

__all__ = [
    # Core types
    "SpecificationOperator",
    "AttributeSpecification",
    "BaseSpecification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "MatchAllSpecification",
    # Schema / translation
    "EntitySchema",
    "FieldDescriptor",
    "FieldType",
    "field_type_for",
    "FilterTranslator",
    "translate_filter",
    # Query options
    "QueryOptions",
    # Evaluator / strategy
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    # Exceptions
    "SpecificationError",
    "ValidationError",
    "OperatorNotFoundError",
    "InvalidFieldError",
    "TypeMismatchError",
]
