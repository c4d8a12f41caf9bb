from enum import Enum


class SpecificationOperator(str, Enum):
    """Supported operators for specifications."""

    # Comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Membership
    IN = "in"
    NOT_IN = "not_in"

    # Text matching
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"

    # Null checks
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    # Logical operators
    AND = "and"
    OR = "or"
    NOT = "not"
