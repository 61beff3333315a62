"""
Core primitives для cryptomath

Конечные множества, мощности, отношения, отображения и таксономия ошибок.
Модули core не зависят от алгебраических структур.
"""

from cryptomath.core.cardinality import (
    CardinalityType,
    are_equinumerous,
    cantor_diagonal_set,
    cantor_theorem,
    cardinality,
    cardinality_le,
    cardinality_lt,
    cardinality_type,
    cartesian_product_cardinality,
    is_finite,
    power_set_cardinality,
)
from cryptomath.core.errors import (
    AlgebraError,
    ArithmeticOverflowError,
    DomainViolationError,
    InconsistentStructureError,
    InvalidConstructionError,
    Law,
    LawViolation,
    UndefinedResultError,
)
from cryptomath.core.finite_set import (
    HOST_INT_BITS,
    CardinalityLimits,
    FiniteSet,
    as_finite_set,
    cartesian_product,
    check_power_set_exponent,
    power_set,
)
from cryptomath.core.mapping import Mapping
from cryptomath.core.relation import Relation

__all__ = [
    # Errors
    "AlgebraError",
    "ArithmeticOverflowError",
    "DomainViolationError",
    "InconsistentStructureError",
    "InvalidConstructionError",
    "Law",
    "LawViolation",
    "UndefinedResultError",
    # Finite Set
    "HOST_INT_BITS",
    "CardinalityLimits",
    "FiniteSet",
    "as_finite_set",
    "cartesian_product",
    "check_power_set_exponent",
    "power_set",
    # Cardinality
    "CardinalityType",
    "are_equinumerous",
    "cantor_diagonal_set",
    "cantor_theorem",
    "cardinality",
    "cardinality_le",
    "cardinality_lt",
    "cardinality_type",
    "cartesian_product_cardinality",
    "is_finite",
    "power_set_cardinality",
    # Relations and Mappings
    "Mapping",
    "Relation",
]
