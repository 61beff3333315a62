"""
cryptomath — движок вычислений в конечной алгебре

Проверяет алгебраические законы на явно заданных конечных носителях
и строит иерархию структур Groupoid → Semigroup → Monoid → Group, на
которой вычисляются подгруппы, смежные классы, фактор-группы, порядки
элементов, показатель группы и функция Эйлера.
"""

from cryptomath.core import (
    AlgebraError,
    ArithmeticOverflowError,
    CardinalityLimits,
    DomainViolationError,
    FiniteSet,
    InconsistentStructureError,
    InvalidConstructionError,
    Law,
    LawViolation,
    Mapping,
    Relation,
    UndefinedResultError,
    cartesian_product,
    power_set,
)
from cryptomath.core.math import coprime_numbers, euler_phi
from cryptomath.groups import (
    Coset,
    CosetSide,
    FactorGroup,
    GroupHomomorphism,
    NormalSubgroup,
    Subgroup,
    element_order,
    find_generator,
    group_exponent,
    is_cyclic,
)
from cryptomath.structures import (
    Capability,
    CayleyRenderConfig,
    CayleyTable,
    Group,
    Groupoid,
    LawCheckResult,
    Monoid,
    Semigroup,
)

__version__ = "0.1.0"

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
    # Sets, Relations, Mappings
    "CardinalityLimits",
    "FiniteSet",
    "Mapping",
    "Relation",
    "cartesian_product",
    "power_set",
    # Structures
    "Capability",
    "CayleyRenderConfig",
    "CayleyTable",
    "Group",
    "Groupoid",
    "LawCheckResult",
    "Monoid",
    "Semigroup",
    # Group theory
    "Coset",
    "CosetSide",
    "FactorGroup",
    "GroupHomomorphism",
    "NormalSubgroup",
    "Subgroup",
    "element_order",
    "find_generator",
    "group_exponent",
    "is_cyclic",
    # Number theory
    "coprime_numbers",
    "euler_phi",
]
