"""
Algebraic structures для cryptomath

Иерархия гарантий Groupoid → Semigroup → Monoid → Group.
Каждая структура — независимая immutable модель, создаваемая только
через валидирующий конструктор и помеченная маркером Capability.
"""

from cryptomath.structures.cayley_table import (
    DEFAULT_MIN_COLUMN_WIDTH,
    DEFAULT_OPERATION_SYMBOL,
    CayleyRenderConfig,
    CayleyTable,
)
from cryptomath.structures.group import Group
from cryptomath.structures.groupoid import Groupoid
from cryptomath.structures.laws import (
    Capability,
    LawCheckResult,
    Operation,
    binary_power,
    check_associativity,
    check_closure,
    check_commutativity,
    check_identity,
    check_inverses,
    check_left_group_axioms,
    check_right_group_axioms,
    find_identity,
    find_inverse,
    is_idempotent,
    is_left_cancellative,
    is_right_cancellative,
    raise_if_violated,
)
from cryptomath.structures.monoid import Monoid
from cryptomath.structures.semigroup import Semigroup

__all__ = [
    # Laws — Types
    "Capability",
    "LawCheckResult",
    "Operation",
    # Laws — Checkers
    "check_associativity",
    "check_closure",
    "check_commutativity",
    "check_identity",
    "check_inverses",
    "check_left_group_axioms",
    "check_right_group_axioms",
    "find_identity",
    "find_inverse",
    "is_idempotent",
    "is_left_cancellative",
    "is_right_cancellative",
    # Laws — Utilities
    "binary_power",
    "raise_if_violated",
    # Structures
    "Groupoid",
    "Semigroup",
    "Monoid",
    "Group",
    # Cayley Table
    "DEFAULT_MIN_COLUMN_WIDTH",
    "DEFAULT_OPERATION_SYMBOL",
    "CayleyRenderConfig",
    "CayleyTable",
]
