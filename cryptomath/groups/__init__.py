"""
Group theory constructs для cryptomath

Подгруппы, центр, смежные классы, фактор-группы, порядок элементов,
циклические группы и гомоморфизмы. Все функции принимают родительскую
группу явно.
"""

from cryptomath.groups.center import (
    center,
    center_elements,
    centralizer,
    centralizer_elements,
    commutes,
    is_centerless,
    is_in_center,
)
from cryptomath.groups.coset import (
    Coset,
    CosetSide,
    distinct_cosets,
    index,
    is_partition,
    left_coset,
    left_coset_partition,
    order_divides_group_order,
    possible_subgroup_orders,
    right_coset,
    right_coset_partition,
    verify_coset_partition,
    verify_lagrange,
)
from cryptomath.groups.cyclic_group import (
    cyclic_order,
    cyclic_subgroup,
    cyclic_subgroups,
    elements_of_order_in_cyclic_group,
    exponent_equals_order,
    find_all_generators,
    find_generator,
    is_cyclic,
    is_generator,
    is_isomorphic_to_zn,
    number_of_generators,
    subgroup_of_order,
    try_find_generator,
    unique_subgroup_for_each_divisor,
)
from cryptomath.groups.element_order import (
    element_order,
    elements_of_order,
    exponent_divides_group_order,
    generated_subgroup_elements,
    group_exponent,
    has_exponent,
    has_finite_exponent,
    has_order,
    is_cyclic_via_exponent,
    is_finite_order,
    matches_exponent,
    order_divides_power,
    order_equals_inverse_order,
    order_map,
    order_of_power,
    order_via_generated_subgroup,
    orders_divide_exponent,
    satisfies_exponent,
    satisfies_identity_power,
    try_element_order,
    try_group_exponent,
    verify_exponent_order_relation,
)
from cryptomath.groups.factor_group import FactorGroup, verify_factor_group
from cryptomath.groups.homomorphism import GroupHomomorphism
from cryptomath.groups.subgroup import (
    NormalSubgroup,
    Subgroup,
    check_normality,
    check_subgroup_criterion,
    find_subgroup,
    improper_normal_subgroup,
    improper_subgroup,
    is_closed_subset,
    is_normal,
    is_normal_by_cosets,
    is_normal_in_abelian_group,
    trivial_normal_subgroup,
    trivial_subgroup,
)

__all__ = [
    # Subgroups
    "NormalSubgroup",
    "Subgroup",
    "check_normality",
    "check_subgroup_criterion",
    "find_subgroup",
    "improper_normal_subgroup",
    "improper_subgroup",
    "is_closed_subset",
    "is_normal",
    "is_normal_by_cosets",
    "is_normal_in_abelian_group",
    "trivial_normal_subgroup",
    "trivial_subgroup",
    # Center
    "center",
    "center_elements",
    "centralizer",
    "centralizer_elements",
    "commutes",
    "is_centerless",
    "is_in_center",
    # Cosets and Lagrange
    "Coset",
    "CosetSide",
    "distinct_cosets",
    "index",
    "is_partition",
    "left_coset",
    "left_coset_partition",
    "order_divides_group_order",
    "possible_subgroup_orders",
    "right_coset",
    "right_coset_partition",
    "verify_coset_partition",
    "verify_lagrange",
    # Factor Group
    "FactorGroup",
    "verify_factor_group",
    # Element Order and Exponent
    "element_order",
    "elements_of_order",
    "exponent_divides_group_order",
    "generated_subgroup_elements",
    "group_exponent",
    "has_exponent",
    "has_finite_exponent",
    "has_order",
    "is_cyclic_via_exponent",
    "is_finite_order",
    "matches_exponent",
    "order_divides_power",
    "order_equals_inverse_order",
    "order_map",
    "order_of_power",
    "order_via_generated_subgroup",
    "orders_divide_exponent",
    "satisfies_exponent",
    "satisfies_identity_power",
    "try_element_order",
    "try_group_exponent",
    "verify_exponent_order_relation",
    # Cyclic Groups
    "cyclic_order",
    "cyclic_subgroup",
    "cyclic_subgroups",
    "elements_of_order_in_cyclic_group",
    "exponent_equals_order",
    "find_all_generators",
    "find_generator",
    "is_cyclic",
    "is_generator",
    "is_isomorphic_to_zn",
    "number_of_generators",
    "subgroup_of_order",
    "try_find_generator",
    "unique_subgroup_for_each_divisor",
    # Homomorphisms
    "GroupHomomorphism",
]
