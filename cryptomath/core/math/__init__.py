"""
Core math modules для cryptomath

Теоретико-числовые примитивы: функция Эйлера и делители.
"""

from cryptomath.core.math.euler_function import (
    coprime_numbers,
    count_coprime,
    divisors,
    euler_phi,
    euler_phi_from_prime_factors,
    euler_phi_prime_power,
    verify_count,
    verify_multiplicative_property,
    verify_sum_over_divisors,
)

__all__ = [
    # Euler Function — Computation
    "euler_phi",
    "euler_phi_from_prime_factors",
    "euler_phi_prime_power",
    # Euler Function — Coprimes
    "coprime_numbers",
    "count_coprime",
    "divisors",
    # Euler Function — Property checks
    "verify_count",
    "verify_multiplicative_property",
    "verify_sum_over_divisors",
]
