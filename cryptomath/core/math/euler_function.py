"""
Euler Function — функция Эйлера φ(n)

φ(n) — количество целых из [1, n), взаимно простых с n.

Свойства:
- φ(0) = 0, φ(1) = 1 (по определению)
- φ(p) = p - 1 для простого p
- φ(p^k) = p^k - p^(k-1)
- φ(mn) = φ(m)·φ(n) при gcd(m, n) = 1
- Σ_{d|n} φ(d) = n

Вычисление: факторизация пробным делением до √n, для каждого различного
простого делителя p применяется result = result / p · (p - 1). Остаток > 1
после цикла — последний простой делитель.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Аргументы — неотрицательные целые (иначе DomainViolationError)
2. Все вычисления точные (целочисленные)
"""

import math
from typing import Iterable

from cryptomath.core.errors import DomainViolationError


def _require_non_negative(n: int, name: str = "n") -> None:
    if n < 0:
        raise DomainViolationError(f"{name} must be non-negative, got {n}")


# =============================================================================
# ВЫЧИСЛЕНИЕ φ(n)
# =============================================================================


def euler_phi(n: int) -> int:
    """
    φ(n) пробным делением.

    Examples:
        >>> euler_phi(12)
        4
        >>> euler_phi(13)
        12
    """
    _require_non_negative(n)
    if n == 0:
        return 0
    if n == 1:
        return 1

    result = n
    remaining = n
    p = 2
    while p * p <= remaining:
        if remaining % p == 0:
            while remaining % p == 0:
                remaining //= p
            result = result // p * (p - 1)
        p += 1

    if remaining > 1:
        result = result // remaining * (remaining - 1)

    return result


def euler_phi_from_prime_factors(factors: Iterable[tuple[int, int]]) -> int:
    """
    φ(n) по разложению n = p1^k1 · ... · pr^kr.

    Args:
        factors: пары (p, k) с различными простыми p и k >= 1

    Examples:
        >>> euler_phi_from_prime_factors([(2, 2), (3, 1)])
        4
    """
    factors = list(factors)
    n = 1
    for p, k in factors:
        _require_non_negative(k, "k")
        n *= p**k

    result = n
    for p, k in factors:
        if k > 0:
            result = result // p * (p - 1)
    return result


def euler_phi_prime_power(p: int, k: int) -> int:
    """φ(p^k) = p^k - p^(k-1); φ(p^0) = 1."""
    _require_non_negative(k, "k")
    if k == 0:
        return 1
    return p**k - p ** (k - 1)


# =============================================================================
# ВЗАИМНО ПРОСТЫЕ
# =============================================================================


def coprime_numbers(n: int) -> list[int]:
    """
    Все i ∈ [1, n) с gcd(i, n) = 1 в порядке возрастания.

    Examples:
        >>> coprime_numbers(12)
        [1, 5, 7, 11]
    """
    _require_non_negative(n)
    return [i for i in range(1, n) if math.gcd(i, n) == 1]


def count_coprime(n: int) -> int:
    """
    Наивный подсчёт взаимно простых (для сверки с φ).

    Для n = 1 возвращается 1, согласно φ(1) = 1, хотя [1, 1) пуст.
    """
    _require_non_negative(n)
    if n == 0:
        return 0
    if n == 1:
        return 1
    return len(coprime_numbers(n))


# =============================================================================
# ПРОВЕРКИ СВОЙСТВ
# =============================================================================


def verify_count(n: int) -> bool:
    """φ(n) совпадает с наивным подсчётом."""
    return euler_phi(n) == count_coprime(n)


def verify_multiplicative_property(m: int, n: int) -> bool:
    """
    φ(mn) = φ(m)·φ(n).

    Для gcd(m, n) ≠ 1 свойство не утверждается — возвращается False.
    """
    _require_non_negative(m, "m")
    _require_non_negative(n)
    if math.gcd(m, n) != 1:
        return False
    return euler_phi(m * n) == euler_phi(m) * euler_phi(n)


def divisors(n: int) -> list[int]:
    """Положительные делители n в порядке возрастания; для n = 0 — пусто."""
    _require_non_negative(n)
    return [d for d in range(1, n + 1) if n % d == 0]


def verify_sum_over_divisors(n: int) -> bool:
    """Σ_{d|n} φ(d) = n"""
    return sum(euler_phi(d) for d in divisors(n)) == n
