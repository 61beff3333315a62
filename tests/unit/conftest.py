"""
Общие фикстуры: стандартные конечные группы

- Z_n: сложение по модулю n
- S3: перестановки {0, 1, 2} с композицией (p ∘ q)(i) = p(q(i))
- V4: группа Клейна, XOR на {0, 1, 2, 3}
"""

from itertools import permutations
from typing import Callable

import pytest

from cryptomath.structures import Group


def _compose(p: tuple[int, ...], q: tuple[int, ...]) -> tuple[int, ...]:
    return tuple(p[q[i]] for i in range(len(q)))


def _invert(p: tuple[int, ...]) -> tuple[int, ...]:
    inverse = [0] * len(p)
    for i, image in enumerate(p):
        inverse[image] = i
    return tuple(inverse)


@pytest.fixture
def cyclic_group() -> Callable[[int], Group]:
    """Фабрика Z_n"""

    def build(n: int) -> Group:
        return Group(
            carrier=range(n),
            operation=lambda a, b: (a + b) % n,
            identity=0,
            inverse_fn=lambda a: (-a) % n,
        )

    return build


@pytest.fixture
def z3(cyclic_group) -> Group:
    return cyclic_group(3)


@pytest.fixture
def z5(cyclic_group) -> Group:
    return cyclic_group(5)


@pytest.fixture
def z6(cyclic_group) -> Group:
    return cyclic_group(6)


@pytest.fixture
def s3() -> Group:
    """Симметрическая группа S3 (неабелева, порядок 6)"""
    return Group(
        carrier=permutations(range(3)),
        operation=_compose,
        identity=(0, 1, 2),
        inverse_fn=_invert,
    )


@pytest.fixture
def klein_four() -> Group:
    """Группа Клейна V4 (абелева, нециклическая)"""
    return Group(
        carrier=[0, 1, 2, 3],
        operation=lambda a, b: a ^ b,
        identity=0,
        inverse_fn=lambda a: a,
    )


class OperationCounter:
    """Z_n, считающая вызовы операции после построения группы."""

    def __init__(self, n: int) -> None:
        self.calls = 0
        self.group = Group(
            carrier=range(n),
            operation=self._add(n),
            identity=0,
            inverse_fn=lambda a: (-a) % n,
        )
        self.calls = 0

    def _add(self, n: int) -> Callable[[int, int], int]:
        def add(a: int, b: int) -> int:
            self.calls += 1
            return (a + b) % n

        return add


@pytest.fixture
def counting_z6() -> OperationCounter:
    return OperationCounter(6)
