"""
Mapping — отображение между конечными множествами

f: A → B, заданное таблицей значений. Таблица тотальна на A и
принимает значения только в B.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ключи таблицы совпадают с доменом (totality)
2. Все значения лежат в кодомене (membership)
3. Композиция определена только если кодомен f равен домену g
"""

from typing import Any, Callable

from pydantic import BaseModel, field_validator, model_validator

from cryptomath.core.errors import (
    DomainViolationError,
    InvalidConstructionError,
    Law,
    LawViolation,
    UndefinedResultError,
)
from cryptomath.core.finite_set import FiniteSet, as_finite_set


class Mapping(BaseModel):
    """
    Отображение f: domain → codomain.

    Immutable модель (frozen=True). Построение отклоняется, если таблица
    не покрывает домен или выводит значение за пределы кодомена.
    """

    domain: FiniteSet
    codomain: FiniteSet
    table: dict[Any, Any]

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("domain", "codomain", mode="before")
    @classmethod
    def _coerce_sets(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @model_validator(mode="after")
    def _check_table(self) -> "Mapping":
        for a in self.domain:
            if a not in self.table:
                raise InvalidConstructionError(
                    LawViolation(
                        law=Law.TOTALITY,
                        witness=(a,),
                        details="Mapping is undefined on a domain element",
                    )
                )
        for a, b in self.table.items():
            if a not in self.domain:
                raise InvalidConstructionError(
                    LawViolation(
                        law=Law.MEMBERSHIP,
                        witness=(a,),
                        details="Mapping table key outside domain",
                    )
                )
            if b not in self.codomain:
                raise InvalidConstructionError(
                    LawViolation(
                        law=Law.CLOSURE,
                        witness=(a, b),
                        details="Mapping value outside codomain",
                    )
                )
        return self

    @classmethod
    def from_function(
        cls, domain: Any, codomain: Any, func: Callable[[Any], Any]
    ) -> "Mapping":
        domain = as_finite_set(domain)
        return cls(domain=domain, codomain=codomain, table={a: func(a) for a in domain})

    @classmethod
    def identity(cls, carrier: Any) -> "Mapping":
        """id_A: a ↦ a"""
        carrier = as_finite_set(carrier)
        return cls(domain=carrier, codomain=carrier, table={a: a for a in carrier})

    # =========================================================================
    # EVALUATION
    # =========================================================================

    def __call__(self, a: Any) -> Any:
        return self.apply(a)

    def apply(self, a: Any) -> Any:
        """
        f(a)

        Raises:
            DomainViolationError: если a вне домена
        """
        if a not in self.domain:
            raise DomainViolationError(f"Element {a!r} not in mapping domain")
        return self.table[a]

    def image(self, subset: Any = None) -> FiniteSet:
        """f(S); без аргумента — образ всего домена."""
        source = self.domain if subset is None else as_finite_set(subset)
        return FiniteSet(self.apply(a) for a in source)

    def preimage(self, b: Any) -> FiniteSet:
        """f⁻¹(b) = {a ∈ A | f(a) = b}"""
        return FiniteSet(a for a in self.domain if self.table[a] == b)

    def preimage_of_set(self, subset: Any) -> FiniteSet:
        """f⁻¹(T) = {a ∈ A | f(a) ∈ T}"""
        target = as_finite_set(subset)
        return FiniteSet(a for a in self.domain if self.table[a] in target)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    def is_injective(self) -> bool:
        return len(self.image()) == len(self.domain)

    def is_surjective(self) -> bool:
        return self.image() == self.codomain

    def is_bijective(self) -> bool:
        return self.is_injective() and self.is_surjective()

    # =========================================================================
    # CONSTRUCTIONS
    # =========================================================================

    def inverse(self) -> "Mapping":
        """
        f⁻¹: B → A

        Raises:
            UndefinedResultError: если f не биекция
        """
        if not self.is_bijective():
            raise UndefinedResultError("Only a bijective mapping has an inverse")
        return Mapping(
            domain=self.codomain,
            codomain=self.domain,
            table={b: a for a, b in self.table.items()},
        )

    def compose(self, inner: "Mapping") -> "Mapping":
        """
        (self ∘ inner)(a) = self(inner(a))

        Raises:
            DomainViolationError: если кодомен inner не совпадает с доменом self
        """
        if inner.codomain != self.domain:
            raise DomainViolationError(
                "Composition requires inner codomain to equal outer domain"
            )
        return Mapping(
            domain=inner.domain,
            codomain=self.codomain,
            table={a: self.table[inner.table[a]] for a in inner.domain},
        )
