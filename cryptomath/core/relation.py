"""
Relation — бинарное отношение на конечном множестве

Immutable Pydantic модель: R ⊆ A × A.
Строится из явного множества пар или из предиката.

Свойства:
- рефлексивность, симметричность, антисимметричность, транзитивность
- отношение эквивалентности, частичный порядок
- классы эквивалентности (разбиение носителя)
- транзитивное замыкание (Floyd–Warshall по k, i, j)
- композиция отношений
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


class Relation(BaseModel):
    """
    Бинарное отношение R ⊆ A × A.

    Immutable модель (frozen=True). Каждая пара обязана лежать в A × A,
    иначе построение отклоняется с Law.MEMBERSHIP.
    """

    carrier: FiniteSet
    pairs: FiniteSet

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("carrier", mode="before")
    @classmethod
    def _coerce_carrier(cls, v: Any) -> FiniteSet:
        return as_finite_set(v)

    @field_validator("pairs", mode="before")
    @classmethod
    def _coerce_pairs(cls, v: Any) -> FiniteSet:
        if isinstance(v, FiniteSet):
            return v
        return FiniteSet(tuple(p) for p in v)

    @model_validator(mode="after")
    def _check_pairs_in_carrier(self) -> "Relation":
        for a, b in self.pairs:
            if a not in self.carrier or b not in self.carrier:
                raise InvalidConstructionError(
                    LawViolation(
                        law=Law.MEMBERSHIP,
                        witness=(a, b),
                        details="Relation contains a pair outside carrier × carrier",
                    )
                )
        return self

    @classmethod
    def from_predicate(
        cls, carrier: Any, predicate: Callable[[Any, Any], bool]
    ) -> "Relation":
        """Отношение {(a, b) ∈ A × A | predicate(a, b)}."""
        carrier = as_finite_set(carrier)
        pairs = FiniteSet((a, b) for a in carrier for b in carrier if predicate(a, b))
        return cls(carrier=carrier, pairs=pairs)

    # =========================================================================
    # QUERIES
    # =========================================================================

    def related(self, a: Any, b: Any) -> bool:
        """(a, b) ∈ R; элементы вне носителя не связаны ни с чем."""
        if a not in self.carrier or b not in self.carrier:
            return False
        return (a, b) in self.pairs

    def is_reflexive(self) -> bool:
        """(a, a) ∈ R для всех a ∈ A"""
        return all(self.related(a, a) for a in self.carrier)

    def is_symmetric(self) -> bool:
        """(a, b) ∈ R ⇒ (b, a) ∈ R"""
        return all(self.related(b, a) for a, b in self.pairs)

    def is_antisymmetric(self) -> bool:
        """(a, b) ∈ R и (b, a) ∈ R ⇒ a = b"""
        return all(a == b or not self.related(b, a) for a, b in self.pairs)

    def is_transitive(self) -> bool:
        """(a, b) ∈ R и (b, c) ∈ R ⇒ (a, c) ∈ R"""
        for a, b in self.pairs:
            for c in self.carrier:
                if self.related(b, c) and not self.related(a, c):
                    return False
        return True

    def is_equivalence_relation(self) -> bool:
        return self.is_reflexive() and self.is_symmetric() and self.is_transitive()

    def is_partial_order(self) -> bool:
        return self.is_reflexive() and self.is_antisymmetric() and self.is_transitive()

    # =========================================================================
    # EQUIVALENCE CLASSES
    # =========================================================================

    def _require_equivalence(self) -> None:
        if not self.is_equivalence_relation():
            raise UndefinedResultError("Relation must be an equivalence relation")

    def equivalence_classes(self) -> FiniteSet:
        """
        Разбиение носителя на классы эквивалентности.

        Берётся первый необработанный представитель (в порядке итерации),
        к нему собираются все связанные с ним элементы.

        Raises:
            UndefinedResultError: если отношение не является эквивалентностью
        """
        self._require_equivalence()

        classes = []
        processed: set[Any] = set()
        for a in self.carrier:
            if a in processed:
                continue
            members = [b for b in self.carrier if self.related(a, b)]
            processed.update(members)
            classes.append(FiniteSet(members))
        return FiniteSet(classes)

    def equivalence_class(self, a: Any) -> FiniteSet:
        """
        [a] = {b ∈ A | (a, b) ∈ R}

        Raises:
            DomainViolationError: если a вне носителя
            UndefinedResultError: если отношение не является эквивалентностью
        """
        if a not in self.carrier:
            raise DomainViolationError(f"Element {a!r} not in relation carrier")
        self._require_equivalence()
        return FiniteSet(b for b in self.carrier if self.related(a, b))

    def quotient_set(self) -> FiniteSet:
        """A / R — множество классов эквивалентности."""
        return self.equivalence_classes()

    # =========================================================================
    # CONSTRUCTIONS
    # =========================================================================

    def transitive_closure(self) -> "Relation":
        """
        Транзитивное замыкание (Floyd–Warshall).

        Начальное состояние: все пары R плюс все рефлексивные пары (a, a).
        Затем для каждого k, i, j: (i, k) и (k, j) ⇒ (i, j).
        """
        closure = set(self.pairs)
        closure.update((a, a) for a in self.carrier)

        for k in self.carrier:
            for i in self.carrier:
                if (i, k) not in closure:
                    continue
                for j in self.carrier:
                    if (k, j) in closure:
                        closure.add((i, j))

        return Relation(carrier=self.carrier, pairs=FiniteSet(closure))

    def compose(self, other: "Relation") -> "Relation":
        """
        Композиция R ∘ S = {(a, c) | ∃b: (a, b) ∈ S и (b, c) ∈ R}.

        Raises:
            DomainViolationError: если отношения на разных носителях
        """
        if self.carrier != other.carrier:
            raise DomainViolationError("Relations must be on the same set")

        composed = FiniteSet(
            (a, c)
            for a, b in other.pairs
            for c in self.carrier
            if self.related(b, c)
        )
        return Relation(carrier=self.carrier, pairs=composed)
