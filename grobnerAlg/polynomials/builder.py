"""
mutable construction of polynomials term by term
"""

from sympy.polys.domains import QQ
from sympy.polys.domains.domain import Domain

from grobnerAlg.errors import ConcurrentModificationError, InvalidArgument
from grobnerAlg.polynomials.monomial import as_monomial
from grobnerAlg.polynomials.polynomial import Multinomial, Polynomial
from grobnerAlg.polynomials.univariate import UnivariatePolynomial
from grobnerAlg.types import Coefficient, Monomial


class PolynomialBuilder:
    """
    Collects terms of a polynomial in nvars variables, then builds an immutable polynomial.

    Iterating over the builder yields its (monomial, coefficient) terms. Modifying the builder while
    an iterator is live makes that iterator raise ConcurrentModificationError on its next step.
    """

    def __init__(self, nvars: int, domain: Domain = QQ):
        if nvars < 1:
            raise InvalidArgument(f"polynomials need at least one variable, got {nvars}")
        self.nvars = nvars
        self.domain = domain
        self._terms: dict[Monomial, Coefficient] = {}
        self._generation = 0

    def _monomial(self, monomial) -> Monomial:
        monomial = as_monomial(monomial)
        if len(monomial) != self.nvars:
            raise InvalidArgument(f"monomial {monomial} does not have {self.nvars} variables")
        return monomial

    def _modified(self):
        self._generation += 1

    def set(self, monomial, coefficient) -> "PolynomialBuilder":
        monomial = self._monomial(monomial)
        coefficient = self.domain.convert(coefficient)
        if self.domain.is_zero(coefficient):
            self._terms.pop(monomial, None)
        else:
            self._terms[monomial] = coefficient
        self._modified()
        return self

    def add_term(self, monomial, coefficient) -> "PolynomialBuilder":
        """Add coefficient to the coefficient at monomial."""
        monomial = self._monomial(monomial)
        return self.set(monomial, self._terms.get(monomial, self.domain.zero) + self.domain.convert(coefficient))

    def add(self, polynomial: Polynomial) -> "PolynomialBuilder":
        if polynomial.nvars != self.nvars:
            raise InvalidArgument(f"cannot add a polynomial in {polynomial.nvars} variables "
                                  f"to a builder in {self.nvars} variables")
        for m, c in polynomial.terms():
            self.add_term(m, self.domain.convert_from(c, polynomial.domain))
        return self

    def remove(self, monomial) -> "PolynomialBuilder":
        self._terms.pop(self._monomial(monomial), None)
        self._modified()
        return self

    def get(self, monomial) -> Coefficient:
        return self._terms.get(self._monomial(monomial), self.domain.zero)

    def __len__(self):
        return len(self._terms)

    def __iter__(self):
        return self._iterate(self._generation, list(self._terms.items()))

    def _iterate(self, generation: int, terms):
        for term in terms:
            if self._generation != generation:
                raise ConcurrentModificationError("polynomial builder modified during iteration")
            yield term

    def build(self) -> Polynomial:
        if self.nvars == 1:
            return UnivariatePolynomial.from_terms(self._terms, 1, self.domain)
        return Multinomial.from_terms(self._terms, self.nvars, self.domain)
