"""
admissible monomial orders, and the order they induce on polynomials

Every order is a sympy MonomialOrder, so calling it on a monomial returns a sort key and it can be
handed to sympy rings directly. compare(m1, m2) is the total order itself.
"""

from functools import cmp_to_key

from sympy.polys.orderings import MonomialOrder as _SympyMonomialOrder

from grobnerAlg.errors import IncomparableArguments, InvalidArgument
from grobnerAlg.polynomials.monomial import check_arity, total_degree
from grobnerAlg.types import Monomial


class MonomialOrder(_SympyMonomialOrder):
    is_global = True

    def compare(self, m1: Monomial, m2: Monomial) -> int:
        """
        Compare two monomials of the same arity.

        Returns:
        - -1, 0 or 1 if m1 is smaller than, equal to or greater than m2.
        """
        check_arity(m1, m2)
        k1, k2 = self(m1), self(m2)
        return (k1 > k2) - (k1 < k2)

    def max(self, monomials):
        return max(monomials, key=self)

    def sorted(self, monomials, reverse: bool = False) -> list[Monomial]:
        return sorted(monomials, key=self, reverse=reverse)


class LexOrder(MonomialOrder):
    """The first differing exponent from the left decides."""
    alias = 'lex'

    def __call__(self, monomial):
        return tuple(monomial)


class RevLexOrder(MonomialOrder):
    """The first differing exponent from the right decides."""
    alias = 'revlex'

    def __call__(self, monomial):
        return tuple(reversed(monomial))


class PermutedLexOrder(MonomialOrder):
    """Lexicographic order after permuting the variables, X[permutation[0]] is the most significant one."""
    alias = 'permlex'

    def __init__(self, permutation):
        self.permutation = tuple(permutation)
        if sorted(self.permutation) != list(range(len(self.permutation))):
            raise InvalidArgument(f"{self.permutation} is no permutation of 0..{len(self.permutation) - 1}")

    def __call__(self, monomial):
        if len(monomial) != len(self.permutation):
            raise InvalidArgument(f"permutation {self.permutation} does not fit monomial {tuple(monomial)}")
        return tuple(monomial[i] for i in self.permutation)

    def __repr__(self):
        return f"{self.__class__.__name__}({self.permutation})"

    def __eq__(self, other):
        return isinstance(other, PermutedLexOrder) and self.permutation == other.permutation

    def __hash__(self):
        return hash((self.__class__, self.permutation))


class DegreeOrder(MonomialOrder):
    """Total degree first, ties are broken by the base order."""

    def __init__(self, base: MonomialOrder):
        self.base = base
        self.alias = f"deg{base.alias}"

    def __call__(self, monomial):
        return (total_degree(monomial), self.base(monomial))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.base!r})"

    def __eq__(self, other):
        return isinstance(other, DegreeOrder) and self.base == other.base

    def __hash__(self):
        return hash((DegreeOrder, self.base))


class DegLexOrder(DegreeOrder):
    def __init__(self):
        super().__init__(LexOrder())

    def __repr__(self):
        return f"{self.__class__.__name__}()"


lex = LexOrder()
revlex = RevLexOrder()
deglex = DegLexOrder()
degrevlex = DegreeOrder(revlex)

_orders = {
    'lex': lex,
    'revlex': revlex,
    'deglex': deglex,
    'degrevlex': degrevlex,
}


def monomial_order(name: str | MonomialOrder) -> MonomialOrder:
    """Resolve an order by name ('lex', 'revlex', 'deglex', 'degrevlex'); orders pass through."""
    if isinstance(name, MonomialOrder):
        return name
    try:
        return _orders[name]
    except KeyError:
        raise InvalidArgument(f"unknown monomial order {name!r}") from None


class InducedOrder:
    """
    The order induced on polynomials by a monomial order.

    The occurring monomials of both polynomials are sorted descending and compared term by term.
    The zero polynomial is the minimum. When one sequence runs out before any difference, the
    polynomials are incomparable and IncomparableArguments is raised.
    """

    def __init__(self, order: MonomialOrder):
        self.order = order
        self.key = cmp_to_key(self.compare)

    def __call__(self, p1, p2) -> int:
        return self.compare(p1, p2)

    def compare(self, p1, p2) -> int:
        amon = self.order.sorted(p1.monomials(), reverse=True)
        bmon = self.order.sorted(p2.monomials(), reverse=True)

        if not amon or not bmon:
            return (len(amon) > 0) - (len(bmon) > 0)

        for nu, mu in zip(amon, bmon):
            cmp = self.order.compare(nu, mu)
            if cmp != 0:
                return cmp

        if len(amon) != len(bmon):
            raise IncomparableArguments(f"incomparable arguments {p1} and {p2} "
                                        f"with (sorted) monomial occurrences {amon} and {bmon}")
        return 0

    def __eq__(self, other):
        return isinstance(other, InducedOrder) and self.order == other.order

    def __hash__(self):
        return hash((self.__class__, self.order))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.order!r})"
