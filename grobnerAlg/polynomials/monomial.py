"""
monomials X0^e0 * ... * Xn-1^en-1, represented by their exponent tuples (e0, ..., en-1)
"""

from sympy.polys.monomials import monomial_deg, monomial_div as _monomial_div, monomial_lcm as _monomial_lcm
from sympy.polys.monomials import monomial_mul as _monomial_mul

from grobnerAlg.errors import InvalidArgument
from grobnerAlg.types import Monomial


def check_arity(m1: Monomial, m2: Monomial) -> None:
    if len(m1) != len(m2):
        raise InvalidArgument(f"incompatible monomial exponents {m1} and {m2} from polynomial rings "
                              "with a different number of variables")


def as_monomial(exponents) -> Monomial:
    """Return exponents as a monomial tuple, rejecting negative exponents."""
    m = tuple(int(e) for e in exponents)
    if any(e < 0 for e in m):
        raise InvalidArgument(f"monomial exponents must be nonnegative, got {m}")
    return m


def unit_monomial(nvars: int) -> Monomial:
    return (0,) * nvars


def total_degree(m: Monomial) -> int:
    return monomial_deg(m)


def monomial_mul(m1: Monomial, m2: Monomial) -> Monomial:
    check_arity(m1, m2)
    return _monomial_mul(m1, m2)


def monomial_div(m1: Monomial, m2: Monomial) -> Monomial | None:
    """Return m1 / m2, or None if m2 does not divide m1."""
    check_arity(m1, m2)
    return _monomial_div(m1, m2)


def monomial_divides(m1: Monomial, m2: Monomial) -> bool:
    """Whether m1 divides m2, i.e. m1 <= m2 componentwise."""
    check_arity(m1, m2)
    return all(a <= b for a, b in zip(m1, m2))


def monomial_lcm(m1: Monomial, m2: Monomial) -> Monomial:
    check_arity(m1, m2)
    return _monomial_lcm(m1, m2)


def monomials_coprime(m1: Monomial, m2: Monomial) -> bool:
    """Whether lcm(m1, m2) == m1 * m2."""
    check_arity(m1, m2)
    return all(a == 0 or b == 0 for a, b in zip(m1, m2))
