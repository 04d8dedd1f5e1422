"""
exact coefficient division on top of a sympy domain
"""

from sympy.polys.domains.domain import Domain
from sympy.polys.polyerrors import ExactQuotientFailed, NotInvertible

from grobnerAlg.errors import ArithmeticFailure
from grobnerAlg.types import Coefficient

# what sympy raises when a coefficient does not divide another one
INDIVISIBLE = (ExactQuotientFailed, NotInvertible, ZeroDivisionError)


def exact_quotient(domain: Domain, a: Coefficient, b: Coefficient) -> Coefficient:
    try:
        return domain.exquo(a, b)
    except INDIVISIBLE as e:
        raise ArithmeticFailure(f"{b} does not divide {a} in {domain}") from e


def inverse(domain: Domain, a: Coefficient) -> Coefficient:
    return exact_quotient(domain, domain.one, a)
