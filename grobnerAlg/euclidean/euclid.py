"""
gcd, extended gcd and lcm over Euclidean rings

A Euclidean ring is given as an object with the capabilities of a sympy domain that are used here:
zero, one, convert, is_zero, add, sub, mul, quo, rem and exquo. The integers are sympy's ZZ, univariate
polynomials over a field are UnivariateRing(field).
"""

from collections.abc import Sequence

from sympy.polys.domains import QQ, ZZ
from sympy.polys.domains.domain import Domain
from sympy.polys.polyerrors import ExactQuotientFailed

from grobnerAlg.errors import ArithmeticFailure, InvalidArgument, UnsupportedOperation
from grobnerAlg.polynomials.coefficients import INDIVISIBLE, exact_quotient
from grobnerAlg.polynomials.univariate import UnivariatePolynomial


class UnivariateRing:
    """The Euclidean ring K[X] of univariate polynomials over a field K."""

    def __init__(self, field: Domain = QQ):
        if not field.is_Field:
            raise UnsupportedOperation(f"K[X] is only Euclidean over a field, not over {field}")
        self.field = field
        self.zero = UnivariatePolynomial((), field)
        self.one = UnivariatePolynomial((field.one,), field)

    def convert(self, a) -> UnivariatePolynomial:
        if isinstance(a, UnivariatePolynomial):
            if a.domain != self.field:
                return a.set_domain(self.field)
            return a
        if isinstance(a, (list, tuple)):
            return UnivariatePolynomial(a, self.field)
        return UnivariatePolynomial((a,), self.field)

    def is_zero(self, a) -> bool:
        return a.is_zero()

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def quo(self, a, b):
        return a.quotient(b)

    def rem(self, a, b):
        return a.modulo(b)

    def exquo(self, a, b):
        q, r = a.divmod(b)
        if not r.is_zero():
            raise ExactQuotientFailed(a, b, self)
        return q

    def __eq__(self, other):
        return isinstance(other, UnivariateRing) and self.field == other.field

    def __hash__(self):
        return hash((UnivariateRing, self.field))

    def __repr__(self):
        return f"{self.field}[X]"


def extended_gcd(a, b, ring=ZZ) -> tuple:
    """
    Extended Euclidean algorithm.

    Args:
    - a, b: elements of ring, not both zero.
    - ring: the Euclidean ring.

    Returns:
    - (r, s, g) where g is a gcd of a and b, and g == r*a + s*b.
    """
    a, b = ring.convert(a), ring.convert(b)
    if ring.is_zero(a) and ring.is_zero(b):
        raise ArithmeticFailure("gcd(0, 0) is undefined")
    if ring.is_zero(b):
        return ring.one, ring.zero, a

    # a0 == r0*a + s0*b and a1 == r1*a + s1*b
    a0, a1 = a, b
    r0, r1 = ring.one, ring.zero
    s0, s1 = ring.zero, ring.one
    while not ring.is_zero(a1):
        q = ring.quo(a0, a1)
        a0, a1 = a1, ring.sub(a0, ring.mul(q, a1))
        r0, r1 = r1, ring.sub(r0, ring.mul(q, r1))
        s0, s1 = s1, ring.sub(s0, ring.mul(q, s1))
    return r0, s0, a0


def gcd(a, b, ring=ZZ):
    return extended_gcd(a, b, ring)[2]


def lcm(a, b, ring=ZZ):
    """Least common multiple a*b / gcd(a, b)."""
    a, b = ring.convert(a), ring.convert(b)
    if ring.is_zero(a) or ring.is_zero(b):
        return ring.zero
    return exact_quotient(ring, ring.mul(a, b), gcd(a, b, ring))


def gcd_all(elements: Sequence, ring=ZZ) -> tuple:
    """
    gcd of the given elements together with its cofactors.

    Returns:
    - the cofactors followed by the gcd, i.e. (1, a) for a single element and (r, s, g) for two.
      More than two elements are not supported.
    """
    elements = list(elements)
    if not elements:
        raise InvalidArgument("gcd of no elements")
    if len(elements) == 1:
        return ring.one, ring.convert(elements[0])
    if len(elements) == 2:
        return extended_gcd(elements[0], elements[1], ring)
    raise UnsupportedOperation(f"gcd of {len(elements)} > 2 elements is not supported")


def inverse_mod(a, modulus, ring=ZZ):
    """
    The inverse of a modulo modulus, i.e. the c with c*a == 1 (mod modulus).

    Raises ArithmeticFailure unless a and modulus are coprime.
    """
    r, _, g = extended_gcd(a, modulus, ring)
    try:
        # make the gcd 1 when it is a unit other than 1
        g_inverse = ring.exquo(ring.one, g)
    except INDIVISIBLE as e:
        raise ArithmeticFailure(f"{a} is not invertible modulo {modulus}, gcd {g}") from e
    return ring.rem(ring.mul(r, g_inverse), modulus)
