"""
univariate polynomials a0 + a1*X + ... + an*X^n with Euclidean division
"""

from collections.abc import Mapping, Sequence

import numpy as np
from sympy.polys.domains import QQ
from sympy.polys.domains.domain import Domain
from sympy.polys.polyerrors import CoercionFailed

from grobnerAlg.errors import ArithmeticFailure, InvalidArgument, UnsupportedOperation
from grobnerAlg.polynomials.coefficients import exact_quotient, inverse
from grobnerAlg.polynomials.monomial import as_monomial
from grobnerAlg.polynomials.polynomial import Multinomial, Polynomial

MULTIPLICATION_METHODS = ('convolution', 'karatsuba')


def _trim(coefficients: Sequence, domain: Domain) -> tuple:
    deg = len(coefficients) - 1
    while deg >= 0 and domain.is_zero(coefficients[deg]):
        deg -= 1
    return tuple(coefficients[:deg + 1])


class UnivariatePolynomial(Polynomial):
    """
    A polynomial in one variable X, coefficients[i] being the coefficient of X^i.

    Trailing zero coefficients are trimmed, so the zero polynomial has no coefficients and degree -1.

    Example:
        >>> f = UnivariatePolynomial([2, 3, 1], QQ)  # X^2 + 3*X + 2
        >>> f // UnivariatePolynomial([1, 1], QQ)
        UnivariatePolynomial(X + 2, QQ)
    """

    def __init__(self, coefficients: Sequence = (), domain: Domain = QQ):
        self.domain = domain
        try:
            converted = [domain.convert(c) for c in coefficients]
        except CoercionFailed as e:
            raise InvalidArgument(f"coefficients not in {domain}: {coefficients!r}") from e
        self._coefficients = _trim(converted, domain)
        self._terms = {(i,): c for i, c in enumerate(self._coefficients) if not domain.is_zero(c)}

    @classmethod
    def from_terms(cls, terms, nvars: int = 1, domain: Domain = QQ) -> "UnivariatePolynomial":
        if nvars != 1:
            raise InvalidArgument(f"univariate polynomials have 1 variable, not {nvars}")
        items = list(terms.items() if isinstance(terms, Mapping) else terms)
        exponents = [as_monomial(m) for m, _ in items]
        if any(len(m) != 1 for m in exponents):
            raise InvalidArgument(f"monomials {exponents} are not univariate")
        coefficients = [domain.zero] * (max((m[0] for m in exponents), default=-1) + 1)
        for (k,), (_, c) in zip(exponents, items):
            coefficients[k] = coefficients[k] + domain.convert(c)
        return cls(coefficients, domain)

    @classmethod
    def monomial(cls, k: int, coefficient=None, domain: Domain = QQ) -> "UnivariatePolynomial":
        """Return coefficient * X^k."""
        c = domain.one if coefficient is None else coefficient
        return cls([domain.zero] * k + [c], domain)

    @property
    def nvars(self) -> int:
        return 1

    @property
    def coeffs(self) -> tuple:
        return self._coefficients

    @property
    def degree(self) -> int:
        return len(self._coefficients) - 1

    def _term_dict(self):
        return self._terms

    def __getitem__(self, i: int):
        """The coefficient of X^i, zero beyond the degree."""
        if i < 0:
            raise InvalidArgument(f"negative exponent {i}")
        return self._coefficients[i] if i <= self.degree else self.domain.zero

    def lc(self):
        """Leading coefficient with respect to the unique order of monomials in one variable."""
        if self.degree < 0:
            raise InvalidArgument("zero polynomial has no leading coefficient")
        return self._coefficients[-1]

    def _new(self, coefficients) -> "UnivariatePolynomial":
        return UnivariatePolynomial(coefficients, self.domain)

    def _add(self, other):
        if self.degree < 0:
            return other
        if other.degree < 0:
            return self
        mindeg = min(self.degree, other.degree)
        r = [self[i] + other[i] for i in range(mindeg + 1)]
        # excess high-order coefficients of the longer operand are copied
        longer = self if self.degree > mindeg else other
        r.extend(longer._coefficients[mindeg + 1:])
        return self._new(r)

    def _sub(self, other):
        n = max(self.degree, other.degree) + 1
        return self._new([self[i] - other[i] for i in range(n)])

    def __neg__(self):
        return self._new([-c for c in self._coefficients])

    # multiplication

    def _mul(self, other):
        return self._convolution(other)

    def multiply(self, other, method: str = 'convolution') -> "UnivariatePolynomial":
        """
        Multiply two univariate polynomials.

        Args:
        - other: the second factor.
        - method: 'convolution' (O(n^2)) or 'karatsuba' (O(n^log2(3))), both give the same result.
        """
        other = self._coerce(other)
        if method == 'convolution':
            return self._convolution(other)
        elif method == 'karatsuba':
            return self._karatsuba(other)
        raise InvalidArgument(f"unknown multiplication method {method!r}, expected one of {MULTIPLICATION_METHODS}")

    def _convolution(self, other):
        if self.degree < 0:
            return self
        if other.degree < 0:
            return other
        r = []
        for i in range(self.degree + other.degree + 1):
            ri = self.domain.zero
            for k in range(max(0, i - other.degree), min(i, self.degree) + 1):
                ri += self._coefficients[k] * other._coefficients[i - k]
            r.append(ri)
        return self._new(r)

    def _split(self, s: int) -> tuple["UnivariatePolynomial", "UnivariatePolynomial"]:
        """Return (low, high) with self == high * X^s + low and deg(low) < s."""
        return self._new(self._coefficients[:s]), self._new(self._coefficients[s:])

    def _karatsuba(self, other):
        if self.degree < 0:
            return self
        if other.degree < 0:
            return other
        n = max(self.degree, other.degree)
        if n == 0:
            return self._new([self[0] * other[0]])

        # (a1*Y + a0)(b1*Y + b0) = ac*Y^2 + ((a1+a0)(b1+b0) - ac - bd)*Y + bd with Y = X^d
        d = (n + 1) >> 1
        a0, a1 = self._split(d)
        b0, b1 = other._split(d)
        ac = a1._karatsuba(b1)
        bd = a0._karatsuba(b0)
        t = (a1 + a0)._karatsuba(b1 + b0)
        middle = t - ac - bd

        r = [self.domain.zero] * (2 * n + 1)
        for i, c in enumerate(bd.coeffs):
            r[i] += c
        for i, c in enumerate(middle.coeffs):
            r[i + d] += c
        for i, c in enumerate(ac.coeffs):
            r[i + 2 * d] += c
        return self._new(r)

    def mul_term(self, monomial, coefficient):
        (k,) = as_monomial(monomial)
        coefficient = self.domain.convert(coefficient)
        if self.degree < 0 or self.domain.is_zero(coefficient):
            return self.zero()
        return self._new([self.domain.zero] * k + [coefficient * c for c in self._coefficients])

    # Euclidean division

    def divmod(self, g: "UnivariatePolynomial") -> tuple["UnivariatePolynomial", "UnivariatePolynomial"]:
        """
        Euclidean division with remainder over a field.

        Args:
        - g: a nonzero divisor.

        Returns:
        - (q, r) with self == q*g + r and deg(r) < deg(g) or r == 0.
        """
        g = self._coerce(g)
        if g.degree < 0:
            raise ArithmeticFailure(f"/ by {g}")
        if not self.domain.is_Field:
            raise UnsupportedOperation(f"Euclidean division requires field coefficients, not {self.domain}")
        if self.degree < g.degree:
            return self.zero(), self

        bm_inverse = inverse(self.domain, g.lc())
        quotient = [self.domain.zero] * (self.degree - g.degree + 1)
        f0 = self
        for k in range(len(quotient) - 1, -1, -1):
            ck = f0[k + g.degree] * bm_inverse
            quotient[k] = ck
            f0 = f0 - g.mul_term((k,), ck)
            if f0.degree < 0:
                # remaining quotient coefficients stay zero
                break

        return self._new(quotient), f0

    def quotient(self, g) -> "UnivariatePolynomial":
        return self.divmod(g)[0]

    def modulo(self, g) -> "UnivariatePolynomial":
        return self.divmod(g)[1]

    def __floordiv__(self, g):
        return self.quotient(g)

    def __mod__(self, g):
        return self.modulo(g)

    def __divmod__(self, g):
        return self.divmod(g)

    def exquo(self, g) -> "UnivariatePolynomial":
        """Exact quotient, failing unless g divides self."""
        q, r = self.divmod(g)
        if r.degree >= 0:
            raise ArithmeticFailure(f"{g} does not divide {self}")
        return q

    # analysis

    def evaluate(self, x):
        """Evaluate at x with Horner's scheme."""
        if isinstance(x, (tuple, list)):
            (x,) = x
        r = self.domain.zero
        for c in reversed(self._coefficients):
            r = r * x + c
        return r

    __call__ = evaluate

    def derive(self) -> "UnivariatePolynomial":
        return self._new([self.domain.convert(i) * c for i, c in enumerate(self._coefficients) if i > 0])

    def integrate(self) -> "UnivariatePolynomial":
        """The antiderivative with constant term zero."""
        if not self.domain.is_Field:
            raise UnsupportedOperation(f"integration requires field coefficients, not {self.domain}")
        return self._new([self.domain.zero] + [
            exact_quotient(self.domain, c, self.domain.convert(i + 1)) for i, c in enumerate(self._coefficients)
        ])

    def monic(self, order=None) -> "UnivariatePolynomial":
        if self.degree < 0:
            return self
        return self.scale(inverse(self.domain, self.lc()))


def representative(coefficients, domain: Domain = QQ) -> Polynomial:
    """
    Return the canonical polynomial of a coefficient array or tensor, trimming zero high-order entries.

    One-dimensional arrays give univariate polynomials, an all-zero array the zero polynomial.
    """
    tensor = np.array(coefficients, dtype=object)
    if tensor.ndim <= 1:
        return UnivariatePolynomial(tensor.reshape(-1).tolist(), domain)
    return Multinomial(tensor, domain)
