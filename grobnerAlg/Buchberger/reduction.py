"""
reduction of polynomials modulo a finite basis, i.e. normal forms with respect to a term rewriting system
"""

import logging
from collections.abc import Sequence

from grobnerAlg.errors import ArithmeticFailure, InvalidArgument
from grobnerAlg.polynomials.coefficients import INDIVISIBLE
from grobnerAlg.polynomials.monomial import monomial_div
from grobnerAlg.polynomials.orders import MonomialOrder, monomial_order
from grobnerAlg.polynomials.polynomial import Polynomial

logger = logging.getLogger(__name__)


class Reducer:
    """
    Reduces polynomials modulo a fixed basis under a monomial order.

    Parameters
    ----------
    basis : sequence of Polynomial
        Nonzero polynomials, all in the same number of variables. Their leading terms are computed once.
    order : MonomialOrder
        Order that determines the leading terms.
    tolerance : float, optional
        Absolute tolerance of the zero test for inexact coefficients. None for exact coefficient rings.

    Examples
    --------
    >>> x, = Multinomial.variables(1)
    >>> Reducer([x - 1], lex)(x**2)
    Multinomial(1, QQ)
    """

    def __init__(self, basis: Sequence[Polynomial], order: MonomialOrder | str, tolerance: float | None = None):
        self.order = monomial_order(order)
        self.tolerance = tolerance
        self.basis = tuple(basis)
        self.steps = 0
        self._leading = []
        for g in self.basis:
            if g.is_zero():
                raise InvalidArgument("cannot reduce modulo the zero polynomial")
            lm, lc = g.leading_term(self.order)
            self._leading.append((g, lm, lc))
        nvars = {g.nvars for g in self.basis}
        if len(nvars) > 1:
            raise InvalidArgument(f"basis polynomials with different numbers of variables {sorted(nvars)}")

    def _check(self, f: Polynomial):
        if self.basis and f.nvars != self.basis[0].nvars:
            raise InvalidArgument(f"cannot reduce a polynomial in {f.nvars} variables "
                                  f"modulo a basis in {self.basis[0].nvars} variables")

    def step(self, f: Polynomial) -> Polynomial:
        """Return the result of one elementary reduction of f, or f itself if f is in normal form."""
        self._check(f)
        domain = f.domain
        for nu in self.order.sorted(f.monomials(), reverse=True):
            c = f.coefficient(nu)
            for g, lm, lc in self._leading:
                shift = monomial_div(nu, lm)
                if shift is None:
                    continue
                try:
                    q = domain.exquo(c, lc)
                except INDIVISIBLE:
                    continue

                h = f - g.mul_term(shift, q)
                leftover = h.coefficient(nu)
                if not domain.is_zero(leftover):
                    if self.tolerance is None or abs(leftover) > self.tolerance:
                        raise ArithmeticFailure(f"reducing {f} by {g} left {leftover} at {nu}")
                    h = h.without(nu)

                self.steps += 1
                logger.debug("reduced %s at %s by %s to %s", f, nu, g, h)
                return h
        return f

    def __call__(self, f: Polynomial) -> Polynomial:
        """Return the normal form of f, the fixed point of step."""
        while True:
            h = self.step(f)
            if h is f:
                return f
            f = h


def reduce(f: Polynomial, basis: Sequence[Polynomial], order: MonomialOrder | str,
           tolerance: float | None = None) -> Polynomial:
    """Return the normal form of f modulo basis.

    Examples
    --------
    >>> x, y = Multinomial.variables(2)
    >>> reduce(x**2*y, [x*y - 1], deglex)
    Multinomial(X0, QQ)

    """
    return Reducer(basis, order, tolerance)(f)


def reducer(basis: Sequence[Polynomial], order: MonomialOrder | str,
            tolerance: float | None = None) -> Reducer:
    """Return the reduction modulo basis as a callable polynomial -> polynomial."""
    return Reducer(basis, order, tolerance)
