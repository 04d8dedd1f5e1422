"""
conversion between grobnerAlg polynomials, sympy ring elements and numpy token arrays
"""

from collections.abc import Sequence

import numpy as np
from sympy.polys.rings import PolyElement, PolyRing

from grobnerAlg.errors import InvalidArgument
from grobnerAlg.polynomials.builder import PolynomialBuilder
from grobnerAlg.polynomials.orders import MonomialOrder, lex
from grobnerAlg.polynomials.polynomial import Polynomial


def from_sympy(poly: PolyElement) -> Polynomial:
    '''
    converts an element of a sympy polynomial ring to a polynomial over the same domain,
    a UnivariatePolynomial if the ring has a single generator, a Multinomial otherwise.

    Parameters:
    poly: PolyElement - element of a ring created with sympy.ring

    Returns: the polynomial
    '''
    ring = poly.ring
    builder = PolynomialBuilder(ring.ngens, ring.domain)
    for monomial, coefficient in poly.terms():
        builder.set(monomial, coefficient)

    return builder.build()


def to_sympy(poly: Polynomial, ring: PolyRing) -> PolyElement:
    '''
    converts a polynomial to an element of a sympy polynomial ring with as many generators as the
    polynomial has variables.
    '''
    if ring.ngens != poly.nvars:
        raise InvalidArgument(f"ring {ring} has {ring.ngens} generators, polynomial has {poly.nvars} variables")

    return ring.from_dict(dict(poly.terms()), poly.domain)


def tokenize(ideal: Sequence[Polynomial], order: MonomialOrder = lex) -> list[np.ndarray]:
    '''
    takes an ideal and returns a tokenized version of it, a list of arrays, one per polynomial, each
    row holding a coefficient followed by the exponents of its monomial. Rows are sorted descending
    under order.

    Parameters:
    ideal: list[Polynomial] - The ideal generators to be tokenized
    order: MonomialOrder - order of the rows

    Returns: tokenized ideal
    '''
    tokens = []
    for poly in ideal:
        monomials = order.sorted(poly.monomials(), reverse=True)
        coefficients = np.array([poly.coefficient(m) for m in monomials], dtype=object).reshape((-1, 1))
        exponents = np.array(monomials, dtype=object).reshape((-1, poly.nvars))
        tokens.append(np.concatenate((coefficients, exponents), axis=1))

    return tokens
