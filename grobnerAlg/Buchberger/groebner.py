"""
Buchberger's algorithm for reduced Groebner bases
"""

import logging
from collections.abc import Iterable, Sequence

from grobnerAlg.Buchberger.reduction import Reducer, reduce
from grobnerAlg.config import GroebnerConfig
from grobnerAlg.errors import ArithmeticFailure, InvalidArgument
from grobnerAlg.polynomials.coefficients import inverse
from grobnerAlg.polynomials.monomial import monomial_div, monomial_lcm, monomial_mul, monomials_coprime
from grobnerAlg.polynomials.orders import MonomialOrder, monomial_order
from grobnerAlg.polynomials.polynomial import Polynomial
from grobnerAlg.types import CriticalPair

logger = logging.getLogger(__name__)


def s_polynomial(f: Polynomial, g: Polynomial, order: MonomialOrder, tolerance: float | None = None) -> Polynomial:
    """Return the s-polynomial X^nu*f/lc(f) - X^mu*g/lc(g) that cancels the leading terms of f and g."""
    lmf, lcf = f.leading_term(order)
    lmg, lcg = g.leading_term(order)
    d = monomial_lcm(lmf, lmg)
    nu = monomial_div(d, lmf)
    mu = monomial_div(d, lmg)
    if monomial_mul(nu, lmf) != monomial_mul(mu, lmg):
        raise ArithmeticFailure(f"shifted leading monomials differ: {nu}*{lmf} != {mu}*{lmg}")

    s1 = f.mul_term(nu, inverse(f.domain, lcf))
    s2 = g.mul_term(mu, inverse(g.domain, lcg))
    return (s1 - s2).chop(tolerance)


def critical_pairs(n: int) -> Iterable[CriticalPair]:
    """All index pairs (i, j) with i < j < n, in lexicographic order."""
    for i in range(n):
        for j in range(i + 1, n):
            yield i, j


def buchberger(generators: Sequence[Polynomial], order: MonomialOrder,
               config: GroebnerConfig = GroebnerConfig()) -> list[Polynomial]:
    """Return a (not necessarily reduced) Groebner basis containing the generators.

    Every pair of basis elements is scanned in list order. The first s-polynomial that does not reduce
    to zero is appended to the basis and the scan restarts from the first pair. Pairs already known to
    reduce to zero are not reduced again.

    Parameters
    ----------
    generators : sequence of Polynomial
        Nonzero polynomials in the same number of variables.
    order : MonomialOrder
        Monomial order of the basis.
    config : GroebnerConfig, optional
        Tolerance and pair elimination options.

    """
    order = monomial_order(order)
    basis = list(generators)
    leading = [g.leading_monomial(order) for g in basis]
    reduced_pairs: set[CriticalPair] = set()

    while True:
        reducer = Reducer(basis, order, config.tolerance)
        for i, j in critical_pairs(len(basis)):
            if (i, j) in reduced_pairs:
                continue
            reduced_pairs.add((i, j))
            if config.product_criterion and monomials_coprime(leading[i], leading[j]):
                continue

            s = s_polynomial(basis[i], basis[j], order, config.tolerance)
            r = reducer(s).chop(config.tolerance)
            if not r.is_zero():
                logger.debug("s-polynomial of %s and %s reduces to %s", basis[i], basis[j], r)
                basis.append(r)
                leading.append(r.leading_monomial(order))
                break
        else:
            return basis


def autoreduce(basis: Sequence[Polynomial], order: MonomialOrder, tolerance: float | None = None) -> list[Polynomial]:
    """Reduce every basis element modulo the others until no element changes.

    A changed element is replaced by its normal form, or dropped if that is zero, and the scan restarts.
    Applied to a Groebner basis the result is the reduced Groebner basis up to the leading coefficients.

    """
    basis = list(basis)
    changed = True
    while changed:
        changed = False
        for i, g in enumerate(basis):
            others = basis[:i] + basis[i + 1:]
            r = reduce(g, others, order, tolerance).chop(tolerance)
            if r != g:
                if r.is_zero():
                    logger.debug("dropped %s", g)
                    del basis[i]
                else:
                    logger.debug("replaced %s by %s", g, r)
                    basis[i] = r
                changed = True
                break
    return basis


def _generators(generators: Iterable[Polynomial], tolerance: float | None) -> list[Polynomial]:
    generators = [g.chop(tolerance) for g in generators]
    generators = [g for g in generators if not g.is_zero()]
    if len({g.nvars for g in generators}) > 1:
        raise InvalidArgument("generators with different numbers of variables")
    if len({g.domain for g in generators}) > 1:
        raise InvalidArgument("generators over different coefficient domains")
    return generators


def groebner_basis(generators: Iterable[Polynomial], order: MonomialOrder | str,
                   config: GroebnerConfig | None = None) -> tuple[Polynomial, ...]:
    """Return the reduced Groebner basis of the ideal generated by generators.

    Parameters
    ----------
    generators : iterable of Polynomial
        Generating set of the ideal, zero polynomials are ignored.
    order : MonomialOrder or str
        Monomial order, or one of 'lex', 'revlex', 'deglex', 'degrevlex'.
    config : GroebnerConfig, optional
        Computation options, defaults to GroebnerConfig().

    Returns
    -------
    tuple of Polynomial
        The basis, monic over a field, sorted descending by leading monomial. Empty for the zero ideal.

    Examples
    --------
    >>> x, y = Multinomial.variables(2)
    >>> groebner_basis([x**2 - y, x*y - 1], 'lex')
    (Multinomial(X0 + (-1)*X1^2, QQ), Multinomial(X1^3 + -1, QQ))

    """
    config = GroebnerConfig() if config is None else config
    order = monomial_order(order)
    generators = _generators(generators, config.tolerance)
    if not generators:
        return ()

    basis = buchberger(generators, order, config)
    logger.debug("groebner basis of %d generators has %d elements before reduction", len(generators), len(basis))
    basis = autoreduce(basis, order, config.tolerance)
    if config.monic and basis[0].domain.is_Field:
        basis = [g.monic(order) for g in basis]
    basis.sort(key=lambda g: order(g.leading_monomial(order)), reverse=True)

    if config.check:
        if not all(reduce(g, basis, order, config.tolerance).chop(config.tolerance).is_zero() for g in generators):
            raise ArithmeticFailure("a generator does not reduce to zero modulo the computed basis")
        if not is_groebner_basis(basis, order, config.tolerance):
            raise ArithmeticFailure("the computed basis is not a Groebner basis")

    return tuple(basis)


def is_groebner_basis(basis: Sequence[Polynomial], order: MonomialOrder | str,
                      tolerance: float | None = None) -> bool:
    """Whether every s-polynomial of basis reduces to zero modulo basis."""
    order = monomial_order(order)
    basis = list(basis)
    reducer = Reducer(basis, order, tolerance)
    for i, j in critical_pairs(len(basis)):
        s = s_polynomial(basis[i], basis[j], order, tolerance)
        if not reducer(s).chop(tolerance).is_zero():
            return False
    return True


def ideal_contains(basis: Sequence[Polynomial], f: Polynomial, order: MonomialOrder | str,
                   tolerance: float | None = None) -> bool:
    """Whether f lies in the ideal of basis, which must be a Groebner basis under order."""
    return reduce(f, basis, order, tolerance).chop(tolerance).is_zero()


def same_ideal(basis1: Iterable[Polynomial], basis2: Iterable[Polynomial], order: MonomialOrder | str,
               config: GroebnerConfig | None = None) -> bool:
    """Whether two generating sets generate the same ideal, by comparing their reduced Groebner bases."""
    return groebner_basis(basis1, order, config) == groebner_basis(basis2, order, config)
