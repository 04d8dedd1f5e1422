"""
random polynomial ideals for benchmarking the monomial orders
"""

import random
from abc import ABC, abstractmethod

from sympy.polys.domains import QQ
from sympy.polys.domains.domain import Domain

from grobnerAlg.errors import InvalidArgument
from grobnerAlg.polynomials.builder import PolynomialBuilder
from grobnerAlg.polynomials.polynomial import Polynomial


def random_monomial(nvars: int, degree: int, rng: random.Random) -> tuple[int, ...]:
    """A uniformly random monomial of total degree at most degree."""
    # stars and bars: nvars cuts among degree + nvars positions
    cuts = sorted(rng.sample(range(degree + nvars), nvars))
    exponents = [cuts[0]] + [b - a - 1 for a, b in zip(cuts, cuts[1:])]
    return tuple(exponents)


def random_polynomial(nvars: int, degree: int, size: int, domain: Domain = QQ,
                      rng: random.Random | None = None, coefficient_bound: int = 10) -> Polynomial:
    """
    A random polynomial with at most size terms of total degree at most degree.

    Coefficients are uniform nonzero integers in [-coefficient_bound, coefficient_bound].
    """
    rng = random.Random() if rng is None else rng
    builder = PolynomialBuilder(nvars, domain)
    for _ in range(size):
        c = rng.choice([i for i in range(-coefficient_bound, coefficient_bound + 1) if i])
        builder.set(random_monomial(nvars, degree, rng), c)

    return builder.build()


def random_ideal(nvars: int, degree: int, size: int, generators: int = 3, domain: Domain = QQ,
                 seed: int | None = None) -> list[Polynomial]:
    """
    Generate the generators of a random ideal.

    Args:
    - nvars (int): number of variables.
    - degree (int): maximal total degree of the generators.
    - size (int): number of terms drawn per generator.
    - generators (int): number of generators.
    - domain (Domain): coefficient domain.
    - seed (int | None): seed of the random number generator.

    Returns:
    - list[Polynomial]: the nonzero generators.
    """
    rng = random.Random(seed)
    ideal = [random_polynomial(nvars, degree, size, domain, rng) for _ in range(generators)]

    return [f for f in ideal if not f.is_zero()]


class IdealGenerator(ABC):
    """An endless iterator over generating sets of ideals."""

    def __iter__(self):
        return self

    @abstractmethod
    def __next__(self) -> list[Polynomial]:
        ...


class RandomIdealGenerator(IdealGenerator):
    def __init__(self, nvars: int, degree: int, size: int, generators: int = 3, domain: Domain = QQ,
                 seed: int | None = None):
        self.nvars = nvars
        self.degree = degree
        self.size = size
        self.generators = generators
        self.domain = domain
        self.rng = random.Random(seed)

    def __next__(self) -> list[Polynomial]:
        return random_ideal(self.nvars, self.degree, self.size, self.generators, self.domain,
                            seed=self.rng.randrange(2 ** 32))


def parse_ideal_dist(ideal_dist: str, domain: Domain = QQ, seed: int | None = None) -> IdealGenerator:
    """
    Return the generator of an ideal distribution given as 'n-d-s-uniform', i.e. ideals in n variables
    whose generators have total degree at most d and s terms.
    """
    parts = ideal_dist.split('-')
    if len(parts) != 4 or parts[3] != 'uniform':
        raise InvalidArgument(f"unknown ideal distribution {ideal_dist!r}, expected 'n-d-s-uniform'")
    try:
        nvars, degree, size = (int(p) for p in parts[:3])
    except ValueError as e:
        raise InvalidArgument(f"unknown ideal distribution {ideal_dist!r}, expected 'n-d-s-uniform'") from e

    return RandomIdealGenerator(nvars, degree, size, domain=domain, seed=seed)
