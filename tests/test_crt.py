import random

import pytest
from sympy.polys.domains import QQ

from grobnerAlg.errors import ArithmeticFailure, InvalidArgument
from grobnerAlg.euclidean.crt import chinese_remainder
from grobnerAlg.euclidean.euclid import UnivariateRing
from grobnerAlg.euclidean.quotient import ResidueClass
from grobnerAlg.polynomials.univariate import UnivariatePolynomial


def test_crt_scenario():
    solution = chinese_remainder([2, 3], [3, 5])
    assert solution == ResidueClass(8, 15)
    assert solution.value == 8
    assert solution.modulus == 15


def test_three_congruences():
    assert chinese_remainder([2, 3, 2], [3, 5, 7]) == ResidueClass(23, 105)


def test_single_congruence():
    assert chinese_remainder([7], [5]) == ResidueClass(2, 5)


@pytest.mark.parametrize("seed", range(3))
def test_solution_satisfies_every_congruence(seed):
    rng = random.Random(seed)
    moduli = [4, 9, 25, 7, 11]
    residues = [rng.randrange(m) for m in moduli]
    solution = chinese_remainder(residues, moduli)
    assert solution.modulus == 4 * 9 * 25 * 7 * 11
    for x, m in zip(residues, moduli):
        assert solution.value % m == x


def test_non_coprime_moduli_fail():
    with pytest.raises(ArithmeticFailure):
        chinese_remainder([1, 2], [4, 6])


def test_invalid_arguments():
    with pytest.raises(InvalidArgument):
        chinese_remainder([1, 2], [3])
    with pytest.raises(InvalidArgument):
        chinese_remainder([], [])


def test_polynomial_congruences():
    ring = UnivariateRing(QQ)
    X = UnivariatePolynomial([0, 1], QQ)
    solution = chinese_remainder([1, 2], [X, X - 1], ring)
    assert solution.value == UnivariatePolynomial([1, 1], QQ)
    assert solution.modulus == X * (X - 1)
