import random

import matplotlib
import pytest
from sympy.polys.domains import GF, QQ

from grobnerAlg.benchmark.benchmark import benchmark_orders, plot_pdf
from grobnerAlg.benchmark.ideals import IdealGenerator, parse_ideal_dist, random_ideal, random_monomial
from grobnerAlg.errors import InvalidArgument
from grobnerAlg.polynomials.monomial import total_degree


matplotlib.use("Agg")


class DummyIdealGenerator(IdealGenerator):
    def __init__(self, batches):
        super().__init__()
        self._data = iter(batches)

    def __next__(self):
        return next(self._data)


def test_random_monomials_respect_the_degree_bound():
    rng = random.Random(0)
    for _ in range(200):
        m = random_monomial(3, 4, rng)
        assert len(m) == 3
        assert all(e >= 0 for e in m)
        assert total_degree(m) <= 4


def test_random_ideal_is_reproducible():
    ideal = random_ideal(3, 4, 5, generators=4, seed=1234)
    assert ideal == random_ideal(3, 4, 5, generators=4, seed=1234)
    assert 0 < len(ideal) <= 4
    for f in ideal:
        assert f.nvars == 3
        assert f.degree <= 4
        assert 0 < len(f) <= 5
        assert f.domain == QQ


def test_random_ideal_over_a_finite_field():
    ideal = random_ideal(2, 3, 3, domain=GF(32003), seed=7)
    assert all(f.domain == GF(32003) for f in ideal)


def test_parse_ideal_dist():
    generator = parse_ideal_dist('3-5-4-uniform', seed=0)
    ideal = next(generator)
    assert all(f.nvars == 3 and f.degree <= 5 for f in ideal)
    assert iter(generator) is generator
    with pytest.raises(InvalidArgument):
        parse_ideal_dist('3-5-uniform')
    with pytest.raises(InvalidArgument):
        parse_ideal_dist('a-b-c-uniform')


def test_benchmark_orders_times_every_order():
    ideals = [random_ideal(2, 2, 2, seed=seed) for seed in range(3)]
    times = benchmark_orders(DummyIdealGenerator(ideals), ['lex', 'deglex'], 3)
    assert set(times) == {'lex', 'deglex'}
    assert all(len(t) == 3 and all(s >= 0 for s in t) for t in times.values())


def test_plot_pdf_saves_a_figure(tmp_path):
    name = tmp_path / "lex"
    plot_pdf([0.1, 0.2, 0.2, 0.3], str(name))
    assert (tmp_path / "lex.png").exists()
