import os
from collections.abc import Sequence
from time import perf_counter

import matplotlib.pyplot as plt
import numpy as np
from tqdm import tqdm

from grobnerAlg.Buchberger.groebner import groebner_basis
from grobnerAlg.benchmark.ideals import IdealGenerator
from grobnerAlg.config import GroebnerConfig
from grobnerAlg.polynomials.orders import MonomialOrder, monomial_order
from grobnerAlg.polynomials.polynomial import Polynomial


def time_groebner_basis(ideal: list[Polynomial], order: MonomialOrder, config: GroebnerConfig | None = None) -> float:
    """Wall-time in seconds of one reduced Groebner basis computation."""
    start = perf_counter()
    groebner_basis(ideal, order, config)

    return perf_counter() - start


def benchmark_orders(
    generator: IdealGenerator, orders: Sequence[MonomialOrder | str], num_ideals: int,
    config: GroebnerConfig | None = None
) -> dict[str, list[float]]:
    """
    Times the Groebner basis computation of the same random ideals under several monomial orders.

    Args:
    - generator (IdealGenerator): source of the ideals.
    - orders (Sequence[MonomialOrder | str]): the orders to compare.
    - num_ideals (int): number of ideals drawn from the generator.
    - config (GroebnerConfig | None): options of the computation.

    Returns:
    - dict[str, list[float]]: the wall-times per order alias, one per ideal.
    """
    orders = [monomial_order(order) for order in orders]
    times: dict[str, list[float]] = {order.alias: [] for order in orders}

    for _ in tqdm(range(num_ideals), desc="Computing Groebner bases", unit="ideals"):
        ideal = next(generator)
        for order in orders:
            times[order.alias].append(time_groebner_basis(ideal, order, config))

    return times


def benchmark_and_plot(
    generator: IdealGenerator, orders: Sequence[MonomialOrder | str], num_ideals: int, folder: str = "figs",
    config: GroebnerConfig | None = None
) -> dict[str, list[float]]:
    """Runs benchmark_orders and saves one histogram per order into folder."""
    times = benchmark_orders(generator, orders, num_ideals, config)
    os.makedirs(folder, exist_ok=True)
    for alias, order_times in times.items():
        plot_pdf(order_times, os.path.join(folder, alias))

    return times


def plot_pdf(times: list, name: str) -> None:
    """
    Plots and saves a probability density function (histogram) of computation times.

    The plot shows the distribution of the times, along with the mean and
    variance. The plot is saved to a PNG file called name.

    Args:
        times (List[float]): A list of computation times in seconds.
        name (str): The name of the monomial order, used for the filename.
    """
    var: float = np.var(times)
    mean: float = np.mean(times)
    plt.hist(times, bins=100, density=True)
    plt.title(f"Variance: {var:.2e}, Mean: {mean:.2e}")
    plt.xlabel("Time [s]")
    plt.ylabel("Probability Density")
    plt.grid()
    plt.savefig(f"{name}.png")
    plt.close()
