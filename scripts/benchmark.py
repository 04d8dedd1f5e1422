"""
Benchmark script comparing the monomial orders on random ideals.
"""

if __name__ == "__main__":
    from grobnerAlg.benchmark.benchmark import benchmark_and_plot
    from grobnerAlg.benchmark.ideals import parse_ideal_dist
    from grobnerAlg.config import GroebnerConfig

    num_ideals = 20
    ideal_dist = parse_ideal_dist("3-3-3-uniform", seed=0)
    orders = ["lex", "deglex", "degrevlex"]
    config = GroebnerConfig(product_criterion=True)

    times = benchmark_and_plot(ideal_dist, orders, num_ideals, folder="figs", config=config)
    for alias, order_times in times.items():
        print(f"{alias}: mean {sum(order_times) / len(order_times):.4f}s")
