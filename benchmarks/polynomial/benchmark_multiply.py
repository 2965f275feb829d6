"""Benchmark polynomial multiplication.

Compares the cost of overflow checking ("raise") against plain
two's-complement arithmetic ("wrap") for the direct O(n^2) convolution
across different polynomial degrees.
"""

import time

import torch

from intpoly.polynomial import polynomial_multiply, polynomial_random


def benchmark_multiply(
    degree: int,
    n_iterations: int = 20,
    overflow: str = "raise",
    seed: int = 0,
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply.
    n_iterations : int
        Number of iterations for timing.
    overflow : str
        'raise' or 'wrap'.
    seed : int
        Seed for the sample polynomials.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    generator = torch.Generator().manual_seed(seed)
    a = polynomial_random(degree, generator=generator)
    b = polynomial_random(degree, generator=generator)

    # Warmup
    for _ in range(3):
        _ = polynomial_multiply(a, b, overflow=overflow)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = polynomial_multiply(a, b, overflow=overflow)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [8, 16, 32, 64, 128, 256, 512]

    print("Polynomial Multiplication Benchmark")
    print("=" * 50)
    print(f"{'Degree':>8} {'Raise (ms)':>14} {'Wrap (ms)':>14}")
    print("-" * 50)

    for degree in degrees:
        ms_raise = benchmark_multiply(degree, overflow="raise")
        ms_wrap = benchmark_multiply(degree, overflow="wrap")

        print(f"{degree:>8} {ms_raise:>14.4f} {ms_wrap:>14.4f}")

    print()
    print("Notes:")
    print("- Both use O(n^2) direct convolution, one row per coefficient")
    print("- Raise additionally checks every product and partial sum")


if __name__ == "__main__":
    main()
