"""Print two random polynomials with their sum, difference, product and the
first one's derivative.

    python -m intpoly --seed 0
"""

import argparse
from typing import Optional, Sequence

import torch

from intpoly.polynomial import (
    polynomial_derivative,
    polynomial_print,
    polynomial_random,
)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="intpoly",
        description="Arithmetic on random integer polynomials.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the random generator (default: nondeterministic)",
    )
    parser.add_argument(
        "--degrees",
        type=int,
        nargs=2,
        default=(6, 4),
        metavar=("DEGREE_1", "DEGREE_2"),
        help="degrees of the two random polynomials (default: 6 4)",
    )
    args = parser.parse_args(argv)

    generator = torch.Generator()
    if args.seed is None:
        generator.seed()
    else:
        generator.manual_seed(args.seed)

    p = polynomial_random(args.degrees[0], generator=generator)
    q = polynomial_random(args.degrees[1], generator=generator)

    polynomial_print(p)
    polynomial_print(q)
    print("sum")
    polynomial_print(p + q)
    print("difference")
    polynomial_print(p - q)
    print("product")
    polynomial_print(p * q)
    print("poly 1 derivative")
    polynomial_print(polynomial_derivative(p))


if __name__ == "__main__":
    main()
