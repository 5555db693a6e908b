"""
Number theoretic functions on ordinary integers.

These are the leaves everything else in the package rests on: primality, factorization,
squarefreeness and the Legendre, Jacobi and Kronecker symbols used to decide how rational
primes split in quadratic rings.
"""
from math import gcd, isqrt, prod
from random import Random

from sympy import factorint, isprime


def mod(n: int, m: int) -> int:
    """
    Euclidean remainder of n divided by m, in [0, |m|) whatever the signs.

    Raises:
        ArithmeticError: If m is 0.
    """
    if m == 0:
        raise ArithmeticError(f"Calculating {n} modulo 0 involves division by 0")

    return n % abs(m)


def is_prime(n: int) -> bool:
    """
    Whether n is prime. Negative numbers are prime when their absolute value is, -1, 0 and 1 are not.

    Returns:
        bool: True for -29, 2 and -2; false for 91 = 7 * 13, 1 and 0.
    """
    n = abs(n)
    if n < 2:
        return False

    if n == 2:
        return True

    if n & 1 == 0:
        return False

    return bool(isprime(n))


def _factor_counts(n: int) -> dict[int, int]:
    """Prime to exponent map of |n| (n must not be 0)."""
    return {int(p): int(e) for p, e in factorint(abs(n)).items()}


def prime_factors(n: int) -> list[int]:
    """
    Prime factorization of n in ascending order, with repetition.

    A negative n gets a leading -1. As special cases, 0, 1 and -1 factor as themselves:
    prime_factors(0) == [0] and prime_factors(1) == [1].

    Returns:
        list: For example [2, 2, 3, 3, 5, 5, 7, 7] for 44100, [-1, 2, 7] for -14.
    """
    if n in (-1, 0, 1):
        return [n]

    factors: list[int] = [-1] if n < 0 else []
    for p, e in sorted(_factor_counts(n).items()):
        factors.extend([p] * e)

    return factors


def _is_powerfree(n: int, power: int) -> bool:
    if n == 0:
        return False

    return all(e < power for e in _factor_counts(n).values())


def is_squarefree(n: int) -> bool:
    """Whether n has no repeated prime factor. -1 and 1 are squarefree, 0 is not."""
    return _is_powerfree(n, 2)


def is_cubefree(n: int) -> bool:
    """Whether no prime divides n three or more times. -1 and 1 are cubefree, 0 is not."""
    return _is_powerfree(n, 3)


def kernel(n: int) -> int:
    """
    Squarefree kernel: the product of the distinct prime factors of n, keeping the sign of n.

    The kernel of -392 = -1 * 2^3 * 7^2 is -14; kernel(0) is 0.
    """
    if n == 0:
        return 0

    k = prod(_factor_counts(n))
    return -k if n < 0 else k


def moebius_mu(n: int) -> int:
    """
    Möbius function: 0 unless n is squarefree, otherwise (-1)^(number of prime factors).

    Since -1 is a unit, mu(-n) == mu(n).
    """
    if n in (-1, 1):
        return 1

    if n == 0:
        return 0

    counts = _factor_counts(n)
    if any(e > 1 for e in counts.values()):
        return 0

    return -1 if len(counts) % 2 else 1


def is_perfect_square(n: int) -> bool:
    """Whether n is 0 or the square of an integer (negative numbers never are)."""
    if n < 0:
        return False

    r = isqrt(n)
    return r * r == n


def euclidean_gcd(a: int, b: int) -> int:
    """
    Greatest common divisor of |a| and |b| by the Euclidean algorithm.

    gcd(0, 0) is given as 0, though strictly speaking every integer divides 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b

    return a


def is_divisible_by(dividend: int, divisor: int) -> bool:
    """Whether divisor divides dividend evenly. Nothing is divisible by 0, not even 0."""
    if divisor == 0:
        return False

    return dividend % divisor == 0


def _next_squarefree(n: int, direction: int) -> int:
    n += direction
    while not is_squarefree(n):
        n += direction

    return n


def next_lowest_squarefree(n: int) -> int:
    """The largest squarefree number below n, e.g. 4751 for any of 4752, 4753 and 4754."""
    return _next_squarefree(n, -1)


def next_highest_squarefree(n: int) -> int:
    """The smallest squarefree number above n, e.g. 4754 for any of 4751, 4752 and 4753."""
    return _next_squarefree(n, 1)


def random_squarefree_number(bound: int, rng: Random) -> int:
    """
    A pseudorandom positive squarefree number, usually below |bound|.

    A number in [0, |bound|) is drawn from rng and, if it is not squarefree, incremented until it
    is. So the result may pass the bound when the draw lands in a run of non-squarefree numbers.

    Args:
        bound: The (exclusive) limit for the draw. Its sign is ignored.
        rng: The pseudorandom source to draw from.

    Returns:
        int: A squarefree number, at least 1.
    """
    bound = abs(bound)
    if bound == 0:
        raise ValueError("bound must not be 0")

    choice = rng.randrange(bound)
    while not is_squarefree(choice):
        choice += 1

    return choice


# region Symbols
def symbol_legendre(a: int, p: int) -> int:
    """
    Legendre symbol (a/p) for an odd prime p, by Euler's criterion a^((p-1)/2) mod p.

    Returns:
        int: 0 if p divides a, 1 if a is a nonzero square modulo p, -1 otherwise.

    Raises:
        ValueError: If p is not an odd prime (the sign of p is ignored).
    """
    p = abs(p)
    if p == 2 or not is_prime(p):
        raise ValueError(f"{p} is not an odd prime")

    a %= p
    if a == 0:
        return 0

    return 1 if pow(a, (p - 1) // 2, p) == 1 else -1


def symbol_jacobi(n: int, m: int) -> int:
    """
    Jacobi symbol (n/m): the product of the Legendre symbols (n/p) over the prime factors p of m.

    Raises:
        ValueError: If m is even or negative.
    """
    if m % 2 == 0:
        raise ValueError(f"{m} is not an odd number")

    if m < 0:
        raise ValueError(f"{m} is negative")

    if m == 1:
        return 1

    if gcd(n, m) > 1:
        return 0

    symbol = 1
    for p in prime_factors(m):
        symbol *= symbol_legendre(n, p)

    return symbol


def _symbol_kronecker_two(n: int) -> int:
    r = n % 8
    if r in (1, 7):
        return 1
    if r in (3, 5):
        return -1
    return 0


def symbol_kronecker(n: int, m: int) -> int:
    """
    Kronecker symbol (n/m), the extension of the Jacobi symbol to every integer m.

    The unit -1 in the factorization of m contributes -1 when n is negative, each factor 2
    contributes 1 when n is ±1 mod 8 and -1 when n is ±3 mod 8, and odd primes contribute their
    Legendre symbols.

    Returns:
        int: -1, 0 or 1. For example symbol_kronecker(3, 2) == -1.
    """
    if gcd(n, m) > 1:
        return 0

    if m == 1:
        return 1

    if m == 0:
        return 1 if n in (-1, 1) else 0

    symbol = 1
    for p in prime_factors(m):
        if p == -1:
            if n < 0:
                symbol = -symbol
        elif p == 2:
            symbol *= _symbol_kronecker_two(n)
        else:
            symbol *= symbol_legendre(n, p)

    return symbol
# endregion
