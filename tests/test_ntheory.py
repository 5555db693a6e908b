from math import prod
from random import Random

import pytest

from sympy import isprime, jacobi_symbol, legendre_symbol, primerange

from quadint.ntheory import (
    euclidean_gcd,
    is_cubefree,
    is_divisible_by,
    is_perfect_square,
    is_prime,
    is_squarefree,
    kernel,
    mod,
    moebius_mu,
    next_highest_squarefree,
    next_lowest_squarefree,
    prime_factors,
    random_squarefree_number,
    symbol_jacobi,
    symbol_kronecker,
    symbol_legendre,
)


class TestMod:
    """Tests for mod"""

    def test_negative(self):
        """The remainder of a negative number is still in [0, m)"""
        assert mod(-118, 30) == 2
        for n in range(-50, 50):
            assert 0 <= mod(n, 7) < 7
            assert (n - mod(n, 7)) % 7 == 0

    def test_negative_modulus(self):
        """The remainder stays in [0, |m|) when m is negative"""
        assert mod(5, -3) == 2
        assert mod(-5, -3) == 1
        for n in range(-50, 50):
            assert 0 <= mod(n, -7) < 7
            assert mod(n, -7) == mod(n, 7)

    def test_zero(self):
        """Modulo 0 fails"""
        with pytest.raises(ArithmeticError):
            mod(5, 0)


class TestIsPrime:
    """Tests for is_prime"""

    def test_examples(self):
        """Examples, including the special cases around 0"""
        assert is_prime(-29)
        assert not is_prime(91)
        assert is_prime(2)
        assert is_prime(-2)
        for n in (-1, 0, 1, 4, -4):
            assert not is_prime(n)

    def test_against_sympy(self):
        """Negative numbers are prime exactly when their absolute values are"""
        for n in range(-500, 500):
            assert is_prime(n) == isprime(abs(n)), n


class TestPrimeFactors:
    """Tests for prime_factors"""

    def test_example(self):
        """44100 = 2^2 * 3^2 * 5^2 * 7^2"""
        assert prime_factors(44100) == [2, 2, 3, 3, 5, 5, 7, 7]

    def test_special_cases(self):
        """0, 1 and -1 factor as themselves, negatives get a leading -1"""
        assert prime_factors(0) == [0]
        assert prime_factors(1) == [1]
        assert prime_factors(-1) == [-1]
        assert prime_factors(-14) == [-1, 2, 7]

    def test_product(self):
        """The factors multiply back to the number and are prime"""
        for n in range(-300, 300):
            if n in (-1, 0, 1):
                continue
            factors = prime_factors(n)
            assert prod(factors) == n
            assert factors == sorted(factors)
            assert all(is_prime(p) for p in factors if p != -1)


class TestPowerfree:
    """Tests for is_squarefree and is_cubefree"""

    def test_squarefree(self):
        """Squarefree examples"""
        assert not is_squarefree(-44100)
        assert not is_squarefree(0)
        assert is_squarefree(1)
        assert is_squarefree(-1)
        assert is_squarefree(30)
        assert is_squarefree(-7)
        assert not is_squarefree(49)

    def test_cubefree(self):
        """Cubefree examples"""
        assert not is_cubefree(0)
        assert is_cubefree(1)
        assert is_cubefree(12)
        assert not is_cubefree(8)
        assert not is_cubefree(-54)
        assert is_cubefree(-36)


class TestKernelAndMoebius:
    """Tests for kernel and moebius_mu"""

    def test_kernel(self):
        """The kernel keeps the sign and drops repeated factors"""
        assert kernel(-392) == -14
        assert kernel(44100) == 210
        assert kernel(1) == 1
        assert kernel(0) == 0

    def test_moebius(self):
        """mu(31) = -1, mu(32) = 0, mu(33) = 1, and -1 makes no difference"""
        assert moebius_mu(31) == -1
        assert moebius_mu(32) == 0
        assert moebius_mu(33) == 1
        assert moebius_mu(-33) == 1
        assert moebius_mu(1) == 1
        assert moebius_mu(-1) == 1
        assert moebius_mu(0) == 0


class TestMisc:
    """Tests for the smaller helpers"""

    def test_perfect_square(self):
        """81 is a perfect square, -81 and 82 are not"""
        assert is_perfect_square(81)
        assert is_perfect_square(0)
        assert not is_perfect_square(-81)
        assert not is_perfect_square(82)
        assert is_perfect_square(12345678987654321 ** 2)

    def test_gcd(self):
        """gcd works on absolute values and gcd(0, 0) is 0"""
        assert euclidean_gcd(0, 0) == 0
        assert euclidean_gcd(-12, 18) == 6
        assert euclidean_gcd(17, 0) == 17
        assert euclidean_gcd(0, -17) == 17

    def test_divisible(self):
        """Nothing is divisible by 0"""
        assert is_divisible_by(6, 3)
        assert is_divisible_by(-6, 3)
        assert not is_divisible_by(7, 2)
        assert not is_divisible_by(0, 0)
        assert is_divisible_by(0, 5)

    def test_next_squarefree(self):
        """4752 = 2^4 * 3^3 * 11 and 4753 = 7^2 * 97 sit between 4751 and 4754"""
        for n in (4752, 4753, 4754):
            assert next_lowest_squarefree(n) == 4751
        for n in (4751, 4752, 4753):
            assert next_highest_squarefree(n) == 4754

    def test_random_squarefree(self):
        """Draws are squarefree and reproducible from the seed"""
        first = [random_squarefree_number(100, Random(12)) for _ in range(5)]
        second = [random_squarefree_number(-100, Random(12)) for _ in range(5)]
        assert first == second

        rng = Random(7)
        for _ in range(200):
            n = random_squarefree_number(100, rng)
            assert n >= 1
            assert is_squarefree(n)


class TestSymbols:
    """Tests for the Legendre, Jacobi and Kronecker symbols"""

    def test_legendre_against_sympy(self):
        """Euler's criterion agrees with sympy"""
        for p in primerange(3, 60):
            for a in range(-30, 30):
                assert symbol_legendre(a, p) == legendre_symbol(a % p, p), (a, p)

    def test_legendre_bad_modulus(self):
        """The modulus must be an odd prime"""
        with pytest.raises(ValueError):
            symbol_legendre(3, 2)
        with pytest.raises(ValueError):
            symbol_legendre(3, 9)

    def test_jacobi_against_sympy(self):
        """The product of Legendre symbols agrees with sympy"""
        for m in range(1, 80, 2):
            for n in range(-30, 30):
                assert symbol_jacobi(n, m) == jacobi_symbol(n, m), (n, m)

    def test_jacobi_bad_modulus(self):
        """The modulus must be odd and positive"""
        with pytest.raises(ValueError):
            symbol_jacobi(3, 4)
        with pytest.raises(ValueError):
            symbol_jacobi(3, -5)

    def test_kronecker_examples(self):
        """Kronecker symbol at 2, 0 and -1"""
        assert symbol_kronecker(3, 2) == -1
        assert symbol_kronecker(5, 2) == -1
        assert symbol_kronecker(-5, 2) == -1
        assert symbol_kronecker(7, 2) == 1
        assert symbol_kronecker(-7, 2) == 1
        assert symbol_kronecker(2, 4) == 0
        assert symbol_kronecker(1, 0) == 1
        assert symbol_kronecker(-1, 0) == 1
        assert symbol_kronecker(5, 0) == 0
        assert symbol_kronecker(-1, -1) == -1
        assert symbol_kronecker(1, -1) == 1

    def test_kronecker_extends_jacobi(self):
        """For odd positive m the Kronecker and Jacobi symbols agree"""
        for m in range(1, 60, 2):
            for n in range(-20, 20):
                assert symbol_kronecker(n, m) == symbol_jacobi(n, m)

    def test_kronecker_multiplicative(self):
        """(n/ab) = (n/a)(n/b)"""
        for n in range(-15, 15):
            for a in range(1, 12):
                for b in range(1, 12):
                    assert symbol_kronecker(n, a * b) == symbol_kronecker(n, a) * symbol_kronecker(n, b)
