"""
Ring level number theory for quadratic integers.

Classification of rings (norm-Euclidean, UFD, class number), primality and irreducibility of
quadratic integers, factorization in canonical form, Euclidean GCDs and fundamental units.

All of it lives on a Calculator, which owns the search limits and the memo tables for the expensive
per-ring results. Module level functions use one shared default calculator, so those tables persist
for the whole session.
"""
import logging
from fractions import Fraction
from math import ceil, isqrt, log, pi, sin, sqrt
from typing import Optional, Union

from sympy import divisors, factorint

from quadint import ntheory
from quadint.config import Config
from quadint.errors import (
    AlgebraicDegreeOverflowError,
    NonEuclideanDomainError,
    NonUniqueFactorizationDomainError,
    UnsupportedNumberDomainError,
)
from quadint.quad import (
    COMPLEX_CUBIC_ROOT_OF_UNITY,
    GAUSSIAN,
    IMAG_UNIT_NEG_I,
    NEG_COMPLEX_CUBIC_ROOT_OF_UNITY,
    ImaginaryQuadraticRing,
    NotDivisible,
    QuadraticRing,
    RealQuadraticRing,
    imagquadint,
    quadint,
    realquadint,
)
from quadint.utils import RingCache

_logger = logging.getLogger(__name__)

NORM_EUCLIDEAN_QUADRATIC_IMAGINARY_RINGS_D = (-11, -7, -3, -2, -1)
NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D = (2, 3, 5, 6, 7, 11, 13, 17, 19, 21, 29, 33, 37, 41, 57, 73)
NORM_EUCLIDEAN_QUADRATIC_RINGS_D = NORM_EUCLIDEAN_QUADRATIC_IMAGINARY_RINGS_D + NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D
HEEGNER_NUMBERS = (-163, -67, -43, -19, -11, -7, -3, -2, -1)

# Fundamental units whose search takes noticeably long, as (regular part, surd part)
KNOWN_FUNDAMENTAL_UNITS = {
    139: (77563250, 6578829),
    151: (1728148040, 140634693),
    166: (1700902565, 132015642),
}
KNOWN_CLASS_NUMBERS = {199: 1}

IntOrQuad = Union[int, quadint]


def _factor_counts(n: int) -> dict[int, int]:
    return {int(p): int(e) for p, e in factorint(abs(n)).items()}


def _solve_elements_of_norm(ring: QuadraticRing, m: int, max_b: int) -> tuple[quadint, ...]:
    """
    Elements (A + B√d)/2 with |N| = m and 0 <= B <= max_b, one surd row at a time.

    Rows advance B by 2 in rings without half integers, by 1 otherwise (so the half integer and
    whole rows interleave). Within a row, the regular part is solved for directly instead of stepped.
    Only nonnegative A and B are listed: negatives are associates and conjugates are tried by callers.
    """
    d = ring.radicand
    step = 1 if ring.has_half_integers else 2
    out: list[quadint] = []
    for B in range(0, max_b + 1, step):
        for t in (d * B * B + 4 * m, d * B * B - 4 * m):
            if t < 0:
                continue
            A = isqrt(t)
            if A * A == t:
                q = ring(A, B, half=True)
                if q not in out:
                    out.append(q)

    return tuple(out)


class Calculator:
    """
    Number theory over quadratic integer rings.

    Args:
        config: Search limits and cache thresholds.
        units: Memo table of fundamental units, seeded with the known expensive cases when omitted.
        class_numbers: Memo table of class numbers, seeded likewise when omitted.
    """

    def __init__(self,
                 config: Optional[Config] = None,
                 units: Optional[RingCache[RealQuadraticRing, quadint]] = None,
                 class_numbers: Optional[RingCache[QuadraticRing, int]] = None) -> None:
        self.config = config if config is not None else Config()

        if units is None:
            units = RingCache(name="fundamental units")
            for d, (a, b) in KNOWN_FUNDAMENTAL_UNITS.items():
                ring = RealQuadraticRing(d)
                units.put(ring, ring(a, b))
        self.units = units

        if class_numbers is None:
            class_numbers = RingCache(name="class numbers")
            for d, h in KNOWN_CLASS_NUMBERS.items():
                class_numbers.put(QuadraticRing.of(d), h)
        self.class_numbers = class_numbers

        # Candidate divisors by norm, reused by irreducibility tests and factorizations
        self.norm_elements: RingCache[tuple[QuadraticRing, int], tuple[quadint, ...]] = \
            RingCache(name="elements of norm")

    # region Argument checks
    @staticmethod
    def _check_ring(ring: object) -> QuadraticRing:
        if ring is None:
            raise TypeError("Ring must not be None")

        if not isinstance(ring, QuadraticRing):
            raise UnsupportedNumberDomainError(f"{type(ring).__name__} is not a supported number domain", ring)

        return ring

    @staticmethod
    def _check_number(num: object) -> quadint:
        if num is None:
            raise TypeError("Number must not be None")

        if not isinstance(num, quadint):
            raise UnsupportedNumberDomainError(f"{type(num).__name__} is not a supported number domain", num)

        return num

    @staticmethod
    def _check_norm(num: quadint) -> int:
        norm = num.norm()
        if isinstance(num, imagquadint) and norm < 0:
            raise ArithmeticError(f"Overflow: {num} has negative norm {norm}")

        return norm
    # endregion

    # region Ring classification
    def is_norm_euclidean(self, ring: QuadraticRing) -> bool:
        """Whether |N| is a Euclidean function on the ring (one of 5 imaginary and 16 real radicands)."""
        return self._check_ring(ring).radicand in NORM_EUCLIDEAN_QUADRATIC_RINGS_D

    def is_ufd(self, ring: QuadraticRing) -> bool:
        """
        Whether the ring is a unique factorization domain.

        Imaginary rings are UFDs exactly for the nine Heegner numbers. Real rings are if they are
        norm-Euclidean or, failing that, if their class number is 1.

        Raises:
            TypeError: If ring is None.
            UnsupportedNumberDomainError: If ring is not a quadratic ring.
        """
        ring = self._check_ring(ring)
        if isinstance(ring, ImaginaryQuadraticRing):
            return ring.radicand in HEEGNER_NUMBERS

        if isinstance(ring, RealQuadraticRing):
            if ring.radicand in NORM_EUCLIDEAN_QUADRATIC_REAL_RINGS_D:
                return True
            return self.field_class_number(ring) == 1

        raise UnsupportedNumberDomainError(f"{ring} is not a supported ring", ring)

    def field_class_number(self, ring: QuadraticRing) -> int:
        """
        The class number of the ring, by the analytic class number formula.

        With D the field discriminant (d or 4d) and χ(i) the Kronecker symbol (D/i):
          - imaginary: h = w/(2D) * Σ_{i=1}^{|D|-1} χ(i)*i, with w the number of units;
          - real: h = -1/(2 ln ε) * Σ_{i=1}^{D-1} χ(i)*ln(sin(πi/D)), with ε the fundamental unit.

        Raises:
            TypeError: If ring is None.
            UnsupportedNumberDomainError: If ring is not a quadratic ring.
            OverflowError: If the fundamental unit search gives up.
        """
        ring = self._check_ring(ring)
        return self.class_numbers.get_or_compute(ring, self._compute_class_number)

    def _compute_class_number(self, ring: QuadraticRing) -> int:
        d = ring.radicand
        disc = d if ring.has_half_integers else 4 * d

        if ring.is_imaginary:
            units_count = {-3: 6, -4: 4}.get(disc, 2)
            total = sum(ntheory.symbol_kronecker(disc, i) * i for i in range(1, -disc))
            h = round(Fraction(units_count * total, 2 * disc))
        else:
            epsilon = float(self.fundamental_unit(ring))
            total_log = sum(log(sin(pi * i / disc)) * ntheory.symbol_kronecker(disc, i) for i in range(1, disc))
            h = round(-total_log / (2 * log(epsilon)))

        _logger.debug("class number of %s is %d", ring, h)
        return h
    # endregion

    # region Units
    def fundamental_unit(self, ring: QuadraticRing) -> quadint:
        """
        The smallest unit greater than 1 of a real quadratic ring.

        Units are searched by increasing surd part, the half integer candidates interleaved with the
        whole ones, so the first unit found is the fundamental one. Results with a surd part above
        Config.unit_cache_threshold are remembered.

        Raises:
            TypeError: If ring is None.
            ValueError: If ring is imaginary (finitely many units, so no fundamental unit).
            UnsupportedNumberDomainError: If ring is not a quadratic ring.
            OverflowError: If the regular part passes Config.max_unit_regular_part before a unit is found.
        """
        ring = self._check_ring(ring)
        if isinstance(ring, ImaginaryQuadraticRing):
            raise ValueError(f"{ring} has finitely many units, so it has no fundamental unit")

        threshold = self.config.unit_cache_threshold
        return self.units.get_or_compute(ring,  # type: ignore[arg-type]
                                         self._search_fundamental_unit,
                                         store=lambda u: abs(u.surd_part_mult) > threshold)

    def _search_fundamental_unit(self, ring: QuadraticRing) -> quadint:
        d = ring.radicand
        limit = self.config.max_unit_regular_part
        step = 1 if ring.has_half_integers else 2

        # (A + B√d)/2 is a unit iff A^2 = d*B^2 ± 4; norm -1 is checked first since it is the smaller
        B = step
        while True:
            square = d * B * B
            if isqrt(square) // 2 > limit:
                raise OverflowError(f"Fundamental unit search for {ring} passed regular part {limit}")

            for t in (square - 4, square + 4):
                A = isqrt(t)
                if A * A == t:
                    unit = ring(A, B, half=True)
                    _logger.debug("fundamental unit of %s is %s (norm %d)", ring, unit, unit.norm())
                    return unit

            B += step

    def place_in_primary_sector(self, num: quadint) -> quadint:
        """
        Multiply num by a unit to bring it into the primary sector of its ring.

        The Gaussian integers rotate by -i until the angle is in (-45°, 45°], the Eisenstein integers
        by -ω until it is in (-30°, 30°]. Every other ring only flips the sign when the regular part
        is negative, or zero with a negative surd part.
        """
        num = self._check_number(num)
        if not num:
            return num

        d = num.ring.radicand
        if d in (-1, -3):
            rotation = IMAG_UNIT_NEG_I if d == -1 else NEG_COMPLEX_CUBIC_ROOT_OF_UNITY
            for _ in range(4 if d == -1 else 6):
                A, B = num.a, num.b
                # Compare the angle of (A/2, B√|d|/2) against the sector edges exactly
                edge = B if d == -1 else 3 * B
                if A > 0 and -A < edge <= A:
                    return num
                num = num * rotation

            raise ArithmeticError(f"No associate of {num} is in the primary sector")

        if num.a < 0 or (num.a == 0 and num.b < 0):
            return -num

        return num

    def divide_out_units(self, num: quadint) -> quadint:
        """
        The canonical associate of num.

        In imaginary rings this is the primary sector placement. In real rings the number is made
        positive and multiplied or divided by the fundamental unit ε until it lies in [1, ε).
        """
        num = self._check_number(num)
        if num.norm() == 0:
            return num

        if isinstance(num, imagquadint):
            return self.place_in_primary_sector(num)

        assert isinstance(num, realquadint)
        epsilon = self.fundamental_unit(num.ring)
        # ε * conj(ε) = N(ε) = ±1, so 1/ε = N(ε) * conj(ε)
        inverse = epsilon.conjugate() * epsilon.norm()

        if num.sign() < 0:
            num = -num  # type: ignore[assignment]
        while num < 1:
            num = num * epsilon  # type: ignore[assignment]
        while num >= epsilon:
            num = num * inverse  # type: ignore[assignment]

        return num
    # endregion

    # region Primality
    def _is_inert(self, p: int, ring: QuadraticRing) -> bool:
        """Whether the rational number p >= 0 is prime in the ring (a rational prime that stays prime)."""
        d = ring.radicand
        if p == 2:
            # 2 ramifies unless d ≡ 1 (mod 4), and then it stays prime iff d ≡ 5 (mod 8)
            if not ring.has_half_integers:
                return False
            return ntheory.symbol_kronecker(d, 2) == -1

        if not ntheory.is_prime(p):
            return False

        if d == -3:
            return p % 3 == 2
        if d == -2:
            return p % 8 in (5, 7)
        if d == -1:
            return p % 4 == 3

        return ntheory.symbol_legendre(d, p) == -1

    def is_prime(self, num: IntOrQuad) -> bool:
        """
        Whether num is prime.

        A quadratic integer is prime when its norm is a rational prime (up to sign), or when it is an
        associate of a rational prime that stays prime in the ring: bi in Z[i] for a prime |b| ≡ 3
        (mod 4), rotations by powers of ω in Z[ω], and rational primes whose Legendre or Kronecker
        symbol against the radicand is -1.

        Args:
            num: A quadratic integer, or an int for ordinary primality.

        Raises:
            TypeError: If num is None.
            UnsupportedNumberDomainError: If num is not a quadratic integer.
            ArithmeticError: If an imaginary quadratic integer reports a negative norm.
        """
        if isinstance(num, int):
            return ntheory.is_prime(num)

        num = self._check_number(num)
        norm = self._check_norm(num)
        if ntheory.is_prime(norm):
            return True

        d = num.ring.radicand
        if d == -1 and num.a == 0:
            b = abs(num.b) // 2
            return ntheory.is_prime(b) and b % 4 == 3

        if d == -3 and num.b != 0:
            rotated = num * COMPLEX_CUBIC_ROOT_OF_UNITY
            if rotated.b != 0:
                rotated = rotated * COMPLEX_CUBIC_ROOT_OF_UNITY
            if rotated.b != 0:
                return False
            p = abs(rotated.a) // 2
            return ntheory.is_prime(p) and p % 3 == 2

        if num.b == 0:
            return self._is_inert(abs(num.a) // 2, num.ring)

        if isinstance(num, realquadint):
            # p times a unit, for an inert rational prime p
            p = isqrt(abs(norm))
            return p * p == abs(norm) and self._is_inert(p, num.ring) and num.divides_evenly(p)

        return False

    def is_irreducible(self, num: quadint) -> bool:
        """
        Whether num is a nonzero non-unit with no factorization into two non-units.

        Units count as irreducible here, as do numbers of prime norm. In norm-Euclidean rings this is
        the same as being prime; in other rings divisors of every smaller norm are tried.
        """
        num = self._check_number(num)
        norm = abs(self._check_norm(num))
        if norm < 2 or ntheory.is_prime(norm):
            return True

        if self.is_norm_euclidean(num.ring):
            return self.is_prime(num)

        return self._find_proper_divisor(num) is None

    def _elements_of_norm(self, ring: QuadraticRing, m: int) -> tuple[quadint, ...]:
        """Up to associates and conjugation, every element of the ring with |N| = m."""
        return self.norm_elements.get_or_compute((ring, m), self._search_elements_of_norm)

    def _search_elements_of_norm(self, key: tuple[QuadraticRing, int]) -> tuple[quadint, ...]:
        ring, m = key
        d = ring.radicand
        if d < 0:
            max_b = isqrt(4 * m // -d)
        else:
            # An associate x of anything with |N| = m has √m <= x < √m*ε, so |B|√d = |x - x'| < √m(ε + 1)
            epsilon = float(self.fundamental_unit(ring))
            max_b = min(ceil(sqrt(m) * (epsilon + 1) / sqrt(d)) + 1, self.config.max_candidate_surd)

        return _solve_elements_of_norm(ring, m, max_b)

    def _find_proper_divisor(self, num: quadint) -> Optional[quadint]:
        """A divisor of num that is neither a unit nor an associate of num, or None when num is irreducible."""
        target = abs(num.norm())
        for m in divisors(target)[1:-1]:
            for candidate in self._elements_of_norm(num.ring, int(m)):
                for divisor in (candidate, candidate.conjugate()):
                    if num.divides_evenly(divisor):
                        _logger.debug("%s has proper divisor %s of norm %d", num, divisor, divisor.norm())
                        return divisor

        return None
    # endregion

    # region Factorization
    def normalize_factors(self, factors: list[quadint]) -> list[quadint]:
        """
        Put a factor list into canonical form.

        Units in the list are folded into one leading unit, the other factors are sorted by
        ascending |norm| and flipped into the positive half plane (positive regular part, or zero
        regular part with positive surd part), with the sign flips folded into the unit. The unit is
        left out when it is 1 and other factors remain. Normalizing a normalized list gives the same list.
        """
        if not factors:
            return []

        unit = factors[0].ring.one()
        rest: list[quadint] = []
        for f in factors:
            if f.is_unit():
                unit = unit * f
            else:
                rest.append(f)

        rest.sort(key=lambda f: abs(f.norm()))
        for i, f in enumerate(rest):
            if f.a < 0 or (f.a == 0 and f.b < 0):
                rest[i] = -f
                unit = -unit

        if unit == 1 and rest:
            return rest

        return [unit] + rest

    def _prime_over(self, ring: QuadraticRing, p: int) -> quadint:
        """A prime of the ring dividing the rational prime p: p itself if it is inert, else one of norm ±p."""
        if self._is_inert(p, ring):
            return ring(p)

        for candidate in self._elements_of_norm(ring, p):
            if self.is_prime(candidate):
                return candidate

        raise NonUniqueFactorizationDomainError(f"{p} is not inert in {ring} yet no element has norm ±{p}", ring(p))

    def factorize(self, num: quadint) -> list[quadint]:
        """
        Factor num into primes.

        The primes are found from the rational primes dividing the norm, smallest first: an inert
        rational prime is its own prime factor, otherwise a prime of norm ±p and its conjugate are
        divided out as often as they go.

        Returns:
            list: An optional leading unit followed by primes in ascending order of |norm|, each in the
            positive half plane. A unit or zero is returned as the only element. The product of the
            list is num.

        Raises:
            TypeError: If num is None.
            UnsupportedNumberDomainError: If num is not a quadratic integer.
            NonUniqueFactorizationDomainError: If the ring of num is not a UFD.
        """
        num = self._check_number(num)
        if not self.is_ufd(num.ring):
            raise NonUniqueFactorizationDomainError(f"{num.ring} is not a unique factorization domain", num)

        norm = abs(num.norm())
        if norm < 2:
            return [num]

        if self.is_prime(num):
            return self.normalize_factors([num.ring.one(), num])

        remaining = num
        factors: list[quadint] = []
        for p in sorted(_factor_counts(norm)):
            prime = self._prime_over(num.ring, p)
            conjugate = prime.conjugate()
            for divisor in (prime, conjugate) if conjugate != prime else (prime,):
                while True:
                    q = remaining.divide(divisor)
                    if isinstance(q, NotDivisible):
                        break
                    factors.append(divisor)
                    remaining = q

        if not remaining.is_unit():
            raise ArithmeticError(f"Remaining cofactor {remaining} of {num} is not a unit; factorization incomplete")

        _logger.debug("factored %s into %s times unit %s", num, factors, remaining)
        return self.normalize_factors([remaining] + factors)

    def prime_factors(self, num: IntOrQuad) -> Union[list[int], list[quadint]]:
        """Prime factorization of an int (see ntheory.prime_factors) or of a quadratic integer (see factorize)."""
        if isinstance(num, int):
            return ntheory.prime_factors(num)

        return self.factorize(num)

    def irreducible_factors(self, num: quadint) -> list[quadint]:
        """
        Factor num into irreducibles.

        In a UFD this is the prime factorization. Elsewhere the number is split by the first proper
        divisor found (trying smaller norms first) until every piece is irreducible; the result is then
        one of the possibly several factorizations.

        Raises:
            RuntimeError: If a UFD unexpectedly reports non-unique factorization.
        """
        num = self._check_number(num)
        if self.is_ufd(num.ring):
            try:
                return self.factorize(num)
            except NonUniqueFactorizationDomainError as e:
                raise RuntimeError(f"{num.ring} is a UFD but factorization of {num} failed") from e

        if abs(num.norm()) < 2:
            return [num]

        factors: list[quadint] = []
        pending = [num]
        while pending:
            n = pending.pop()
            if abs(n.norm()) < 2:
                factors.append(n)
                continue

            divisor = self._find_proper_divisor(n)
            if divisor is None:
                factors.append(n)
                continue

            q = n.divide(divisor)
            assert isinstance(q, quadint)
            pending.extend((divisor, q))

        return self.normalize_factors(factors)

    def is_divisible_by(self, dividend: IntOrQuad, divisor: IntOrQuad) -> bool:
        """
        Whether divisor divides dividend evenly.

        Nothing is divisible by 0, and 0 is divisible by everything else.

        Raises:
            TypeError: If either number is None.
            UnsupportedNumberDomainError: If either number is neither an int nor a quadratic integer.
            AlgebraicDegreeOverflowError: If the numbers are irrational and from different rings.
        """
        if isinstance(dividend, int) and isinstance(divisor, int):
            return ntheory.is_divisible_by(dividend, divisor)

        if isinstance(dividend, int):
            divisor = self._check_number(divisor)
            dividend = divisor.ring(dividend)
        else:
            dividend = self._check_number(dividend)
            if not isinstance(divisor, int):
                divisor = self._check_number(divisor)

        x, y = dividend._reconcile(divisor)
        if y.norm() == 0:
            return False

        if x.norm() == 0:
            return True

        return x.divides_evenly(y)
    # endregion

    # region GCD
    def euclidean_gcd(self, a: IntOrQuad, b: IntOrQuad, *, check_ring: bool = True) -> IntOrQuad:
        """
        Greatest common divisor by the Euclidean algorithm.

        Two ints give their ordinary gcd. A single int is taken as a Gaussian integer, which (having no
        surd part) then moves into the ring of the other number. Each division step takes the exact
        quotient if there is one and otherwise the first bounding integer leaving a remainder of
        smaller norm. The result is negated if its regular part is negative, and in Z[i] turned from
        bi to b first.

        Args:
            a: First number.
            b: Second number.
            check_ring: Set False to try the descent in rings not known to be norm-Euclidean.

        Returns:
            The GCD. gcd(a, b) == gcd(b, a).

        Raises:
            AlgebraicDegreeOverflowError: If a and b are irrational numbers from different rings.
            NonEuclideanDomainError: If the ring is not norm-Euclidean (and check_ring is set).
            ArithmeticError: If no remainder of smaller norm could be found.
        """
        if isinstance(a, int) and isinstance(b, int):
            return ntheory.euclidean_gcd(a, b)

        x = GAUSSIAN(a) if isinstance(a, int) else self._check_number(a)
        y = GAUSSIAN(b) if isinstance(b, int) else self._check_number(b)

        if x.ring != y.ring:
            if y.b == 0:
                y = x.ring(y.a, 0, half=True)
            elif x.b == 0:
                x = y.ring(x.a, 0, half=True)
            else:
                raise AlgebraicDegreeOverflowError(f"{x} and {y} are from different rings, {x.ring} and {y.ring}",
                                                   2 * x.ring.max_algebraic_degree, x, y)

        if check_ring and not self.is_norm_euclidean(x.ring):
            raise NonEuclideanDomainError(f"{x.ring} is not a norm-Euclidean domain", x, y)

        # Larger norm first; the tie-break makes the result independent of argument order
        if (abs(x.norm()), x.components2()) < (abs(y.norm()), y.components2()):
            x, y = y, x

        radius = self.config.division_search_radius
        max_radius = self.config.max_division_search_radius
        last = abs(y.norm())
        while y:
            _, r = x.euclidean_divmod(y, radius=radius, max_radius=max_radius)
            x, y = y, r

            if y:
                nr = abs(y.norm())
                if nr >= last:
                    raise ArithmeticError(f"Euclidean descent failed (non-decreasing remainder norm) in {x.ring}")
                last = nr

        if x.ring.radicand == -1 and x.a == 0:
            x = x * IMAG_UNIT_NEG_I
        if x.a < 0:
            x = -x

        return x
    # endregion


_DEFAULT: Optional[Calculator] = None


def default_calculator() -> Calculator:
    """The calculator shared by the module level functions (created on first use)."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Calculator()

    return _DEFAULT


def is_norm_euclidean(ring: QuadraticRing) -> bool:
    return default_calculator().is_norm_euclidean(ring)


def is_ufd(ring: QuadraticRing) -> bool:
    return default_calculator().is_ufd(ring)


def field_class_number(ring: QuadraticRing) -> int:
    return default_calculator().field_class_number(ring)


def fundamental_unit(ring: QuadraticRing) -> quadint:
    return default_calculator().fundamental_unit(ring)


def place_in_primary_sector(num: quadint) -> quadint:
    return default_calculator().place_in_primary_sector(num)


def divide_out_units(num: quadint) -> quadint:
    return default_calculator().divide_out_units(num)


def is_prime(num: IntOrQuad) -> bool:
    return default_calculator().is_prime(num)


def is_irreducible(num: quadint) -> bool:
    return default_calculator().is_irreducible(num)


def factorize(num: quadint) -> list[quadint]:
    return default_calculator().factorize(num)


def prime_factors(num: IntOrQuad) -> Union[list[int], list[quadint]]:
    return default_calculator().prime_factors(num)


def irreducible_factors(num: quadint) -> list[quadint]:
    return default_calculator().irreducible_factors(num)


def is_divisible_by(dividend: IntOrQuad, divisor: IntOrQuad) -> bool:
    return default_calculator().is_divisible_by(dividend, divisor)


def euclidean_gcd(a: IntOrQuad, b: IntOrQuad) -> IntOrQuad:
    return default_calculator().euclidean_gcd(a, b)
