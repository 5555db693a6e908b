from dataclasses import dataclass
from fractions import Fraction
from math import atan2, ceil, floor, hypot, pi, sqrt
from typing import Any, Iterator, Optional, Union

from quadint.config import Config
from quadint.errors import AlgebraicDegreeOverflowError, NotDivisibleError
from quadint.ntheory import is_squarefree

OTHER_OP_TYPES = int
_OTHER_OP_TYPES = (int,)  # mypyc-friendly for isinstance
OP_TYPES = Union["quadint", OTHER_OP_TYPES]


# region Rings
@dataclass(frozen=True)
class QuadraticRing:
    """
    The ring of algebraic integers of Q(√d) for a squarefree radicand d other than 0 and 1.

    Rings are plain values: two rings are equal when they are the same variant with the same radicand.
    """
    radicand: int

    def __post_init__(self) -> None:
        if type(self) is QuadraticRing:
            raise TypeError("Use ImaginaryQuadraticRing or RealQuadraticRing (or QuadraticRing.of)")

        d = self.radicand
        if d in (0, 1):
            raise ValueError(f"Radicand must not be {d}")

        if not is_squarefree(d):
            raise ValueError(f"Radicand {d} is not squarefree")

    @staticmethod
    def of(radicand: int) -> "QuadraticRing":
        """Build the imaginary or real ring for the radicand, according to its sign."""
        if radicand < 0:
            return ImaginaryQuadraticRing(radicand)

        return RealQuadraticRing(radicand)

    @property
    def has_half_integers(self) -> bool:
        """True iff d ≡ 1 (mod 4), in which case (a + b√d)/2 with a, b both odd is in the ring."""
        return self.radicand % 4 == 1

    @property
    def is_imaginary(self) -> bool:
        return self.radicand < 0

    @property
    def max_algebraic_degree(self) -> int:
        return 2

    @property
    def element_type(self) -> type["quadint"]:
        return imagquadint if self.is_imaginary else realquadint

    def __call__(self, a: int = 0, b: int = 0, *, half: bool = False) -> "quadint":
        """Build the element a + b√d of this ring, or (a + b√d)/2 with half=True."""
        return self.element_type(a, b, self, half=half)

    def zero(self) -> "quadint":
        return self(0, 0)

    def one(self) -> "quadint":
        return self(1, 0)

    def neg_one(self) -> "quadint":
        return self(-1, 0)

    def root_symbol(self, ascii_only: bool = False) -> str:
        """How √d is written inside a number: i for the Gaussian integers, √2, √(-7) or sqrt(-7) otherwise."""
        d = self.radicand
        if d == -1:
            return "i"

        if ascii_only:
            return f"sqrt({d})"

        return f"√({d})" if d < 0 else f"√{d}"

    def _name(self, ascii_only: bool) -> str:
        d = self.radicand
        if d == -1:
            return "Z[i]"
        if d == -3:
            return "Z[omega]" if ascii_only else "Z[ω]"
        if d == 5:
            return "Z[phi]" if ascii_only else "Z[φ]"

        root = f"sqrt({d})" if ascii_only else f"√{d}"
        if self.has_half_integers:
            return f"O_(Q({root}))"

        return f"Z[{root}]"

    def __str__(self) -> str:
        return self._name(ascii_only=False)

    def to_ascii(self) -> str:
        return self._name(ascii_only=True)


@dataclass(frozen=True)
class ImaginaryQuadraticRing(QuadraticRing):
    """A quadratic ring with negative radicand. Its unit group is finite."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.radicand > 0:
            raise ValueError(f"Radicand {self.radicand} of an imaginary quadratic ring must be negative")


@dataclass(frozen=True)
class RealQuadraticRing(QuadraticRing):
    """A quadratic ring with positive radicand. Its units are ±ε^n for a fundamental unit ε."""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.radicand < 0:
            raise ValueError(f"Radicand {self.radicand} of a real quadratic ring must be positive")
# endregion


class quadint:
    """
    Quadratic integer, the common base of imagquadint and realquadint.

    Internally stored in "numerator units" as (A, B) representing:
        (A + B*√d) / 2

    Integrality constraint:
        A and B must have the same parity, and may only both be odd when d ≡ 1 (mod 4).

    The norm is always an integer for valid elements:
        N(q) = (A^2 - d*B^2) / 4
    """

    __slots__ = ("a", "b", "ring")

    a: int
    b: int
    ring: QuadraticRing

    def __init__(self, a: int, b: int, ring: QuadraticRing, *, half: bool = False) -> None:
        """
        Initialize a quadratic integer.

        Args:
            a:
                If half=False (default): the regular part, q = a + b√d.
                If half=True: the numerator of the regular part, q = (a + b√d)/2.
                (So the golden ratio is realquadint(1, 1, RealQuadraticRing(5), half=True).)
            b: The surd part, see a.
            ring: The ring the number belongs to.
            half: Whether inputs are already in numerator-units for /2 representation.

        Raises:
            TypeError: If the ring does not fit the variant.
            ValueError: If parity is incorrect.
        """
        if type(self) is quadint:
            raise TypeError("quadint is abstract, use imagquadint, realquadint or ring(a, b)")

        if not isinstance(ring, QuadraticRing) or ring.element_type is not type(self):
            raise TypeError(f"{type(self).__name__} can't belong to {ring!r}")

        a0, b0 = int(a), int(b)

        if not half:
            a0 *= 2
            b0 *= 2

        if (a0 ^ b0) & 1:
            raise ValueError("Regular and surd numerators must have the same parity")

        if a0 & 1 and not ring.has_half_integers:
            raise ValueError(f"{ring} has no half integers")

        self.a, self.b, self.ring = a0, b0, ring

    # region constructors / conversions
    def _make(self, A: int, B: int) -> "quadint":
        """Construct a new value in the ring of this value from internal numerators A,B."""
        return type(self)(A, B, self.ring, half=True)

    def _from_obj(self, n: OP_TYPES) -> "quadint":
        """Convert an int (or a rational quadint from another ring) into the ring of this value."""
        if isinstance(n, _OTHER_OP_TYPES):
            return self._make(2 * int(n), 0)

        return self._make(n.a, n.b)

    def _reconcile(self, other: OP_TYPES) -> tuple["quadint", "quadint"]:
        """
        Bring two operands into one ring.

        A number with zero surd part is rational, so it belongs to every ring and simply moves into the
        ring of the other operand.

        Raises:
            AlgebraicDegreeOverflowError: If both numbers are irrational and from different rings.
        """
        if isinstance(other, _OTHER_OP_TYPES):
            return self, self._from_obj(other)

        if other.ring == self.ring:
            return self, other

        if other.b == 0:
            return self, self._from_obj(other)

        if self.b == 0:
            return other._from_obj(self), other

        raise AlgebraicDegreeOverflowError(f"{self} and {other} are from different rings, "
                                           f"{self.ring} and {other.ring}",
                                           2 * self.ring.max_algebraic_degree, self, other)
    # endregion

    @property
    def reg_part_mult(self) -> int:
        """The regular part numerator of the reduced form (reg_part_mult + surd_part_mult√d)/denominator."""
        return self.a if self.denominator == 2 else self.a // 2

    @property
    def surd_part_mult(self) -> int:
        return self.b if self.denominator == 2 else self.b // 2

    @property
    def denominator(self) -> int:
        return 2 if self.a & 1 else 1

    @property
    def is_half_integer(self) -> bool:
        """True iff both numerators are odd, i.e. the number is a genuine (a + b√d)/2."""
        return bool(self.a & 1)

    def components2(self) -> tuple[int, int]:
        """Return the stored numerator components (A,B) for (...)/2."""
        return (self.a, self.b)

    def conjugate(self) -> "quadint":
        """(A + B√d)/2 -> (A - B√d)/2"""
        return self._make(self.a, -self.b)

    def norm(self) -> int:
        """
        The norm, q times its conjugate:
            N((A + B√d)/2) = (A^2 - d*B^2)/4

        Positive for nonzero imaginary quadratic integers, either sign for real ones.

        Raises:
            ArithmeticError: If there is a non-integral norm due to parity violation.
        """
        q, r = divmod(self.a * self.a - self.ring.radicand * self.b * self.b, 4)
        if r != 0:
            raise ArithmeticError("Non-integral norm; parity constraint violated")

        return q

    def trace(self) -> int:
        """q plus its conjugate, which is A."""
        return self.a

    def is_unit(self) -> bool:
        return abs(self.norm()) == 1

    def algebraic_degree(self) -> int:
        """0 for zero, 1 for the other rational integers, 2 for everything else."""
        if self.b != 0:
            return 2

        return 1 if self.a else 0

    def min_polynomial(self) -> tuple[int, int, int]:
        """
        Coefficients (c0, c1, c2) of the minimal polynomial c2*x^2 + c1*x + c0.

        Zero gives x, a rational integer n gives x - n, anything else x^2 - trace*x + norm.
        """
        degree = self.algebraic_degree()
        if degree == 0:
            return (0, 1, 0)

        if degree == 1:
            return (-(self.a // 2), 1, 0)

        return (self.norm(), -self.trace(), 1)

    def min_polynomial_string(self, ascii_only: bool = False) -> str:
        """
        The minimal polynomial as text, for example "x² − 5x + 8" for (5 + √-7)/2.

        Args:
            ascii_only: Write x^2 and - instead of x² and −.
        """
        c0, c1, _ = self.min_polynomial()
        degree = self.algebraic_degree()

        if degree == 0:
            text = "x"
        elif degree == 1:
            text = f"x - {-c0}" if c0 < 0 else f"x + {c0}"
        else:
            text = "x^2 "
            if c1 < -1:
                text += f"- {-c1}x "
            elif c1 == -1:
                text += "- x "
            elif c1 == 1:
                text += "+ x "
            elif c1 > 1:
                text += f"+ {c1}x "
            text += f"- {-c0}" if c0 < 0 else f"+ {c0}"

        if ascii_only:
            return text

        return text.replace("^2", "²").replace("-", "−")

    # region numeric views
    def real_part_numeric(self) -> float:
        raise NotImplementedError

    def imag_part_numeric(self) -> float:
        raise NotImplementedError

    def angle(self) -> float:
        """The argument in radians, in (-π, π]."""
        return atan2(self.imag_part_numeric(), self.real_part_numeric())

    def __complex__(self) -> complex:
        return complex(self.real_part_numeric(), self.imag_part_numeric())

    def __abs__(self) -> float:
        """The absolute value as a complex number (not the norm)."""
        return hypot(self.real_part_numeric(), self.imag_part_numeric())
    # endregion

    def __add__(self, other: OP_TYPES) -> "quadint":
        if not isinstance(other, (quadint, int)):
            return NotImplemented

        x, y = self._reconcile(other)
        return x._make(x.a + y.a, x.b + y.b)

    def __radd__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__add__(other)

    def __sub__(self, other: OP_TYPES) -> "quadint":
        if not isinstance(other, (quadint, int)):
            return NotImplemented

        x, y = self._reconcile(other)
        return x._make(x.a - y.a, x.b - y.b)

    def __rsub__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__neg__().__add__(other)

    def __neg__(self) -> "quadint":
        return self._make(-self.a, -self.b)

    def __pos__(self) -> "quadint":
        return self._make(self.a, self.b)

    def __mul__(self, other: OP_TYPES) -> "quadint":
        if not isinstance(other, (quadint, int)):
            return NotImplemented

        x, y = self._reconcile(other)

        # If x=(A+B√d)/2 and y=(C+D√d)/2, then xy has denominator 4;
        # we store with denominator 2, so we must divide resulting numerators by 2.
        A, B, C, D = x.a, x.b, y.a, y.b
        P = A * C + x.ring.radicand * B * D
        Q = A * D + B * C

        if (P & 1) or (Q & 1):
            raise ArithmeticError("Non-integral product; parity constraint violated")

        return x._make(P // 2, Q // 2)

    def __rmul__(self, other: OTHER_OP_TYPES) -> "quadint":
        return self.__mul__(other)

    def __pow__(self, exp: int) -> "quadint":
        e = int(exp)
        if e < 0:
            raise ValueError("Negative powers not supported")

        result = self.ring.one()
        base: quadint = self
        while e:
            if e & 1:
                result = result * base

            e >>= 1
            if e:
                base = base * base

        return result

    # region Division
    def divide(self, other: OP_TYPES) -> Union["quadint", "NotDivisible"]:
        """
        Exact division.

        Returns:
            The quotient when other divides self evenly, otherwise a NotDivisible record with the exact
            fractional quotient and the bounding integers around it.

        Raises:
            ZeroDivisionError: If other is 0.
            AlgebraicDegreeOverflowError: If the operands can't be brought into one ring.
        """
        x, y = self._reconcile(other)

        n = y.norm()
        if n == 0:
            raise ZeroDivisionError(f"Can't divide {x} by 0")

        # x / y = x * conj(y) / N(y); the product is stored as (P + Q√d)/2,
        # so the quotient in numerator units is (P/n, Q/n) when those are integers.
        num = x * y.conjugate()
        P, Q = num.a, num.b

        if P % n == 0 and Q % n == 0:
            A, B = P // n, Q // n
            if not ((A ^ B) & 1) and (not (A & 1) or x.ring.has_half_integers):
                return x._make(A, B)

        return NotDivisible(dividend=x, divisor=y, reg_part=Fraction(P, 2 * n), surd_part=Fraction(Q, 2 * n))

    def divides_evenly(self, other: OP_TYPES) -> bool:
        """Whether other divides self with no remainder (other must not be 0)."""
        return isinstance(self.divide(other), quadint)

    def euclidean_divmod(self, other: OP_TYPES, *, radius: Optional[int] = None,
                         max_radius: Optional[int] = None) -> tuple["quadint", "quadint"]:
        """
        Division with remainder: self = q * other + r.

        The quotient is exact when possible. Otherwise the first bounding integer whose remainder has
        smaller absolute norm than other is used, and failing that the best quotient within `radius`
        lattice steps of the exact fractional quotient. In real rings a small remainder can sit far from
        the exact quotient, so there the radius doubles until the remainder is smaller than other or
        `max_radius` is reached.

        Returns:
            (q, r) where r has small absolute norm (smaller than that of other in norm-Euclidean rings).

        Raises:
            ZeroDivisionError: if other == 0
        """
        res = self.divide(other)
        if isinstance(res, quadint):
            return res, res.ring.zero()

        x, y = res.dividend, res.divisor
        target = abs(y.norm())
        for q in res.bounding_integers():
            r = x - q * y
            if abs(r.norm()) < target:
                return q, r

        if radius is None:
            radius = Config.division_search_radius
        if max_radius is None:
            max_radius = Config.max_division_search_radius

        q, r = res.nearest(radius)
        # The closest lattice point already minimizes the norm in imaginary rings
        while not x.ring.is_imaginary and abs(r.norm()) >= target and radius < max_radius:
            radius = min(max(2 * radius, 1), max_radius)
            q, r = res.nearest(radius)

        return q, r

    def __divmod__(self, other: OP_TYPES) -> tuple["quadint", "quadint"]:
        if not isinstance(other, (quadint, int)):
            return NotImplemented

        return self.euclidean_divmod(other)

    def __rdivmod__(self, other: OTHER_OP_TYPES) -> tuple["quadint", "quadint"]:
        if isinstance(other, _OTHER_OP_TYPES):
            return self._from_obj(other).euclidean_divmod(self)

        return NotImplemented

    def __truediv__(self, other: OP_TYPES) -> "quadint":
        """
        Exact division.

        Raises:
            NotDivisibleError: If there is no exact quotient; the error carries the NotDivisible record.
        """
        if not isinstance(other, (quadint, int)):
            return NotImplemented

        res = self.divide(other)
        if isinstance(res, NotDivisible):
            raise NotDivisibleError(f"{res.dividend} is not divisible by {res.divisor}", res)

        return res

    def __rtruediv__(self, other: OTHER_OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            return self._from_obj(other).__truediv__(self)

        return NotImplemented

    def __floordiv__(self, other: OP_TYPES) -> "quadint":
        q, _ = divmod(self, other)
        return q

    def __rfloordiv__(self, other: OTHER_OP_TYPES) -> "quadint":
        if isinstance(other, _OTHER_OP_TYPES):
            return self._from_obj(other).__floordiv__(self)

        return NotImplemented

    def __mod__(self, other: OP_TYPES) -> "quadint":
        _, r = divmod(self, other)
        return r
    # endregion

    def __bool__(self) -> bool:
        return (self.a | self.b) != 0

    def __iter__(self) -> Iterator[int]:
        return iter((self.a, self.b))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _OTHER_OP_TYPES):
            return self.b == 0 and self.a == 2 * other

        if not isinstance(other, quadint):
            return False

        if self.b == 0 and other.b == 0:
            # rational integers are the same number whatever ring they were built in
            return self.a == other.a

        return (self.a, self.b, self.ring) == (other.a, other.b, other.ring)

    def __hash__(self) -> int:
        if self.b == 0:
            return hash(self.a // 2)

        return hash((self.a, self.b, self.ring))

    def _format(self, root: str) -> str:
        if self.b == 0:
            return str(self.a // 2)

        a, b = self.reg_part_mult, self.surd_part_mult
        suffix = "/2" if self.denominator == 2 else ""

        mag = -b if b < 0 else b
        surd = (root if mag == 1 else f"{mag}{root}") + suffix
        if a == 0:
            return f"-{surd}" if b < 0 else surd

        sign = "-" if b < 0 else "+"
        return f"{a}{suffix} {sign} {surd}"

    def __repr__(self) -> str:
        return self._format(self.ring.root_symbol())

    def to_ascii(self) -> str:
        """Like repr, with sqrt instead of √, e.g. "-3/2 + sqrt(37)/2"."""
        return self._format(self.ring.root_symbol(ascii_only=True))

    def to_string_alt(self, ascii_only: bool = False) -> str:
        """
        Write numbers of rings with half integers in terms of θ = (1 + √d)/2.

        The Eisenstein integers use ω = (-1 + √-3)/2 and Z[φ] the golden ratio φ instead of θ. So
        (5 + √-11)/2 is "2 + θ" and (-1 + √-3)/2 is "ω".
        Rings without half integers write the number as usual.
        """
        if not self.ring.has_half_integers:
            return self.to_ascii() if ascii_only else repr(self)

        d = self.ring.radicand
        coeff = self.b
        if d == -3:
            rest = (self.a + self.b) // 2
            letter = "omega" if ascii_only else "ω"
        else:
            rest = (self.a - self.b) // 2
            if d == 5:
                letter = "phi" if ascii_only else "φ"
            else:
                letter = "theta" if ascii_only else "θ"

        if coeff == 0:
            return str(rest)

        mag = -coeff if coeff < 0 else coeff
        term = letter if mag == 1 else f"{mag}{letter}"
        if rest == 0:
            return f"-{term}" if coeff < 0 else term

        sign = "-" if coeff < 0 else "+"
        return f"{rest} {sign} {term}"


class imagquadint(quadint):
    """A quadratic integer of an imaginary quadratic ring, a point of the complex plane."""

    __slots__ = ()

    def real_part_numeric(self) -> float:
        return self.a / 2

    def imag_part_numeric(self) -> float:
        return self.b * sqrt(-self.ring.radicand) / 2


class realquadint(quadint):
    """
    A quadratic integer of a real quadratic ring, a point of the real line.

    These are ordered exactly (without floating point), against each other and against ints.
    """

    __slots__ = ()

    def real_part_numeric(self) -> float:
        return (self.a + self.b * sqrt(self.ring.radicand)) / 2

    def imag_part_numeric(self) -> float:
        return 0.0

    def __float__(self) -> float:
        return self.real_part_numeric()

    def angle(self) -> float:
        return pi if self.sign() < 0 else 0.0

    def sign(self) -> int:
        """-1, 0 or 1 according to the sign of the real value, computed exactly."""
        A, B = self.a, self.b
        if B == 0:
            return (A > 0) - (A < 0)

        if A == 0 or (A > 0) == (B > 0):
            return 1 if B > 0 else -1

        # Opposite signs: the larger of A^2 and d*B^2 wins (they can't be equal, d is not a square)
        if A * A > self.ring.radicand * B * B:
            return 1 if A > 0 else -1

        return 1 if B > 0 else -1

    def _compare(self, other: Any) -> Optional[int]:
        if not isinstance(other, (quadint, int)):
            return None

        return (self - other).sign()  # type: ignore[attr-defined]

    def __lt__(self, other: OP_TYPES) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c < 0

    def __le__(self, other: OP_TYPES) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c <= 0

    def __gt__(self, other: OP_TYPES) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c > 0

    def __ge__(self, other: OP_TYPES) -> bool:
        c = self._compare(other)
        if c is None:
            return NotImplemented
        return c >= 0


@dataclass(frozen=True)
class NotDivisible:
    """
    The outcome of a division with no exact quotient.

    The exact quotient dividend/divisor is reg_part + surd_part*√d with rational parts, and the
    bounding integers are the nearby ring elements a caller can try as approximate quotients.
    """
    dividend: quadint
    divisor: quadint
    reg_part: Fraction
    surd_part: Fraction

    @property
    def ring(self) -> QuadraticRing:
        return self.dividend.ring

    def numeric_real_part(self) -> float:
        if self.ring.is_imaginary:
            return float(self.reg_part)

        return float(self.reg_part) + float(self.surd_part) * sqrt(self.ring.radicand)

    def numeric_imag_part(self) -> float:
        if self.ring.is_imaginary:
            return float(self.surd_part) * sqrt(-self.ring.radicand)

        return 0.0

    def bounding_integers(self) -> tuple[quadint, ...]:
        """
        Ring elements close to the exact quotient.

        With half integers: the top corner (ceil(2*reg), ceil(2*surd))/2, moved down one on the regular
        side if the parities differ, and the three lattice points below it. Otherwise: the four
        floor/ceiling combinations of the regular and surd parts.
        """
        ring = self.ring
        if ring.has_half_integers:
            top_a = ceil(2 * self.reg_part)
            top_b = ceil(2 * self.surd_part)
            if (top_a ^ top_b) & 1:
                top_a -= 1

            points = [(top_a, top_b), (top_a - 1, top_b - 1), (top_a + 1, top_b - 1), (top_a, top_b - 2)]
        else:
            lo_a, hi_a = floor(self.reg_part), ceil(self.reg_part)
            lo_b, hi_b = floor(self.surd_part), ceil(self.surd_part)
            points = [(2 * lo_a, 2 * lo_b), (2 * hi_a, 2 * lo_b), (2 * lo_a, 2 * hi_b), (2 * hi_a, 2 * hi_b)]

        return tuple(ring(A, B, half=True) for A, B in dict.fromkeys(points))

    def _quotient_error(self, A: int, B: int) -> tuple[Fraction, Fraction]:
        """|N| of the exact quotient minus (A + B√d)/2, then the squared distance between the two."""
        dx = self.reg_part - Fraction(A, 2)
        dy = self.surd_part - Fraction(B, 2)
        return abs(dx * dx - self.ring.radicand * dy * dy), dx * dx + dy * dy

    def _row_candidates(self, B: int) -> tuple[int, ...]:
        """
        Regular numerators worth trying on the surd row B of a real ring.

        With dy the surd part error, |N| is |dx^2 - d*dy^2|, smallest where dx = ±√d*|dy|; the
        lattice points of the right parity on either side of both roots are returned.
        """
        dy = self.surd_part - Fraction(B, 2)
        root = sqrt(float(self.ring.radicand * dy * dy))
        parity = B & 1 if self.ring.has_half_integers else 0

        out: list[int] = []
        for center in (2 * float(self.reg_part) - 2 * root, 2 * float(self.reg_part) + 2 * root):
            A = floor(center)
            if (A - parity) & 1:
                A -= 1
            out.extend((A, A + 2))

        return tuple(out)

    def nearest(self, radius: int) -> tuple[quadint, quadint]:
        """
        Search the lattice around the exact quotient for the quotient with the smallest remainder.

        Imaginary rings try u*(1) + v*(lattice step) within radius steps of the rounded quotient. In
        real rings small norms lie along the lines dx = ±√d*dy instead, so each of the surd rows within
        radius steps is solved for its best regular part. The remainder norm decides and distance to
        the exact quotient breaks ties.

        Returns:
            (q, r) with dividend = q * divisor + r.
        """
        ring = self.ring
        half = ring.has_half_integers

        # Coordinates (u, v) map to numerators (2u + v, v) with half integers, (2u, 2v) otherwise
        if half:
            v0 = round(2 * self.surd_part)
            u0 = round((2 * self.reg_part - v0) / 2)
        else:
            v0 = round(self.surd_part)
            u0 = round(self.reg_part)

        best: Optional[tuple[Fraction, Fraction, int, int]] = None
        for v in range(v0 - radius, v0 + radius + 1):
            B = v if half else 2 * v
            if ring.is_imaginary:
                row: tuple[int, ...] = tuple(2 * u + v if half else 2 * u
                                             for u in range(u0 - radius, u0 + radius + 1))
            else:
                row = self._row_candidates(B)

            for A in row:
                err, dist = self._quotient_error(A, B)
                if best is None or (err, dist) < best[:2]:
                    best = (err, dist, A, B)

        assert best is not None
        q = ring(best[2], best[3], half=True)
        return q, self.dividend - q * self.divisor


GAUSSIAN = ImaginaryQuadraticRing(-1)
EISENSTEIN = ImaginaryQuadraticRing(-3)
GOLDEN = RealQuadraticRing(5)

IMAG_UNIT_I = GAUSSIAN(0, 1)
IMAG_UNIT_NEG_I = GAUSSIAN(0, -1)
COMPLEX_CUBIC_ROOT_OF_UNITY = EISENSTEIN(-1, 1, half=True)
NEG_COMPLEX_CUBIC_ROOT_OF_UNITY = EISENSTEIN(1, -1, half=True)
GOLDEN_RATIO = GOLDEN(1, 1, half=True)
