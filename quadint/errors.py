from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from quadint.quad import NotDivisible, quadint


class AlgebraicDegreeOverflowError(ValueError):
    """
    Raised when an operation between two algebraic integers would produce a number of higher degree.

    For quadratic integers this means two numbers with nonzero surd parts from different rings.
    """

    def __init__(self, message: str, max_degree: int, a: Any, b: Any) -> None:
        super().__init__(message)
        self.max_degree = max_degree
        self.operands = (a, b)


class UnsupportedNumberDomainError(NotImplementedError):
    """Raised when a function is called on a ring or number type it does not support yet."""

    def __init__(self, message: str, *operands: Any) -> None:
        super().__init__(message)
        self.operands = operands


class NotDivisibleError(ArithmeticError):
    """Raised by ``/`` when there is no exact quotient. ``result`` holds the NotDivisible record."""

    def __init__(self, message: str, result: "NotDivisible") -> None:
        super().__init__(message)
        self.result = result

    def bounding_integers(self) -> tuple["quadint", ...]:
        return self.result.bounding_integers()


class NonEuclideanDomainError(ArithmeticError):
    """
    Raised when a Euclidean GCD is requested in a ring not known to be norm-Euclidean.

    The two operands are kept so a caller may still try the descent.
    """

    def __init__(self, message: str, a: "quadint", b: "quadint") -> None:
        super().__init__(message)
        self.a = a
        self.b = b

    def try_euclidean_gcd_anyway(self) -> "quadint":
        """
        Run the Euclidean descent without checking that the ring is norm-Euclidean.

        Returns:
            quadint: The last nonzero remainder, which is a GCD whenever the descent worked.

        Raises:
            ArithmeticError: If no remainder of smaller norm could be found along the way.
        """
        from quadint.calculator import default_calculator

        return default_calculator().euclidean_gcd(self.a, self.b, check_ring=False)


class NonUniqueFactorizationDomainError(ArithmeticError):
    """Raised when a prime factorization is requested in a ring that is proven not to be a UFD."""

    def __init__(self, message: str, number: "quadint") -> None:
        super().__init__(message)
        self.number = number

    def try_to_factorize_anyway(self) -> list["quadint"]:
        """Factor into irreducibles. The result is one of possibly several factorizations."""
        from quadint.calculator import default_calculator

        return default_calculator().irreducible_factors(self.number)
