from quadint.calculator import (
    HEEGNER_NUMBERS,
    NORM_EUCLIDEAN_QUADRATIC_RINGS_D,
    Calculator,
    default_calculator,
    divide_out_units,
    euclidean_gcd,
    factorize,
    field_class_number,
    fundamental_unit,
    irreducible_factors,
    is_divisible_by,
    is_irreducible,
    is_norm_euclidean,
    is_prime,
    is_ufd,
    place_in_primary_sector,
    prime_factors,
)
from quadint.config import Config
from quadint.errors import (
    AlgebraicDegreeOverflowError,
    NonEuclideanDomainError,
    NonUniqueFactorizationDomainError,
    NotDivisibleError,
    UnsupportedNumberDomainError,
)
from quadint.quad import (
    COMPLEX_CUBIC_ROOT_OF_UNITY,
    EISENSTEIN,
    GAUSSIAN,
    GOLDEN,
    GOLDEN_RATIO,
    IMAG_UNIT_I,
    IMAG_UNIT_NEG_I,
    ImaginaryQuadraticRing,
    NotDivisible,
    QuadraticRing,
    RealQuadraticRing,
    imagquadint,
    quadint,
    realquadint,
)
