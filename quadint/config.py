from dataclasses import dataclass


@dataclass
class Config:
    """Limits for the brute force searches of the ring engine, and cache thresholds."""

    # Fundamental units with a surd part above this are remembered for the session
    unit_cache_threshold: int = 1000
    # The unit search gives up once the regular part would pass this
    max_unit_regular_part: int = 2**31 - 1
    # How far (in numerator units) Euclidean division looks past the bounding integers
    division_search_radius: int = 6
    # Real rings double the division search radius up to this before the descent gives up
    max_division_search_radius: int = 4096
    # Largest surd part numerator tried when looking for divisors of a given norm in a real ring
    max_candidate_surd: int = 10**6
