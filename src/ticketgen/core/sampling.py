import random

from ticketgen.core.errors import InvalidLength

DEFAULT_MIN_LENGTH = 8
DEFAULT_MAX_LENGTH = 32

# Shared non-secure source used when callers do not inject their own.
_DEFAULT_RNG = random.Random()


def resolve_rng(rng: random.Random | None) -> random.Random:
    return _DEFAULT_RNG if rng is None else rng


def rand_int(
    min_value: int = DEFAULT_MIN_LENGTH,
    max_value: int = DEFAULT_MAX_LENGTH,
    rng: random.Random | None = None,
) -> int:
    """Return a uniformly distributed integer in [min_value, max_value].

    The offset from min_value is a real draw in [0, width) truncated with
    int(), so ranges below zero stay uniform. Callers must pass
    min_value <= max_value; a malformed range is rejected rather than
    swapped.
    """
    if min_value > max_value:
        raise ValueError(
            f"range is malformed: low ({min_value}) must be <= "
            f"high ({max_value})"
        )
    rng = resolve_rng(rng)
    return min_value + int(rng.random() * (max_value + 1 - min_value))


def resolve_length(
    length: int | None, rng: random.Random | None = None
) -> int:
    """Return an explicit length unchanged, or sample a default one.

    Explicit lengths outside the default range are accepted; only
    negative values and non-integers are rejected.
    """
    if length is None:
        return rand_int(rng=rng)
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(
            f"length must be an int, got {type(length).__name__}"
        )
    if length < 0:
        raise InvalidLength(f"length must be >= 0, got {length}")
    return length
