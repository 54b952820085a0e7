import random

from ticketgen.core.charsets import ALPHANUMERIC, require_literal_charset
from ticketgen.core.sampling import resolve_length, resolve_rng


def generate_rand_string(
    charset: str = ALPHANUMERIC,
    length: int | None = None,
    rng: random.Random | None = None,
) -> str:
    """Sample ``length`` characters from ``charset`` with replacement.

    The charset is taken literally; pass ``CHARSETS[name]`` to use a
    table entry. Each position draws ``int(random() * len(charset))``.
    """
    charset = require_literal_charset(charset)
    length = resolve_length(length, rng)
    rng = resolve_rng(rng)
    size = len(charset)
    chars = []
    for _ in range(length):
        chars.append(charset[int(rng.random() * size)])
    return "".join(chars)
