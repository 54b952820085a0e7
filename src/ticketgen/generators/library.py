import random

from ticketgen.core.charsets import resolve_charset
from ticketgen.core.sampling import resolve_length, resolve_rng


def generate_random_string(
    charset: str = "alphanumeric",
    length: int | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return a random string built with ``random.Random.choices``.

    ``charset`` is either a name from CHARSETS (alphanumeric, alphabetic,
    numeric, hex) or a literal string of characters to draw from. Not
    suitable for secrets: the source is the general-purpose Mersenne
    Twister.
    """
    chars = resolve_charset(charset)
    length = resolve_length(length, rng)
    return "".join(resolve_rng(rng).choices(chars, k=length))
