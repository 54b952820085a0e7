"""Interchangeable random string generators."""

from ticketgen.generators.ascii_range import generate_rand_ascii
from ticketgen.generators.charset_sampling import generate_rand_string
from ticketgen.generators.library import generate_random_string
from ticketgen.generators.secure import generate_crypto

__all__ = [
    "generate_crypto",
    "generate_rand_ascii",
    "generate_rand_string",
    "generate_random_string",
]
