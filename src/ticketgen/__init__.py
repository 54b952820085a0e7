"""Randomized ticket strings for barcode payloads."""

from ticketgen.core.charsets import CHARSETS
from ticketgen.core.errors import (
    EntropyUnavailable,
    InvalidCharset,
    InvalidLength,
    TicketGenError,
)
from ticketgen.core.models import GenerationRequest, Strategy
from ticketgen.core.sampling import rand_int
from ticketgen.generators import (
    generate_crypto,
    generate_rand_ascii,
    generate_rand_string,
    generate_random_string,
)
from ticketgen.registry import (
    generate_ticket,
    generate_tickets,
    generate_traced_ticket,
    get_generator,
)

__all__ = [
    "CHARSETS",
    "EntropyUnavailable",
    "GenerationRequest",
    "InvalidCharset",
    "InvalidLength",
    "Strategy",
    "TicketGenError",
    "generate_crypto",
    "generate_rand_ascii",
    "generate_rand_string",
    "generate_random_string",
    "generate_ticket",
    "generate_tickets",
    "generate_traced_ticket",
    "get_generator",
    "rand_int",
]
