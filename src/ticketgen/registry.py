"""Maps strategies to their generator functions."""

import logging
import random
from collections.abc import Callable
from functools import partial

from ticketgen.core.charsets import CHARSETS, resolve_charset
from ticketgen.core.models import GenerationRequest, Strategy
from ticketgen.core.sampling import rand_int, resolve_rng
from ticketgen.core.trace import GenerationTrace, TraceStep, trace_step
from ticketgen.generators.ascii_range import generate_rand_ascii
from ticketgen.generators.charset_sampling import generate_rand_string
from ticketgen.generators.library import generate_random_string
from ticketgen.generators.secure import generate_crypto

logger = logging.getLogger(__name__)

_GENERATORS: dict[Strategy, Callable[..., str]] = {
    Strategy.LIBRARY: generate_random_string,
    Strategy.SECURE: generate_crypto,
    Strategy.CHARSET: generate_rand_string,
    Strategy.ASCII: generate_rand_ascii,
}


def get_generator(strategy: Strategy | str) -> Callable[..., str]:
    """Return the generator function for a strategy or its name."""
    try:
        key = Strategy(strategy)
    except ValueError as err:
        raise ValueError(
            f"Unknown strategy: {strategy!r}; expected one of "
            f"{[s.value for s in Strategy]}"
        ) from err
    return _GENERATORS[key]


def _bind_charset(
    request: GenerationRequest, trace: list[TraceStep] | None
) -> Callable[..., str]:
    generator = get_generator(request.strategy)
    if request.charset is None:
        return generator

    match request.strategy:
        case Strategy.LIBRARY:
            charset = request.charset
        case Strategy.CHARSET:
            # The sampling generator takes literal charsets; let requests
            # name table entries too.
            charset = CHARSETS.get(request.charset, request.charset)
        case _:
            raise ValueError(
                f"charset is not supported by the {request.strategy.value} "
                "strategy"
            )

    trace_step(
        trace,
        "resolve_charset",
        f"Charset: {request.charset}",
        resolve_charset(charset),
    )
    return partial(generator, charset)


def generate_ticket(
    request: GenerationRequest,
    rng: random.Random | None = None,
    trace: list[TraceStep] | None = None,
) -> str:
    """Generate a single string as described by ``request``."""
    rng = resolve_rng(rng)
    generator = _bind_charset(request, trace)

    if request.length is None:
        length = rand_int(*request.length_range, rng=rng)
        trace_step(
            trace,
            "sample_length",
            f"Length sampled from {request.length_range}: {length}",
            length,
        )
    else:
        length = request.length
        trace_step(
            trace, "explicit_length", f"Explicit length: {length}", length
        )

    logger.debug(
        "Generating ticket: strategy=%s length=%s",
        request.strategy.value,
        length,
    )
    return generator(length=length, rng=rng)


def generate_tickets(
    request: GenerationRequest, rng: random.Random | None = None
) -> list[str]:
    """Generate ``request.count`` independent strings.

    Duplicates are possible and are not filtered.
    """
    rng = resolve_rng(rng)
    return [generate_ticket(request, rng) for _ in range(request.count)]


def generate_traced_ticket(
    request: GenerationRequest, rng: random.Random | None = None
) -> tuple[str, GenerationTrace]:
    """Generate one string and return it with the decisions behind it."""
    steps: list[TraceStep] = []
    ticket = generate_ticket(request, rng, trace=steps)
    return ticket, GenerationTrace(
        strategy=request.strategy.value, steps=steps
    )
