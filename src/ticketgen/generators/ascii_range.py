"""Printable ASCII generator.

Codes are drawn from 40 (``(``) to 126 (``~``). This packs more entropy
into each character than the curated charsets, but the output includes
punctuation such as ``/``, ``?`` and ``\\`` that some URL or barcode
encodings cannot carry unescaped.
"""

import random

from ticketgen.core.sampling import rand_int, resolve_length

ASCII_MIN_CODE = 40
ASCII_MAX_CODE = 126


def generate_rand_ascii(
    length: int | None = None, rng: random.Random | None = None
) -> str:
    length = resolve_length(length, rng)
    codes = [
        rand_int(ASCII_MIN_CODE, ASCII_MAX_CODE, rng) for _ in range(length)
    ]
    return "".join(map(chr, codes))
