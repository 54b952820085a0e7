import logging
import random
from secrets import token_bytes

from ticketgen.core.errors import EntropyUnavailable
from ticketgen.core.sampling import resolve_length

logger = logging.getLogger(__name__)


def generate_crypto(
    length: int | None = None, rng: random.Random | None = None
) -> str:
    """Return a lowercase hex string from the OS cryptographic source.

    ``rng`` only picks the default length. The characters themselves
    always come from ``secrets.token_bytes``; if that fails the error is
    raised as EntropyUnavailable and no weaker source is tried.
    """
    length = resolve_length(length, rng)
    # Two hex digits per byte; round up and trim odd lengths.
    n_bytes = (length + 1) // 2
    try:
        raw = token_bytes(n_bytes)
    except (OSError, NotImplementedError) as err:
        logger.warning("Secure random source failed: %s", err)
        raise EntropyUnavailable(
            f"cryptographic random source unavailable: {err}"
        ) from err
    return raw.hex()[:length]
