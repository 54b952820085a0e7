class TicketGenError(Exception):
    """Base class for all ticket generation failures."""


class InvalidLength(TicketGenError, ValueError):
    """Raised when a requested length is negative or not an integer."""


class InvalidCharset(TicketGenError, ValueError):
    """Raised when a charset selector is empty or cannot be resolved."""


class EntropyUnavailable(TicketGenError, RuntimeError):
    """Raised when the secure randomness source cannot produce bytes."""
