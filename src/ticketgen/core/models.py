from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ticketgen.core.sampling import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH


class Strategy(str, Enum):
    LIBRARY = "library"
    SECURE = "secure"
    CHARSET = "charset"
    ASCII = "ascii"


# Strategies whose output domain is fixed and ignores a charset selector.
FIXED_DOMAIN_STRATEGIES = frozenset({Strategy.SECURE, Strategy.ASCII})


def _validate_no_bool_int_fields(data: Any) -> None:
    if not isinstance(data, dict):
        return

    if isinstance(data.get("length"), bool):
        raise ValueError("length: bool is not allowed")
    if isinstance(data.get("count"), bool):
        raise ValueError("count: bool is not allowed")
    value = data.get("length_range")
    if isinstance(value, (tuple, list)) and len(value) == 2:
        low, high = value
        if isinstance(low, bool) or isinstance(high, bool):
            raise ValueError(
                "length_range: bool is not allowed for int range bounds"
            )


class GenerationRequest(BaseModel):
    """Parameters for one or more generator calls.

    ``length`` is an explicit override and is passed through as-is, so
    values outside ``length_range`` are allowed; negative values are
    rejected by the generator itself. When ``length`` is None a length is
    sampled from ``length_range`` for every string produced.
    """

    strategy: Strategy = Field(default=Strategy.LIBRARY)
    charset: str | None = Field(default=None)
    length: int | None = Field(default=None)
    length_range: tuple[int, int] = Field(
        default=(DEFAULT_MIN_LENGTH, DEFAULT_MAX_LENGTH)
    )
    count: int = Field(default=1, ge=1)

    @model_validator(mode="before")
    @classmethod
    def validate_input_fields(cls, data: Any) -> Any:
        _validate_no_bool_int_fields(data)
        return data

    @model_validator(mode="after")
    def validate_request(self) -> "GenerationRequest":
        lo, hi = self.length_range
        if lo > hi:
            raise ValueError(
                f"length_range: low ({lo}) must be <= high ({hi})"
            )
        if lo < 0:
            raise ValueError(f"length_range: low ({lo}) must be >= 0")
        if (
            self.charset is not None
            and self.strategy in FIXED_DOMAIN_STRATEGIES
        ):
            raise ValueError(
                f"charset is not supported by the {self.strategy.value} "
                "strategy"
            )
        return self
