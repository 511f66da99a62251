"""Shared building blocks for Ultra API contracts."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def _coerce_integer_string(value: Any) -> Any:
    """Normalise a raw integer amount to its digit-string form.

    JSON integers are accepted and converted; floats are rejected since
    they may already have lost precision.
    """
    if isinstance(value, bool):
        raise ValueError("raw amount must be an integer, got a boolean")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("raw amount must be non-negative")
        return str(value)
    if isinstance(value, str):
        if not value.isdigit() or not value.isascii():
            raise ValueError(f"raw amount must be a non-negative integer string, got {value!r}")
        return value
    raise ValueError(f"raw amount must be an integer string, got {type(value).__name__}")


# Integer amount in a token's smallest unit, kept as a decimal digit string
RawAmount = Annotated[str, BeforeValidator(_coerce_integer_string)]


class UltraModel(BaseModel):
    """Base model for Ultra API payloads (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Dump to the API's JSON shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
