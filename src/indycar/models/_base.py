"""Base classes shared by the upstream schema and the output records."""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel


def blank_on_mismatch(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    """Read a malformed list item as an empty record so its siblings survive."""
    try:
        return handler(value)
    except ValidationError:
        return handler({})


class UpstreamModel(BaseModel):
    """Partial view of an ESPN payload.

    Every field is optional. A value of the wrong shape is read as missing
    instead of failing the whole payload; a malformed list item is read as
    an empty record (see ``blank_on_mismatch``).
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @field_validator("*", mode="wrap")
    @classmethod
    def _missing_on_mismatch(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class OutputModel(BaseModel):
    """Projection record, serialized with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_output(self) -> dict[str, Any]:
        """Return the JSON-ready dict handed back to callers."""
        return self.model_dump(mode="json", by_alias=True)
