"""Shared pydantic configuration for Gfycat records."""

from __future__ import annotations

from typing import Annotated

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel

from gfycat_client.models.codecs import U32_MAX, U64_MAX

# Plain fields decode strictly: "600" is not a height and 1 is not a bool.
# JSON integers are still accepted where a float is expected.
Str = StrictStr
Bool = StrictBool
Float = StrictFloat
U32 = Annotated[StrictInt, Field(ge=0, le=U32_MAX)]
U64 = Annotated[StrictInt, Field(ge=0, le=U64_MAX)]


class GfycatModel(BaseModel):
    """Base class for every decoded provider record.

    Records are immutable, tolerate fields the provider adds over time, and
    read and write their camelCase wire names while exposing snake_case
    attributes.  Scalar fields use the strict aliases above; nested records
    are still decoded from plain mappings.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:  # type: ignore[type-arg]
        """Return the record as a JSON-compatible dict under its wire names."""
        return self.model_dump(mode="json", by_alias=True)
