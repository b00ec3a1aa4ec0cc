import math
import numbers
from decimal import Decimal
from typing import Any, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)

Number = Union[int, float]


def _parse_numeric_string(text: str) -> Optional[Number]:
    """Parse a numeric string with the grammar of JavaScript's Number()."""
    if "_" in text:
        return None
    if text.lower().startswith(("0x", "0o", "0b")):
        try:
            return int(text, 0)
        except ValueError:
            return None
    unsigned = text.lstrip("+-")
    if unsigned.lower() in ("inf", "infinity", "nan"):
        # Only the exact "Infinity" spelling is numeric
        if unsigned != "Infinity" or len(text) - len(unsigned) > 1:
            return None
        return -math.inf if text.startswith("-") else math.inf
    try:
        return int(text)
    except ValueError:
        try:
            return float(text)
        except ValueError:
            return None


def coerce_number(value: Any) -> Optional[Number]:
    """
    Coerce a loosely typed value to a number.

    Never raises: anything that is not numeric (or a numeric string)
    becomes None, as does NaN. Integral floats are returned as int.
    Decimals and other numeric types (e.g. numpy scalars) are accepted.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        value = _parse_numeric_string(text)
        if value is None:
            return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, Decimal) and value.is_nan():
        return None
    if isinstance(value, (numbers.Real, Decimal)):
        value = float(value)
        if math.isnan(value):
            return None
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return value
    return None


class PaginationSource(BaseModel):
    """
    Pagination metadata as produced by the query layer.

    Accepts the camelCase keys of a paginated query result as well as
    their snake_case spellings, from a mapping or an object.
    """

    model_config = ConfigDict(from_attributes=True, extra="ignore")

    total: Optional[Number] = None
    per_page: Optional[Number] = Field(
        None, validation_alias=AliasChoices("perPage", "per_page")
    )
    current_page: Optional[Number] = Field(
        None, validation_alias=AliasChoices("page", "current_page")
    )
    last_page: Optional[Number] = Field(
        None, validation_alias=AliasChoices("lastPage", "last_page")
    )
    data: Any = None

    @field_validator("total", "per_page", "current_page", "last_page", mode="before")
    @classmethod
    def coerce_numeric(cls, v: Any) -> Optional[Number]:
        return coerce_number(v)


class PaginationEnvelope(BaseModel):
    """Flat pagination response: metadata plus the page data."""

    model_config = ConfigDict(populate_by_name=True)

    total: Optional[Number] = None
    per_page: Optional[Number] = None
    current_page: Number = 1
    last_page: Optional[Number] = None
    next_page_url: Optional[str] = None
    prev_page_url: Optional[str] = None
    from_: Optional[Number] = Field(None, alias="from")
    to: Optional[Number] = None
    data: Any = None

    @field_serializer(
        "total", "per_page", "current_page", "last_page", "from_", "to", when_used="json"
    )
    def serialize_non_finite(self, v: Optional[Number]) -> Optional[Number]:
        # JSON has no NaN/Infinity, render them as null
        if isinstance(v, float) and not math.isfinite(v):
            return None
        return v

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
