"""Base schema and input helpers shared by every resource."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hoteldesk.schemas.validators import is_blank, lookup


class CamelModel(BaseModel):
    """Snake_case attributes exposed as camelCase JSON fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def drop_blank(data: Any, *aliases: str) -> Any:
    """Remove optional keys sent as null/blank so their defaults apply."""
    if not isinstance(data, dict):
        return data
    blank = {alias for alias in aliases if alias in data and is_blank(lookup(data, alias))}
    return {key: value for key, value in data.items() if key not in blank}
