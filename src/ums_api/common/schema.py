"""Shared Pydantic schema utilities."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base class for all API schemas with UMS defaults."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        use_enum_values=True,
        extra="ignore",
    )

    def serializable_dict(
        self,
        *,
        exclude_none: bool = True,
        by_alias: bool = True,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Return a dict representation suited for JSON responses."""

        return self.model_dump(exclude_none=exclude_none, by_alias=by_alias, **kwargs)


__all__ = ["BaseSchema"]
