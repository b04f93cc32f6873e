"""Owning collective reference model."""

from typing import Optional, Union

from pydantic import BaseModel


class ParentCollective(BaseModel):
    """Read-only reference to the collective that owns an event."""

    id: Optional[Union[int, str]] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    currency: Optional[str] = None

    model_config = {"frozen": True, "extra": "allow"}
