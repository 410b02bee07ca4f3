"""
Group-related Pydantic models
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator

class GroupWriteRequest(BaseModel):
    """Body of group create and update; groupe_name presence is checked by the route"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    groupe_name: Optional[str] = None
    Description: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value
