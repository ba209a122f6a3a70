"""
Pydantic models for request/response validation
"""
import datetime
from typing import Optional
from pydantic import BaseModel, Field, StrictBool, field_validator


class WeightEntry(BaseModel):
    """A body-weight measurement as stored in `weights`"""
    id: int
    date: datetime.date
    value: float


class ChecklistEntry(BaseModel):
    """One meal checklist item for a day, as stored in `meal_checklist`"""
    id: int
    date: datetime.date
    item: str
    checked: bool


class WeightPayload(BaseModel):
    """POST /weights body; date falls back to today when omitted or blank"""
    date: Optional[datetime.date] = None
    # JSON numbers only: no numeric strings, booleans, NaN or infinities
    value: float = Field(..., strict=True, allow_inf_nan=False)

    @field_validator("date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ChecklistPayload(BaseModel):
    """POST /checklist body; any client-sent date is ignored"""
    item: str
    checked: StrictBool


class MessageResponse(BaseModel):
    message: str
