from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import date, datetime

class PageCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=20)
    content: Optional[str] = None
    target_date: date
    address_id: Optional[int] = None
    is_locked: bool = False

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class PageUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=20)
    content: Optional[str] = None
    target_date: Optional[date] = None
    address_id: Optional[int] = None
    is_locked: Optional[bool] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class PageResponse(BaseModel):
    id: int
    title: str
    content: Optional[str] = None
    writer_id: int
    diary_id: int
    address_id: Optional[int] = None
    target_date: date
    is_locked: bool
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
