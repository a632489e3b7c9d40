from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime
from models.diary import DiaryCategory, Color

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class DiaryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    img_url: str
    diary_category: DiaryCategory
    description: str = Field(..., min_length=1, max_length=20)
    color: Color
    # 함께 쓸 사용자 닉네임 (생성자는 자동으로 포함)
    users: List[str] = Field(default_factory=list)

    model_config = _camel

class DiaryUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    img_url: Optional[str] = None
    diary_category: Optional[DiaryCategory] = None
    description: Optional[str] = Field(None, min_length=1, max_length=20)
    color: Optional[Color] = None

    model_config = _camel

class DiaryResponse(BaseModel):
    id: int
    name: str
    img_url: str
    diary_category: DiaryCategory
    description: str
    color: Color
    users: List[str] = []
    user_count: int = 0
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

class DiaryListItem(BaseModel):
    id: int
    name: str
    img_url: str
    diary_category: DiaryCategory
    color: Color
    user_count: int

    model_config = _camel

class DiaryPage(BaseModel):
    items: List[DiaryListItem]
    total: int
    page: int
    size: int

    model_config = _camel
