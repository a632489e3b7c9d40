from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class AddCommentRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=1000)

    model_config = _camel

class UpdateCommentRequest(BaseModel):
    content: str = Field(..., min_length=1, max_length=1000)

    model_config = _camel

class CommentResponse(BaseModel):
    """댓글 단건 조회 응답 (없으면 모든 필드가 비어 있는 응답)"""
    id: Optional[int] = None
    content: Optional[str] = None
    paper_id: Optional[int] = None
    user_id: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = _camel

class CommentListResponse(BaseModel):
    id: int
    content: str
    user_id: int
    nickname: Optional[str] = None
    created_at: Optional[datetime] = None
    is_mine: bool
    can_delete: bool

    model_config = _camel

class AddCommentResponse(BaseModel):
    id: int
    paper_id: int
    user_id: int
    created_at: Optional[datetime] = None

    model_config = _camel

class UpdateCommentResponse(BaseModel):
    id: int
    content: str

    model_config = _camel
