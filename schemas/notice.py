from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class NoticeRequest(BaseModel):
    """알림 전송 요청

    messageType 1/3 은 senderId, 2/4 는 paperId 가 필요하다 (서비스에서 검사).
    """
    message_type: int
    response_id: int
    sender_id: Optional[int] = None
    paper_id: Optional[int] = None

    model_config = _camel

class NoticeResponse(BaseModel):
    id: int
    type: str
    message: str
    time: datetime
    paper_id: Optional[int] = None

    model_config = _camel

class NoticeSelectedDelete(BaseModel):
    notice_ids: List[int] = Field(default_factory=list)

    model_config = _camel

class NoticeSendResponse(BaseModel):
    id: int
    request_id: int
    response_id: int
    message_type: int
    message: str

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
