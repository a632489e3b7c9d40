import enum
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from database import Base

class NoticeType(enum.IntEnum):
    FRIEND_REQUEST = 1
    COMMENT = 2
    FRIEND_ACCEPT = 3
    ACTIVITY = 4

    @property
    def is_friend(self) -> bool:
        return self in (NoticeType.FRIEND_REQUEST, NoticeType.FRIEND_ACCEPT)

class Notice(Base):
    __tablename__ = "notice"

    id = Column(Integer, primary_key=True, index=True)
    # 친구 알림(1, 3)은 보낸 사용자 id, 코멘트/기록 알림(2, 4)은 페이지 id
    request_id = Column(Integer, nullable=False, index=True)
    response_id = Column(Integer, nullable=False, index=True)  # 받는 사용자 id
    message = Column(String(255), nullable=False)
    message_type = Column(Integer, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
