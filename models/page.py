from sqlalchemy import Column, Integer, String, Text, Date, DateTime, ForeignKey, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base

class Page(Base):
    __tablename__ = "page"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(20), nullable=False)
    content = Column(Text, nullable=True)
    writer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    diary_id = Column(Integer, ForeignKey("diary.id"), nullable=False)
    address_id = Column(Integer, nullable=True)  # 위치 정보 참조 (주소 테이블은 외부)
    target_date = Column(Date, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    is_locked = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    modified_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    writer = relationship("User", back_populates="pages")
    diary = relationship("Diary", back_populates="pages")
    comments = relationship("Comment", back_populates="page", cascade="all, delete-orphan")
