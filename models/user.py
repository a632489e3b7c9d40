from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # email / nickname 중복은 탈퇴하지 않은 사용자 사이에서만 검사 (서비스 계층)
    email = Column(String(100), index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    nickname = Column(String(30), index=True, nullable=False)
    is_deleted = Column(Boolean, default=False, nullable=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    diaries = relationship("Diary", secondary="diary_user", back_populates="users")
    pages = relationship("Page", back_populates="writer")
    comments = relationship("Comment", back_populates="author")
