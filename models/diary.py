import enum
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base

class DiaryCategory(str, enum.Enum):
    INDIVIDUAL = "INDIVIDUAL"
    COUPLE = "COUPLE"
    FRIEND = "FRIEND"
    FAMILY = "FAMILY"

class Color(str, enum.Enum):
    RED = "RED"
    ORANGE = "ORANGE"
    YELLOW = "YELLOW"
    GREEN = "GREEN"
    BLUE = "BLUE"
    PURPLE = "PURPLE"
    PINK = "PINK"

# 다이어리 - 사용자 멤버십
diary_user = Table(
    "diary_user",
    Base.metadata,
    Column("diary_id", Integer, ForeignKey("diary.id"), primary_key=True),
    Column("user_id", Integer, ForeignKey("users.id"), primary_key=True),
)

class Diary(Base):
    __tablename__ = "diary"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    img_url = Column(String, nullable=False)
    diary_category = Column(Enum(DiaryCategory), nullable=False)
    description = Column(String(20), nullable=False)
    color = Column(Enum(Color), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    users = relationship("User", secondary=diary_user, back_populates="diaries")
    pages = relationship("Page", back_populates="diary", cascade="all, delete-orphan")
