from fastapi import Depends
from sqlalchemy.orm import Session

from database import get_db
from services.comment_service import CommentService
from services.diary_service import DiaryService
from services.notice_service import NoticeService
from services.page_service import PageService
from services.user_service import UserService

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)

def get_diary_service(db: Session = Depends(get_db)) -> DiaryService:
    return DiaryService(db)

def get_notice_service(db: Session = Depends(get_db)) -> NoticeService:
    return NoticeService(db)

def get_page_service(
    db: Session = Depends(get_db),
    notice_service: NoticeService = Depends(get_notice_service),
) -> PageService:
    return PageService(db, notice_service)

def get_comment_service(
    db: Session = Depends(get_db),
    notice_service: NoticeService = Depends(get_notice_service),
) -> CommentService:
    return CommentService(db, notice_service)
