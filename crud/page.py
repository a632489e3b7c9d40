from sqlalchemy.orm import Session
from typing import List, Optional
from models.page import Page

def get_page_by_id(db: Session, page_id: int) -> Optional[Page]:
    """삭제되지 않은 페이지 조회"""
    return db.query(Page).filter(Page.id == page_id, Page.is_deleted == False).first()

def get_pages_by_diary(db: Session, diary_id: int, skip: int = 0, limit: int = 20) -> List[Page]:
    return db.query(Page)\
        .filter(Page.diary_id == diary_id, Page.is_deleted == False)\
        .order_by(Page.target_date.desc(), Page.id.desc())\
        .offset(skip)\
        .limit(limit)\
        .all()

def create_page(db: Session, page: Page) -> Page:
    db.add(page)
    db.flush()
    db.refresh(page)  # created_at 등 서버 기본값 반영
    return page
