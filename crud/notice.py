from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional
from models.notice import Notice, NoticeType

def get_notice_by_id(db: Session, notice_id: int) -> Optional[Notice]:
    return db.query(Notice).filter(Notice.id == notice_id).first()

def get_notices_by_ids(db: Session, notice_ids: List[int]) -> List[Notice]:
    return db.query(Notice).filter(Notice.id.in_(notice_ids)).all()

def get_notices_by_receiver(
    db: Session,
    response_id: int,
    request_time: datetime,
    skip: int = 0,
    limit: int = 20,
) -> List[Notice]:
    """받은 알림 중 request_time 이전에 생성된 것 (최신순)"""
    return db.query(Notice)\
        .filter(Notice.response_id == response_id, Notice.created_at <= request_time)\
        .order_by(Notice.created_at.desc(), Notice.id.desc())\
        .offset(skip)\
        .limit(limit)\
        .all()

def count_notices_by_receiver(db: Session, response_id: int) -> int:
    return db.query(Notice).filter(Notice.response_id == response_id).count()

def find_by_request_and_response_and_type(
    db: Session, request_id: int, response_id: int, message_type: int
) -> Optional[Notice]:
    return db.query(Notice).filter(
        Notice.request_id == request_id,
        Notice.response_id == response_id,
        Notice.message_type == message_type,
    ).first()

def create_notice(db: Session, notice: Notice) -> Notice:
    db.add(notice)
    db.flush()
    return notice

def delete_notice(db: Session, notice: Notice) -> None:
    db.delete(notice)
    db.flush()

def delete_notices_by_receiver(db: Session, response_id: int) -> int:
    return db.query(Notice)\
        .filter(Notice.response_id == response_id)\
        .delete(synchronize_session=False)

def delete_notices(db: Session, notices: List[Notice]) -> None:
    for notice in notices:
        db.delete(notice)
    db.flush()

def delete_notices_by_pages(db: Session, page_ids: List[int]) -> int:
    """페이지를 출처로 하는 코멘트/기록 알림 삭제"""
    if not page_ids:
        return 0
    return db.query(Notice)\
        .filter(
            Notice.request_id.in_(page_ids),
            Notice.message_type.in_([int(NoticeType.COMMENT), int(NoticeType.ACTIVITY)]),
        )\
        .delete(synchronize_session=False)
