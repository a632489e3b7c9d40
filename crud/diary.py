from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import List, Optional, Tuple
from models.diary import Diary, DiaryCategory, diary_user
from models.user import User

def get_diary_by_id(db: Session, diary_id: int) -> Optional[Diary]:
    return db.query(Diary).filter(Diary.id == diary_id).first()

def is_member(db: Session, diary_id: int, user_id: int) -> bool:
    return db.query(diary_user).filter(
        diary_user.c.diary_id == diary_id,
        diary_user.c.user_id == user_id,
    ).first() is not None

def count_user_by_diary(db: Session, diary_id: int) -> int:
    """다이어리 멤버 수"""
    return db.query(func.count(diary_user.c.user_id))\
        .filter(diary_user.c.diary_id == diary_id)\
        .scalar() or 0

def find_user_by_diary(db: Session, diary_id: int) -> List[str]:
    """다이어리 멤버 닉네임 목록"""
    rows = db.query(User.nickname)\
        .join(diary_user, diary_user.c.user_id == User.id)\
        .filter(diary_user.c.diary_id == diary_id, User.is_deleted == False)\
        .order_by(User.id)\
        .all()
    return [row.nickname for row in rows]

def find_member_ids(db: Session, diary_id: int) -> List[int]:
    rows = db.query(diary_user.c.user_id).filter(diary_user.c.diary_id == diary_id).all()
    return [row.user_id for row in rows]

def search_diary(
    db: Session,
    user_id: int,
    skip: int = 0,
    limit: int = 20,
    category: Optional[DiaryCategory] = None,
) -> Tuple[List[Tuple[Diary, int]], int]:
    """사용자가 속한 다이어리 목록 (멤버 수 포함, 최신순) 과 전체 개수"""
    member_count = db.query(
        diary_user.c.diary_id.label("diary_id"),
        func.count(diary_user.c.user_id).label("user_count"),
    ).group_by(diary_user.c.diary_id).subquery()

    query = db.query(Diary, member_count.c.user_count)\
        .join(diary_user, diary_user.c.diary_id == Diary.id)\
        .join(member_count, member_count.c.diary_id == Diary.id)\
        .filter(diary_user.c.user_id == user_id)

    if category is not None:
        query = query.filter(Diary.diary_category == category)

    total = query.count()
    rows = query.order_by(Diary.id.desc()).offset(skip).limit(limit).all()
    return [(diary, count) for diary, count in rows], total

def create_diary(db: Session, diary: Diary, members: List[User]) -> Diary:
    diary.users = list(members)
    db.add(diary)
    db.flush()
    return diary

def remove_member(db: Session, diary: Diary, user_id: int) -> None:
    diary.users = [user for user in diary.users if user.id != user_id]
    db.flush()

def delete_diary(db: Session, diary: Diary) -> None:
    db.delete(diary)
    db.flush()
