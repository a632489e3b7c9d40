from sqlalchemy.orm import Session
from typing import Optional
from models.user import User
from utils.security import hash_password
from schemas.user import UserCreate

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """탈퇴하지 않은 사용자 조회"""
    return db.query(User).filter(User.id == user_id, User.is_deleted == False).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email, User.is_deleted == False).first()

def get_user_by_nickname(db: Session, nickname: str) -> Optional[User]:
    return db.query(User).filter(User.nickname == nickname, User.is_deleted == False).first()

def exists_by_email(db: Session, email: str) -> bool:
    return get_user_by_email(db, email) is not None

def exists_by_nickname(db: Session, nickname: str) -> bool:
    return get_user_by_nickname(db, nickname) is not None

def create_user(db: Session, user: UserCreate) -> User:
    db_user = User(
        email=user.email,
        hashed_password=hash_password(user.password),
        nickname=user.nickname,
    )
    db.add(db_user)
    db.flush()  # ID 생성을 위해 flush
    return db_user
