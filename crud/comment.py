from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from models.comment import Comment

def get_comment_by_id(db: Session, comment_id: int) -> Optional[Comment]:
    return db.query(Comment).filter(Comment.id == comment_id).first()

def get_comment_by_page(db: Session, page_id: int, comment_id: int) -> Optional[Comment]:
    return db.query(Comment)\
        .filter(Comment.id == comment_id, Comment.page_id == page_id)\
        .first()

def get_comments_by_page(db: Session, page_id: int) -> List[Comment]:
    return db.query(Comment).options(
        joinedload(Comment.author)
    ).filter(Comment.page_id == page_id).order_by(Comment.created_at.asc(), Comment.id.asc()).all()

def create_comment(db: Session, comment: Comment) -> Comment:
    db.add(comment)
    db.flush()
    db.refresh(comment)
    return comment

def delete_comment(db: Session, comment: Comment) -> None:
    db.delete(comment)
    db.flush()
