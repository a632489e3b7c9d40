import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from crud import comment as comment_crud
from crud.diary import is_member
from crud.page import get_page_by_id
from database import transaction
from exceptions import NotFoundError, UnauthorizedError
from models.comment import Comment
from models.notice import NoticeType
from models.page import Page
from schemas.comment import AddCommentRequest, UpdateCommentRequest, CommentListResponse
from services.notice_service import NoticeService, PageNotice

logger = logging.getLogger(__name__)

class CommentService:
    """댓글 서비스"""

    def __init__(self, db: Session, notice_service: Optional[NoticeService] = None):
        self.db = db
        self.notice_service = notice_service or NoticeService(db)

    def _check_member(self, page: Page, user_id: int) -> None:
        if not is_member(self.db, page.diary_id, user_id):
            logger.warning(f"다이어리 멤버가 아닌 사용자의 댓글 접근: user={user_id} page={page.id}")
            raise UnauthorizedError("다이어리 멤버만 댓글을 보거나 쓸 수 있습니다.")

    def _get_member_page(self, paper_id: int, user_id: int) -> Page:
        page = get_page_by_id(self.db, paper_id)
        if not page:
            raise NotFoundError("페이지를 찾을 수 없습니다.")
        self._check_member(page, user_id)
        return page

    def get_comment(self, paper_id: int, comment_id: int, user_id: int) -> Optional[Comment]:
        """페이지의 댓글 단건 조회 (없으면 None)"""
        with transaction(self.db):
            page = get_page_by_id(self.db, paper_id)
            if not page:
                return None
            self._check_member(page, user_id)
            return comment_crud.get_comment_by_page(self.db, paper_id, comment_id)

    def get_comments(self, paper_id: int, user_id: int) -> List[CommentListResponse]:
        """페이지의 댓글 목록 (조회자 기준 본인 댓글/삭제 가능 여부 표시)"""
        with transaction(self.db):
            page = self._get_member_page(paper_id, user_id)

            comments = comment_crud.get_comments_by_page(self.db, paper_id)
            return [
                CommentListResponse(
                    id=comment.id,
                    content=comment.content,
                    user_id=comment.user_id,
                    nickname=comment.author.nickname if comment.author else None,
                    created_at=comment.created_at,
                    is_mine=comment.user_id == user_id,
                    can_delete=comment.user_id == user_id or page.writer_id == user_id,
                )
                for comment in comments
            ]

    def add_comment(self, request: AddCommentRequest, paper_id: int, user_id: int) -> Comment:
        """댓글 작성 (페이지 작성자에게 코멘트 알림)"""
        with transaction(self.db):
            page = self._get_member_page(paper_id, user_id)

            comment = comment_crud.create_comment(
                self.db, Comment(content=request.content, page_id=paper_id, user_id=user_id)
            )
            if page.writer_id != user_id:
                self.notice_service.notify(
                    PageNotice(NoticeType.COMMENT, paper_id=page.id, receiver_id=page.writer_id)
                )
            logger.info(f"댓글 작성: page={paper_id} comment={comment.id} user={user_id}")
            return comment

    def update_comment(self, comment_id: int, request: UpdateCommentRequest, user_id: int) -> Comment:
        """댓글 수정 (작성자만 가능)"""
        with transaction(self.db):
            comment = comment_crud.get_comment_by_id(self.db, comment_id)
            if not comment:
                raise NotFoundError("해당 Id에 대한 댓글을 찾을 수 없습니다.")
            if comment.user_id != user_id:
                raise UnauthorizedError("본인이 작성한 댓글만 수정할 수 있습니다.")
            comment.content = request.content
            self.db.flush()
            logger.info(f"댓글 수정: comment={comment_id}")
            return comment

    def delete_comment(self, comment_id: int, user_id: int) -> None:
        """댓글 삭제 (댓글 작성자 또는 페이지 작성자)"""
        with transaction(self.db):
            comment = comment_crud.get_comment_by_id(self.db, comment_id)
            if not comment:
                raise NotFoundError("해당 Id에 대한 댓글을 찾을 수 없습니다.")
            if comment.user_id != user_id and comment.page.writer_id != user_id:
                raise UnauthorizedError("댓글을 삭제할 권한이 없습니다.")
            comment_crud.delete_comment(self.db, comment)
            logger.info(f"댓글 삭제: comment={comment_id}")
