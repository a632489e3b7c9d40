import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from crud import page as page_crud
from crud.notice import delete_notices_by_pages
from crud.diary import get_diary_by_id, is_member, find_member_ids
from database import transaction
from exceptions import NotFoundError, UnauthorizedError
from models.notice import NoticeType
from models.page import Page
from schemas.page import PageCreate, PageUpdate
from services.notice_service import NoticeService, PageNotice

logger = logging.getLogger(__name__)

class PageService:
    """페이지(다이어리 기록) 서비스"""

    def __init__(self, db: Session, notice_service: Optional[NoticeService] = None):
        self.db = db
        self.notice_service = notice_service or NoticeService(db)

    def _check_member(self, diary_id: int, user_id: int) -> None:
        if not get_diary_by_id(self.db, diary_id):
            raise NotFoundError("다이어리를 찾을 수 없습니다.")
        if not is_member(self.db, diary_id, user_id):
            raise UnauthorizedError("다이어리 멤버가 아닙니다.")

    def _get_page(self, page_id: int) -> Page:
        page = page_crud.get_page_by_id(self.db, page_id)
        if not page:
            raise NotFoundError("페이지를 찾을 수 없습니다.")
        return page

    def _get_own_page(self, page_id: int, user_id: int) -> Page:
        page = self._get_page(page_id)
        if page.writer_id != user_id:
            raise UnauthorizedError("본인이 작성한 페이지만 수정/삭제할 수 있습니다.")
        return page

    def create_page(self, diary_id: int, request: PageCreate, user_id: int) -> Page:
        """페이지 작성 (다른 멤버들에게 기록 알림)"""
        with transaction(self.db):
            self._check_member(diary_id, user_id)
            page = page_crud.create_page(
                self.db,
                Page(
                    title=request.title,
                    content=request.content,
                    writer_id=user_id,
                    diary_id=diary_id,
                    address_id=request.address_id,
                    target_date=request.target_date,
                    is_locked=request.is_locked,
                ),
            )
            for member_id in find_member_ids(self.db, diary_id):
                if member_id != user_id:
                    self.notice_service.notify(
                        PageNotice(NoticeType.ACTIVITY, paper_id=page.id, receiver_id=member_id)
                    )
            logger.info(f"페이지 작성: diary={diary_id} page={page.id} user={user_id}")
            return page

    def get_page(self, page_id: int, user_id: int) -> Page:
        with transaction(self.db):
            page = self._get_page(page_id)
            self._check_member(page.diary_id, user_id)
            return page

    def get_pages(self, diary_id: int, user_id: int, page: int = 0, size: int = 20) -> List[Page]:
        with transaction(self.db):
            self._check_member(diary_id, user_id)
            return page_crud.get_pages_by_diary(self.db, diary_id, skip=page * size, limit=size)

    def update_page(self, page_id: int, request: PageUpdate, user_id: int) -> Page:
        with transaction(self.db):
            page = self._get_own_page(page_id, user_id)
            update_data = request.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in update_data.items():
                setattr(page, field, value)
            self.db.flush()
            logger.info(f"페이지 수정: page={page_id}")
            return page

    def delete_page(self, page_id: int, user_id: int) -> None:
        """페이지 삭제 (soft delete)"""
        with transaction(self.db):
            page = self._get_own_page(page_id, user_id)
            page.is_deleted = True
            cleared = delete_notices_by_pages(self.db, [page.id])
            logger.info(f"페이지 삭제: page={page_id} notices={cleared}")
