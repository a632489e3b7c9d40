import logging
from typing import Optional
from sqlalchemy.orm import Session

from crud import diary as diary_crud
from crud.notice import delete_notices_by_pages
from crud.user import get_user_by_id, get_user_by_nickname
from database import transaction
from exceptions import NotFoundError, UnauthorizedError
from models.diary import Diary, DiaryCategory
from schemas.diary import DiaryCreate, DiaryUpdate, DiaryResponse, DiaryListItem, DiaryPage

logger = logging.getLogger(__name__)

class DiaryService:
    """다이어리 서비스"""

    def __init__(self, db: Session):
        self.db = db

    def _get_member_diary(self, diary_id: int, user_id: int) -> Diary:
        diary = diary_crud.get_diary_by_id(self.db, diary_id)
        if not diary:
            raise NotFoundError("다이어리를 찾을 수 없습니다.")
        if not diary_crud.is_member(self.db, diary_id, user_id):
            raise UnauthorizedError("다이어리 멤버가 아닙니다.")
        return diary

    def _to_response(self, diary: Diary) -> DiaryResponse:
        nicknames = diary_crud.find_user_by_diary(self.db, diary.id)
        return DiaryResponse(
            id=diary.id,
            name=diary.name,
            img_url=diary.img_url,
            diary_category=diary.diary_category,
            description=diary.description,
            color=diary.color,
            users=nicknames,
            user_count=diary_crud.count_user_by_diary(self.db, diary.id),
            created_at=diary.created_at,
        )

    def create_diary(self, request: DiaryCreate, user_id: int) -> DiaryResponse:
        """다이어리 생성 (생성자 + 초대한 닉네임들이 멤버)"""
        with transaction(self.db):
            creator = get_user_by_id(self.db, user_id)
            if not creator:
                raise NotFoundError("사용자를 찾을 수 없습니다.")

            members = [creator]
            for nickname in request.users:
                member = get_user_by_nickname(self.db, nickname)
                if not member:
                    raise NotFoundError(f"'{nickname}' 사용자를 찾을 수 없습니다.")
                if member.id not in {m.id for m in members}:
                    members.append(member)

            diary = Diary(
                name=request.name,
                img_url=request.img_url,
                diary_category=request.diary_category,
                description=request.description,
                color=request.color,
            )
            diary_crud.create_diary(self.db, diary, members)
            logger.info(f"다이어리 생성: diary={diary.id} members={len(members)}")
            return self._to_response(diary)

    def get_diary(self, diary_id: int, user_id: int) -> DiaryResponse:
        with transaction(self.db):
            return self._to_response(self._get_member_diary(diary_id, user_id))

    def get_diaries(
        self,
        user_id: int,
        page: int = 0,
        size: int = 20,
        category: Optional[DiaryCategory] = None,
    ) -> DiaryPage:
        """내 다이어리 목록 (카테고리 필터, 페이지네이션)"""
        with transaction(self.db):
            rows, total = diary_crud.search_diary(
                self.db, user_id, skip=page * size, limit=size, category=category
            )
            items = [
                DiaryListItem(
                    id=diary.id,
                    name=diary.name,
                    img_url=diary.img_url,
                    diary_category=diary.diary_category,
                    color=diary.color,
                    user_count=user_count,
                )
                for diary, user_count in rows
            ]
            return DiaryPage(items=items, total=total, page=page, size=size)

    def update_diary(self, diary_id: int, request: DiaryUpdate, user_id: int) -> DiaryResponse:
        with transaction(self.db):
            diary = self._get_member_diary(diary_id, user_id)
            update_data = request.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in update_data.items():
                setattr(diary, field, value)
            self.db.flush()
            logger.info(f"다이어리 수정: diary={diary_id}")
            return self._to_response(diary)

    def leave_diary(self, diary_id: int, user_id: int) -> None:
        """다이어리 나가기 (마지막 멤버가 나가면 다이어리 삭제)"""
        with transaction(self.db):
            diary = self._get_member_diary(diary_id, user_id)
            diary_crud.remove_member(self.db, diary, user_id)
            if diary_crud.count_user_by_diary(self.db, diary_id) == 0:
                delete_notices_by_pages(self.db, [page.id for page in diary.pages])
                diary_crud.delete_diary(self.db, diary)
                logger.info(f"다이어리 삭제: diary={diary_id}")
            else:
                logger.info(f"다이어리 나가기: diary={diary_id} user={user_id}")
