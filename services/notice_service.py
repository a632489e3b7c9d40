"""
알림 서비스
알림 전송(메시지 타입별 검증/메시지 생성), 조회(화면용 분류), 삭제
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config.notice_config import get_notice_categories, get_notice_messages
from crud import notice as notice_crud
from crud.page import get_page_by_id
from crud.user import get_user_by_id
from database import transaction
from exceptions import InternalServerError, NotFoundError, UnauthorizedError, ValidationError
from models.notice import Notice, NoticeType
from schemas.notice import NoticeRequest, NoticeResponse

logger = logging.getLogger(__name__)

INVALID_MESSAGE_TYPE = "잘못된 메시지 타입입니다."


@dataclass(frozen=True)
class FriendNotice:
    """친구 요청(1) / 친구 수락(3) 알림: 보낸 사용자가 출처"""
    notice_type: NoticeType
    sender_id: int
    receiver_id: int

    @property
    def request_id(self) -> int:
        return self.sender_id


@dataclass(frozen=True)
class PageNotice:
    """코멘트(2) / 기록(4) 알림: 페이지가 출처"""
    notice_type: NoticeType
    paper_id: int
    receiver_id: int

    @property
    def request_id(self) -> int:
        return self.paper_id


NoticeMessage = Union[FriendNotice, PageNotice]


def as_utc(value: datetime) -> datetime:
    """UTC 시각으로 변환 (timezone 없는 값은 UTC 로 간주)"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_notice_type(value: int) -> NoticeType:
    try:
        return NoticeType(value)
    except ValueError:
        raise ValidationError(INVALID_MESSAGE_TYPE)


def parse_notice_request(request: NoticeRequest) -> NoticeMessage:
    """전송 요청을 메시지 타입별 알림으로 변환 (타입별 필수값 검사)"""
    notice_type = to_notice_type(request.message_type)

    if notice_type.is_friend:
        if request.sender_id is None:
            raise ValidationError("친구 알림에는 senderId 가 필요합니다.")
        return FriendNotice(notice_type, request.sender_id, request.response_id)

    if request.paper_id is None:
        raise ValidationError("코멘트/기록 알림에는 paperId 가 필요합니다.")
    return PageNotice(notice_type, request.paper_id, request.response_id)


class NoticeService:
    """알림 서비스"""

    def __init__(self, db: Session):
        self.db = db
        self.messages = get_notice_messages()
        self.categories = get_notice_categories()

    # ── 전송 ──────────────────────────────────────────────

    def send_notice(self, request: NoticeRequest, caller_id: Optional[int] = None) -> Notice:
        """알림 전송 (메시지 타입별 검증 후 저장)

        caller_id 가 주어지면 친구 알림은 본인 명의로만 보낼 수 있다.
        """
        with transaction(self.db):
            message = parse_notice_request(request)
            if caller_id is not None and isinstance(message, FriendNotice) and message.sender_id != caller_id:
                logger.warning(f"다른 사용자 명의의 친구 알림 전송 시도: user={caller_id} sender={message.sender_id}")
                raise UnauthorizedError("다른 사용자 명의로 알림을 보낼 수 없습니다.")
            return self._save(message)

    def notify(self, message: NoticeMessage) -> Notice:
        """다른 서비스의 트랜잭션 안에서 알림 저장 (댓글/기록 작성 시)"""
        return self._save(message)

    def _save(self, message: NoticeMessage) -> Notice:
        notice = Notice(
            request_id=message.request_id,
            response_id=message.receiver_id,
            message=self._build_message(message),
            message_type=int(message.notice_type),
        )
        notice_crud.create_notice(self.db, notice)
        logger.info(
            f"알림 저장: type={int(message.notice_type)} "
            f"request_id={notice.request_id} response_id={notice.response_id}"
        )
        return notice

    def _build_message(self, message: NoticeMessage) -> str:
        template = self.messages[message.notice_type]
        if message.notice_type == NoticeType.FRIEND_ACCEPT:
            sender = get_user_by_id(self.db, message.sender_id)
            if not sender:
                raise NotFoundError("알림을 보낸 사용자를 찾을 수 없습니다.")
            return template.format(nickname=sender.nickname)
        return template

    # ── 조회 ──────────────────────────────────────────────

    def get_notices(
        self,
        user_id: int,
        request_time: Optional[datetime] = None,
        page: int = 0,
        size: int = 20,
    ) -> List[NoticeResponse]:
        """받은 알림 목록 (request_time 이전 생성분, 최신순)"""
        with transaction(self.db):
            request_time = as_utc(request_time) if request_time else datetime.now(timezone.utc)
            notices = notice_crud.get_notices_by_receiver(
                self.db, user_id, request_time, skip=page * size, limit=size
            )
            return [self.render(notice) for notice in notices]

    def render(self, notice: Notice) -> NoticeResponse:
        """저장된 알림을 화면 표시용 응답으로 변환"""
        notice_type = to_notice_type(notice.message_type)
        category = self.categories[notice_type]

        if notice_type.is_friend:
            return NoticeResponse(
                id=notice.id, type=category, message=notice.message, time=as_utc(notice.created_at)
            )

        if notice_type == NoticeType.COMMENT:
            page = get_page_by_id(self.db, notice.request_id)
            if not page:
                raise NotFoundError("알림과 연결된 페이지를 찾을 수 없습니다.")
            return NoticeResponse(
                id=notice.id,
                type=category,
                message=notice.message,
                time=as_utc(page.created_at),
                paper_id=page.id,
            )

        return NoticeResponse(
            id=notice.id,
            type=category,
            message=notice.message,
            time=as_utc(notice.created_at),
            paper_id=notice.request_id,
        )

    # ── 삭제 ──────────────────────────────────────────────

    def delete_notice(self, user_id: int, notice_id: int) -> None:
        """알림 단건 삭제 (받은 사람만 가능)"""
        with transaction(self.db):
            notice = notice_crud.get_notice_by_id(self.db, notice_id)
            if not notice:
                raise NotFoundError("알림을 찾을 수 없습니다.")
            if notice.response_id != user_id:
                logger.warning(f"다른 사용자의 알림 삭제 시도: user={user_id} notice={notice_id}")
                raise UnauthorizedError("다른 사용자의 알림을 삭제할 수 없습니다.")
            notice_crud.delete_notice(self.db, notice)
            logger.info(f"알림 삭제: notice={notice_id}")

    def delete_notice_by_sender(self, request_id: int, response_id: int, message_type: int) -> None:
        """조건에 맞는 알림이 있으면 삭제 (없으면 아무것도 하지 않음)"""
        with transaction(self.db):
            notice = notice_crud.find_by_request_and_response_and_type(
                self.db, request_id, response_id, message_type
            )
            if notice:
                notice_crud.delete_notice(self.db, notice)
                logger.info(f"알림 삭제: notice={notice.id}")

    def delete_all_notices(self, user_id: Optional[int]) -> int:
        """사용자가 받은 모든 알림 삭제"""
        if user_id is None:
            raise ValidationError("사용자 ID가 필요합니다.")

        with transaction(self.db):
            if not get_user_by_id(self.db, user_id):
                raise NotFoundError("사용자를 찾을 수 없습니다.")
            if notice_crud.count_notices_by_receiver(self.db, user_id) == 0:
                raise NotFoundError("삭제할 알림이 없습니다.")
            try:
                deleted = notice_crud.delete_notices_by_receiver(self.db, user_id)
            except SQLAlchemyError as e:
                logger.error(f"알림 전체 삭제 실패: user={user_id} error={str(e)}")
                raise InternalServerError("알림 삭제 중 오류가 발생했습니다.")
            logger.info(f"알림 전체 삭제: user={user_id} count={deleted}")
            return deleted

    def delete_selected_notices(self, user_id: int, notice_ids: List[int]) -> int:
        """선택한 알림 일괄 삭제 (하나라도 남의 알림이면 전체 거부)"""
        if not notice_ids:
            raise ValidationError("삭제할 알림을 선택해주세요.")

        with transaction(self.db):
            notices = notice_crud.get_notices_by_ids(self.db, notice_ids)
            if not notices:
                raise NotFoundError("선택한 알림을 찾을 수 없습니다.")
            if any(notice.response_id != user_id for notice in notices):
                logger.warning(f"다른 사용자의 알림이 포함된 일괄 삭제 시도: user={user_id}")
                raise UnauthorizedError("다른 사용자의 알림은 삭제할 수 없습니다.")
            notice_crud.delete_notices(self.db, notices)
            logger.info(f"선택 알림 삭제: user={user_id} count={len(notices)}")
            return len(notices)
