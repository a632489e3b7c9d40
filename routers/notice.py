"""
알림 API 라우터
알림 조회, 전송, 삭제(단건/전체/선택/조건) 엔드포인트 제공
"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import List, Optional
from datetime import datetime

from config.settings import settings
from dependencies import get_notice_service
from schemas.notice import NoticeRequest, NoticeResponse, NoticeSelectedDelete, NoticeSendResponse
from services.notice_service import NoticeService
from utils.auth import get_current_user

router = APIRouter(prefix="/notices", tags=["notices"], dependencies=[Depends(get_current_user)])

@router.get("", response_model=List[NoticeResponse])
def get_notices(
    request: Request,
    request_time: Optional[datetime] = Query(None, alias="requestTime", description="이 시각 이전 알림만 조회"),
    page: int = Query(0, ge=0, description="페이지 번호 (0부터)"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    service: NoticeService = Depends(get_notice_service),
):
    """받은 알림 목록 조회"""
    return service.get_notices(request.state.user_id, request_time, page=page, size=size)

@router.post("", response_model=NoticeSendResponse, status_code=status.HTTP_201_CREATED)
def send_notice(
    notice: NoticeRequest,
    request: Request,
    service: NoticeService = Depends(get_notice_service),
):
    """알림 전송 (친구 알림은 로그인한 사용자 명의로만)"""
    return service.send_notice(notice, caller_id=request.state.user_id)

# 경로 매칭 순서 때문에 /{notice_id} 보다 먼저 선언
@router.delete("/selected", status_code=status.HTTP_204_NO_CONTENT)
def delete_selected_notices(
    body: NoticeSelectedDelete,
    request: Request,
    service: NoticeService = Depends(get_notice_service),
):
    """선택한 알림 삭제"""
    service.delete_selected_notices(request.state.user_id, body.notice_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/sender", status_code=status.HTTP_204_NO_CONTENT)
def delete_notice_by_sender(
    request: Request,
    request_id: int = Query(..., alias="requestId"),
    message_type: int = Query(..., alias="messageType"),
    service: NoticeService = Depends(get_notice_service),
):
    """보낸 쪽/메시지 타입으로 알림 삭제 (없으면 무시)"""
    service.delete_notice_by_sender(request_id, request.state.user_id, message_type)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{notice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_notice(notice_id: int, request: Request, service: NoticeService = Depends(get_notice_service)):
    """알림 삭제"""
    service.delete_notice(request.state.user_id, notice_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_all_notices(request: Request, service: NoticeService = Depends(get_notice_service)):
    """받은 알림 전체 삭제"""
    service.delete_all_notices(request.state.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
