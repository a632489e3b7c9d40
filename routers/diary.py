from fastapi import APIRouter, Depends, Query, Request, Response, status
from typing import Optional

from config.settings import settings
from dependencies import get_diary_service
from models.diary import DiaryCategory
from schemas.diary import DiaryCreate, DiaryUpdate, DiaryResponse, DiaryPage
from services.diary_service import DiaryService
from utils.auth import get_current_user

router = APIRouter(prefix="/diaries", tags=["diaries"], dependencies=[Depends(get_current_user)])

@router.post("", response_model=DiaryResponse, status_code=status.HTTP_201_CREATED)
def create_diary(
    diary: DiaryCreate,
    request: Request,
    service: DiaryService = Depends(get_diary_service),
):
    """다이어리 생성"""
    return service.create_diary(diary, request.state.user_id)

@router.get("", response_model=DiaryPage)
def get_my_diaries(
    request: Request,
    page: int = Query(0, ge=0, description="페이지 번호 (0부터)"),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    category: Optional[DiaryCategory] = Query(None, description="다이어리 카테고리"),
    service: DiaryService = Depends(get_diary_service),
):
    """내 다이어리 목록 조회"""
    return service.get_diaries(request.state.user_id, page=page, size=size, category=category)

@router.get("/{diary_id}", response_model=DiaryResponse)
def get_diary(diary_id: int, request: Request, service: DiaryService = Depends(get_diary_service)):
    """다이어리 조회"""
    return service.get_diary(diary_id, request.state.user_id)

@router.put("/{diary_id}", response_model=DiaryResponse)
def update_diary(
    diary_id: int,
    diary: DiaryUpdate,
    request: Request,
    service: DiaryService = Depends(get_diary_service),
):
    """다이어리 수정"""
    return service.update_diary(diary_id, diary, request.state.user_id)

@router.delete("/{diary_id}/members/me", status_code=status.HTTP_204_NO_CONTENT)
def leave_diary(diary_id: int, request: Request, service: DiaryService = Depends(get_diary_service)):
    """다이어리 나가기"""
    service.leave_diary(diary_id, request.state.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
