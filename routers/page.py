from fastapi import APIRouter, Depends, Query, Response, status
from typing import List

from config.settings import settings
from dependencies import get_page_service
from schemas.page import PageCreate, PageUpdate, PageResponse
from services.page_service import PageService
from utils.auth import get_current_user

router = APIRouter(tags=["pages"])

@router.post("/diaries/{diary_id}/pages", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
def create_page(
    diary_id: int,
    page: PageCreate,
    current_user: int = Depends(get_current_user),
    service: PageService = Depends(get_page_service),
):
    """페이지 작성"""
    return service.create_page(diary_id, page, current_user)

@router.get("/diaries/{diary_id}/pages", response_model=List[PageResponse])
def get_pages(
    diary_id: int,
    page: int = Query(0, ge=0),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user: int = Depends(get_current_user),
    service: PageService = Depends(get_page_service),
):
    """다이어리의 페이지 목록"""
    return service.get_pages(diary_id, current_user, page=page, size=size)

@router.get("/pages/{page_id}", response_model=PageResponse)
def get_page(
    page_id: int,
    current_user: int = Depends(get_current_user),
    service: PageService = Depends(get_page_service),
):
    """페이지 조회"""
    return service.get_page(page_id, current_user)

@router.put("/pages/{page_id}", response_model=PageResponse)
def update_page(
    page_id: int,
    page: PageUpdate,
    current_user: int = Depends(get_current_user),
    service: PageService = Depends(get_page_service),
):
    """페이지 수정"""
    return service.update_page(page_id, page, current_user)

@router.delete("/pages/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page(
    page_id: int,
    current_user: int = Depends(get_current_user),
    service: PageService = Depends(get_page_service),
):
    """페이지 삭제"""
    service.delete_page(page_id, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
