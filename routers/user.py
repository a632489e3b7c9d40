from fastapi import APIRouter, Depends, Response, status
import logging

from dependencies import get_user_service
from schemas.user import UserCreate, UserLogin, UserResponse, LoginResponse
from services.user_service import UserService
from utils.auth import get_current_user

# 로거 설정
logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])

@router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user_endpoint(user: UserCreate, service: UserService = Depends(get_user_service)):
    """사용자 회원가입"""
    return service.sign_up(user)

@router.post("/auth/login", response_model=LoginResponse)
def login_endpoint(user: UserLogin, service: UserService = Depends(get_user_service)):
    """사용자 로그인 (access / refresh 토큰 발급)"""
    return service.login(user)

@router.get("/users/me", response_model=UserResponse)
def get_current_user_info(
    current_user: int = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """현재 로그인한 사용자 정보 조회"""
    return service.get_user(current_user)

@router.delete("/users/me", status_code=status.HTTP_204_NO_CONTENT)
def delete_current_user(
    current_user: int = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """현재 로그인한 사용자 계정 삭제"""
    service.withdraw(current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
