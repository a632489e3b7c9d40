import logging
from datetime import datetime, timezone
from sqlalchemy.orm import Session

from crud import user as user_crud
from database import transaction
from exceptions import NotFoundError, ValidationError
from models.user import User
from schemas.user import UserCreate, UserLogin, LoginResponse
from utils.auth import create_access_token, create_refresh_token
from utils.security import verify_password

logger = logging.getLogger(__name__)

LOGIN_FAILED = "이메일 또는 비밀번호가 올바르지 않습니다."

class UserService:
    """회원가입 / 로그인 / 탈퇴"""

    def __init__(self, db: Session):
        self.db = db

    def sign_up(self, user: UserCreate) -> User:
        with transaction(self.db):
            if user_crud.exists_by_email(self.db, user.email):
                raise ValidationError("이미 존재하는 이메일입니다.")
            if user_crud.exists_by_nickname(self.db, user.nickname):
                raise ValidationError("이미 존재하는 닉네임입니다.")
            db_user = user_crud.create_user(self.db, user)
            logger.info(f"새 사용자 가입: {db_user.id} ({user.email})")
            return db_user

    def login(self, user: UserLogin) -> LoginResponse:
        with transaction(self.db):
            db_user = user_crud.get_user_by_email(self.db, user.email)
            if not db_user:
                logger.warning(f"로그인 실패: 존재하지 않는 이메일 - {user.email}")
                raise ValidationError(LOGIN_FAILED)
            if not verify_password(user.password, str(db_user.hashed_password)):
                logger.warning(f"로그인 실패: 잘못된 비밀번호 - {user.email}")
                raise ValidationError(LOGIN_FAILED)

            logger.info(f"사용자 로그인 성공: {db_user.id}")
            return LoginResponse(
                user_id=db_user.id,
                nickname=db_user.nickname,
                access_token=create_access_token(db_user.id),
                refresh_token=create_refresh_token(),
            )

    def get_user(self, user_id: int) -> User:
        with transaction(self.db):
            db_user = user_crud.get_user_by_id(self.db, user_id)
            if not db_user:
                raise NotFoundError("사용자를 찾을 수 없습니다.")
            return db_user

    def withdraw(self, user_id: int) -> None:
        """회원 탈퇴 (soft delete)"""
        with transaction(self.db):
            db_user = user_crud.get_user_by_id(self.db, user_id)
            if not db_user:
                raise NotFoundError("사용자를 찾을 수 없습니다.")
            db_user.is_deleted = True
            db_user.deleted_at = datetime.now(timezone.utc)
            logger.info(f"사용자 계정 삭제: {user_id}")
