import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import HTTPException, Request, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from config.settings import settings

logger = logging.getLogger(__name__)

# JWT 설정 (서명 키는 설정된 salt 로부터 생성)
SECRET_KEY = settings.jwt_salt
ALGORITHM = settings.jwt_algorithm
ACCESS_TOKEN_EXPIRE_MINUTES = settings.access_token_expire_minutes
REFRESH_TOKEN_EXPIRE_DAYS = settings.refresh_token_expire_days
USER_ID_CLAIM = "userId"

security = HTTPBearer(auto_error=False)  # auto_error=False로 설정하여 401 반환

def _encode(claims: dict, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    to_encode = claims.copy()
    to_encode.update({"iat": now, "exp": now + expires_delta})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)

def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """userId 클레임을 담은 access 토큰 발급 (기본 30분)"""
    token = _encode(
        {USER_ID_CLAIM: user_id},
        expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    logger.info("access 토큰 생성 완료")
    return token

def create_refresh_token(expires_delta: Optional[timedelta] = None) -> str:
    """사용자 정보 없는 refresh 토큰 발급 (기본 7일)"""
    token = _encode({}, expires_delta or timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS))
    logger.info("refresh 토큰 생성 완료")
    return token

def get_user_pk(token: str) -> int:
    """토큰에서 사용자 id 추출. 서명/형식/만료 오류는 JWTError 로 전파된다."""
    payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    user_id = payload.get(USER_ID_CLAIM)
    if user_id is None:
        raise JWTError("userId 클레임이 없는 토큰입니다.")
    return int(user_id)

def validate_token(token: str) -> bool:
    """서명이 올바르고 만료 전이면 True. 예외는 던지지 않는다."""
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        logger.info(f"토큰 유효성 검사 실패: {e}")
        return False
    exp = payload.get("exp")
    if exp is None:
        return False
    return datetime.fromtimestamp(exp, tz=timezone.utc) > datetime.now(timezone.utc)

def _credentials_exception(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )

async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> int:
    """Bearer 토큰을 검증하고 사용자 id 를 request.state 에 저장"""
    if credentials is None:
        raise _credentials_exception("Not authenticated")

    token = credentials.credentials
    if not validate_token(token):
        raise _credentials_exception("Could not validate credentials")
    try:
        user_id = get_user_pk(token)
    except (JWTError, ValueError):
        raise _credentials_exception("Could not validate credentials")

    request.state.user_id = user_id
    return user_id
