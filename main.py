from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import os
from datetime import datetime
from config.settings import settings
from routers import user as user_router
from routers import diary as diary_router
from routers import page as page_router
from routers import comment as comment_router
from routers import notice as notice_router
from database import init_db
from exceptions import AppError

# 로그 디렉토리 생성
def setup_logging():
    """로깅 설정 초기화"""
    # logs 디렉토리 생성
    log_dir = settings.log_dir
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    # 로그 파일명 (날짜별)
    today = datetime.now().strftime("%Y-%m-%d")
    log_file = f"{log_dir}/app_{today}.log"

    # 로깅 설정
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            # 파일 핸들러 (로그 파일에 저장)
            logging.FileHandler(log_file, encoding='utf-8'),
            # 콘솔 핸들러 (터미널에도 출력)
            logging.StreamHandler()
        ]
    )

    # 로거 생성
    logger = logging.getLogger(__name__)
    logger.info("로깅 시스템 초기화 완료")
    logger.info(f"로그 파일 위치: {os.path.abspath(log_file)}")

    return logger

def register_exception_handlers(app: FastAPI) -> None:
    """서비스 예외를 HTTP 응답으로 변환"""
    logger = logging.getLogger(__name__)

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} 처리 실패: {exc.message}")
        else:
            logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 로깅 설정
    logger = setup_logging()

    # 서버 시작 시 실행
    try:
        logger.info("서버 시작 중...")

        # 데이터베이스 테이블 생성
        init_db()
        logger.info("✅ 데이터베이스 테이블 생성 완료")

    except Exception as e:
        logger.error(f"❌ 서버 초기화 중 오류 발생: {e}")
        raise

    logger.info("서버 시작 완료")
    yield

    # 서버 종료 시 실행
    logger.info("서버 종료 중...")

app = FastAPI(title="Diary API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(user_router.router)
app.include_router(diary_router.router)
app.include_router(page_router.router)
app.include_router(comment_router.router)
app.include_router(notice_router.router)
