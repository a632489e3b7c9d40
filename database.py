import logging
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from config.settings import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    # SQLite 는 스레드 체크만 끄고, 그 외 DB 는 커넥션 풀 설정 적용
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_engine(settings.database_url, **_engine_options(settings.database_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """서비스 메서드 하나 = 트랜잭션 하나 (정상 종료 시 커밋, 예외 시 롤백)"""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        logger.debug("트랜잭션 롤백")
        raise


def init_db() -> None:
    # 모델을 import 해야 Base.metadata 에 테이블이 등록된다
    import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
