import os
import tempfile

# 앱 import 전에 테스트용 설정 주입
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_DIR", os.path.join(tempfile.gettempdir(), "diary-backend-test-logs"))

import pytest
from datetime import date
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from database import Base, get_db
from crud.user import create_user
from models.diary import Diary, DiaryCategory, Color
from models.page import Page
from schemas.user import UserCreate
from utils.auth import create_access_token

# 테스트용 데이터베이스 설정
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

@pytest.fixture(scope="function")
def db_session():
    """테스트용 데이터베이스 세션"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)

@pytest.fixture(scope="function")
def client(db_session):
    """테스트용 FastAPI 클라이언트"""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

def make_user(db_session, email: str, nickname: str, password: str = "testpass123"):
    """사용자 생성 후 커밋"""
    user = create_user(db_session, UserCreate(email=email, password=password, nickname=nickname))
    db_session.commit()
    db_session.refresh(user)
    return user

@pytest.fixture
def test_user_data():
    """테스트용 사용자 데이터"""
    return {
        "email": "writer@example.com",
        "password": "testpass123",
        "nickname": "writer"
    }

@pytest.fixture
def test_user(db_session, test_user_data):
    return make_user(db_session, test_user_data["email"], test_user_data["nickname"], test_user_data["password"])

@pytest.fixture
def other_user(db_session):
    return make_user(db_session, "reader@example.com", "reader")

@pytest.fixture
def test_user_token(test_user):
    """테스트용 JWT 토큰"""
    return create_access_token(test_user.id)

@pytest.fixture
def authenticated_client(client, test_user_token):
    """인증된 테스트 클라이언트"""
    client.headers.update({"Authorization": f"Bearer {test_user_token}"})
    return client

def auth_header(user) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}

@pytest.fixture
def sample_diary(db_session, test_user, other_user):
    """작성자/독자가 함께 쓰는 다이어리"""
    diary = Diary(
        name="우리 다이어리",
        img_url="https://example.com/diary.png",
        diary_category=DiaryCategory.FRIEND,
        description="함께 쓰는 일기",
        color=Color.BLUE,
    )
    diary.users = [test_user, other_user]
    db_session.add(diary)
    db_session.commit()
    db_session.refresh(diary)
    return diary

@pytest.fixture
def sample_page(db_session, sample_diary, test_user):
    """test_user 가 작성한 페이지"""
    page = Page(
        title="첫 기록",
        content="오늘은 바다에 갔다",
        writer_id=test_user.id,
        diary_id=sample_diary.id,
        target_date=date(2024, 6, 3),
    )
    db_session.add(page)
    db_session.commit()
    db_session.refresh(page)
    return page
