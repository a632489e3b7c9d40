from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경변수(.env) 기반 애플리케이션 설정"""

    # 데이터베이스
    database_url: str = "sqlite:///./app.db"
    db_pool_size: int = Field(default=20, ge=1, le=100)
    db_max_overflow: int = Field(default=30, ge=0, le=100)

    # JWT 서명 키는 salt 로부터 만든다
    jwt_salt: str = "ustory-local-development-salt-change-me"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30
    refresh_token_expire_days: int = 7

    # 로깅
    log_dir: str = "logs"
    log_level: str = "INFO"

    cors_origins: str = "*"

    # 페이지네이션
    default_page_size: int = Field(default=20, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"잘못된 로그 레벨입니다: {v}")
        return upper

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",")]


settings = Settings()
