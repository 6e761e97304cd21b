from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Movie Ticketing System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    AUTO_CREATE_TABLES: bool = True

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7
    ALGORITHM: str = 'HS256'
    AUTH_COOKIE_NAME: str = 'movieticketauth'
    AUTH_COOKIE_SECURE: bool = False  # Set to True in production

    # CORS
    # Comma-separated string in env files
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'movie_ticket_db'
    DATABASE_URL: str = ''  # Explicit override, e.g. sqlite+aiosqlite:///:memory: for tests

    # Connection pool (ignored for SQLite)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:'
            f'{self.POSTGRES_PASSWORD.get_secret_value()}@'
            f'{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Purchase
    CONFIRMATION_CODE_MAX_ATTEMPTS: int = 3

    # Notification
    EMAIL_BACKEND: str = 'log'  # 'log' or 'smtp'
    MAIL_FROM: str = 'no-reply@movieticket.local'
    SMTP_HOST: str = 'localhost'
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ''
    SMTP_PASSWORD: SecretStr = SecretStr('')
    SMTP_USE_TLS: bool = True
    NOTIFICATION_MAX_ATTEMPTS: int = 3
    NOTIFICATION_BACKOFF_SECONDS: float = 0.5
    NOTIFICATION_TIMEOUT_SECONDS: float = 10.0

    # S3 image storage
    AWS_S3_BUCKET: str = 'movie-ticket-images'
    AWS_REGION: str = 'us-east-1'
    AWS_ACCESS_KEY_ID: str = ''
    AWS_SECRET_ACCESS_KEY: SecretStr = SecretStr('')
    IMAGE_MAX_SIZE_BYTES: int = 5 * 1024 * 1024  # 5MB
    IMAGE_ALLOWED_CONTENT_TYPES: Annotated[List[str], NoDecode] = [
        'image/jpeg',
        'image/jpg',
        'image/png',
        'image/gif',
        'image/webp',
    ]

    @field_validator('IMAGE_ALLOWED_CONTENT_TYPES', mode='before')
    @classmethod
    def assemble_allowed_content_types(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
