from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROJECT_NAME = "Ecom User API"
DEFAULT_API_V1_PREFIX = "/api"
DEFAULT_DATABASE_URL = "sqlite:///./ecom.db"
USER_ID_POLICIES = ('ignore', 'accept', 'reject')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', extra='ignore')

    PROJECT_NAME: str = DEFAULT_PROJECT_NAME
    API_V1_PREFIX: str = DEFAULT_API_V1_PREFIX
    ENV: str = 'development'
    DEBUG: bool = False

    DATABASE_URL: str = DEFAULT_DATABASE_URL
    LOG_LEVEL: str = 'INFO'
    LOG_JSON: bool = False
    CORS_ORIGINS: list[str] = ['*']
    AUTO_CREATE_TABLES: bool = False

    # What to do with a client-supplied id on create: ignore, accept or reject.
    USER_ID_ON_CREATE: str = 'ignore'

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, value):  # type: ignore[override]
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return []
            if value == '*':
                return ['*']
            return [item.strip() for item in value.split(',') if item.strip()]
        return value

    @field_validator('USER_ID_ON_CREATE')
    @classmethod
    def check_user_id_policy(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in USER_ID_POLICIES:
            raise ValueError(f"USER_ID_ON_CREATE must be one of {', '.join(USER_ID_POLICIES)}")
        return value


settings = Settings()
