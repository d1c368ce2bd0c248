"""
运行环境配置
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEVELOPMENT = "Development"
PRODUCTION = "Production"

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./data/bookstore.db"


class Settings(BaseSettings):
    """应用配置，读取 BOOKSTORE_ 前缀的环境变量和 .env 文件"""

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: str = Field(default=PRODUCTION)
    log_level: str = Field(default="INFO")
    database_url: str = Field(default=DEFAULT_DATABASE_URL)
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == DEVELOPMENT.lower()


def load_settings() -> Settings:
    """读取当前配置"""
    return Settings()
