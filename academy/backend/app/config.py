from functools import lru_cache
import os
from pydantic import BaseModel, Field


class Settings(BaseModel):
    env: str = Field(default="dev", alias="ENV")
    timezone: str = Field(default="Asia/Kolkata", alias="TIMEZONE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str = Field(default="", alias="DATABASE_URL")
    postgres_db: str = Field(default="academy", alias="POSTGRES_DB")
    postgres_user: str = Field(default="academy", alias="POSTGRES_USER")
    postgres_password: str = Field(default="academy", alias="POSTGRES_PASSWORD")
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")

    jwt_secret: str = Field(default="secret", alias="JWT_SECRET")
    jwt_expire_min: int = Field(default=480, alias="JWT_EXPIRE_MIN")

    default_admin_login: str = Field(default="owner", alias="DEFAULT_ADMIN_LOGIN")
    default_admin_password: str = Field(default="owner1234", alias="DEFAULT_ADMIN_PASSWORD")

    # Weekday labels the facility is closed on; parsed by calendar.parse_weekdays
    closed_weekdays: str = Field(default="thu,fri", alias="CLOSED_WEEKDAYS")

    class Config:
        populate_by_name = True

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(**os.environ)
