# rolodex/settings.py
import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Rolodex Search")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # storage: "json" reads DATA_DIR/persons.json + notes.json,
    # "http" reads the notes app REST API at NOTES_API_URL
    STORAGE_BACKEND: str = Field(default="json")
    DATA_DIR: str = Field(default="data")
    NOTES_API_URL: str = Field(default="http://localhost:3000")
    STORAGE_TIMEOUT: float = Field(default=10.0)

    # search
    SEARCH_TUNING_PATH: str | None = None
    SEARCH_WORKERS: int = Field(default=2)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
