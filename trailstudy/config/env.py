from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API settings
    api_title: str = Field(
        default="TrailStudy API",
        description="API title for documentation"
    )
    api_description: str = Field(
        default="API for studying topics of flashcards, alone or shared",
        description="API description for documentation"
    )
    api_version: str = Field(
        default="1.0.0",
        description="API version"
    )

    # Store settings
    admin_user_id: str = Field(
        default="2023305700",
        description="ID of the administrator account created at startup"
    )
    seed_demo_data: bool = Field(
        default=True,
        description="Create the admin account and the sample topic at startup"
    )

    # Session settings
    session_database_url: str = Field(
        default="sqlite:///./trailstudy_session.db",
        description="Database holding the persisted login session"
    )
    session_key: str = Field(
        default="trailstudy_user",
        description="Key of the persisted session record"
    )

    # Quiz settings
    quiz_seed: Optional[int] = Field(
        default=None,
        description="Seed for quiz shuffling; random when unset"
    )

    # Logging settings
    log_dir: str = Field(
        default="logs",
        description="Directory for rotating log files"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",  # Allow extra fields in environment without validation errors
    )

settings = Settings()
