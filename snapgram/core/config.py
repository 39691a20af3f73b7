import os
from typing import List

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()

class Settings(BaseSettings):
    """Application settings."""

    # Application
    PROJECT_NAME: str = "Snapgram Comments API"
    PROJECT_DESCRIPTION: str = "Comment service for Snapgram posts, backed by Supabase"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # Supabase
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")  # anon or service_role key

    # Remote collections
    COMMENTS_COLLECTION: str = os.getenv("COMMENTS_COLLECTION", "comments")
    USERS_COLLECTION: str = os.getenv("USERS_COLLECTION", "users")

    # Comments
    FALLBACK_USER_NAME: str = os.getenv("FALLBACK_USER_NAME", "Unknown User")
    REMOTE_CALL_TIMEOUT_SECONDS: float = float(os.getenv("REMOTE_CALL_TIMEOUT_SECONDS", "10"))
    NAME_LOOKUP_CONCURRENCY: int = int(os.getenv("NAME_LOOKUP_CONCURRENCY", "10"))  # in-flight user lookups per list

    # Logging
    LOG_COLORS: bool = os.getenv("LOG_COLORS", "true").lower() == "true"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost", "http://localhost:3000", "http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

settings = Settings()
