"""
Application configuration.
All deployment-specific values loaded from environment variables.
"""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""
    
    # Database
    DATABASE_URL: str = "postgresql+asyncpg://postgres:postgres@db:5432/fittrack"
    DATABASE_ECHO: bool = False
    
    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console
    
    # Analytics
    # Summaries are computed over the most recent N records of each kind,
    # not over the full history.
    ANALYTICS_FETCH_LIMIT: int = 200
    
    # Record listing defaults
    RECORDS_DEFAULT_LIMIT: int = 10
    
    # Weekly reports
    REPORTS_DEFAULT_LIMIT: int = 4
    WEEKLY_REPORT_DAYS: int = 7
    
    # Saved plans
    PLANS_DEFAULT_LIMIT: int = 1
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
