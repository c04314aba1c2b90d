from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import model_validator
from typing import List, Optional
from functools import lru_cache
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

class Settings(BaseSettings):
    # Project settings
    PROJECT_NAME: str = "AskTacit API"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # CORS
    CORS_ORIGINS: List[str] = ["*"]

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Alltius
    ALLTIUS_CHAT_URL: str = "https://app.alltius.ai/api/platform/v1/chat"
    ALLTIUS_API_KEY: Optional[str] = None
    ALLTIUS_ASSISTANT_ID: Optional[str] = None
    ALLTIUS_DEFAULT_SESSION: str = "new-session"
    ALLTIUS_DEFAULT_USER: str = "test_user"

    # Airtable
    AIRTABLE_API_URL: str = "https://api.airtable.com/v0"
    AIRTABLE_API_KEY: Optional[str] = None
    AIRTABLE_BASE_ID: Optional[str] = None
    AIRTABLE_TABLE_NAME: Optional[str] = None

    # Assistant versions
    RFP_ASSISTANT_ID: str = "67212f6bf8bc9853980a8e6b"
    RFP_AIRTABLE_BASE_ID: str = "appO645FMzwrtH9G6"
    RFP_AIRTABLE_TABLE_NAME: str = "RFPData"
    CYBER_ASSISTANT_ID: str = "your-cybersecurity-assistant-id"
    CYBER_AIRTABLE_BASE_ID: str = "your-cyber-base-id"
    CYBER_AIRTABLE_TABLE_NAME: str = "CyberData"

    # Optional logging settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode='after')
    def check_fields(self) -> 'Settings':
        self.LOG_LEVEL = self.LOG_LEVEL.upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        if self.HTTP_TIMEOUT_SECONDS <= 0:
            raise ValueError("HTTP_TIMEOUT_SECONDS must be positive")
        return self

@lru_cache()
def get_settings() -> Settings:
    return Settings()

settings = get_settings()
