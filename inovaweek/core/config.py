from typing import Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "InovaWeek Screens"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    LOG_DIR: str = "logs"
    SUPABASE_URL: str
    SUPABASE_KEY: str
    PASSWORD_RESET_REDIRECT_URL: Optional[str] = None
    LOGIN_PATH: str = "/login"
    GROUPS_TABLE: str = "Grupo"

    class Config:
        case_sensitive = True


settings = Settings()
