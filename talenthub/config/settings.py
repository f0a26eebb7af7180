"""
Application configuration settings.
"""
import os

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings"""

    # Auth Service
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:5000/api")
    AUTH_REQUEST_TIMEOUT: float = float(os.getenv("AUTH_REQUEST_TIMEOUT", "15"))

    # Routing
    AUTH_PATH = "/auth"
    DEFAULT_REDIRECT_PATH = "/profile"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOGS_DIR: str = os.getenv("LOGS_DIR", "logs")

    # UI
    PAGE_TITLE = "TalentHub - Sign In"
    PAGE_ICON = "💼"
    LAYOUT = "centered"


settings = Settings()
