"""
Configuration settings for the portfolio and blog application.
"""

import os
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Portfolio & Blog"
    APP_VERSION = "0.2.0"

    # Data directories
    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    DATA_DIR = Path(os.getenv("DATA_DIR", BASE_DIR / "data"))
    DRAFTS_DIR = DATA_DIR / "drafts"

    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR}/portfolio.db")

    # Admin auth
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")
    SESSION_DURATION_SECONDS = 24 * 60 * 60
    SESSION_PURGE_THRESHOLD = 100

    # Image host
    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
    UPLOAD_FOLDER = "blog"
    UPLOAD_TIMEOUT_SECONDS = 60

    # API keys
    GROQ_API_KEY = os.getenv("GROQ_API_KEY")
    YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY")

    # Generation
    MODEL_PROVIDER = os.getenv("MODEL_PROVIDER", "groq")
    DEFAULT_GENERATION_MODEL = os.getenv("GENERATION_MODEL", "llama-3.3-70b-versatile")
    GENERATION_TEMPERATURE = 0.7
    GENERATION_MAX_TOKENS = 8192
    TRANSCRIPT_CHAR_LIMIT = 50000
    GENERATION_RETRIES = 3
    GENERATION_RETRY_DELAY = 1
    GENERATION_RETRY_BACKOFF = 2
    GENERATION_RETRY_JITTER = (0, 1)

    PUBLIC_URL = os.getenv("PUBLIC_URL", "http://localhost:8000")

    DEBUG = False
    LOG_LEVEL = "INFO"

    # Create data directories if they don't exist
    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.DATA_DIR.mkdir(parents=True, exist_ok=True)
        cls.DRAFTS_DIR.mkdir(parents=True, exist_ok=True)

        # Validate required environment variables
        if not cls.ADMIN_PASSWORD:
            print("WARNING: ADMIN_PASSWORD environment variable not set.")
            print("Admin login will be unavailable until it is set.")
        if not cls.GROQ_API_KEY:
            print("WARNING: GROQ_API_KEY environment variable not set.")
            print("Please set it in the .env file or environment variables.")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
