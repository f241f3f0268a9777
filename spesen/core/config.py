from typing import Optional

from dotenv import load_dotenv
from pydantic_settings import BaseSettings  # type: ignore

# Load .env file if it exists
load_dotenv()


class Settings(BaseSettings):
    # Core
    MODE: str = "dev"  # dev, prod
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./spesen.db"
    RUN_MIGRATIONS: bool = False

    # Security
    # Base64, at least 32 bytes once decoded. Generate with: spesen keys generate
    SECRET_ENCRYPTION_KEY: Optional[str] = None
    KEY_DERIVATION: str = "truncate"  # truncate, hkdf-sha256

    model_config = {
        "case_sensitive": True,
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
