"""Runtime configuration for the TODO plugin service."""
from dataclasses import dataclass, field
from typing import List
import os
from dotenv import load_dotenv

# Load environment variables from a local .env file if present
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_STATIC_DIR = os.path.join(PACKAGE_DIR, "static")


@dataclass
class Settings:
    """Settings read from the environment at startup."""
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 5000
    server_url: str = "http://localhost:5000"
    allowed_origins: List[str] = field(default_factory=lambda: ["https://chat.openai.com"])
    static_dir: str = DEFAULT_STATIC_DIR
    log_level: str = "INFO"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"


def _split_origins(value: str) -> List[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    return Settings(
        environment=os.environ.get("ENVIRONMENT", "development"),
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "5000")),
        server_url=os.environ.get("SERVER_URL", "http://localhost:5000"),
        allowed_origins=_split_origins(os.environ.get("ALLOWED_ORIGINS", "https://chat.openai.com")),
        static_dir=os.environ.get("STATIC_DIR", DEFAULT_STATIC_DIR),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    )
