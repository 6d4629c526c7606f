import os
import sys
import tempfile
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from loguru import logger
from pydantic import BaseModel, Field

from ..errors import ConfigurationError

# This file: src/lumos/config/settings.py
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
ENV_PATH = PROJECT_ROOT / ".env"

if ENV_PATH.exists():
    load_dotenv(ENV_PATH)
else:
    # Fallback to simple load_dotenv which looks in cwd
    load_dotenv()


def default_data_dir(env: str) -> Path:
    """Writable data root: the OS temp dir in production (serverless hosts), ./data otherwise."""
    if env == "production":
        return Path(tempfile.gettempdir()) / "lumos-data"
    return Path.cwd() / "data"


class Settings(BaseModel):
    """Global Application Settings"""

    # Environment
    ENV: str = Field(default="development", description="Environment: development, production, testing")
    LOG_LEVEL: str = Field(default="INFO", description="Log level")

    # Storage
    DATA_DIR: Path = Field(default_factory=lambda: default_data_dir("development"), description="Root for persisted data")

    # Chunking
    CHUNK_SIZE: int = Field(default=1000, description="Target chunk size in characters")
    CHUNK_OVERLAP: int = Field(default=200, description="Chunk overlap budget in characters")

    # Embeddings
    EMBEDDER_TYPE: str = Field(default="mock", description="Embedder type: mock, openai")
    OPENAI_API_KEY: Optional[str] = Field(default=None, description="OpenAI API Key")
    OPENAI_BASE_URL: str = Field(default="https://api.openai.com/v1", description="OpenAI-compatible API root")
    OPENAI_EMBEDDING_MODEL: str = Field(default="text-embedding-3-small", description="Embedding model name")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True
    }

    @property
    def vector_store_dir(self) -> Path:
        return self.DATA_DIR / "vector-stores"

    @property
    def documents_dir(self) -> Path:
        return self.DATA_DIR / "documents"


def load_settings() -> Settings:
    """Load settings from environment variables.

    Raises:
        ConfigurationError: If a numeric variable is not an integer
    """
    env = os.getenv("ENV", "development")
    data_dir = os.getenv("DATA_DIR")
    return Settings(
        ENV=env,
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        DATA_DIR=Path(data_dir) if data_dir else default_data_dir(env),
        CHUNK_SIZE=_int_env("CHUNK_SIZE", 1000),
        CHUNK_OVERLAP=_int_env("CHUNK_OVERLAP", 200),
        EMBEDDER_TYPE=os.getenv("EMBEDDER_TYPE", "mock"),
        OPENAI_API_KEY=os.getenv("OPENAI_API_KEY"),
        OPENAI_BASE_URL=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1"),
        OPENAI_EMBEDDING_MODEL=os.getenv("OPENAI_EMBEDDING_MODEL", "text-embedding-3-small"),
    )


def configure_logging(level: str = "INFO") -> None:
    """Send loguru output to stderr at the given level."""
    try:
        logger.level(level.upper())
    except ValueError as e:
        raise ConfigurationError(f"Invalid LOG_LEVEL {level!r}", original_error=e) from e
    logger.configure(handlers=[{"sink": sys.stderr, "level": level.upper()}])


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}",
            details={"variable": name},
            original_error=e,
        ) from e
