"""Process configuration loaded from the environment (and .env, if present)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

REQUIRED_ENV = ("GEMINI_API_KEY", "QDRANT_API_KEY", "QDRANT_COLLECTION", "QDRANT_URL")


class ConfigError(RuntimeError):
    pass


def _number(name: str, default: str, cast=int):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ConfigError(f"Invalid value for {name}: {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    gemini_api_key: str
    qdrant_api_key: str
    collection: str
    qdrant_url: str

    embed_model: str = "gemini-embedding-001"
    embed_dim: int = 3072
    chat_model: str = "gemini-2.5-flash"
    browse_model: str = "gemini-2.5-flash"
    thinking_budget: int = 0

    top_k: int = 5
    max_tokens: int = 150
    temperature: float = 0.7

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        missing = [name for name in REQUIRED_ENV if not os.getenv(name)]
        if missing:
            raise ConfigError(f"Missing environment variables: {', '.join(missing)}")

        return cls(
            gemini_api_key=os.environ["GEMINI_API_KEY"],
            qdrant_api_key=os.environ["QDRANT_API_KEY"],
            collection=os.environ["QDRANT_COLLECTION"],
            qdrant_url=os.environ["QDRANT_URL"],
            embed_model=os.getenv("EMBED_MODEL", "gemini-embedding-001"),
            embed_dim=_number("EMBED_DIM", "3072"),
            chat_model=os.getenv("CHAT_MODEL", "gemini-2.5-flash"),
            browse_model=os.getenv("BROWSE_MODEL", "gemini-2.5-flash"),
            thinking_budget=_number("THINKING_BUDGET", "0"),
            top_k=_number("TOP_K", "5"),
            max_tokens=_number("MAX_TOKENS", "150"),
            temperature=_number("TEMPERATURE", "0.7", float),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
