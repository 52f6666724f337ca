import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Always load .env from the repo root (stable, regardless of CWD)
BASE_DIR = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=BASE_DIR / ".env", override=False)


def _env(name: str, default: str | None = None) -> str | None:
    v = os.getenv(name)
    return v if v and v.strip() else default


def _optional_float(name: str) -> float | None:
    v = _env(name)
    return float(v) if v is not None else None


@dataclass(frozen=True)
class Settings:
    env: str = _env("ENV", "local")
    log_level: str = _env("LOG_LEVEL", "INFO")

    # "openai" | "ollama"
    llm_provider: str = (_env("LLM_PROVIDER", "openai") or "openai").lower()

    openai_api_key: str | None = _env("OPENAI_API_KEY")
    openai_model: str = _env("OPENAI_MODEL", "gpt-4o")
    openai_max_tokens: int = int(_env("OPENAI_MAX_TOKENS", "1200"))

    ollama_base_url: str = _env("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = _env("OLLAMA_MODEL", "qwen2.5:7b-instruct")

    # Unset = the caller imposes no timeout of its own.
    generation_timeout_sec: float | None = _optional_float("GENERATION_TIMEOUT_SEC")
    generation_max_retries: int = int(_env("GENERATION_MAX_RETRIES", "0"))

    transcript_max_chars: int = int(_env("TRANSCRIPT_MAX_CHARS", "5000"))
    metadata_timeout_sec: float = float(_env("METADATA_TIMEOUT_SEC", "5"))


settings = Settings()
