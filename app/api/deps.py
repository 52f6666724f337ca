"""
Collaborator providers. Routes receive these through Depends so tests can
swap in fakes with app.dependency_overrides. Built per request: nothing is
shared between requests.
"""
import logging

from fastapi import Depends
from pydantic import BaseModel

from app.core.config import Settings, settings
from app.services.llm.base import GenerationError, GenerationRequest, StructuredGenerator
from app.services.llm.ollama_client import OllamaStructuredGenerator
from app.services.llm.openai_client import OpenAIStructuredGenerator
from app.services.metadata import OEmbedTitleFetcher, TitleFetcher
from app.services.transcript import TranscriptFetcher, default_transcript_fetcher

logger = logging.getLogger(__name__)


class UnavailableGenerator:
    """Stands in for a misconfigured backend so each endpoint applies its own failure policy."""

    def __init__(self, reason: str) -> None:
        self.reason = reason

    def generate(self, request: GenerationRequest) -> BaseModel:
        raise GenerationError(self.reason)


def get_settings() -> Settings:
    return settings


def build_generator(cfg: Settings) -> StructuredGenerator:
    if cfg.llm_provider == "ollama":
        return OllamaStructuredGenerator(
            base_url=cfg.ollama_base_url,
            model=cfg.ollama_model,
            timeout_s=cfg.generation_timeout_sec,
            max_retries=cfg.generation_max_retries,
        )
    if cfg.llm_provider == "openai":
        return OpenAIStructuredGenerator(
            api_key=cfg.openai_api_key,
            model=cfg.openai_model,
            max_tokens=cfg.openai_max_tokens,
            timeout_s=cfg.generation_timeout_sec,
            max_retries=cfg.generation_max_retries,
        )
    raise ValueError(f"Unknown LLM_PROVIDER: {cfg.llm_provider!r} (use openai or ollama)")


def get_generator(cfg: Settings = Depends(get_settings)) -> StructuredGenerator:
    try:
        return build_generator(cfg)
    except ValueError as e:
        logger.error("generation backend unavailable: %s", e)
        return UnavailableGenerator(str(e))


def get_transcript_fetcher() -> TranscriptFetcher:
    return default_transcript_fetcher()


def get_title_fetcher() -> TitleFetcher:
    return OEmbedTitleFetcher()
