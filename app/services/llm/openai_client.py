from __future__ import annotations

import logging

from openai import OpenAI, OpenAIError
from pydantic import BaseModel

from app.services.llm.base import GenerationError, GenerationRequest, parse_structured, schema_instructions

logger = logging.getLogger(__name__)


class OpenAIStructuredGenerator:
    """
    Structured generation through the Chat Completions API in JSON mode.
    The reply is validated against the request schema before it is returned.

    timeout_s=None means no client-side timeout; max_retries is handed to the SDK.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o",
        max_tokens: int = 1200,
        timeout_s: float | None = None,
        max_retries: int = 0,
        client: OpenAI | None = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.timeout_s = timeout_s
        self.max_retries = max_retries
        self._client = client

    def _build_client(self) -> OpenAI:
        if self._client is None:
            if not self.api_key:
                raise GenerationError("OPENAI_API_KEY is missing")
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout_s, max_retries=self.max_retries)
        return self._client

    def generate(self, request: GenerationRequest) -> BaseModel:
        client = self._build_client()

        try:
            chat = client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": request.system + "\n\n" + schema_instructions(request.schema)},
                    {"role": "user", "content": request.prompt},
                ],
                response_format={"type": "json_object"},
                max_tokens=self.max_tokens,
            )
        except OpenAIError as e:
            raise GenerationError(f"OpenAI request failed: {e}") from e

        raw_text = (chat.choices[0].message.content or "").strip() if chat.choices else ""
        logger.debug("openai %s replied with %d chars", self.model, len(raw_text))
        return parse_structured(request.schema, raw_text)
