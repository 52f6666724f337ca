from __future__ import annotations

import logging
import time
from typing import Any, Dict

import httpx
from pydantic import BaseModel

from app.services.llm.base import GenerationError, GenerationRequest, parse_structured

logger = logging.getLogger(__name__)


class OllamaStructuredGenerator:
    """
    Local generation through Ollama.

    Uses /api/generate with `format` set to the schema so the model is
    constrained to it; the reply is still validated locally.
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        timeout_s: float | None = None,
        max_retries: int = 0,
        temperature: float = 0.2,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout_s = timeout_s
        self.max_retries = max(0, max_retries)
        self.temperature = temperature
        self.transport = transport

    def _post(self, payload: Dict[str, Any]) -> str:
        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            r = client.post(f"{self.base_url}/api/generate", json=payload)
            r.raise_for_status()
            data = r.json()

        # Ollama returns {"response": "...", ...}
        return (data.get("response") or "").strip()

    def generate(self, request: GenerationRequest) -> BaseModel:
        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": request.prompt,
            "system": request.system,
            "format": request.schema.model_json_schema(),
            "stream": False,
            "options": {"temperature": self.temperature},
        }

        attempts = self.max_retries + 1
        last_err: Exception | None = None

        for i in range(attempts):
            try:
                return parse_structured(request.schema, self._post(payload))
            except (httpx.HTTPError, ValueError, GenerationError) as e:
                last_err = e
                if i < attempts - 1:
                    logger.warning("ollama attempt %d/%d failed: %s", i + 1, attempts, e)
                    time.sleep(1.5 * (2**i))

        raise GenerationError(f"Ollama generation failed after {attempts} attempt(s): {last_err}") from last_err
