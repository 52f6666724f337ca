from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


class GenerationError(RuntimeError):
    """The backend failed, timed out, or returned output outside the schema."""


@dataclass(frozen=True)
class GenerationRequest:
    system: str
    prompt: str
    schema: type[BaseModel]


class StructuredGenerator(Protocol):
    def generate(self, request: GenerationRequest) -> BaseModel: ...


def schema_instructions(schema: type[BaseModel]) -> str:
    return (
        "Output MUST be valid JSON only. No markdown, no commentary.\n"
        "The JSON MUST validate against this JSON Schema, including every minItems/maxItems and enum:\n"
        + json.dumps(schema.model_json_schema(), ensure_ascii=False)
    )


def extract_json(text: str) -> dict[str, Any]:
    """
    Best-effort JSON extraction if model returns extra text.
    """
    text = (text or "").strip()
    if not text:
        raise ValueError("Empty response from model")

    # Fast path
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Try to find outermost JSON object
    start = text.find("{")
    end = text.rfind("}")
    if start >= 0 and end > start:
        return json.loads(text[start : end + 1])

    raise ValueError(f"Model returned non-JSON. First 200 chars: {text[:200]!r}")


def parse_structured(schema: type[T], raw_text: str) -> T:
    try:
        return schema.model_validate(extract_json(raw_text))
    except ValidationError as e:
        raise GenerationError(f"{schema.__name__} contract violated: {e.error_count()} error(s)") from e
    except ValueError as e:
        raise GenerationError(str(e)) from e


def conform(schema: type[T], value: Any) -> T:
    """Re-check a generated value against the schema bounds (models are re-dumped, not trusted)."""
    if isinstance(value, BaseModel):
        value = value.model_dump()
    try:
        return schema.model_validate(value)
    except ValidationError as e:
        raise GenerationError(f"{schema.__name__} contract violated: {e.error_count()} error(s)") from e
