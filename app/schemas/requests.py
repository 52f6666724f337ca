from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_validator


class ChallengeRequest(BaseModel):
    url: str | None = None
    transcript: str | None = None


class SherpaRequest(BaseModel):
    mode: Literal["lost", "quiz"]
    url: str | None = None
    note: str | None = None
    timestamp: str | None = None


class RescueRequest(BaseModel):
    transcript: str
    url: str | None = None
    timestamp: str | None = None

    @field_validator("transcript")
    @classmethod
    def _transcript_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Transcript is required.")
        return v


class PreviewResponse(BaseModel):
    ok: bool
    video_id: str | None = None
    video_url: str | None = None
    embed_url: str | None = None
