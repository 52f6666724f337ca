from __future__ import annotations

import logging

from app.schemas.artifacts import ChallengeArtifact, RescueArtifact, SherpaArtifact
from app.schemas.requests import ChallengeRequest, RescueRequest, SherpaRequest
from app.services.fallbacks import rescue_fallback, sherpa_fallback
from app.services.llm.base import StructuredGenerator, conform
from app.services.llm.prompts import assemble_challenge, assemble_rescue, assemble_sherpa
from app.services.metadata import TitleFetcher
from app.services.transcript import TranscriptFetcher, prepare_transcript
from app.services.youtube import extract_youtube_video_id

logger = logging.getLogger(__name__)

MSG_LINK_OR_TRANSCRIPT = "Provide a valid YouTube link or paste the transcript."
MSG_TRANSCRIPT_UNAVAILABLE = (
    "Transcript fetch failed or is unavailable for this video. "
    "Paste the transcript manually or use Demo Mode."
)
MSG_INVALID_LINK = "Provide a valid YouTube link."


class InvalidRequest(ValueError):
    pass


def _title_for(url: str | None, titles: TitleFetcher) -> str | None:
    video_id = extract_youtube_video_id(url)
    if not video_id:
        return None
    return titles.fetch_title(video_id)


def run_challenge(
    req: ChallengeRequest,
    generator: StructuredGenerator,
    transcripts: TranscriptFetcher,
    max_chars: int,
) -> ChallengeArtifact:
    """
    Manual transcript wins; otherwise the url must resolve and its transcript
    must be fetchable. GenerationError propagates (no generic fallback here).
    """
    transcript_text = (req.transcript or "").strip()

    if not transcript_text:
        video_id = extract_youtube_video_id(req.url)
        if not video_id:
            raise InvalidRequest(MSG_LINK_OR_TRANSCRIPT)
        transcript_text = (transcripts.fetch_transcript(video_id) or "").strip()

    if not transcript_text:
        raise InvalidRequest(MSG_TRANSCRIPT_UNAVAILABLE)

    trimmed = prepare_transcript(transcript_text, max_chars)
    if trimmed.truncated:
        logger.info("challenge transcript trimmed to %d chars", max_chars)

    return conform(ChallengeArtifact, generator.generate(assemble_challenge(trimmed)))


def run_sherpa(
    req: SherpaRequest,
    generator: StructuredGenerator,
    titles: TitleFetcher,
) -> SherpaArtifact:
    url = (req.url or "").strip()
    if url and not extract_youtube_video_id(url):
        raise InvalidRequest(MSG_INVALID_LINK)

    title = _title_for(url, titles)
    request = assemble_sherpa(req.mode, title=title, note=req.note, timestamp=req.timestamp)

    try:
        return conform(SherpaArtifact, generator.generate(request))
    except Exception:
        logger.exception("sherpa generation failed (mode=%s); serving fallback", req.mode)
        return sherpa_fallback()


def run_rescue(
    req: RescueRequest,
    generator: StructuredGenerator,
    titles: TitleFetcher,
    max_chars: int,
) -> RescueArtifact:
    # A bad url only costs us the title: the transcript is already here.
    title = _title_for(req.url, titles)
    trimmed = prepare_transcript(req.transcript, max_chars)
    request = assemble_rescue(trimmed, title=title, timestamp=req.timestamp)

    try:
        return conform(RescueArtifact, generator.generate(request))
    except Exception:
        logger.exception("rescue generation failed; serving fallback")
        return rescue_fallback()
