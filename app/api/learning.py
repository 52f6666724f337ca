from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from app.api.deps import get_generator, get_settings, get_title_fetcher, get_transcript_fetcher
from app.core.config import Settings
from app.schemas.artifacts import ChallengeArtifact, RescueArtifact, SherpaArtifact
from app.schemas.requests import ChallengeRequest, PreviewResponse, RescueRequest, SherpaRequest
from app.services.learning import InvalidRequest, run_challenge, run_rescue, run_sherpa
from app.services.llm.base import StructuredGenerator
from app.services.metadata import TitleFetcher
from app.services.transcript import TranscriptFetcher
from app.services.youtube import build_embed_url, build_video_url, extract_youtube_video_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["learning"])

MSG_CHALLENGE_FAILED = "Unable to generate a challenge right now."


@router.post("/challenge", response_model=ChallengeArtifact)
def challenge(
    req: ChallengeRequest,
    generator: StructuredGenerator = Depends(get_generator),
    transcripts: TranscriptFetcher = Depends(get_transcript_fetcher),
    cfg: Settings = Depends(get_settings),
) -> ChallengeArtifact | JSONResponse:
    try:
        return run_challenge(req, generator, transcripts, cfg.transcript_max_chars)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("challenge route failed")
        return JSONResponse(status_code=500, content={"error": MSG_CHALLENGE_FAILED})


@router.post("/sherpa", response_model=SherpaArtifact)
def sherpa(
    req: SherpaRequest,
    generator: StructuredGenerator = Depends(get_generator),
    titles: TitleFetcher = Depends(get_title_fetcher),
) -> SherpaArtifact:
    try:
        return run_sherpa(req, generator, titles)
    except InvalidRequest as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/rescue", response_model=RescueArtifact)
def rescue(
    req: RescueRequest,
    generator: StructuredGenerator = Depends(get_generator),
    titles: TitleFetcher = Depends(get_title_fetcher),
    cfg: Settings = Depends(get_settings),
) -> RescueArtifact:
    return run_rescue(req, generator, titles, cfg.transcript_max_chars)


@router.get("/preview", response_model=PreviewResponse)
def preview(url: str = Query(default="")) -> PreviewResponse:
    """Same resolver as the analysis endpoints, so a UI preview never shows a different video."""
    video_id = extract_youtube_video_id(url)
    if not video_id:
        return PreviewResponse(ok=False)
    return PreviewResponse(
        ok=True,
        video_id=video_id,
        video_url=build_video_url(video_id),
        embed_url=build_embed_url(video_id),
    )
