from __future__ import annotations

import logging
import re
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

import webvtt
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.formatters import TextFormatter
from youtube_transcript_api.proxies import GenericProxyConfig

from app.core.youtube_settings import YouTubeSettings, youtube_settings
from app.services.youtube import build_video_url

logger = logging.getLogger(__name__)


class TranscriptNotFound(Exception):
    pass


# -----------------------------
# Normalization + truncation
# -----------------------------
_WS_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TrimmedTranscript:
    text: str
    truncated: bool


def normalize_transcript(text: str | None) -> str:
    """Collapse every whitespace run to one space and strip both ends."""
    return _WS_RE.sub(" ", text or "").strip()


def trim_transcript(text: str, max_chars: int) -> TrimmedTranscript:
    if len(text) <= max_chars:
        return TrimmedTranscript(text=text, truncated=False)
    return TrimmedTranscript(text=text[:max_chars], truncated=True)


def prepare_transcript(text: str | None, max_chars: int) -> TrimmedTranscript:
    return trim_transcript(normalize_transcript(text), max_chars)


# -----------------------------
# Acquisition sources
# -----------------------------
class TranscriptFetcher(Protocol):
    def fetch_transcript(self, video_id: str) -> str | None: ...


class TranscriptApiSource:
    """Captions via youtube-transcript-api."""

    name = "transcript_api"

    def __init__(self, cfg: YouTubeSettings = youtube_settings) -> None:
        self.cfg = cfg

    def _api(self) -> YouTubeTranscriptApi:
        if self.cfg.proxy_url:
            proxy = GenericProxyConfig(http_url=self.cfg.proxy_url, https_url=self.cfg.proxy_url)
            return YouTubeTranscriptApi(proxy_config=proxy)
        return YouTubeTranscriptApi()

    def fetch(self, video_id: str) -> str:
        fetched = self._api().fetch(video_id, languages=list(self.cfg.languages))
        text = TextFormatter().format_transcript(fetched).strip()
        if not text:
            raise TranscriptNotFound("Transcript empty after fetch (transcript_api)")
        return text


class YtDlpSubtitleSource:
    """Subtitles (manual or auto) downloaded by the yt-dlp CLI and parsed as VTT."""

    name = "ytdlp_subs"

    def __init__(self, cfg: YouTubeSettings = youtube_settings) -> None:
        self.cfg = cfg

    def fetch(self, video_id: str) -> str:
        with tempfile.TemporaryDirectory() as td:
            outtmpl = str(Path(td) / "%(id)s.%(ext)s")
            sub_langs = ",".join(f"{lang}.*" for lang in self.cfg.languages)
            args = [
                "yt-dlp",
                "--skip-download",
                "--write-subs",
                "--write-auto-subs",
                "--sub-format",
                "vtt",
                "--sub-langs",
                sub_langs,
                "-o",
                outtmpl,
                build_video_url(video_id),
            ]

            if self.cfg.cookies_file:
                args.extend(["--cookies", self.cfg.cookies_file])

            if self.cfg.proxy_url:
                args.extend(["--proxy", self.cfg.proxy_url])

            try:
                p = subprocess.run(args, capture_output=True, text=True, timeout=self.cfg.ytdlp_timeout_sec)
            except FileNotFoundError as e:
                raise TranscriptNotFound("yt-dlp not found on PATH") from e
            except subprocess.TimeoutExpired as e:
                raise TranscriptNotFound("yt-dlp timed out while fetching subtitles") from e

            if p.returncode != 0:
                raise TranscriptNotFound(f"yt-dlp subs failed: {p.stderr.strip() or p.stdout.strip()}")

            vtts = list(Path(td).glob("*.vtt"))
            if not vtts:
                raise TranscriptNotFound("yt-dlp succeeded but no .vtt subtitles found")

            vtt_path = sorted(vtts, key=lambda x: x.stat().st_size, reverse=True)[0]

            parts: list[str] = []
            for caption in webvtt.read(str(vtt_path)):
                txt = normalize_transcript(caption.text)
                # auto-subs repeat the previous line as a rolling caption
                if txt and (not parts or parts[-1] != txt):
                    parts.append(txt)

            text = " ".join(parts).strip()
            if not text:
                raise TranscriptNotFound("Parsed VTT but transcript text is empty")
            return text


class TranscriptChain:
    """
    Tries each source in order and returns the first non-empty transcript.
    Never raises: a video without a usable transcript yields None.
    """

    def __init__(self, sources: Sequence) -> None:
        self.sources = list(sources)

    def fetch_transcript(self, video_id: str) -> str | None:
        if not video_id:
            return None

        for source in self.sources:
            name = getattr(source, "name", type(source).__name__)
            try:
                text = source.fetch(video_id)
            except Exception as e:
                logger.warning("transcript source %s failed for %s: %s", name, video_id, e)
                continue
            if text and text.strip():
                logger.info("transcript for %s fetched via %s (%d chars)", video_id, name, len(text))
                return text

        return None


def default_transcript_fetcher(cfg: YouTubeSettings = youtube_settings) -> TranscriptChain:
    sources: list = [TranscriptApiSource(cfg)]
    if cfg.enable_ytdlp_fallback:
        sources.append(YtDlpSubtitleSource(cfg))
    return TranscriptChain(sources)
