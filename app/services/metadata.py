from __future__ import annotations

import logging
from typing import Protocol, Sequence

import httpx

from app.core.config import settings
from app.services.youtube import build_video_url

logger = logging.getLogger(__name__)

TITLE_SOURCES: tuple[str, ...] = (
    "https://www.youtube.com/oembed",
    "https://noembed.com/embed",
)


class TitleFetcher(Protocol):
    def fetch_title(self, video_id: str) -> str | None: ...


class OEmbedTitleFetcher:
    """
    Looks the title up through oEmbed-style endpoints, in order.
    First source returning a title wins; all failures yield None.
    """

    def __init__(
        self,
        sources: Sequence[str] = TITLE_SOURCES,
        timeout_s: float = settings.metadata_timeout_sec,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.sources = list(sources)
        self.timeout_s = timeout_s
        self.transport = transport

    def fetch_title(self, video_id: str) -> str | None:
        if not video_id:
            return None

        params = {"url": build_video_url(video_id), "format": "json"}

        with httpx.Client(timeout=self.timeout_s, transport=self.transport) as client:
            for source in self.sources:
                try:
                    r = client.get(source, params=params)
                    if r.status_code != 200:
                        continue
                    data = r.json()
                except (httpx.HTTPError, ValueError) as e:
                    logger.info("title source %s failed for %s: %s", source, video_id, e)
                    continue

                title = data.get("title") if isinstance(data, dict) else None
                if isinstance(title, str) and title.strip():
                    return title.strip()

        logger.warning("no title found for %s", video_id)
        return None
