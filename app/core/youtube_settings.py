import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _languages() -> tuple[str, ...]:
    raw = os.getenv("YOUTUBE_LANGUAGES", "en")
    return tuple(x.strip() for x in raw.split(",") if x.strip()) or ("en",)


@dataclass(frozen=True)
class YouTubeSettings:
    # Optional: path to cookies.txt (Netscape format), used by the yt-dlp fallback.
    cookies_file: str | None = os.getenv("YOUTUBE_COOKIES_FILE")

    # Optional: proxy URL, e.g. http://127.0.0.1:7890
    proxy_url: str | None = os.getenv("YOUTUBE_PROXY_URL")

    # Preferred caption languages, in order
    languages: tuple[str, ...] = field(default_factory=_languages)

    # Whether to try yt-dlp subtitles if transcript_api fails
    enable_ytdlp_fallback: bool = os.getenv("YOUTUBE_ENABLE_YTDLP_FALLBACK", "1") == "1"
    ytdlp_timeout_sec: float = float(os.getenv("YOUTUBE_YTDLP_TIMEOUT_SEC", "60"))


youtube_settings = YouTubeSettings()
