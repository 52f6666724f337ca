import re
from urllib.parse import parse_qs, urlparse


_YT_ID_RE = re.compile(r"^[a-zA-Z0-9_-]{11}$")

# Last resort: an id anchored by "v=" or a path separator
_YT_ID_SCAN_RE = re.compile(r"(?:v=|/)([A-Za-z0-9_-]{11})(?:\?|&|$)")


def _valid(vid: str | None) -> str | None:
    vid = (vid or "").strip()
    return vid if _YT_ID_RE.match(vid) else None


def _id_from_url(value: str) -> str | None:
    try:
        u = urlparse(value)
        host = (u.hostname or "").lower()
    except ValueError:
        return None

    segments = [s for s in (u.path or "").split("/") if s]

    # youtu.be/VIDEOID
    if "youtu.be" in host:
        return _valid(segments[0] if segments else None)

    if "youtube.com" in host:
        # youtube.com/watch?v=VIDEOID
        if (u.path or "").startswith("/watch"):
            q = parse_qs(u.query or "")
            return _valid(q.get("v", [""])[0])

        # youtube.com/embed/VIDEOID, youtube.com/shorts/VIDEOID
        if segments and segments[0] in ("embed", "shorts"):
            return _valid(segments[1] if len(segments) > 1 else None)

    return None


def extract_youtube_video_id(value: str | None) -> str | None:
    """
    Supports:
    - VIDEOID (bare 11-char id)
    - https://www.youtube.com/watch?v=VIDEOID
    - https://youtu.be/VIDEOID
    - https://www.youtube.com/embed/VIDEOID
    - https://www.youtube.com/shorts/VIDEOID
    - any of the above without a scheme (www.youtube.com/watch?v=...)
    """
    trimmed = (value or "").strip()
    if not trimmed:
        return None

    if _YT_ID_RE.match(trimmed):
        return trimmed

    maybe_url = trimmed
    if not trimmed.startswith("http") and "youtu" in trimmed:
        maybe_url = f"https://{trimmed}"

    if maybe_url.startswith("http"):
        vid = _id_from_url(maybe_url)
        if vid:
            return vid

    m = _YT_ID_SCAN_RE.search(trimmed)
    return m.group(1) if m else None


def build_video_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def build_embed_url(video_id: str) -> str:
    return f"https://www.youtube.com/embed/{video_id}"
