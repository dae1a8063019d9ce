"""URLs d'embed — réécrit les liens YouTube/Vimeo vers leur forme lecteur."""
import re
from urllib.parse import parse_qs, urlparse

_VIMEO_ID = re.compile(r"vimeo\.com/(?:video/)?(\d+)")


def _youtube_id(url: str) -> str:
    parsed = urlparse(url)
    if "youtube.com" not in parsed.netloc or not parsed.path.startswith("/watch"):
        return ""
    return (parse_qs(parsed.query).get("v") or [""])[0]


def resolve_embed_url(url: str, autoplay: bool = False) -> str:
    """
    https://www.youtube.com/watch?v=ID → https://www.youtube.com/embed/ID?autoplay=0|1
    https://vimeo.com/ID               → https://player.vimeo.com/video/ID?autoplay=0|1
    Toute autre URL est renvoyée inchangée.
    """
    flag = 1 if autoplay else 0

    video_id = _youtube_id(url)
    if video_id:
        return f"https://www.youtube.com/embed/{video_id}?autoplay={flag}"

    m = _VIMEO_ID.search(url)
    if m and "player.vimeo.com" not in url:
        return f"https://player.vimeo.com/video/{m.group(1)}?autoplay={flag}"

    return url
