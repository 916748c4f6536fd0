import re
from typing import Optional
from urllib.parse import urlparse, parse_qs

YOUTUBE_HOSTS = {"www.youtube.com", "youtube.com", "m.youtube.com"}
SHORT_HOSTS = {"youtu.be", "www.youtu.be"}


def is_youtube_url(url: str) -> bool:
    """True for channel, handle, playlist or video URLs on youtube.com / youtu.be."""
    parsed = urlparse(url if "://" in url else f"https://{url}")
    hostname = (parsed.hostname or "").lower()
    return hostname in YOUTUBE_HOSTS or hostname in SHORT_HOSTS


def extract_video_id(youtube_url: str) -> Optional[str]:
    parsed = urlparse(youtube_url)
    if parsed.hostname in YOUTUBE_HOSTS:
        qs = parse_qs(parsed.query)
        if "v" in qs:
            return qs["v"][0]
        # /embed/<id> and /shorts/<id>
        match = re.match(r"^/(?:embed|shorts)/([\w-]{11})$", parsed.path)
        if match:
            return match.group(1)
    if parsed.hostname in SHORT_HOSTS:
        match = re.match(r"^/([\w-]{11})$", parsed.path)
        if match:
            return match.group(1)
    return None
