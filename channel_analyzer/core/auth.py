import secrets
from typing import Optional

from fastapi import HTTPException, Security, status
from fastapi.security import APIKeyHeader

from channel_analyzer.config import get_settings

api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def _matches_any(candidate: str, allowed: set[str]) -> bool:
    # Constant time per key; every configured key is compared
    matched = False
    for key in allowed:
        matched |= secrets.compare_digest(candidate.encode(), key.encode())
    return matched


async def verify_api_key(api_key: Optional[str] = Security(api_key_header)) -> bool:
    """
    Gate the analysis routes behind ALLOWED_API_KEYS.

    An empty ALLOWED_API_KEYS leaves the routes open. Otherwise a request
    without X-API-Key gets 401 and one with an unknown key gets 403.
    """
    allowed = get_settings().api_keys_set
    if not allowed:
        return True

    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-API-Key header is required",
        )
    if not _matches_any(api_key, allowed):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="X-API-Key is not recognized",
        )
    return True
