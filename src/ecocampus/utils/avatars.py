"""Avatar URL helpers."""

from typing import Optional
from urllib.parse import urlencode

from ..core.config import get_settings

DEFAULT_AVATAR_NAME = "User"


def placeholder_avatar_url(name: Optional[str]) -> str:
    """Return a generated initials avatar for users without a profile image."""

    query = urlencode(
        {
            "name": name or DEFAULT_AVATAR_NAME,
            "background": "10B981",
            "color": "fff",
            "size": 128,
        }
    )
    return f"{get_settings().placeholder_avatar_url}?{query}"


def resolve_avatar_url(avatar_url: Optional[str], name: Optional[str]) -> str:
    return avatar_url or placeholder_avatar_url(name)
