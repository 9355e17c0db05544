"""
Image URL Resolution

Turns stored image references into absolute URLs for API responses.

Resolution Rules:
=================
    None / ""                  → {IMAGE_BASE_URL}/placeholders/{type}-placeholder.jpg
    "http://..." / "https://..." → unchanged
    "covers/inception.jpg"     → {IMAGE_BASE_URL}/covers/inception.jpg

Usage:
======
    from mediashelf.shared.utils.images import build_image_url, build_profile_picture_url

    cover = build_image_url(work.cover_url, work.type)
    avatar = build_profile_picture_url(user.profile_picture_url)
"""

from typing import Optional

from mediashelf.config.settings import settings


DEFAULT_COVER = "default-cover.jpg"
DEFAULT_PROFILE_PICTURE = "default-profile.jpg"

PLACEHOLDER_TYPES = {"movie", "series", "music", "book", "graphic-novel", "profile"}


def build_image_url(
    path: Optional[str],
    fallback_type: Optional[str] = None,
    base_url: Optional[str] = None,
) -> str:
    """
    Build a displayable absolute image URL.

    Args:
        path: Stored image path or absolute URL, may be empty
        fallback_type: Work type (or "profile") used to pick a placeholder
        base_url: Overrides IMAGE_BASE_URL

    Returns:
        Absolute URL
    """
    base = (base_url if base_url is not None else settings.IMAGE_BASE_URL).rstrip("/")

    if not path or not path.strip():
        kind = str(getattr(fallback_type, "value", fallback_type) or "")
        if kind in PLACEHOLDER_TYPES:
            return f"{base}/placeholders/{kind}-placeholder.jpg"
        return f"{base}/{DEFAULT_COVER}"

    path = path.strip()
    if path.startswith(("http://", "https://")):
        return path

    return f"{base}/{path.lstrip('/')}"


def build_profile_picture_url(path: Optional[str], base_url: Optional[str] = None) -> str:
    """Resolve a user's profile picture, falling back to the default avatar."""
    if not path or not path.strip():
        base = (base_url if base_url is not None else settings.IMAGE_BASE_URL).rstrip("/")
        return f"{base}/{DEFAULT_PROFILE_PICTURE}"
    return build_image_url(path, "profile", base_url=base_url)
