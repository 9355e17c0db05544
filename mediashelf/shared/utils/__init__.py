"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- clock: UTC timestamps and recommendation version tokens
- images: Absolute image URL resolution
- ratings: Average score computation

Usage:
======
    from mediashelf.shared.utils.clock import utcnow, next_version
    from mediashelf.shared.utils.images import build_image_url
    from mediashelf.shared.utils.ratings import average_score
"""

from mediashelf.shared.utils.clock import utcnow, now_ms, next_version
from mediashelf.shared.utils.images import build_image_url, build_profile_picture_url
from mediashelf.shared.utils.ratings import average_score

__all__ = [
    "utcnow",
    "now_ms",
    "next_version",
    "build_image_url",
    "build_profile_picture_url",
    "average_score",
]
