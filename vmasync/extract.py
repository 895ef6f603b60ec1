"""Pattern-based metadata extraction from the upstream header."""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .models import VersionInfo

VERSION_PATTERN = r"<b>Version\s*(.+?)\s*</b>"
VULKAN_VERSION_PATTERN = re.compile(r"VK_VERSION_(\d+)_(\d+)")


class ExtractionError(RuntimeError):
    """Raised when expected metadata is missing from fetched text."""


def first_match(text: str, pattern: str, error_message: str) -> str:
    """Return the first capture group of ``pattern`` in document order."""
    match = re.search(pattern, text)
    if match is None:
        raise ExtractionError(error_message)
    return match.group(1)


def highest_version_marker(text: str) -> Tuple[int, int]:
    """Return the greatest ``(major, minor)`` across all ``VK_VERSION_x_y`` markers."""
    highest: Optional[Tuple[int, int]] = None
    for match in VULKAN_VERSION_PATTERN.finditer(text):
        candidate = (int(match.group(1)), int(match.group(2)))
        if highest is None or candidate > highest:
            highest = candidate
    if highest is None:
        raise ExtractionError("Cannot detect Vulkan version")
    return highest


def extract_version_info(text: str) -> VersionInfo:
    """Read the library version and the highest Vulkan version from a header."""
    return VersionInfo(
        library_version=first_match(text, VERSION_PATTERN, "Cannot extract version"),
        protocol_version=highest_version_marker(text),
    )


__all__ = [
    "ExtractionError",
    "extract_version_info",
    "first_match",
    "highest_version_marker",
]
