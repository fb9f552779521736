"""Configuration for attribute markers and navigation rules."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

# File extensions that never render as a page
_UNVISITABLE_EXTENSIONS = frozenset({
    ".7z", ".aac", ".apk", ".avi", ".bmp", ".bz2", ".css", ".csv", ".deb",
    ".dmg", ".doc", ".docx", ".exe", ".gif", ".gz", ".heic", ".heif", ".ico",
    ".iso", ".jpeg", ".jpg", ".js", ".json", ".m4a", ".mkv", ".mov", ".mp3",
    ".mp4", ".mpeg", ".mpg", ".msi", ".ogg", ".ogv", ".pdf", ".pkg", ".png",
    ".ppt", ".pptx", ".rar", ".rtf", ".svg", ".tar", ".tif", ".tiff", ".txt",
    ".wav", ".webm", ".webp", ".wma", ".wmv", ".xls", ".xlsx", ".xml", ".zip",
})


@dataclass(frozen=True)
class PageSwapConfig:
    """
    Settings shared by Snapshot, View and the renderers.

    Passed explicitly to whatever needs it; nothing reads a global.
    """

    permanent_attribute: str = "data-turbo-permanent"
    preview_attribute: str = "data-turbo-preview"
    visit_direction_attribute: str = "data-turbo-visit-direction"
    placeholder_name: str = "turbo-permanent-placeholder"
    temporary_tabindex: str = "-1"
    unvisitable_extensions: frozenset[str] = field(default=_UNVISITABLE_EXTENSIONS)
    # Seconds to wait for an intercepted render to resume; None waits forever
    interception_timeout: float | None = None

    def replace(self, **changes) -> PageSwapConfig:
        return replace(self, **changes)


DEFAULT_CONFIG = PageSwapConfig()
