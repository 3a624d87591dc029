from __future__ import annotations
from typing import Any, Protocol

class MediaUrlResolver(Protocol):
    """Turn a media reference (or None) into a URL usable by the caller's context."""
    def resolve(self, media: Any) -> str: ...
