# flowershop/services/media/resolvers.py
"""
Media URL resolution.

Two resolvers share one precedence order and differ only in how a relative
`file_path` becomes a URL:

  - ServerMediaResolver: under the application's own `/storage/` prefix,
    for code that runs while handling a request.
  - ClientMediaResolver: against the public media origin (CDN / object store
    worker), for anything handed to a browser.

Pick one at the call site and pass it in; there is no global switch.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from flowershop.common.settings import MediaConfig, get_settings
from flowershop.domain.ports.media import MediaUrlResolver


def _field(media: Any, name: str) -> Optional[str]:
    if isinstance(media, Mapping):
        v = media.get(name)
    else:
        v = getattr(media, name, None)
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def _join(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class _BaseResolver:
    def __init__(self, placeholder: str) -> None:
        # an empty placeholder would break the "never empty" contract
        self.placeholder = placeholder or MediaConfig().placeholder_path

    def resolve(self, media: Any) -> str:
        if media is None:
            return self.placeholder
        url = _field(media, "file_url")
        if url:
            return url
        path = _field(media, "file_path")
        if path and path.strip("/"):
            return self._from_path(path)
        return self.placeholder

    def _from_path(self, path: str) -> str:
        raise NotImplementedError


class ServerMediaResolver(_BaseResolver):
    def __init__(self, *, storage_prefix: str = "/storage", placeholder: str = "/placeholder-image.jpg") -> None:
        super().__init__(placeholder)
        self.storage_prefix = "/" + (storage_prefix or "storage").strip("/")

    def _from_path(self, path: str) -> str:
        return _join(self.storage_prefix, path)


class ClientMediaResolver(_BaseResolver):
    def __init__(
        self,
        *,
        public_base_url: Optional[str] = None,
        proxy_path: str = "/api/r2-upload",
        placeholder: str = "/placeholder-image.jpg",
    ) -> None:
        super().__init__(placeholder)
        self.public_base_url = (public_base_url or "").strip() or None
        self.proxy_path = "/" + (proxy_path or "api/r2-upload").strip("/")

    def _from_path(self, path: str) -> str:
        # no public origin configured -> go through our own upload proxy
        return _join(self.public_base_url or self.proxy_path, path)


def server_resolver(cfg: MediaConfig | None = None) -> ServerMediaResolver:
    cfg = cfg or get_settings().media
    return ServerMediaResolver(storage_prefix=cfg.storage_prefix, placeholder=cfg.placeholder_path)


def client_resolver(cfg: MediaConfig | None = None) -> ClientMediaResolver:
    cfg = cfg or get_settings().media
    return ClientMediaResolver(
        public_base_url=cfg.public_base_url,
        proxy_path=cfg.proxy_path,
        placeholder=cfg.placeholder_path,
    )


def resolve_all(resolver: MediaUrlResolver, media_items: Iterable[Any]) -> List[str]:
    """Resolve a gallery, skipping entries that carry no reference at all."""
    out: List[str] = []
    for m in media_items or []:
        if m is None or not (_field(m, "file_url") or _field(m, "file_path")):
            continue
        out.append(resolver.resolve(m))
    return out
