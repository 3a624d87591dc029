# flowershop/services/api/routers/health.py
from __future__ import annotations

from fastapi import APIRouter, Request

from flowershop.common.settings import get_settings
from flowershop.database.core.main import get_store

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz(request: Request):
    """Liveness only; never opens a store connection."""
    s = get_settings()
    store = getattr(request.app.state, "store", None) or get_store()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "store": "connected" if store.is_initialized else "idle",
    }
