# flowershop/services/api/serve.py
from __future__ import annotations

import uvicorn

from flowershop.common.settings import get_settings


def main() -> None:
    """Run the catalog API with the configured host, port and log level."""
    cfg = get_settings()
    uvicorn.run(
        "flowershop.services.api.app:app",
        host=cfg.api.host,
        port=cfg.api.port,
        log_level=cfg.log_level.lower(),
        reload=cfg.app_env.lower() == "development",
    )


if __name__ == "__main__":
    main()
