from __future__ import annotations

import uvicorn

from .config import DEFAULT_APP_CONFIG

if __name__ == "__main__":
    uvicorn.run(
        "weatherwear.app:app",
        host=DEFAULT_APP_CONFIG.host,
        port=DEFAULT_APP_CONFIG.port,
        log_level=DEFAULT_APP_CONFIG.log_level.lower(),
    )
