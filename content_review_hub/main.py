"""
Run the Content Review Hub API under uvicorn.

    python -m content_review_hub.main
"""

from typing import Optional

import uvicorn

from .api import app  # noqa: F401
from .config import get_settings


def run(
    host: Optional[str] = None,
    port: Optional[int] = None,
    reload: Optional[bool] = None,
) -> None:
    """Serve the API; unset arguments come from settings."""
    settings = get_settings()
    if reload is None:
        reload = settings.debug
    uvicorn.run(
        "content_review_hub.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        workers=1 if reload else settings.api_workers,
    )


if __name__ == "__main__":
    run()
