"""Gift Tracker API entrypoint.

Run with:
  python -m gift_tracker
"""

import uvicorn

from gift_tracker.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "gift_tracker.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    main()
