from __future__ import annotations

import uvicorn

from menu_api.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "menu_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        # Keep the JSON handlers installed by configure_logging().
        log_config=None,
    )


if __name__ == "__main__":
    main()
