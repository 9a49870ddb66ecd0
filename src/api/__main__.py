"""Serve the login API with uvicorn: ``python -m src.api``."""

import uvicorn

from src.config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
