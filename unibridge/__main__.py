"""Serve the API with uvicorn: python -m unibridge."""

import uvicorn

from unibridge.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "unibridge.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
