"""Run the API with uvicorn: python -m habitrack."""

import uvicorn

from habitrack.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "habitrack.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
