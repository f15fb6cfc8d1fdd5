"""Run the backend with uvicorn: `python -m breakfast_backend`."""

import uvicorn

from breakfast_backend.config import settings


def main() -> None:
    uvicorn.run(
        "breakfast_backend.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
