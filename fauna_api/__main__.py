"""Run the API with uvicorn: `python -m fauna_api`."""

import uvicorn

from fauna_api.config import settings


def main() -> None:
    uvicorn.run(
        "fauna_api.main:app",
        host=settings.backend_host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
