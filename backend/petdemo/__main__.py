"""Run the development server: `python -m petdemo`."""

import uvicorn

from petdemo.config import settings


def main() -> None:
    uvicorn.run(
        "petdemo.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
