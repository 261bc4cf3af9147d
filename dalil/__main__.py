"""Run the API with uvicorn: ``python -m dalil``."""

import uvicorn

from dalil.core.config import settings


def main() -> None:
    uvicorn.run(
        "dalil.main:app",
        host="0.0.0.0",
        port=settings.app_port,
        reload=settings.app_env == "development",
    )


if __name__ == "__main__":
    main()
