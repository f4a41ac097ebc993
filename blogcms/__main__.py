"""Serve the API with uvicorn: ``python -m blogcms``."""
import uvicorn

from blogcms.config import settings


def main() -> None:
    uvicorn.run(
        "blogcms.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG and settings.APP_ENV == "development",
    )


if __name__ == "__main__":
    main()
