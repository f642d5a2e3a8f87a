"""Process entry point: ``companies-api`` or ``python -m companies_api.server``."""
import uvicorn

from companies_api.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "companies_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
