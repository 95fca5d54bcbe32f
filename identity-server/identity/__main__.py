import uvicorn

from identity.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "identity.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
