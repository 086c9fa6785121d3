import uvicorn

from buku_api.config import settings


def main() -> None:
    uvicorn.run(
        "buku_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
