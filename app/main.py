import uvicorn

from app.api.main import create_app
from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.logging.logger import Log
from app.upload.orchestrator import build_orchestrator


def main() -> None:
    """Entry point: configure logging -> open pool -> build orchestrator -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    uses_postgres = settings.record_store_engine.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)

    try:
        app = create_app(build_orchestrator(settings))
        Log.info(
            f"Serving on {settings.api_host}:{settings.api_port} "
            f"(storage={settings.storage_engine}, ocr={settings.ocr_provider})"
        )
        uvicorn.run(
            app,
            host=settings.api_host,
            port=settings.api_port,
            log_level=settings.log_level.lower(),
        )
    finally:
        if uses_postgres:
            close_pool()


if __name__ == "__main__":
    main()
