import uvicorn

from docsum.api.app import create_app
from docsum.config.settings import Settings
from docsum.logging.logger import Log
from docsum.processor.processor import build_processor


def main() -> None:
    """Entry point: load settings -> build pipeline once -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)

    processor = build_processor(settings)
    app = create_app(processor, settings)
    Log.info(f"Server starting on {settings.api_host}:{settings.api_port} ({settings.app_env})")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
