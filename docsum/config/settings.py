from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 5000
    cors_allowed_origins: str = "http://localhost:3000,https://localhost:3000"

    upload_dir: Path = Path("uploads")
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    pdf_engine: str = "pdfplumber"

    ocr_language: str = "eng"
    ocr_timeout_seconds: int = 0
    tesseract_cmd: str = ""

    summarization_provider: str = "gemini"
    summarization_api_key: str = ""
    summarization_model_name: str = "gemini-1.5-flash"
    summarization_base_url: str = ""
    summarization_timeout_seconds: int = 60
    summarization_temperature: float = 0.3
    escalate_quota_errors: bool = False

    @property
    def cors_origins(self) -> list[str]:
        """Comma-separated CORS_ALLOWED_ORIGINS as a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]
