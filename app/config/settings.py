from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8000

    record_store_engine: str = "postgres"
    db_host: str = "host.docker.internal"
    db_port: int = 5432
    db_database: str = "imagetext"
    db_username: str = "imagetext"
    db_password: str = "secret"
    db_pool_max_size: int = 10
    db_pool_timeout_seconds: float = 10.0
    db_statement_timeout_ms: int = 15000

    storage_engine: str = "minio"
    minio_endpoint: str = "localhost:9000"
    minio_access_key: str = "minioadmin"
    minio_secret_key: str = "minioadmin"
    minio_bucket: str = "uploads"
    minio_secure: bool = False
    minio_public_base_url: str = ""
    storage_timeout_seconds: float = 30.0

    ocr_provider: str = "groq"

    ocr_openai_api_key: str = ""
    ocr_openai_model_name: str = "gpt-4o-mini"
    ocr_openai_timeout_seconds: int = 60

    ocr_openai_compatible_api_key: str = ""
    ocr_openai_compatible_model_name: str = ""
    ocr_openai_compatible_timeout_seconds: int = 60
    ocr_openai_compatible_base_url: str | None = None

    ocr_groq_api_key: str = ""
    ocr_groq_model_name: str = "meta-llama/llama-4-scout-17b-16e-instruct"
    ocr_groq_timeout_seconds: int = 60

    ocr_openrouter_api_key: str = ""
    ocr_openrouter_model_name: str = ""
    ocr_openrouter_timeout_seconds: int = 60

    ocr_together_api_key: str = ""
    ocr_together_model_name: str = ""
    ocr_together_timeout_seconds: int = 60

    upload_max_file_size_bytes: int = 10 * 1024 * 1024
    upload_allowed_mime_types: list[str] = [
        "image/jpeg",
        "image/png",
        "image/webp",
        "image/gif",
        "image/bmp",
    ]

    rate_limit_window_seconds: float = 60.0
    rate_limit_max_requests: int = 10
