from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Buku API"
    app_version: str = "0.1.0"
    app_description: str = "CRUD service for Buku records joined with their Penulis."
    database_url: str = "sqlite:///./buku.db"
    host: str = "0.0.0.0"
    port: int = 3001
    debug: bool = False
    create_schema: bool = True
    log_level: str = "INFO"
    log_format: str = "json"
    log_service_name: str = "buku-api"

    model_config = SettingsConfigDict(
        env_prefix="BUKU_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
