from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Admin API
    medusa_backend_url: str = "http://localhost:9000"
    medusa_admin_email: str | None = None
    medusa_admin_password: str | None = None
    # Secret API key; takes precedence over email/password when set
    medusa_admin_api_key: str | None = None
    request_timeout_seconds: float = 30.0

    # Seeding
    static_base_url: str = "http://localhost:9000/static"
    seed_skip_existing: bool = False

    # App
    app_name: str = "medusa-seed"
    version: str = "1.0.0"
    log_level: str = "INFO"


settings = Settings()
