from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App
    # -------------------------
    app_name: str = "Event Status Backend"
    log_level: str = "INFO"
    log_json: bool = True

    # -------------------------
    # Event repository
    # -------------------------
    event_repository_backend: str = "memory"  # memory | supabase
    events_table: str = "events"

    # -------------------------
    # Supabase (required only for the supabase backend)
    # -------------------------
    supabase_url: str | None = None
    supabase_service_key: str | None = None

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
