from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PORTAL_", env_file=".env", extra="ignore")

    app_name: str = "Assignment Portal"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000

    # ritardo artificiale applicato a ogni login
    login_delay_seconds: float = 1.0

    roster_size: int = 25
    default_max_score: int = 100
    upcoming_limit: int = 3

    # True = rifiuta i voti fuori da [0, maxScore]
    strict_score_bounds: bool = False
    seed_mock_data: bool = True

    cors_origins: list[str] = ["*"]


settings = Settings()
