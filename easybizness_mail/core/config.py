from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    # App
    APP_ENV: str = "development"
    PORT: int = 5174
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"

    # SMTP (Mailtrap)
    MAIL_ENABLED: bool = True
    MAILTRAP_HOST: str = "sandbox.smtp.mailtrap.io"
    MAILTRAP_PORT: int = 2525
    MAILTRAP_USER: str | None = None
    MAILTRAP_PASS: str | None = None
    MAILTRAP_FROM_EMAIL: str = "no-reply@example.com"
    MAILTRAP_FROM_NAME: str = "EasyBizness"

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = False
    SEND_APPROVAL_RATE_LIMIT: str = "30/minute"

    # Monitoring
    SENTRY_DSN: str = ""
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
