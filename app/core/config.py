from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Impact Gravity Backend"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 3000
    CORS_ORIGINS: list[str] = ["*"]

    BUSINESS_TIMEZONE: str = "America/Los_Angeles"
    TRANSACTION_PLACEHOLDER_PREFIX: str = "DEMO_"

    EMAIL_USER: str | None = None
    EMAIL_APP_PASSWORD: str | None = None
    EMAIL_FROM: str | None = None
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 465
    OWNER_EMAIL: str | None = None

    GOOGLE_CLIENT_ID: str | None = None
    GOOGLE_CLIENT_SECRET: str | None = None
    GOOGLE_REDIRECT_URI: str | None = None
    GOOGLE_REFRESH_TOKEN: str | None = None
    GOOGLE_CALENDAR_ID: str = "primary"
    GOOGLE_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
    GOOGLE_CALENDAR_BASE_URL: str = "https://www.googleapis.com/calendar/v3"


settings = Settings()
