from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="BLINKPAY_", extra="ignore"
    )

    LOG_LEVEL: str = "INFO"

    # Blink Debit API
    DEBIT_URL: str = "https://sandbox.debit.blinkpay.co.nz"
    CLIENT_ID: str = ""
    CLIENT_SECRET: str = ""
    TIMEOUT_SEC: float = 10.0

    # Connection pool
    MAX_CONNECTIONS: int = 50
    MAX_KEEPALIVE_CONNECTIONS: int = 20
    KEEPALIVE_EXPIRY_SEC: float = 20.0

    # Retries for 408, 5xx and transport failures
    RETRY_ENABLED: bool = True
    RETRY_MAX_ATTEMPTS: int = 3
    RETRY_MIN_WAIT_SEC: float = 2.0
    RETRY_MAX_WAIT_SEC: float = 5.0

    # Polling interval of the await_* helpers
    AWAIT_POLL_INTERVAL_SEC: float = 1.0

    # Access token is refreshed this many seconds before it expires
    TOKEN_EXPIRY_SKEW_SEC: int = 60


settings = Settings()
