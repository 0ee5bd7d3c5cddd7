from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Listening address
    HOST: str = "127.0.0.1"
    PORT: int = 5000

    # Seed file: users, fee, init_balance, trade_start_nanos, asks
    AUCTION_CONFIG_PATH: str = "config/auction.json"

    # App
    APP_NAME: str = "Auction Service"
    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False


settings = Settings()
