from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Splitledger Backend"
    DEFAULT_CURRENCY: str = "USD"
    DEFAULT_LOCALE: str = "en_US"
    STRICT_BALANCES: bool = False
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()
