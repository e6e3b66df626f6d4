from decimal import Decimal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Group Ledger"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 3001
    CORS_ORIGIN_REGEX: str = r"^http://(localhost|127\.0\.0\.1):\d{1,5}$"
    DEFAULT_GROUP_NAME: str = "New Group"
    ID_LENGTH: int = 6
    # keeps summed balances well inside the 28-digit decimal context
    MAX_AMOUNT: Decimal = Decimal("1000000000")

    class Config:
        env_file = ".env"

settings = Settings()
