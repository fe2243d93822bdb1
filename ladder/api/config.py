from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Ladder
    PRICE_STEP: float = 0.05  # 5% per additional entry
    MAX_ADDITIONAL_ENTRIES: int = 500

    # Display precision
    MONEY_DECIMALS: int = 2
    QTY_DECIMALS: int = 4
    PRICE_DECIMALS: int = 5

    # Form defaults
    DEFAULT_LEVERAGE: float = 3.0
    DEFAULT_ADDITIONAL_ENTRIES: int = 3
    DEFAULT_ENTRY_RATIO: float = 0.5

    @field_validator("PRICE_STEP")
    @classmethod
    def _step_in_range(cls, v: float) -> float:
        if not 0.0 < v < 1.0:
            raise ValueError("PRICE_STEP must be in (0, 1)")
        return v


settings = Settings()
