from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Simulated processing latency (uniform, half-open interval in ms)
    SIMULATE_LATENCY: bool = True
    LATENCY_MIN_MS: int = 600
    LATENCY_MAX_MS: int = 1000

    # Cosmetic confidence score: floor + U[0,1) * spread
    CONFIDENCE_FLOOR: float = 0.82
    CONFIDENCE_SPREAD: float = 0.15
    CONFIDENCE_DECIMALS: int = 2

    # Seed for the handler's random source; None draws from the OS
    RANDOM_SEED: Optional[int] = None

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    CORS_ORIGINS: list[str] = ["*"]

    log_dir: str = "logs"
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _check_latency_window(self) -> "Settings":
        if self.LATENCY_MIN_MS < 0:
            raise ValueError("LATENCY_MIN_MS must be >= 0")
        if self.LATENCY_MAX_MS < self.LATENCY_MIN_MS:
            raise ValueError("LATENCY_MAX_MS must be >= LATENCY_MIN_MS")
        return self

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
