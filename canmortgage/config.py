from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Decimal arithmetic
    # 28 significant digits reproduces the published payment figures
    decimal_precision: int = Field(28, ge=1)

    # App
    log_level: str = "INFO"


settings = Settings()
