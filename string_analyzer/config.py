from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"extra": "ignore", "env_file": ".env", "env_file_encoding": "utf-8"}

    APP_TITLE: str = "String Analyzer Service"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Logging configuration used by string_analyzer.logging
    LOG_LEVEL: str = "INFO"
    CONSOLE_LOG_LEVEL: str = "INFO"

    # Comma-separated list of allowed origins, "*" allows any
    CORS_ORIGINS: str = "*"

    @property
    def cors_origins(self) -> List[str]:
        origins = [o.strip() for o in self.CORS_ORIGINS.split(",")]
        return [o for o in origins if o] or ["*"]


settings = Settings()
