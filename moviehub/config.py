from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import ConfigDict


class Settings(BaseSettings):
    APP_NAME: str = 'MovieHub API'
    APP_VERSION: str = '1.0.0'
    HOST: str = '0.0.0.0'
    PORT: int = 8080
    LOG_LEVEL: str = 'INFO'
    LOG_FILE: Optional[str] = None

    model_config = ConfigDict(
        env_file=".env"
    )


settings = Settings()
