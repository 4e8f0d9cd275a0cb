"""Settings for application, utilizing pydantic"""
from pathlib import Path
from typing import Dict, List
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from App.Models.models import Account


class Settings(BaseSettings):
    app_env: str = Field("local", validation_alias="APP_ENV")
    api_host: str = Field("0.0.0.0", validation_alias="API_HOST")
    api_port: int = Field(8000, validation_alias="API_PORT")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")

    # Registry
    install_default_broadcaster: bool = Field(True, validation_alias="INSTALL_DEFAULT_BROADCASTER")
    # JSON mapping: {"Test": [{"username": "...", "password": "..."}]}
    test_accounts: Dict[str, List[Account]] = Field(default_factory=dict, validation_alias="TEST_ACCOUNTS")

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent.parent / ".env",
        extra="ignore",
        populate_by_name=True,
    )

settings = Settings()
