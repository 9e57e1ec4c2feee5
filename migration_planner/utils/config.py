"""
Configuration management for the Migration Planner estimation service.

Loads configuration from environment variables and provides
typed configuration objects.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class AppConfig(BaseSettings):
    """Application configuration"""
    name: str = Field(default="Migration Planner Estimation", alias="APP_NAME")
    version: str = Field(default="1.0.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


class APIConfig(BaseSettings):
    """API Server configuration"""
    host: str = Field(default="0.0.0.0", alias="API_HOST")
    port: int = Field(default=8000, alias="API_PORT")
    workers: int = Field(default=4, alias="API_WORKERS")

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


class EstimationConfig(BaseSettings):
    """
    Calculator defaults used by the API.

    Values here sit between the built-in calculator defaults and the
    per-request parameters: a request param always wins.
    """
    troubleshoot_mins_per_vm: float = Field(
        default=60.0,
        alias="ESTIMATION_TROUBLESHOOT_MINS_PER_VM"
    )
    engineer_count: int = Field(default=10, alias="ESTIMATION_ENGINEER_COUNT")
    work_hours_per_day: float = Field(default=8.0, alias="ESTIMATION_WORK_HOURS_PER_DAY")
    # 620 Mbps ~= 77.5 MB/s, the 110 min / 500 GB baseline
    transfer_rate_mbps: float = Field(default=620.0, alias="ESTIMATION_TRANSFER_RATE_MBPS")

    class Config:
        env_file = ".env"
        case_sensitive = False
        populate_by_name = True
        extra = "ignore"


class Config:
    """Main configuration container"""

    def __init__(self):
        """Initialize all configuration sections"""
        self.app = AppConfig()
        self.api = APIConfig()
        self.estimation = EstimationConfig()


# Global configuration instance
config = Config()
