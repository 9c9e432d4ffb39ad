from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import Dict, Any, List


class ApiConfiguration(BaseSettings):
    """
    Configuration for the API.
    """

    # Routing
    api_prefix: str = "/api"
    cors_origins: List[str] = ["*"]

    # Generation
    simulated_delay_ms: int = 2000

    log_level: str = "INFO"

    def update(self, new_config: Dict[str, Any]) -> None:
        """Update configuration with new values."""
        for key, value in new_config.items():
            if hasattr(self, key):
                setattr(self, key, value)

    class Config:
        env_prefix = "SCHEMAGENIE_"


@lru_cache(maxsize=1)
def get_api_configuration() -> ApiConfiguration:
    """
    Get the API configuration.
    """
    return ApiConfiguration()
