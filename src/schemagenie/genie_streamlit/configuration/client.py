from functools import lru_cache
from pydantic_settings import BaseSettings


class ClientConfiguration(BaseSettings):
    """
    Configuration for the Streamlit client.
    """

    api_base_url: str = "http://localhost:8000"
    generate_path: str = "/api/generate-schema"
    # Generation takes at least two seconds server side
    request_timeout_s: float = 30.0

    class Config:
        env_prefix = "SCHEMAGENIE_CLIENT_"


@lru_cache(maxsize=1)
def get_client_configuration() -> ClientConfiguration:
    """
    Get the client configuration.
    """
    return ClientConfiguration()
