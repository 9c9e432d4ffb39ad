from functools import lru_cache

from schemagenie.genie_api.configuration.api import get_api_configuration
from schemagenie.shared.generator import SchemaGenerator


@lru_cache(maxsize=1)
def get_generator() -> SchemaGenerator:
    """Get the shared SchemaGenerator instance.

    The generator holds no mutable state, so a single instance serves every
    request.
    """
    return SchemaGenerator(get_api_configuration())
