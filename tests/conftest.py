import pytest
from fastapi.testclient import TestClient

from schemagenie.genie_api.app import app
from schemagenie.genie_api.configuration.api import ApiConfiguration
from schemagenie.genie_api.deps.generator import get_generator
from schemagenie.shared.generator import SchemaGenerator


@pytest.fixture
def fast_generator():
    """Generator with the simulated delay switched off."""
    configuration = ApiConfiguration()
    configuration.update({"simulated_delay_ms": 0})
    return SchemaGenerator(configuration)


@pytest.fixture
def api_client(fast_generator):
    app.dependency_overrides[get_generator] = lambda: fast_generator
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def generation_payload():
    return {
        "inputCode": "<div>x</div>",
        "inputType": "html",
        "options": {
            "outputFormat": "sql",
            "databaseType": "postgresql",
            "suggestAPI": True,
            "generateERD": True,
        },
    }
