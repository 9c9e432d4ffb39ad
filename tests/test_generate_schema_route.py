"""Tests for POST /api/generate-schema."""
import pytest

from schemagenie.genie_api.app import app
from schemagenie.genie_api.deps.generator import get_generator
from schemagenie.shared.canned_content import (
    CANNED_API_ROUTES,
    CANNED_EXPLANATION,
    CANNED_SCHEMAS,
)
from schemagenie.shared.erd import ERD_DATA_URI_PREFIX, decode_erd_payload
from schemagenie.shared.options import OutputFormat

GENERATE_URL = "/api/generate-schema"


def test_root_returns_status(api_client):
    response = api_client.get("/api/")
    assert response.status_code == 200
    assert response.json() == {"message": "SchemaGenie API"}


@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_schema_matches_output_format(api_client, generation_payload, output_format):
    """Each output format returns its canned schema."""
    generation_payload["options"]["outputFormat"] = output_format.value

    response = api_client.post(GENERATE_URL, json=generation_payload)

    assert response.status_code == 200
    assert response.json()["schema"] == CANNED_SCHEMAS[output_format]


def test_schema_ignores_input_code_type_and_database(api_client, generation_payload):
    """Submitted content, input type and database type do not change the output."""
    first = api_client.post(GENERATE_URL, json=generation_payload).json()

    generation_payload["inputCode"] = "export const Form = () => <form />"
    generation_payload["inputType"] = "react"
    generation_payload["options"]["databaseType"] = "mongodb"
    second = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert first == second


def test_api_routes_omitted_when_not_requested(api_client, generation_payload):
    generation_payload["options"]["suggestAPI"] = False

    body = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert "apiRoutes" not in body, "apiRoutes must be omitted, not null"


def test_api_routes_included_verbatim(api_client, generation_payload):
    body = api_client.post(GENERATE_URL, json=generation_payload).json()
    assert body["apiRoutes"] == CANNED_API_ROUTES


def test_erd_omitted_when_not_requested(api_client, generation_payload):
    generation_payload["options"]["generateERD"] = False

    body = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert "erdImageUrl" not in body


def test_erd_payload_decodes_to_diagram(api_client, generation_payload):
    body = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert body["erdImageUrl"].startswith(ERD_DATA_URI_PREFIX)
    diagram = decode_erd_payload(body["erdImageUrl"])
    assert diagram.startswith("erDiagram")
    assert "USER {" in diagram
    assert 'USER ||--o{ POST : "creates"' in diagram


def test_explanation_always_present(api_client, generation_payload):
    generation_payload["options"]["suggestAPI"] = False
    generation_payload["options"]["generateERD"] = False

    body = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert body == {"schema": CANNED_SCHEMAS[OutputFormat.SQL], "explanation": CANNED_EXPLANATION}


def test_repeated_requests_are_identical(api_client, generation_payload):
    first = api_client.post(GENERATE_URL, json=generation_payload).json()
    second = api_client.post(GENERATE_URL, json=generation_payload).json()

    assert first == second
    assert decode_erd_payload(first["erdImageUrl"]) == decode_erd_payload(second["erdImageUrl"])


def test_markup_to_sql_end_to_end(api_client, generation_payload):
    """HTML input with SQL output returns SQL DDL, routes and a USER/POST diagram."""
    response = api_client.post(GENERATE_URL, json=generation_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["schema"].startswith("CREATE TABLE users")
    assert body["apiRoutes"] == CANNED_API_ROUTES
    diagram = decode_erd_payload(body["erdImageUrl"])
    assert "USER {" in diagram
    assert "POST {" in diagram
    assert "USER ||--o{ POST" in diagram


def test_options_default_when_absent(api_client):
    body = api_client.post(GENERATE_URL, json={"inputCode": "<form></form>"}).json()

    assert body["schema"] == CANNED_SCHEMAS[OutputFormat.PRISMA]
    assert body["apiRoutes"] == CANNED_API_ROUTES
    assert "erdImageUrl" in body


@pytest.mark.parametrize("input_code", ["", None])
def test_missing_input_code_is_rejected(api_client, generation_payload, input_code):
    generation_payload["inputCode"] = input_code

    response = api_client.post(GENERATE_URL, json=generation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Input code is required"}


def test_absent_input_code_is_rejected(api_client, generation_payload):
    del generation_payload["inputCode"]

    response = api_client.post(GENERATE_URL, json=generation_payload)

    assert response.status_code == 400
    assert response.json() == {"error": "Input code is required"}


def test_missing_input_code_skips_generation(generation_payload):
    """The generator is never called for a rejected request."""
    from fastapi.testclient import TestClient

    class RecordingGenerator:
        calls = 0

        async def generate(self, request):
            RecordingGenerator.calls += 1

    app.dependency_overrides[get_generator] = RecordingGenerator
    try:
        with TestClient(app) as client:
            generation_payload["inputCode"] = ""
            response = client.post(GENERATE_URL, json=generation_payload)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 400
    assert RecordingGenerator.calls == 0


def test_unknown_output_format_is_rejected(api_client, generation_payload):
    generation_payload["options"]["outputFormat"] = "cassandra"

    response = api_client.post(GENERATE_URL, json=generation_payload)

    assert response.status_code == 400
    assert "outputFormat" in response.json()["error"]


def test_malformed_body_is_rejected(api_client):
    response = api_client.post(
        GENERATE_URL,
        content="not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert "error" in response.json()


def test_unexpected_failure_returns_generic_error(generation_payload):
    from fastapi.testclient import TestClient

    class BrokenGenerator:
        async def generate(self, request):
            raise RuntimeError("boom")

    app.dependency_overrides[get_generator] = BrokenGenerator
    try:
        with TestClient(app) as client:
            response = client.post(GENERATE_URL, json=generation_payload)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to generate schema"}
