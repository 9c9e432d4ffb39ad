from typing import Any, Dict, Optional
import logging

import requests

from schemagenie.genie_streamlit.configuration.client import ClientConfiguration
from schemagenie.shared.errors import TransportError
from schemagenie.shared.options import InputType

logger = logging.getLogger(__name__)


def select_input(input_type: str, input_code: str, figma_url: str) -> str:
    """Return the buffer that is submitted for ``input_type``."""
    if input_type == InputType.FIGMA.value:
        return figma_url
    return input_code


def build_payload(
    input_type: str,
    input_code: str,
    figma_url: str,
    output_format: str,
    database_type: str,
    suggest_api: bool,
    generate_erd: bool,
) -> Dict[str, Any]:
    """Assemble the JSON body for a generation request."""
    return {
        "inputCode": select_input(input_type, input_code, figma_url),
        "inputType": input_type,
        "options": {
            "outputFormat": output_format,
            "databaseType": database_type,
            "suggestAPI": suggest_api,
            "generateERD": generate_erd,
        },
    }


def can_submit(
    input_type: str, input_code: str, figma_url: str, is_generating: bool
) -> bool:
    """Submission needs non-empty input and no request already in flight."""
    if is_generating:
        return False
    content = select_input(input_type, input_code, figma_url)
    return bool(content and content.strip())


class SchemaGenieClient:
    def __init__(self, configuration: ClientConfiguration):
        self.config = configuration

    @property
    def generate_url(self) -> str:
        return self.config.api_base_url.rstrip("/") + self.config.generate_path

    def _post(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = requests.post(
                self.generate_url,
                json=payload,
                timeout=self.config.request_timeout_s,
            )
        except requests.RequestException as e:
            raise TransportError(f"Request failed: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Non-JSON response (status {response.status_code})"
            ) from e

        if not response.ok:
            detail = data.get("error") if isinstance(data, dict) else None
            raise TransportError(
                f"Server returned {response.status_code}: {detail or response.reason}"
            )
        return data

    def generate_schema(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Send one generation request.

        Returns:
            Optional[Dict[str, Any]]: The decoded response body, or None when the
            request failed. Failures are logged, never retried.
        """
        try:
            return self._post(payload)
        except TransportError as e:
            logger.error(f"Failed to generate schema: {e.message}")
            return None
