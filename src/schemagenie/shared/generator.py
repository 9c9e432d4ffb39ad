import asyncio
import logging

from schemagenie.genie_api.configuration.api import ApiConfiguration
from schemagenie.genie_api.models.generation_request import GenerationRequest
from schemagenie.genie_api.models.generation_response import GenerationResponse
from schemagenie.shared.canned_content import (
    CANNED_API_ROUTES,
    CANNED_EXPLANATION,
    get_canned_schema,
)
from schemagenie.shared.erd import build_erd_diagram, encode_erd_payload

logger = logging.getLogger(__name__)


class SchemaGenerator:
    config: ApiConfiguration

    def __init__(self, configuration: ApiConfiguration):
        self.config = configuration
        logger.info(
            "SchemaGenerator ready (simulated delay: %s ms)",
            self.config.simulated_delay_ms,
        )

    @property
    def delay_seconds(self) -> float:
        return max(self.config.simulated_delay_ms, 0) / 1000

    async def generate(self, request: GenerationRequest) -> GenerationResponse:
        """Generate schema, routes, ERD and explanation for a request.

        The submitted code, input type and database type do not influence the
        result; only the output format and the two option flags do.

        Args:
            request (GenerationRequest): Validated generation request

        Returns:
            GenerationResponse: Response with optional fields left unset when
            their option flag is off
        """
        options = request.options

        # Simulate model processing time
        await asyncio.sleep(self.delay_seconds)

        response = GenerationResponse(
            schema=get_canned_schema(options.output_format),
            explanation=CANNED_EXPLANATION,
        )

        if options.suggest_api:
            response.api_routes = CANNED_API_ROUTES

        if options.generate_erd:
            diagram = build_erd_diagram(
                options.output_format.value, options.database_type
            )
            response.erd_image_url = encode_erd_payload(diagram)

        return response
