import logging

from fastapi import APIRouter, Depends

from schemagenie.genie_api.deps.generator import get_generator
from schemagenie.genie_api.models.error_response import ErrorResponse
from schemagenie.genie_api.models.generation_request import GenerationRequest
from schemagenie.genie_api.models.generation_response import GenerationResponse
from schemagenie.shared.errors import InternalError, SchemaGenieError, ValidationError
from schemagenie.shared.generator import SchemaGenerator

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/generate-schema",
    response_model=GenerationResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    tags=["generation"],
)
async def generate_schema(
    request: GenerationRequest,
    generator: SchemaGenerator = Depends(get_generator),
) -> GenerationResponse:
    """
    Generate a database schema from frontend code or a design reference.
    Optionally includes suggested API routes and an ER diagram.
    """
    if not request.input_code:
        logger.warning("Rejected generation request without input code")
        raise ValidationError("Input code is required")

    options = request.options
    logger.info(
        "Generating schema: input_type=%s output_format=%s database_type=%s "
        "suggest_api=%s generate_erd=%s",
        request.input_type,
        options.output_format.value,
        options.database_type,
        options.suggest_api,
        options.generate_erd,
    )
    try:
        return await generator.generate(request)
    except SchemaGenieError:
        raise
    except Exception as e:
        logger.exception(f"Schema generation error: {str(e)}")
        raise InternalError("Failed to generate schema") from e
