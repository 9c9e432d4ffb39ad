import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from schemagenie.genie_api.routes import router as main_router
from schemagenie.genie_api.deps.generator import get_generator
from schemagenie.genie_api.configuration.api import get_api_configuration
from schemagenie.shared.errors import SchemaGenieError
# Load environment variables
load_dotenv()

# OpenAPI/Swagger documentation
description = """
SchemaGenie API turns frontend code or designs into a backend data schema.

## Features

* Schema generation for Prisma, SQL, MongoDB and Firebase
* Suggested REST API routes
* Entity-relationship diagrams in Mermaid syntax
* Natural-language explanation of design decisions
"""

tags_metadata = [
    {
        "name": "root",
        "description": "Basic API information and health check",
    },
    {
        "name": "generation",
        "description": "Schema, API route and ER diagram generation",
    },
]

configuration = get_api_configuration()

logging.basicConfig(level=configuration.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        get_generator()
    except Exception as e:
        logger.error(f"Error initializing generator: {str(e)}")
        raise
    yield


# Initialize FastAPI app with enhanced documentation
app = FastAPI(
    title="SchemaGenie API",
    description=description,
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    license_info={
        "name": "MIT License",
        "url": "https://opensource.org/licenses/MIT",
    },
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=configuration.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SchemaGenieError)
async def schemagenie_error_handler(request: Request, exc: SchemaGenieError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.warning(f"Invalid generation request: {message}")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Failed to generate schema"})


app.include_router(
    router=main_router,
    prefix=configuration.api_prefix,
    responses={404: {"description": "Not found"}},
)
